# ============================================================================
# COLUMN MODEL
# ============================================================================
# EPOCH: 1 - CATALOG DUMP
# STATUS: Core model - INFORMATION_SCHEMA.COLUMNS row
# PURPOSE: Typed column metadata consumed by the column formatter
# CREATED: 19 OCT 2026
# EXPORTS: ColumnRow
# DEPENDENCIES: pydantic
# ============================================================================
"""
Column Model

One row of INFORMATION_SCHEMA.COLUMNS. `data_type` is the bare catalog type
(`varchar`, `tinyint`, ...); `column_type` is the full declared form
(`varchar(64)`, `int unsigned`, `tinyint(1)`), which carries the display width
and the unsigned marker.
"""

from typing import Optional

from pydantic import Field

from core.models.catalog_row import CatalogRow


class ColumnRow(CatalogRow):
    """
    Column metadata.

    Source: INFORMATION_SCHEMA.COLUMNS, ordered by TABLE_NAME, ORDINAL_POSITION
    """

    table_name: str
    column_name: str
    ordinal_position: int = Field(..., ge=1)
    column_default: Optional[str] = Field(default=None, description="Raw default literal, possibly quoted or a keyword")
    is_nullable: str = Field(default="YES", description="'YES' or 'NO'")
    data_type: str
    character_maximum_length: Optional[int] = None
    numeric_precision: Optional[int] = None
    numeric_scale: Optional[int] = None
    column_type: str = ""
    extra: Optional[str] = None
    column_comment: Optional[str] = None
    datetime_precision: Optional[int] = None
    collation_name: Optional[str] = None

    @property
    def nullable(self) -> bool:
        return self.is_nullable != "NO"

    @property
    def unsigned(self) -> bool:
        return "unsigned" in self.column_type

    @property
    def has_comment(self) -> bool:
        return bool(self.column_comment)
