# ============================================================================
# TABLE MODELS
# ============================================================================
# EPOCH: 1 - CATALOG DUMP
# STATUS: Core model - Tables, table options and the per-dump snapshot
# PURPOSE: Everything the renderer needs about one table, plus the raw snapshot
# CREATED: 19 OCT 2026
# EXPORTS: TableRow, TableOptionsRow, TableRecord, CatalogSnapshot
# DEPENDENCIES: pydantic
# ============================================================================
"""
Table Models

Lifecycle:
    1. CatalogRepository reads a CatalogSnapshot (flat rows, six lists)
    2. CatalogAggregator groups it into TableRecords + ForeignKeyRecords
    3. The generator renders them and everything is discarded

Nothing here is shared between dumps or mutated after construction.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from core.models.catalog_row import CatalogRow
from core.models.check_constraint import CheckConstraintRow
from core.models.column import ColumnRow
from core.models.foreign_key import ForeignKeyRow
from core.models.index import IndexRecord, IndexRow


class TableRow(CatalogRow):
    """Source: INFORMATION_SCHEMA.TABLES (base tables only)"""

    table_name: str


class TableOptionsRow(CatalogRow):
    """
    Table-level options.

    Source: INFORMATION_SCHEMA.TABLES.TABLE_COLLATION / TABLE_COMMENT
    """

    table_name: str
    collation: Optional[str] = None
    comment: Optional[str] = None

    @property
    def charset(self) -> Optional[str]:
        """Character set implied by the collation (`utf8mb4_bin` -> `utf8mb4`)."""
        if not self.collation:
            return None
        return self.collation.split("_")[0]


class TableRecord(BaseModel):
    """
    One table, grouped and ready to render.

    `primary_key` is the index named PRIMARY, already removed from `indexes`.
    """

    name: str
    options: Optional[TableOptionsRow] = None
    columns: List[ColumnRow] = Field(default_factory=list)
    primary_key: Optional[IndexRecord] = None
    indexes: Dict[str, IndexRecord] = Field(default_factory=dict)
    check_constraints: List[CheckConstraintRow] = Field(default_factory=list)

    model_config = {"frozen": True}

    def find_column(self, name: str) -> Optional[ColumnRow]:
        for column in self.columns:
            if column.column_name == name:
                return column
        return None


class CatalogSnapshot(BaseModel):
    """Flat rows from one catalog read."""

    tables: List[TableRow] = Field(default_factory=list)
    columns: List[ColumnRow] = Field(default_factory=list)
    indexes: List[IndexRow] = Field(default_factory=list)
    table_options: List[TableOptionsRow] = Field(default_factory=list)
    foreign_keys: List[ForeignKeyRow] = Field(default_factory=list)
    check_constraints: List[CheckConstraintRow] = Field(default_factory=list)

    model_config = {"frozen": True}

    @property
    def table_names(self) -> List[str]:
        return [t.table_name for t in self.tables]
