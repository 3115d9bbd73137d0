# ============================================================================
# FOREIGN KEY MODELS
# ============================================================================
# EPOCH: 1 - CATALOG DUMP
# STATUS: Core model - Foreign key rows
# PURPOSE: KEY_COLUMN_USAGE joined with REFERENTIAL_CONSTRAINTS
# CREATED: 19 OCT 2026
# EXPORTS: ForeignKeyRow, ForeignKeyRecord
# DEPENDENCIES: pydantic
# ============================================================================
"""
Foreign Key Models

The catalog returns one row per referencing column. Composite keys are
collapsed by the aggregator to the column with the lowest ordinal position,
so a ForeignKeyRecord always names a single source and referenced column.
"""

from typing import Optional

from pydantic import Field

from core.models.catalog_row import CatalogRow


class ForeignKeyRow(CatalogRow):
    """
    Source: INFORMATION_SCHEMA.KEY_COLUMN_USAGE + REFERENTIAL_CONSTRAINTS,
    ordered by TABLE_NAME, CONSTRAINT_NAME
    """

    table_name: str
    constraint_name: str
    column_name: str
    ordinal_position: int = Field(default=1, ge=1, description="Position of the column within the key")
    referenced_table_name: str
    referenced_column_name: Optional[str] = None
    delete_rule: Optional[str] = None
    update_rule: Optional[str] = None


class ForeignKeyRecord(ForeignKeyRow):
    """One foreign key per (table, constraint); rules are kept but not rendered."""

    @property
    def key(self) -> tuple:
        return (self.table_name, self.constraint_name)
