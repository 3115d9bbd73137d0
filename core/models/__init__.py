# ============================================================================
# MODELS MODULE
# ============================================================================
# EPOCH: 1 - CATALOG DUMP
# STATUS: Model exports
# PURPOSE: Central export point for all Pydantic models
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================
"""
Models Module - Central Export Point

Typed catalog rows (one model per INFORMATION_SCHEMA query shape) and the
grouped records the renderer consumes.
"""

from core.models.catalog_row import CatalogRow
from core.models.column import ColumnRow
from core.models.index import IndexRow, IndexRecord
from core.models.foreign_key import ForeignKeyRow, ForeignKeyRecord
from core.models.check_constraint import CheckConstraintRow
from core.models.table import TableRow, TableOptionsRow, TableRecord, CatalogSnapshot

__all__ = [
    # Base
    "CatalogRow",
    # Rows
    "TableRow",
    "TableOptionsRow",
    "ColumnRow",
    "IndexRow",
    "ForeignKeyRow",
    "CheckConstraintRow",
    # Grouped records
    "IndexRecord",
    "ForeignKeyRecord",
    "TableRecord",
    "CatalogSnapshot",
]
