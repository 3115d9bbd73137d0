# ============================================================================
# CORE MODULE
# ============================================================================
# EPOCH: 1 - CATALOG DUMP
# STATUS: Core module initialization
# PURPOSE: Export core contracts, models, and SDL generation
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================

from core.contracts import (
    DumperMode,
    IndexOrder,
    SchemaDumpError,
    MalformedDefaultValueError,
    SchemaMismatchError,
)
from core.models import (
    ColumnRow,
    IndexRecord,
    ForeignKeyRecord,
    CheckConstraintRow,
    TableOptionsRow,
    TableRecord,
    CatalogSnapshot,
)
from core.schema import SchemaDefinitionGenerator

__all__ = [
    # Enums
    "DumperMode",
    "IndexOrder",
    # Errors
    "SchemaDumpError",
    "MalformedDefaultValueError",
    "SchemaMismatchError",
    # Models
    "ColumnRow",
    "IndexRecord",
    "ForeignKeyRecord",
    "CheckConstraintRow",
    "TableOptionsRow",
    "TableRecord",
    "CatalogSnapshot",
    # Schema
    "SchemaDefinitionGenerator",
]
