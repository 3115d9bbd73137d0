# ============================================================================
# SCHEMA MODULE
# ============================================================================
# EPOCH: 1 - CATALOG DUMP
# STATUS: Core - SDL generation from catalog records
# PURPOSE: Render grouped catalog records into the schema definition document
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================

from core.schema.sdl_utils import (
    escape_string,
    quote,
    singularize,
    balanced_parentheses,
    strip_outer_parentheses,
    canonical_decimal,
    canonical_float,
    index_sort_key,
)
from core.schema.column_formatter import ColumnFormatter, TYPE_MAP
from core.schema.index_formatter import IndexFormatter
from core.schema.foreign_key_formatter import ForeignKeyFormatter
from core.schema.table_renderer import TableRenderer
from core.schema.sdl_generator import SDLBuilder, SchemaDefinitionGenerator

__all__ = [
    # Generator
    "SchemaDefinitionGenerator",
    "SDLBuilder",
    # Formatters
    "TableRenderer",
    "ColumnFormatter",
    "IndexFormatter",
    "ForeignKeyFormatter",
    "TYPE_MAP",
    # Utilities
    "escape_string",
    "quote",
    "singularize",
    "balanced_parentheses",
    "strip_outer_parentheses",
    "canonical_decimal",
    "canonical_float",
    "index_sort_key",
]
