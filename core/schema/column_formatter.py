# ============================================================================
# COLUMN FORMATTER
# ============================================================================
# EPOCH: 1 - CATALOG DUMP
# STATUS: Core - Column statements
# PURPOSE: Map one INFORMATION_SCHEMA.COLUMNS row to a `t.<type> "<name>"` line
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: ColumnFormatter, TYPE_MAP
# DEPENDENCIES: core.schema.sdl_utils
# ============================================================================
"""
Column Formatter.

Produces the column line exactly as the reference dumper does. Modifiers are
appended in a fixed order:

    limit, size, precision (datetime), precision/scale (decimal),
    default, null, comment, unsigned, collation

Usage:
    formatter = ColumnFormatter()
    formatter.format(column)   # 't.string "email", limit: 100, null: false'
"""

from decimal import InvalidOperation
from typing import Dict, List, Optional

from core.config.defaults import SchemaDumpDefaults
from core.contracts import MalformedDefaultValueError
from core.models.column import ColumnRow
from core.schema.sdl_utils import canonical_decimal, canonical_float, escape_string, quote


# ============================================================================
# TYPE MAPPING
# ============================================================================

TYPE_MAP: Dict[str, str] = {
    # Strings
    "varchar": "string",
    "char": "string",
    # Integers
    "int": "integer",
    "tinyint": "integer",
    "smallint": "integer",
    "mediumint": "integer",
    "bigint": "bigint",
    # Text
    "text": "text",
    "tinytext": "text",
    "mediumtext": "text",
    "longtext": "text",
    # Temporal
    "datetime": "datetime",
    "timestamp": "datetime",
    "date": "date",
    "time": "time",
    # Numeric
    "decimal": "decimal",
    "float": "float",
    "double": "float",
    # Structured
    "json": "json",
    # Binary
    "binary": "binary",
    "varbinary": "binary",
    "blob": "binary",
    "tinyblob": "binary",
    "mediumblob": "binary",
    "longblob": "binary",
}

INTEGER_LIMITS: Dict[str, int] = {
    "tinyint": 1,
    "smallint": 2,
    "mediumint": 3,
}

TEXT_SIZES: Dict[str, str] = {
    "mediumtext": "medium",
    "longtext": "long",
}

STRING_DEFAULT_TYPES = frozenset({"varchar", "char", "text"})
INTEGER_DEFAULT_TYPES = frozenset({"int", "tinyint", "smallint", "mediumint", "bigint"})
TEMPORAL_DEFAULT_TYPES = frozenset({"datetime", "timestamp"})
FLOAT_DEFAULT_TYPES = frozenset({"float", "double"})

CURRENT_TIMESTAMP = "CURRENT_TIMESTAMP"


class ColumnFormatter:
    """
    Render column statements.

    Stateless apart from the implicit defaults it compares against.
    """

    def __init__(self, defaults: Optional[SchemaDumpDefaults] = None):
        self.defaults = defaults or SchemaDumpDefaults()

    # =========================================================================
    # TYPE
    # =========================================================================

    def is_boolean(self, column: ColumnRow) -> bool:
        return column.column_type == self.defaults.boolean_column_type

    def map_type(self, column: ColumnRow) -> str:
        """Symbolic SDL type for a column."""
        if self.is_boolean(column):
            return "boolean"
        return TYPE_MAP.get(column.data_type, column.data_type)

    # =========================================================================
    # STATEMENT
    # =========================================================================

    def format(self, column: ColumnRow) -> str:
        """Full column statement without indentation."""
        parts: List[str] = [f't.{self.map_type(column)} "{column.column_name}"']
        data_type = column.data_type

        # limit (varchar, char)
        if (
            data_type in ("varchar", "char")
            and column.character_maximum_length is not None
            and column.character_maximum_length != self.defaults.default_string_limit
        ):
            parts.append(f"limit: {column.character_maximum_length}")

        # limit (integers); tinyint(1) is a boolean and has none
        if data_type in INTEGER_LIMITS and not (data_type == "tinyint" and self.is_boolean(column)):
            parts.append(f"limit: {INTEGER_LIMITS[data_type]}")

        # size (text)
        if data_type in TEXT_SIZES:
            parts.append(f"size: :{TEXT_SIZES[data_type]}")

        # precision (datetime): the host default is 6, so 0 must be stated
        if data_type == "datetime" and column.datetime_precision is not None:
            if int(column.datetime_precision) == 0:
                parts.append("precision: nil")

        # precision, scale (decimal)
        if data_type == "decimal" and column.numeric_precision is not None:
            parts.append(f"precision: {column.numeric_precision}")
            if column.numeric_scale is not None:
                parts.append(f"scale: {column.numeric_scale}")

        default = self.format_default(column)
        if default is not None:
            parts.append(f"default: {default}")

        if not column.nullable:
            parts.append("null: false")

        if column.has_comment:
            parts.append(f"comment: {quote(column.column_comment)}")

        if column.unsigned:
            parts.append("unsigned: true")

        if (
            column.collation_name
            and ("char" in data_type or "text" in data_type)
            and column.collation_name == self.defaults.notable_collation
        ):
            parts.append(f'collation: "{column.collation_name}"')

        return ", ".join(parts)

    # =========================================================================
    # DEFAULT VALUES
    # =========================================================================

    def format_default(self, column: ColumnRow) -> Optional[str]:
        """
        Canonical SDL literal for a column default, or None when omitted.

        Raises:
            MalformedDefaultValueError: decimal/float default that does not parse
        """
        default = column.column_default
        if default is None or default == "NULL":
            return None

        if self.is_boolean(column):
            return "true" if default == "1" else "false"

        data_type = column.data_type

        if data_type in STRING_DEFAULT_TYPES:
            return f'"{escape_string(default)}"'

        if data_type in INTEGER_DEFAULT_TYPES:
            return default

        if data_type in TEMPORAL_DEFAULT_TYPES:
            if default == CURRENT_TIMESTAMP:
                return f'-> {{ "{CURRENT_TIMESTAMP}" }}'
            return f'"{default}"'

        if data_type == "decimal":
            try:
                return f'"{canonical_decimal(default)}"'
            except (InvalidOperation, ValueError) as e:
                raise MalformedDefaultValueError(
                    f"Cannot parse decimal default {default!r} of "
                    f"{column.table_name}.{column.column_name}",
                    value=default,
                    data_type=data_type,
                    table=column.table_name,
                    column=column.column_name,
                ) from e

        if data_type in FLOAT_DEFAULT_TYPES:
            try:
                return f'"{canonical_float(default)}"'
            except ValueError as e:
                raise MalformedDefaultValueError(
                    f"Cannot parse float default {default!r} of "
                    f"{column.table_name}.{column.column_name}",
                    value=default,
                    data_type=data_type,
                    table=column.table_name,
                    column=column.column_name,
                ) from e

        if data_type == "json":
            return "[]" if _unquote(default) == "[]" else "{}"

        if len(default) >= 2 and default.startswith("'") and default.endswith("'"):
            return f'"{default[1:-1]}"'
        return default


def _unquote(text: str) -> str:
    if len(text) >= 2 and text.startswith("'") and text.endswith("'"):
        return text[1:-1]
    return text


__all__ = [
    "ColumnFormatter",
    "TYPE_MAP",
    "INTEGER_LIMITS",
    "TEXT_SIZES",
]
