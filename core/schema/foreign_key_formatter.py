# ============================================================================
# FOREIGN KEY FORMATTER
# ============================================================================
# EPOCH: 1 - CATALOG DUMP
# STATUS: Core - Trailing add_foreign_key statements
# PURPOSE: Render foreign keys with column/name elision
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: ForeignKeyFormatter
# DEPENDENCIES: core.schema.sdl_utils
# ============================================================================
"""
Foreign Key Formatter.

The migration tool infers the source column from the referenced table
("users" -> "user_id") and generates constraint names with a fixed prefix.
Only what cannot be inferred is written, and never both:

    add_foreign_key "posts", "users", column: "author_id"
    add_foreign_key "comments", "posts", name: "fk_manual_name"
    add_foreign_key "comments", "users"
"""

from typing import Iterable, List, Optional

from core.config.defaults import SchemaDumpDefaults
from core.models.foreign_key import ForeignKeyRecord
from core.schema.sdl_utils import singularize


class ForeignKeyFormatter:
    """Render the foreign-key block appended after all tables."""

    def __init__(self, defaults: Optional[SchemaDumpDefaults] = None):
        self.defaults = defaults or SchemaDumpDefaults()

    @staticmethod
    def inferred_column(referenced_table: str) -> str:
        return f"{singularize(referenced_table)}_id"

    @staticmethod
    def sort(foreign_keys: Iterable[ForeignKeyRecord]) -> List[ForeignKeyRecord]:
        """Order by table, referenced table, source column (then constraint name)."""
        return sorted(
            foreign_keys,
            key=lambda fk: (fk.table_name, fk.referenced_table_name, fk.column_name, fk.constraint_name),
        )

    def format(self, fk: ForeignKeyRecord) -> str:
        line = f'add_foreign_key "{fk.table_name}", "{fk.referenced_table_name}"'

        if fk.column_name != self.inferred_column(fk.referenced_table_name):
            line += f', column: "{fk.column_name}"'
        elif not fk.constraint_name.startswith(self.defaults.foreign_key_prefix):
            line += f', name: "{fk.constraint_name}"'

        return line

    def format_all(self, foreign_keys: Iterable[ForeignKeyRecord]) -> List[str]:
        return [self.format(fk) for fk in self.sort(foreign_keys)]
