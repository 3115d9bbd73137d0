# ============================================================================
# TABLE RENDERER
# ============================================================================
# EPOCH: 1 - CATALOG DUMP
# STATUS: Core - create_table blocks
# PURPOSE: Assemble one table's block from its columns, indexes and checks
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: TableRenderer
# DEPENDENCIES: core.schema.column_formatter, core.schema.index_formatter
# ============================================================================
"""
Table Renderer.

Produces the lines of one table block:

    create_table "users", charset: "utf8mb4", collation: "utf8mb4_0900_ai_ci", force: :cascade do |t|
      t.string "email", null: false
      t.index ["email"], name: "index_users_on_email", unique: true
      t.check_constraint "`age` >= 0", name: "age_check"
    end

Primary key handling:
    PRIMARY == ["id"]        -> nothing, or `id: { ... }` when the id column
                                deviates (type, comment, unsigned)
    anything else            -> `id: false`
The second branch folds "no primary key", "composite key" and "single key on
another column" together; the reference dumper does the same.
"""

from typing import List, Optional

from core.config.defaults import SchemaDumpDefaults
from core.logging import ComponentType, get_logger
from core.models.check_constraint import CheckConstraintRow
from core.models.table import TableRecord
from core.schema.column_formatter import ColumnFormatter
from core.schema.index_formatter import IndexFormatter
from core.schema.sdl_utils import quote, strip_outer_parentheses

logger = get_logger(__name__, ComponentType.RENDERER)

INDENT = "  "


class TableRenderer:
    """Render `create_table ... end` blocks."""

    def __init__(
        self,
        defaults: Optional[SchemaDumpDefaults] = None,
        column_formatter: Optional[ColumnFormatter] = None,
        index_formatter: Optional[IndexFormatter] = None,
    ):
        self.defaults = defaults or SchemaDumpDefaults()
        self.column_formatter = column_formatter or ColumnFormatter(self.defaults)
        self.index_formatter = index_formatter or IndexFormatter()

    def render(self, table: TableRecord) -> List[str]:
        """All lines of the block, header through `end`."""
        lines = [self.render_header(table)]

        pk_column = self.defaults.primary_key_column
        for column in table.columns:
            if column.column_name == pk_column:
                continue
            lines.append(INDENT + self.column_formatter.format(column))

        for index in self.index_formatter.sort(table.indexes):
            lines.append(INDENT + self.index_formatter.format(index))

        for constraint in sorted(table.check_constraints, key=lambda c: c.check_clause):
            lines.append(INDENT + self.format_check_constraint(constraint))

        lines.append("end")
        logger.debug(
            f"Rendered {table.name}: {len(table.columns)} columns, "
            f"{len(table.indexes)} indexes, {len(table.check_constraints)} checks"
        )
        return lines

    # =========================================================================
    # HEADER
    # =========================================================================

    def render_header(self, table: TableRecord) -> str:
        header = f'create_table "{table.name}"'

        id_option = self.primary_key_option(table)
        if id_option:
            header += f", {id_option}"

        options = table.options
        if options is not None and options.collation:
            header += f', charset: "{options.charset}"'
            header += f', collation: "{options.collation}"'

        if options is not None and options.comment:
            header += f", comment: {quote(options.comment)}"

        return header + ", force: :cascade do |t|"

    def primary_key_option(self, table: TableRecord) -> Optional[str]:
        """
        The `id:` option of the header, or None when the default id applies.
        """
        pk = table.primary_key
        pk_column = self.defaults.primary_key_column

        if pk is None or pk.columns != [pk_column]:
            return "id: false"

        id_column = table.find_column(pk_column)
        if id_column is None:
            return None

        default_type = self.defaults.default_id_type
        id_options: List[str] = []

        if id_column.data_type != default_type:
            id_options.append(f"type: :{id_column.data_type}")

        if id_column.has_comment:
            id_options.append(f"comment: {quote(id_column.column_comment)}")

        if id_column.unsigned:
            id_options.append("unsigned: true")

        if not id_options:
            return None

        # The type is restated first once any option is present
        if id_column.data_type == default_type:
            id_options.insert(0, f"type: :{default_type}")

        return f"id: {{ {', '.join(id_options)} }}"

    # =========================================================================
    # CHECK CONSTRAINTS
    # =========================================================================

    def format_check_constraint(self, constraint: CheckConstraintRow) -> str:
        clause = strip_outer_parentheses(constraint.check_clause)
        # The catalog escapes single quotes; the host's canonical form does not
        clause = clause.replace("\\'", "'")

        line = f"t.check_constraint {quote(clause)}"
        if not constraint.constraint_name.startswith(self.defaults.check_constraint_prefix):
            line += f', name: "{constraint.constraint_name}"'
        return line
