# ============================================================================
# SDL GENERATOR
# ============================================================================
# EPOCH: 1 - CATALOG DUMP
# STATUS: Core - Whole-document assembly
# PURPOSE: Concatenate table blocks and foreign keys into the final SDL text
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: SDLBuilder, SchemaDefinitionGenerator
# DEPENDENCIES: core.schema.table_renderer, core.schema.foreign_key_formatter
# ============================================================================
"""
SDL Generator.

Document layout:

    <table block>
    <blank>
    <table block>
    <blank>
    add_foreign_key ...
    add_foreign_key ...

Tables are emitted in ascending name order with one blank line between them;
a single blank line separates the last table from the foreign keys. The text
has no trailing newline after the last foreign key (and ends with exactly one
newline when there are none).

The document is collected in an SDLBuilder and joined once by `finalize()`,
so nothing reaches the output sink until every table has rendered.
"""

from typing import Iterable, List, Optional

from core.config.defaults import SchemaDumpDefaults
from core.logging import ComponentType, get_logger, log_context
from core.models.foreign_key import ForeignKeyRecord
from core.models.table import TableRecord
from core.schema.foreign_key_formatter import ForeignKeyFormatter
from core.schema.table_renderer import TableRenderer

logger = get_logger(__name__, ComponentType.RENDERER)


class SDLBuilder:
    """
    Ordered line buffer with an explicit finalize step.

    Usage:
        builder = SDLBuilder()
        builder.extend(lines)
        builder.blank()
        text = builder.finalize()
    """

    def __init__(self):
        self._lines: List[str] = []
        self._finalized = False

    def _check_open(self) -> None:
        if self._finalized:
            raise RuntimeError("SDLBuilder already finalized")

    def append(self, line: str) -> None:
        self._check_open()
        self._lines.append(line)

    def extend(self, lines: Iterable[str]) -> None:
        self._check_open()
        self._lines.extend(lines)

    def blank(self) -> None:
        self.append("")

    def drop_trailing_blank(self) -> None:
        """Remove one trailing blank line, if present."""
        self._check_open()
        if self._lines and self._lines[-1] == "":
            self._lines.pop()

    def __len__(self) -> int:
        return len(self._lines)

    def finalize(self) -> str:
        """Join the lines; the builder cannot be modified afterwards."""
        self._check_open()
        self._finalized = True
        return "\n".join(self._lines)


class SchemaDefinitionGenerator:
    """
    Render a whole schema document from grouped records.

    Usage:
        generator = SchemaDefinitionGenerator()
        text = generator.generate(tables, foreign_keys)
    """

    def __init__(
        self,
        defaults: Optional[SchemaDumpDefaults] = None,
        table_renderer: Optional[TableRenderer] = None,
        foreign_key_formatter: Optional[ForeignKeyFormatter] = None,
    ):
        self.defaults = defaults or SchemaDumpDefaults()
        self.table_renderer = table_renderer or TableRenderer(self.defaults)
        self.foreign_key_formatter = foreign_key_formatter or ForeignKeyFormatter(self.defaults)

    def generate(
        self,
        tables: Iterable[TableRecord],
        foreign_keys: Iterable[ForeignKeyRecord],
    ) -> str:
        builder = SDLBuilder()

        for table in sorted(tables, key=lambda t: t.name):
            with log_context(table=table.name):
                builder.extend(self.table_renderer.render(table))
            builder.blank()

        builder.drop_trailing_blank()
        builder.blank()

        fk_lines = self.foreign_key_formatter.format_all(foreign_keys)
        builder.extend(fk_lines)

        logger.debug(f"Generated {len(builder)} lines ({len(fk_lines)} foreign keys)")
        return builder.finalize()
