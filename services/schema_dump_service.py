# ============================================================================
# SCHEMA DUMP SERVICE
# ============================================================================
# EPOCH: 1 - CATALOG DUMP
# STATUS: Core - Dump orchestration
# PURPOSE: Catalog read -> aggregation -> SDL text -> single write to a sink
# CREATED: 19 OCT 2026
# ============================================================================
"""
Schema Dump Service

Runs one dump end to end:
    1. CatalogRepository.read_snapshot()     (all catalog queries)
    2. CatalogAggregator.aggregate()         (group rows per table)
    3. SchemaDefinitionGenerator.generate()  (render SDL text)
    4. stream.write(text)                    (once)

The document is complete in memory before the sink sees a single byte, so a
failed query or a malformed default never leaves partial output behind. Each
call builds its working data from scratch; nothing is cached between dumps.

Usage:
    service = SchemaDumpService(CatalogRepository(MySQLRepository(config)))
    service.dump(sys.stdout)
"""

import io
import sys
from typing import Optional, TextIO

from core.config.defaults import SchemaDumpDefaults, get_defaults
from core.logging import ComponentType, get_logger, log_checkpoint, log_context
from core.schema import SchemaDefinitionGenerator
from repositories.catalog_repo import CatalogRepository
from services.catalog_aggregator import CatalogAggregator

logger = get_logger(__name__, ComponentType.SERVICE)


class SchemaDumpService:
    """Produce the SDL document for one schema."""

    def __init__(
        self,
        catalog_repo: Optional[CatalogRepository] = None,
        defaults: Optional[SchemaDumpDefaults] = None,
        aggregator: Optional[CatalogAggregator] = None,
        generator: Optional[SchemaDefinitionGenerator] = None,
    ):
        """
        Initialize dump service.

        Args:
            catalog_repo: Catalog reader (defaults to one built from environment config)
            defaults: Implicit values shared by reader, aggregator and generator
            aggregator: Optional aggregator override
            generator: Optional generator override
        """
        self.defaults = defaults or get_defaults().schema
        self.catalog_repo = catalog_repo or CatalogRepository(defaults=self.defaults)
        self.aggregator = aggregator or CatalogAggregator(self.defaults)
        self.generator = generator or SchemaDefinitionGenerator(self.defaults)

    def render(self) -> str:
        """
        Read the catalog and return the SDL document.

        Raises:
            CatalogQueryError: A catalog read failed
            MalformedDefaultValueError: A default could not be canonicalized
        """
        schema = self.catalog_repo.schema_name or "DATABASE()"
        with log_context(schema=schema, operation="dump"):
            snapshot = self.catalog_repo.read_snapshot()
            log_checkpoint("snapshot_read", {"tables": len(snapshot.tables)})

            tables, foreign_keys = self.aggregator.aggregate(snapshot)
            log_checkpoint("aggregated", {"tables": len(tables), "foreign_keys": len(foreign_keys)})

            text = self.generator.generate(tables, foreign_keys)
            log_checkpoint("rendered", {"bytes": len(text)})

        logger.debug(f"Rendered schema for {schema}: {len(tables)} tables")
        return text

    def dump(self, stream: Optional[TextIO] = None) -> str:
        """
        Render and write the document to `stream` in a single write.

        Returns:
            The text that was written
        """
        text = self.render()
        target = stream if stream is not None else sys.stdout
        target.write(text)
        if hasattr(target, "flush"):
            target.flush()
        log_checkpoint("flushed", {"bytes": len(text)})
        return text

    def dump_to_string(self) -> str:
        """Render into an in-memory buffer (what hosts substitute for the reference dumper)."""
        buffer = io.StringIO()
        self.dump(buffer)
        return buffer.getvalue()


__all__ = [
    "SchemaDumpService",
]
