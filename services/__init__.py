# ============================================================================
# SERVICES MODULE
# ============================================================================
# EPOCH: 1 - CATALOG DUMP
# STATUS: Core - Dump orchestration layer
# PURPOSE: Aggregation, dump orchestration and dumper selection
# CREATED: 19 OCT 2026
# ============================================================================
"""
Services Module

Services coordinate the catalog repository and the SDL generator.

Usage:
    from services import SchemaDumpService, select_dumper

    text = SchemaDumpService().dump_to_string()
"""

from .catalog_aggregator import CatalogAggregator
from .schema_dump_service import SchemaDumpService
from .dumper_strategy import (
    SchemaDumper,
    ReferenceSchemaDumper,
    FastSchemaDumper,
    VerifyingSchemaDumper,
    select_dumper,
)

__all__ = [
    "CatalogAggregator",
    "SchemaDumpService",
    "SchemaDumper",
    "ReferenceSchemaDumper",
    "FastSchemaDumper",
    "VerifyingSchemaDumper",
    "select_dumper",
]
