# ============================================================================
# REPOSITORIES MODULE
# ============================================================================
# EPOCH: 1 - CATALOG DUMP
# STATUS: Core - Database access layer
# PURPOSE: Bulk INFORMATION_SCHEMA reads
# CREATED: 19 OCT 2026
# ============================================================================
"""
Repositories Module

Provides read access to the MySQL catalog.

Usage:
    from repositories import CatalogRepository

    repo = CatalogRepository()
    snapshot = repo.read_snapshot()
"""

from .catalog_repo import CatalogRepository

__all__ = [
    "CatalogRepository",
]
