# ============================================================================
# INFRASTRUCTURE MODULE
# ============================================================================
# EPOCH: 1 - CATALOG DUMP
# STATUS: Infrastructure - Database connectivity and repository base
# PURPOSE: MySQL connections and shared repository error handling
# CREATED: 19 OCT 2026
# ============================================================================
"""
Infrastructure module for the fast schema dumper.

Provides:
- MySQLRepository: connection and dictionary-cursor management
- BaseRepository: error context and logging shared by repositories
- RepositoryError, CatalogQueryError, UnsupportedCatalogFeature

Usage:
    from infrastructure import MySQLRepository

    repo = MySQLRepository(config)
    with repo.get_connection() as conn:
        rows = repo.fetch_all("SELECT 1 AS one", conn=conn)
"""

from infrastructure.base_repository import (
    BaseRepository,
    RepositoryError,
    CatalogQueryError,
    UnsupportedCatalogFeature,
)
from infrastructure.mysql import MySQLRepository

__all__ = [
    # Repository base
    'BaseRepository',
    'RepositoryError',
    'CatalogQueryError',
    'UnsupportedCatalogFeature',
    # MySQL
    'MySQLRepository',
]
