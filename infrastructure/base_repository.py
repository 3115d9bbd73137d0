# ============================================================================
# BASE REPOSITORY - ERROR HANDLING PATTERNS
# ============================================================================
# EPOCH: 1 - CATALOG DUMP
# STATUS: Infrastructure - Base repository patterns
# PURPOSE: Common error handling and logging for catalog repositories
# CREATED: 19 OCT 2026
# ============================================================================
"""
Base Repository Patterns

Abstract base class that provides common infrastructure for repositories:
- Consistent error handling with context managers
- Standardized logging

Catalog reads are all-or-nothing: any failure is wrapped into a
CatalogQueryError carrying the operation name and re-raised. Nothing is
retried; the caller decides whether to run the whole dump again.
"""

import logging
from abc import ABC
from contextlib import contextmanager
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class RepositoryError(Exception):
    """Base exception for repository operations."""

    def __init__(self, message: str, operation: str = None, entity_id: str = None):
        self.operation = operation
        self.entity_id = entity_id
        super().__init__(message)


class CatalogQueryError(RepositoryError):
    """A required catalog read failed. Fatal for the dump."""


class UnsupportedCatalogFeature(RepositoryError):
    """
    The connected server lacks an optional catalog view.

    Readers convert this into an empty result set.
    """

    def __init__(self, message: str, feature: str = None, **kwargs):
        self.feature = feature
        super().__init__(message, **kwargs)


class BaseRepository(ABC):
    """
    Abstract base repository with common patterns.

    Provides:
    - Error context manager for consistent error handling
    - Standardized logging

    Subclasses implement storage-specific operations.
    """

    def __init__(self):
        """Initialize base repository."""
        self.logger = logging.getLogger(self.__class__.__name__)
        self.logger.debug(f"{self.__class__.__name__} initialized")

    @contextmanager
    def _error_context(self, operation: str, entity_id: Optional[str] = None):
        """
        Context manager for consistent error handling.

        All exceptions are logged with context before being re-raised as
        CatalogQueryError.

        Args:
            operation: Human-readable description of the operation
            entity_id: Optional entity (schema, table) for context

        Example:
            with self._error_context("read columns", schema):
                rows = self._fetch_all(cur, COLUMNS_SQL, params)
        """
        try:
            yield
        except RepositoryError:
            # Already has context, just re-raise
            raise
        except Exception as e:
            error_msg = f"{operation} failed"
            if entity_id:
                error_msg += f" for {entity_id}"
            error_msg += f": {e}"
            self.logger.error(error_msg)
            raise CatalogQueryError(error_msg, operation=operation, entity_id=entity_id) from e

    def _log_operation(
        self,
        operation: str,
        entity_id: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Log a completed operation with consistent formatting.

        Format:
            "operation: entity_id | details"
        """
        msg = f"{operation}: {entity_id}"
        if details:
            msg += f" | {details}"
        self.logger.debug(msg)


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "BaseRepository",
    "RepositoryError",
    "CatalogQueryError",
    "UnsupportedCatalogFeature",
]
