# ============================================================================
# MYSQL CONNECTION INFRASTRUCTURE
# ============================================================================
# EPOCH: 1 - CATALOG DUMP
# STATUS: Infrastructure - MySQL connection handling
# PURPOSE: Database connectivity for catalog reads
# CREATED: 19 OCT 2026
# ============================================================================
"""
MySQL Connection Infrastructure

Provides database connectivity for the catalog reader:
- Connection settings from DatabaseConfig (database.yml + environment)
- Dictionary cursors so rows map straight onto the typed row models
- Context managers for safe resource management

One dump uses one connection; it is opened lazily and closed when the
context exits. No transaction is started: every statement is a read of
INFORMATION_SCHEMA.
"""

import threading
from contextlib import contextmanager
from typing import Any, Dict, List, Optional, Sequence

import mysql.connector

from core.config.database import DatabaseConfig
from core.logging import ComponentType, get_logger

logger = get_logger(__name__, ComponentType.INFRASTRUCTURE)


# ============================================================================
# MYSQL REPOSITORY BASE
# ============================================================================

class MySQLRepository:
    """
    Base repository for MySQL read operations.

    Usage:
        repo = MySQLRepository(config)
        with repo.get_connection() as conn:
            rows = repo.fetch_all("SELECT 1 AS one", conn=conn)
    """

    def __init__(self, config: Optional[DatabaseConfig] = None):
        """
        Initialize MySQL repository.

        Args:
            config: Connection settings; loaded via DatabaseConfig.load() when omitted
        """
        self._config = config
        self._config_lock = threading.Lock()

    @property
    def config(self) -> DatabaseConfig:
        """Get or load connection settings (lazy, thread-safe)."""
        if self._config is None:
            with self._config_lock:
                if self._config is None:
                    self._config = DatabaseConfig.load()
        return self._config

    @contextmanager
    def get_connection(self):
        """
        Context manager for MySQL connections.

        Yields:
            mysql.connector connection
        """
        conn = None
        try:
            logger.debug(f"Connecting to MySQL {self.config.safe_description}...")
            conn = mysql.connector.connect(**self.config.connect_kwargs())
            logger.debug("MySQL connection established")
            yield conn

        except mysql.connector.Error as e:
            logger.error(f"MySQL connection error: {e}")
            raise

        finally:
            if conn is not None:
                conn.close()

    @contextmanager
    def get_cursor(self, conn=None):
        """
        Context manager for dictionary cursors.

        Args:
            conn: Optional existing connection (reused for a whole dump)

        Yields:
            cursor returning one dict per row
        """
        if conn is not None:
            cursor = conn.cursor(dictionary=True)
            try:
                yield cursor
            finally:
                cursor.close()
        else:
            with self.get_connection() as own_conn:
                cursor = own_conn.cursor(dictionary=True)
                try:
                    yield cursor
                finally:
                    cursor.close()

    def fetch_one(self, query: str, params: Sequence[Any] = None, conn=None) -> Optional[Dict[str, Any]]:
        """Execute query and fetch one result."""
        with self.get_cursor(conn) as cur:
            cur.execute(query, params)
            row = cur.fetchone()
            # Unread rows would block the next statement on this connection
            cur.fetchall()
            return row

    def fetch_all(self, query: str, params: Sequence[Any] = None, conn=None) -> List[Dict[str, Any]]:
        """Execute query and fetch all results."""
        with self.get_cursor(conn) as cur:
            cur.execute(query, params)
            return list(cur.fetchall())


__all__ = [
    "MySQLRepository",
]
