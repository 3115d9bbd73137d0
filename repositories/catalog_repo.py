# ============================================================================
# CATALOG REPOSITORY
# ============================================================================
# EPOCH: 1 - CATALOG DUMP
# STATUS: Repository - INFORMATION_SCHEMA bulk reads
# PURPOSE: Read every table, column, index, option, FK and CHECK in one pass
# CREATED: 19 OCT 2026
# ============================================================================
"""
Catalog Repository

Reads the structural metadata of one MySQL schema with a fixed set of bulk
queries (instead of per-table introspection) and returns typed rows.

Queries, issued sequentially over one connection:
    1. base tables (migration bookkeeping tables excluded)
    2. columns
    3. index statistics
    4. table options (collation, comment)
    5. foreign keys joined with their referential rules
    6. CHECK constraints, only if INFORMATION_SCHEMA.CHECK_CONSTRAINTS exists

Rows are ordered at the source, but consumers must not rely on it.

Usage:
    repo = CatalogRepository(MySQLRepository(config))
    snapshot = repo.read_snapshot()
"""

from typing import Any, List, Optional, Tuple

from core.config.defaults import SchemaDumpDefaults
from core.logging import ComponentType, get_logger
from core.models import (
    CatalogSnapshot,
    CheckConstraintRow,
    ColumnRow,
    ForeignKeyRow,
    IndexRow,
    TableOptionsRow,
    TableRow,
)
from infrastructure.base_repository import BaseRepository, UnsupportedCatalogFeature
from infrastructure.mysql import MySQLRepository

logger = get_logger(__name__, ComponentType.REPOSITORY)

# Active schema: the explicit name when given, else the connection's database
SCHEMA_EXPR = "COALESCE(%s, DATABASE())"


# ============================================================================
# SQL
# ============================================================================

TABLES_SQL = f"""
    SELECT TABLE_NAME AS table_name
    FROM INFORMATION_SCHEMA.TABLES
    WHERE TABLE_SCHEMA = {SCHEMA_EXPR}
      AND TABLE_TYPE = 'BASE TABLE'
      {{exclusions}}
    ORDER BY TABLE_NAME
"""

COLUMNS_SQL = f"""
    SELECT
        TABLE_NAME AS table_name,
        COLUMN_NAME AS column_name,
        ORDINAL_POSITION AS ordinal_position,
        COLUMN_DEFAULT AS column_default,
        IS_NULLABLE AS is_nullable,
        DATA_TYPE AS data_type,
        CHARACTER_MAXIMUM_LENGTH AS character_maximum_length,
        NUMERIC_PRECISION AS numeric_precision,
        NUMERIC_SCALE AS numeric_scale,
        COLUMN_TYPE AS column_type,
        EXTRA AS extra,
        COLUMN_COMMENT AS column_comment,
        DATETIME_PRECISION AS datetime_precision,
        COLLATION_NAME AS collation_name
    FROM INFORMATION_SCHEMA.COLUMNS
    WHERE TABLE_SCHEMA = {SCHEMA_EXPR}
    ORDER BY TABLE_NAME, ORDINAL_POSITION
"""

INDEXES_SQL = f"""
    SELECT
        s.TABLE_NAME AS table_name,
        s.INDEX_NAME AS index_name,
        s.NON_UNIQUE AS non_unique,
        s.COLUMN_NAME AS column_name,
        s.SEQ_IN_INDEX AS seq_in_index,
        s.INDEX_COMMENT AS index_comment,
        s.COLLATION AS collation
    FROM INFORMATION_SCHEMA.STATISTICS s
    WHERE s.TABLE_SCHEMA = {SCHEMA_EXPR}
    ORDER BY s.TABLE_NAME, s.INDEX_NAME, s.SEQ_IN_INDEX
"""

TABLE_OPTIONS_SQL = f"""
    SELECT
        TABLE_NAME AS table_name,
        TABLE_COLLATION AS collation,
        TABLE_COMMENT AS comment
    FROM INFORMATION_SCHEMA.TABLES
    WHERE TABLE_SCHEMA = {SCHEMA_EXPR}
      AND TABLE_TYPE = 'BASE TABLE'
    ORDER BY TABLE_NAME
"""

FOREIGN_KEYS_SQL = f"""
    SELECT
        kcu.TABLE_NAME AS table_name,
        kcu.CONSTRAINT_NAME AS constraint_name,
        kcu.COLUMN_NAME AS column_name,
        kcu.ORDINAL_POSITION AS ordinal_position,
        kcu.REFERENCED_TABLE_NAME AS referenced_table_name,
        kcu.REFERENCED_COLUMN_NAME AS referenced_column_name,
        rc.DELETE_RULE AS delete_rule,
        rc.UPDATE_RULE AS update_rule
    FROM INFORMATION_SCHEMA.KEY_COLUMN_USAGE kcu
    JOIN INFORMATION_SCHEMA.REFERENTIAL_CONSTRAINTS rc
      ON kcu.CONSTRAINT_SCHEMA = rc.CONSTRAINT_SCHEMA
     AND kcu.CONSTRAINT_NAME = rc.CONSTRAINT_NAME
    WHERE kcu.TABLE_SCHEMA = {SCHEMA_EXPR}
      AND kcu.REFERENCED_TABLE_NAME IS NOT NULL
    ORDER BY kcu.TABLE_NAME, kcu.CONSTRAINT_NAME, kcu.ORDINAL_POSITION
"""

CHECK_VIEW_EXISTS_SQL = """
    SELECT COUNT(*) AS count
    FROM INFORMATION_SCHEMA.TABLES
    WHERE TABLE_SCHEMA = 'information_schema'
      AND TABLE_NAME = 'CHECK_CONSTRAINTS'
"""

CHECK_CONSTRAINTS_SQL = f"""
    SELECT
        tc.CONSTRAINT_NAME AS constraint_name,
        tc.TABLE_NAME AS table_name,
        cc.CHECK_CLAUSE AS check_clause
    FROM INFORMATION_SCHEMA.TABLE_CONSTRAINTS tc
    JOIN INFORMATION_SCHEMA.CHECK_CONSTRAINTS cc
      ON tc.CONSTRAINT_SCHEMA = cc.CONSTRAINT_SCHEMA
     AND tc.CONSTRAINT_NAME = cc.CONSTRAINT_NAME
    WHERE tc.TABLE_SCHEMA = {SCHEMA_EXPR}
      AND tc.CONSTRAINT_TYPE = 'CHECK'
    ORDER BY tc.TABLE_NAME, tc.CONSTRAINT_NAME
"""


class CatalogRepository(BaseRepository):
    """
    Bulk reader for INFORMATION_SCHEMA.

    Every read is wrapped in an error context: a driver failure surfaces as
    CatalogQueryError naming the failed read.
    """

    def __init__(
        self,
        db: Optional[MySQLRepository] = None,
        defaults: Optional[SchemaDumpDefaults] = None,
        schema_name: Optional[str] = None,
    ):
        """
        Args:
            db: Connection provider
            defaults: Implicit values (internal tables to exclude)
            schema_name: Schema to read; the connection's database when None
        """
        super().__init__()
        self.db = db or MySQLRepository()
        self.defaults = defaults or SchemaDumpDefaults()
        self.schema_name = schema_name

    @property
    def _schema_label(self) -> str:
        return self.schema_name or "DATABASE()"

    def _params(self, *extra: Any) -> Tuple[Any, ...]:
        return (self.schema_name, *extra)

    # =========================================================================
    # SNAPSHOT
    # =========================================================================

    def read_snapshot(self) -> CatalogSnapshot:
        """
        Run every catalog query over a single connection.

        Raises:
            CatalogQueryError: If any required read fails
        """
        with self._error_context("catalog connection", self._schema_label):
            with self.db.get_connection() as conn:
                snapshot = CatalogSnapshot(
                    tables=self.list_tables(conn),
                    columns=self.list_columns(conn),
                    indexes=self.list_index_rows(conn),
                    table_options=self.list_table_options(conn),
                    foreign_keys=self.list_foreign_keys(conn),
                    check_constraints=self.list_check_constraints(conn),
                )

        self._log_operation("read snapshot", self._schema_label, {
            "tables": len(snapshot.tables),
            "columns": len(snapshot.columns),
            "index_rows": len(snapshot.indexes),
            "foreign_keys": len(snapshot.foreign_keys),
            "check_constraints": len(snapshot.check_constraints),
        })
        return snapshot

    # =========================================================================
    # INDIVIDUAL READS
    # =========================================================================

    def list_tables(self, conn=None) -> List[TableRow]:
        internal = tuple(self.defaults.internal_tables)
        exclusions = ""
        if internal:
            placeholders = ", ".join(["%s"] * len(internal))
            exclusions = f"AND TABLE_NAME NOT IN ({placeholders})"

        with self._error_context("read tables", self._schema_label):
            rows = self.db.fetch_all(
                TABLES_SQL.format(exclusions=exclusions),
                self._params(*internal),
                conn=conn,
            )
            return [TableRow.from_row(r) for r in rows]

    def list_columns(self, conn=None) -> List[ColumnRow]:
        with self._error_context("read columns", self._schema_label):
            rows = self.db.fetch_all(COLUMNS_SQL, self._params(), conn=conn)
            return [ColumnRow.from_row(r) for r in rows]

    def list_index_rows(self, conn=None) -> List[IndexRow]:
        with self._error_context("read indexes", self._schema_label):
            rows = self.db.fetch_all(INDEXES_SQL, self._params(), conn=conn)
            return [IndexRow.from_row(r) for r in rows]

    def list_table_options(self, conn=None) -> List[TableOptionsRow]:
        with self._error_context("read table options", self._schema_label):
            rows = self.db.fetch_all(TABLE_OPTIONS_SQL, self._params(), conn=conn)
            return [TableOptionsRow.from_row(r) for r in rows]

    def list_foreign_keys(self, conn=None) -> List[ForeignKeyRow]:
        with self._error_context("read foreign keys", self._schema_label):
            rows = self.db.fetch_all(FOREIGN_KEYS_SQL, self._params(), conn=conn)
            return [ForeignKeyRow.from_row(r) for r in rows]

    def list_check_constraints(self, conn=None) -> List[CheckConstraintRow]:
        """CHECK constraints, or an empty list on servers before MySQL 8.0.16."""
        try:
            self._require_check_constraints_view(conn)
        except UnsupportedCatalogFeature as e:
            logger.debug(f"Skipping CHECK constraints: {e}")
            return []

        with self._error_context("read check constraints", self._schema_label):
            rows = self.db.fetch_all(CHECK_CONSTRAINTS_SQL, self._params(), conn=conn)
            return [CheckConstraintRow.from_row(r) for r in rows]

    def _require_check_constraints_view(self, conn=None) -> None:
        with self._error_context("look up check constraints view", self._schema_label):
            row = self.db.fetch_one(CHECK_VIEW_EXISTS_SQL, conn=conn)

        count = 0
        if row:
            count = int(row.get("count", row.get("COUNT", 0)) or 0)
        if count == 0:
            raise UnsupportedCatalogFeature(
                "INFORMATION_SCHEMA.CHECK_CONSTRAINTS not available",
                feature="check_constraints",
                operation="look up check constraints view",
            )


__all__ = [
    "CatalogRepository",
]
