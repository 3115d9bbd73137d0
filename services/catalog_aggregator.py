# ============================================================================
# CATALOG AGGREGATOR
# ============================================================================
# EPOCH: 1 - CATALOG DUMP
# STATUS: Service - Group flat catalog rows per table
# PURPOSE: Turn a CatalogSnapshot into TableRecords and ForeignKeyRecords
# CREATED: 19 OCT 2026
# ============================================================================
"""
Catalog Aggregator

Groups the flat rows of a CatalogSnapshot:
- columns by table, ordered by ordinal position
- indexes by table and name, columns ordered by sequence in index
- CHECK constraints and table options by table
- foreign keys as one global list, one record per (table, constraint)

The PRIMARY index is removed from each table's index map and attached as
`TableRecord.primary_key`; it never renders as a regular index.

Source ordering is not trusted: everything that affects output is re-sorted.
"""

from collections import defaultdict
from typing import Dict, List, Optional, Tuple

from core.config.defaults import SchemaDumpDefaults
from core.contracts import IndexOrder
from core.logging import ComponentType, get_logger
from core.models import (
    CatalogSnapshot,
    CheckConstraintRow,
    ColumnRow,
    ForeignKeyRecord,
    ForeignKeyRow,
    IndexRecord,
    IndexRow,
    TableRecord,
)

logger = get_logger(__name__, ComponentType.SERVICE)


class CatalogAggregator:
    """Group snapshot rows into per-table records."""

    def __init__(self, defaults: Optional[SchemaDumpDefaults] = None):
        self.defaults = defaults or SchemaDumpDefaults()

    def aggregate(self, snapshot: CatalogSnapshot) -> Tuple[List[TableRecord], List[ForeignKeyRecord]]:
        """
        Build table records (sorted by name) and the foreign key list.

        Tables with no rows in a given category get empty values.
        """
        columns = self.group_columns(snapshot.columns)
        indexes = self.group_indexes(snapshot.indexes)
        checks = self.group_check_constraints(snapshot.check_constraints)
        options = {row.table_name: row for row in snapshot.table_options}

        tables: List[TableRecord] = []
        for name in sorted(set(snapshot.table_names)):
            table_indexes = dict(indexes.get(name, {}))
            primary_key = table_indexes.pop(self.defaults.primary_key_index, None)
            tables.append(TableRecord(
                name=name,
                options=options.get(name),
                columns=columns.get(name, []),
                primary_key=primary_key,
                indexes=table_indexes,
                check_constraints=checks.get(name, []),
            ))

        foreign_keys = self.collapse_foreign_keys(snapshot)
        logger.debug(f"Aggregated {len(tables)} tables, {len(foreign_keys)} foreign keys")
        return tables, foreign_keys

    # =========================================================================
    # GROUPING
    # =========================================================================

    @staticmethod
    def group_columns(rows: List[ColumnRow]) -> Dict[str, List[ColumnRow]]:
        grouped: Dict[str, List[ColumnRow]] = defaultdict(list)
        for row in rows:
            grouped[row.table_name].append(row)
        return {
            table: sorted(table_columns, key=lambda c: c.ordinal_position)
            for table, table_columns in grouped.items()
        }

    @staticmethod
    def group_indexes(rows: List[IndexRow]) -> Dict[str, Dict[str, IndexRecord]]:
        """
        Fold statistics rows into one IndexRecord per (table, index name).

        Uniqueness and comment come from the first row of an index. Key parts
        without a column name (functional indexes) are skipped.
        """
        by_index: Dict[Tuple[str, str], List[IndexRow]] = defaultdict(list)
        for row in rows:
            by_index[(row.table_name, row.index_name)].append(row)

        grouped: Dict[str, Dict[str, IndexRecord]] = defaultdict(dict)
        for (table, index_name), index_rows in by_index.items():
            first = index_rows[0]
            columns: List[str] = []
            orders: Dict[str, IndexOrder] = {}
            for row in sorted(index_rows, key=lambda r: r.seq_in_index):
                if row.column_name is None or row.column_name in columns:
                    continue
                columns.append(row.column_name)
                if row.order == IndexOrder.DESC:
                    orders[row.column_name] = IndexOrder.DESC

            if not columns:
                logger.debug(f"Skipping index {table}.{index_name}: no named columns")
                continue

            grouped[table][index_name] = IndexRecord(
                name=index_name,
                columns=columns,
                unique=int(first.non_unique) == 0,
                orders=orders,
                comment=first.index_comment,
            )
        return dict(grouped)

    @staticmethod
    def group_check_constraints(rows: List[CheckConstraintRow]) -> Dict[str, List[CheckConstraintRow]]:
        grouped: Dict[str, List[CheckConstraintRow]] = defaultdict(list)
        for row in rows:
            grouped[row.table_name].append(row)
        return dict(grouped)

    @staticmethod
    def collapse_foreign_keys(snapshot: CatalogSnapshot) -> List[ForeignKeyRecord]:
        """
        One record per (table, constraint).

        Composite keys keep only their first column (lowest ordinal position),
        whatever order the rows arrive in.
        """
        first: Dict[Tuple[str, str], ForeignKeyRow] = {}
        for row in snapshot.foreign_keys:
            key = (row.table_name, row.constraint_name)
            current = first.get(key)
            if current is None or row.ordinal_position < current.ordinal_position:
                first[key] = row
        return [ForeignKeyRecord(**row.model_dump()) for row in first.values()]


__all__ = [
    "CatalogAggregator",
]
