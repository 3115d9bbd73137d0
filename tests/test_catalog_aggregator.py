# ============================================================================
# CATALOG AGGREGATOR TESTS
# ============================================================================
# EPOCH: 1 - CATALOG DUMP
# STATUS: Tests - Row grouping
# PURPOSE: Verify per-table grouping, PRIMARY extraction and FK collapsing
# CREATED: 19 OCT 2026
# ============================================================================
"""
Catalog Aggregator Tests

Rows are deliberately fed out of order: the aggregator must not rely on the
ORDER BY of the catalog queries.

Run with:
    pytest tests/test_catalog_aggregator.py -v
"""

from core.contracts import IndexOrder
from core.models import (
    CatalogSnapshot,
    CheckConstraintRow,
    ColumnRow,
    ForeignKeyRow,
    IndexRow,
    TableOptionsRow,
    TableRow,
)
from services.catalog_aggregator import CatalogAggregator


# ============================================================================
# HELPERS
# ============================================================================

def _col(table, name, position):
    return ColumnRow(
        table_name=table, column_name=name, ordinal_position=position,
        data_type="bigint", column_type="bigint",
    )


def _idx(table, index, column, seq, non_unique=1, collation="A", comment=""):
    return IndexRow(
        table_name=table, index_name=index, column_name=column, seq_in_index=seq,
        non_unique=non_unique, collation=collation, index_comment=comment,
    )


def _fk(table, name, column, referenced, position=1):
    return ForeignKeyRow(
        table_name=table, constraint_name=name, column_name=column, ordinal_position=position,
        referenced_table_name=referenced, referenced_column_name="id",
        delete_rule="CASCADE", update_rule="RESTRICT",
    )


def _snapshot(**kwargs):
    kwargs.setdefault("tables", [TableRow(table_name="users"), TableRow(table_name="posts")])
    return CatalogSnapshot(**kwargs)


# ============================================================================
# TABLES AND COLUMNS
# ============================================================================

class TestTables:

    def test_tables_sorted_by_name(self):
        tables, _ = CatalogAggregator().aggregate(_snapshot())
        assert [t.name for t in tables] == ["posts", "users"]

    def test_table_without_rows_gets_empty_values(self):
        tables, fks = CatalogAggregator().aggregate(_snapshot())
        posts = tables[0]
        assert posts.columns == []
        assert posts.indexes == {}
        assert posts.check_constraints == []
        assert posts.options is None
        assert posts.primary_key is None
        assert fks == []

    def test_columns_sorted_by_ordinal(self):
        snapshot = _snapshot(columns=[
            _col("users", "email", 3),
            _col("users", "id", 1),
            _col("posts", "id", 1),
            _col("users", "name", 2),
        ])
        tables, _ = CatalogAggregator().aggregate(snapshot)
        users = tables[1]
        assert [c.column_name for c in users.columns] == ["id", "name", "email"]
        assert [c.column_name for c in tables[0].columns] == ["id"]

    def test_options_attached(self):
        snapshot = _snapshot(table_options=[
            TableOptionsRow(table_name="users", collation="utf8mb4_bin", comment="people"),
        ])
        tables, _ = CatalogAggregator().aggregate(snapshot)
        assert tables[1].options.charset == "utf8mb4"
        assert tables[1].options.comment == "people"

    def test_check_constraints_grouped(self):
        snapshot = _snapshot(check_constraints=[
            CheckConstraintRow(table_name="posts", constraint_name="c1", check_clause="(`x` > 0)"),
        ])
        tables, _ = CatalogAggregator().aggregate(snapshot)
        assert len(tables[0].check_constraints) == 1
        assert tables[1].check_constraints == []


# ============================================================================
# INDEXES
# ============================================================================

class TestIndexes:

    def test_primary_extracted(self):
        snapshot = _snapshot(indexes=[
            _idx("users", "PRIMARY", "id", 1, non_unique=0),
            _idx("users", "index_users_on_email", "email", 1, non_unique=0),
        ])
        tables, _ = CatalogAggregator().aggregate(snapshot)
        users = tables[1]
        assert users.primary_key.columns == ["id"]
        assert "PRIMARY" not in users.indexes
        assert users.indexes["index_users_on_email"].unique is True

    def test_columns_ordered_by_sequence(self):
        snapshot = _snapshot(indexes=[
            _idx("users", "idx_ab", "b", 2),
            _idx("users", "idx_ab", "a", 1),
        ])
        tables, _ = CatalogAggregator().aggregate(snapshot)
        index = tables[1].indexes["idx_ab"]
        assert index.columns == ["a", "b"]
        assert index.unique is False

    def test_duplicate_columns_dropped(self):
        snapshot = _snapshot(indexes=[
            _idx("users", "idx_a", "a", 1),
            _idx("users", "idx_a", "a", 2),
        ])
        tables, _ = CatalogAggregator().aggregate(snapshot)
        assert tables[1].indexes["idx_a"].columns == ["a"]

    def test_descending_columns(self):
        snapshot = _snapshot(indexes=[
            _idx("users", "idx_recent", "user_id", 1),
            _idx("users", "idx_recent", "created_at", 2, collation="D"),
        ])
        tables, _ = CatalogAggregator().aggregate(snapshot)
        assert tables[1].indexes["idx_recent"].orders == {"created_at": IndexOrder.DESC}

    def test_functional_key_part_skipped(self):
        snapshot = _snapshot(indexes=[
            _idx("users", "idx_expr", None, 1),
            _idx("users", "idx_mixed", "a", 1),
            _idx("users", "idx_mixed", None, 2),
        ])
        tables, _ = CatalogAggregator().aggregate(snapshot)
        indexes = tables[1].indexes
        assert "idx_expr" not in indexes
        assert indexes["idx_mixed"].columns == ["a"]

    def test_comment_kept(self):
        snapshot = _snapshot(indexes=[_idx("users", "idx_a", "a", 1, comment="hot path")])
        tables, _ = CatalogAggregator().aggregate(snapshot)
        assert tables[1].indexes["idx_a"].comment == "hot path"


# ============================================================================
# FOREIGN KEYS
# ============================================================================

class TestForeignKeys:

    def test_composite_key_keeps_first_column(self):
        snapshot = _snapshot(foreign_keys=[
            _fk("posts", "fk_composite", "user_id", "users"),
            _fk("posts", "fk_composite", "tenant_id", "users", position=2),
            _fk("posts", "fk_rails_1", "editor_id", "users"),
        ])
        _, fks = CatalogAggregator().aggregate(snapshot)
        assert len(fks) == 2
        composite = [fk for fk in fks if fk.constraint_name == "fk_composite"][0]
        assert composite.column_name == "user_id"
        assert composite.key == ("posts", "fk_composite")
        assert composite.delete_rule == "CASCADE"

    def test_composite_key_ignores_row_order(self):
        rows = [
            _fk("posts", "fk_composite", "tenant_id", "users", position=2),
            _fk("posts", "fk_composite", "user_id", "users", position=1),
        ]
        for ordered in (rows, list(reversed(rows))):
            _, fks = CatalogAggregator().aggregate(_snapshot(foreign_keys=ordered))
            assert [fk.column_name for fk in fks] == ["user_id"]

    def test_same_constraint_name_on_different_tables(self):
        snapshot = _snapshot(foreign_keys=[
            _fk("posts", "fk_owner", "user_id", "users"),
            _fk("users", "fk_owner", "manager_id", "users"),
        ])
        _, fks = CatalogAggregator().aggregate(snapshot)
        assert len(fks) == 2
