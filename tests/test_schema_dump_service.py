# ============================================================================
# SCHEMA DUMP SERVICE TESTS
# ============================================================================
# EPOCH: 1 - CATALOG DUMP
# STATUS: Tests - End-to-end document rendering
# PURPOSE: Verify the whole SDL document from a mocked catalog snapshot
# CREATED: 19 OCT 2026
# ============================================================================
"""
Schema Dump Service Tests

The catalog repository is mocked; everything from aggregation to the final
text runs for real.

Run with:
    pytest tests/test_schema_dump_service.py -v
"""

import io
from unittest.mock import MagicMock

import pytest

from core.contracts import MalformedDefaultValueError
from core.config.defaults import SchemaDumpDefaults
from core.models import (
    CatalogSnapshot,
    CheckConstraintRow,
    ColumnRow,
    ForeignKeyRow,
    IndexRow,
    TableOptionsRow,
    TableRow,
)
from core.schema.sdl_generator import SDLBuilder
from infrastructure.base_repository import CatalogQueryError
from services.schema_dump_service import SchemaDumpService


# ============================================================================
# FIXTURE DATA
# ============================================================================

def _col(table, name, position, data_type, column_type=None, **kwargs):
    return ColumnRow(
        table_name=table, column_name=name, ordinal_position=position,
        data_type=data_type, column_type=column_type or data_type, **kwargs,
    )


def _idx(table, index, column, seq=1, non_unique=1, collation="A"):
    return IndexRow(
        table_name=table, index_name=index, column_name=column,
        seq_in_index=seq, non_unique=non_unique, collation=collation, index_comment="",
    )


def _sample_snapshot(**overrides):
    data = dict(
        tables=[TableRow(table_name="users"), TableRow(table_name="posts")],
        columns=[
            _col("users", "id", 1, "bigint", is_nullable="NO", extra="auto_increment"),
            _col("users", "email", 2, "varchar", "varchar(100)",
                 character_maximum_length=100, is_nullable="NO"),
            _col("users", "admin", 3, "tinyint", "tinyint(1)", column_default="0", is_nullable="NO"),
            _col("users", "created_at", 4, "datetime", "datetime(6)",
                 datetime_precision=6, is_nullable="NO"),
            _col("posts", "id", 1, "int", "int unsigned", is_nullable="NO"),
            _col("posts", "author_id", 2, "bigint"),
            _col("posts", "body", 3, "mediumtext", collation_name="utf8mb4_bin"),
            _col("posts", "price", 4, "decimal", "decimal(8,2)",
                 numeric_precision=8, numeric_scale=2, column_default="1.50"),
        ],
        indexes=[
            _idx("users", "PRIMARY", "id", non_unique=0),
            _idx("users", "index_users_on_email", "email", non_unique=0),
            _idx("posts", "PRIMARY", "id", non_unique=0),
            _idx("posts", "index_posts_on_author_id", "author_id"),
            _idx("posts", "idx_author_recent", "author_id", 1),
            _idx("posts", "idx_author_recent", "id", 2, collation="D"),
        ],
        table_options=[
            TableOptionsRow(table_name="users", collation="utf8mb4_0900_ai_ci", comment=""),
            TableOptionsRow(table_name="posts", collation="utf8mb4_0900_ai_ci", comment="Blog posts"),
        ],
        foreign_keys=[
            ForeignKeyRow(
                table_name="posts", constraint_name="fk_rails_abc123", column_name="author_id",
                referenced_table_name="users", referenced_column_name="id",
            ),
        ],
        check_constraints=[
            CheckConstraintRow(table_name="posts", constraint_name="price_positive",
                               check_clause="(`price` > 0)"),
        ],
    )
    data.update(overrides)
    return CatalogSnapshot(**data)


EXPECTED = "\n".join([
    'create_table "posts", id: { type: :int, unsigned: true }, charset: "utf8mb4", '
    'collation: "utf8mb4_0900_ai_ci", comment: "Blog posts", force: :cascade do |t|',
    '  t.bigint "author_id"',
    '  t.text "body", size: :medium, collation: "utf8mb4_bin"',
    '  t.decimal "price", precision: 8, scale: 2, default: "1.5"',
    '  t.index ["author_id", "id"], name: "idx_author_recent", order: { id: :desc }',
    '  t.index ["author_id"], name: "index_posts_on_author_id"',
    '  t.check_constraint "`price` > 0", name: "price_positive"',
    "end",
    "",
    'create_table "users", charset: "utf8mb4", collation: "utf8mb4_0900_ai_ci", '
    "force: :cascade do |t|",
    '  t.string "email", limit: 100, null: false',
    '  t.boolean "admin", default: false, null: false',
    '  t.datetime "created_at", null: false',
    '  t.index ["email"], name: "index_users_on_email", unique: true',
    "end",
    "",
    'add_foreign_key "posts", "users", column: "author_id"',
])


def _make_service(snapshot=None, error=None):
    repo = MagicMock()
    repo.schema_name = None
    if error is not None:
        repo.read_snapshot.side_effect = error
    else:
        repo.read_snapshot.return_value = snapshot or _sample_snapshot()
    return SchemaDumpService(repo, defaults=SchemaDumpDefaults())


# ============================================================================
# DOCUMENT
# ============================================================================

class TestRender:

    def test_full_document(self):
        assert _make_service().render() == EXPECTED

    def test_idempotent(self):
        service = _make_service()
        assert service.render() == service.render()

    def test_no_foreign_keys_ends_with_newline(self):
        snapshot = _sample_snapshot(foreign_keys=[])
        text = _make_service(snapshot).render()
        assert text.endswith("end\n")
        assert not text.endswith("\n\n")

    def test_empty_schema(self):
        snapshot = CatalogSnapshot()
        assert _make_service(snapshot).render() == ""

    def test_source_order_does_not_matter(self):
        snapshot = _sample_snapshot()
        shuffled = _sample_snapshot(
            tables=list(reversed(snapshot.tables)),
            columns=list(reversed(snapshot.columns)),
            indexes=list(reversed(snapshot.indexes)),
        )
        assert _make_service(shuffled).render() == EXPECTED


# ============================================================================
# OUTPUT SINK
# ============================================================================

class TestDump:

    def test_single_write(self):
        stream = MagicMock()
        text = _make_service().dump(stream)
        stream.write.assert_called_once_with(EXPECTED)
        stream.flush.assert_called_once()
        assert text == EXPECTED

    def test_dump_to_string(self):
        assert _make_service().dump_to_string() == EXPECTED

    def test_nothing_written_on_catalog_error(self):
        stream = io.StringIO()
        service = _make_service(error=CatalogQueryError("read columns failed", operation="read columns"))
        with pytest.raises(CatalogQueryError):
            service.dump(stream)
        assert stream.getvalue() == ""

    def test_nothing_written_on_malformed_default(self):
        snapshot = _sample_snapshot(columns=[
            _col("users", "id", 1, "bigint"),
            _col("users", "ratio", 2, "double", column_default="not-a-number"),
        ])
        stream = io.StringIO()
        with pytest.raises(MalformedDefaultValueError):
            _make_service(snapshot).dump(stream)
        assert stream.getvalue() == ""


# ============================================================================
# BUILDER
# ============================================================================

class TestSDLBuilder:

    def test_finalize_joins(self):
        builder = SDLBuilder()
        builder.extend(["a", "b"])
        builder.blank()
        builder.drop_trailing_blank()
        assert len(builder) == 2
        assert builder.finalize() == "a\nb"

    def test_closed_after_finalize(self):
        builder = SDLBuilder()
        builder.finalize()
        with pytest.raises(RuntimeError):
            builder.append("late")
