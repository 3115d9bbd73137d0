# ============================================================================
# FOREIGN KEY FORMATTER TESTS
# ============================================================================
# EPOCH: 1 - CATALOG DUMP
# STATUS: Tests - add_foreign_key statements
# PURPOSE: Verify column/name elision and ordering
# CREATED: 19 OCT 2026
# ============================================================================
"""
Foreign Key Formatter Tests

Run with:
    pytest tests/test_foreign_key_formatter.py -v
"""

from core.config.defaults import SchemaDumpDefaults
from core.models import ForeignKeyRecord
from core.schema.foreign_key_formatter import ForeignKeyFormatter


def _fk(table, column, referenced, name):
    return ForeignKeyRecord(
        table_name=table,
        constraint_name=name,
        column_name=column,
        referenced_table_name=referenced,
        referenced_column_name="id",
    )


class TestForeignKeyFormat:

    def test_custom_column(self):
        line = ForeignKeyFormatter().format(_fk("posts", "author_id", "users", "fk_rails_1a2b3c"))
        assert line == 'add_foreign_key "posts", "users", column: "author_id"'

    def test_custom_name(self):
        line = ForeignKeyFormatter().format(_fk("comments", "post_id", "posts", "fk_manual_name"))
        assert line == 'add_foreign_key "comments", "posts", name: "fk_manual_name"'

    def test_fully_inferred(self):
        line = ForeignKeyFormatter().format(_fk("comments", "user_id", "users", "fk_rails_0099aa"))
        assert line == 'add_foreign_key "comments", "users"'

    def test_column_wins_over_name(self):
        line = ForeignKeyFormatter().format(_fk("posts", "editor_id", "users", "fk_editor"))
        assert line == 'add_foreign_key "posts", "users", column: "editor_id"'

    def test_irregular_plural(self):
        line = ForeignKeyFormatter().format(_fk("posts", "category_id", "categories", "fk_rails_cat"))
        assert line == 'add_foreign_key "posts", "categories"'

    def test_custom_prefix(self):
        formatter = ForeignKeyFormatter(SchemaDumpDefaults(foreign_key_prefix="fk_"))
        assert formatter.format(_fk("comments", "post_id", "posts", "fk_manual_name")) == (
            'add_foreign_key "comments", "posts"'
        )


class TestForeignKeySort:

    def test_ordering(self):
        fks = [
            _fk("posts", "user_id", "users", "fk_rails_3"),
            _fk("comments", "user_id", "users", "fk_rails_2"),
            _fk("comments", "post_id", "posts", "fk_rails_1"),
            _fk("posts", "editor_id", "users", "fk_rails_4"),
        ]
        ordered = ForeignKeyFormatter.sort(fks)
        assert [(f.table_name, f.referenced_table_name, f.column_name) for f in ordered] == [
            ("comments", "posts", "post_id"),
            ("comments", "users", "user_id"),
            ("posts", "users", "editor_id"),
            ("posts", "users", "user_id"),
        ]

    def test_format_all(self):
        fks = [
            _fk("posts", "user_id", "users", "fk_rails_3"),
            _fk("comments", "post_id", "posts", "fk_rails_1"),
        ]
        assert ForeignKeyFormatter().format_all(fks) == [
            'add_foreign_key "comments", "posts"',
            'add_foreign_key "posts", "users"',
        ]
