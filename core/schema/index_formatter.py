# ============================================================================
# INDEX FORMATTER
# ============================================================================
# EPOCH: 1 - CATALOG DUMP
# STATUS: Core - Index statements
# PURPOSE: Render `t.index [...]` lines and their emission order
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: IndexFormatter
# DEPENDENCIES: core.schema.sdl_utils
# ============================================================================
"""
Index Formatter.

    t.index ["email"], name: "index_users_on_email", unique: true
    t.index ["user_id", "created_at"], name: "idx_recent", order: { created_at: :desc }

Option order is fixed: name, unique, order, comment.
"""

from typing import Dict, List

from core.contracts import IndexOrder
from core.models.index import IndexRecord
from core.schema.sdl_utils import index_sort_key, quote


class IndexFormatter:
    """Render and order the secondary indexes of a table."""

    def format(self, index: IndexRecord) -> str:
        """Full index statement without indentation."""
        if index.is_single_column:
            columns = f'["{index.columns[0]}"]'
        else:
            columns = "[" + ", ".join(f'"{c}"' for c in index.columns) + "]"

        parts: List[str] = [f"t.index {columns}", f'name: "{index.name}"']

        if index.unique:
            parts.append("unique: true")

        descending = [
            column for column in index.columns
            if index.orders.get(column) == IndexOrder.DESC
        ]
        if descending:
            if index.is_single_column:
                parts.append(f"order: :{IndexOrder.DESC.value}")
            else:
                pairs = ", ".join(f"{c}: :{IndexOrder.DESC.value}" for c in descending)
                parts.append(f"order: {{ {pairs} }}")

        if index.comment:
            parts.append(f"comment: {quote(index.comment)}")

        return ", ".join(parts)

    @staticmethod
    def sort(indexes: Dict[str, IndexRecord]) -> List[IndexRecord]:
        """
        Emission order for a table's indexes (primary key already removed).

        Column tuples are padded to the widest index so that a shorter tuple
        sorts after a longer one sharing its prefix. Ties fall back to name.
        """
        if not indexes:
            return []
        width = max(len(index.columns) for index in indexes.values())
        return sorted(
            indexes.values(),
            key=lambda index: (index_sort_key(index.columns, width), index.name),
        )
