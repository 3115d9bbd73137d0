# ============================================================================
# INDEX MODELS
# ============================================================================
# EPOCH: 1 - CATALOG DUMP
# STATUS: Core model - Index statistics rows and grouped indexes
# PURPOSE: STATISTICS rows (one per index column) and the per-index record
# CREATED: 19 OCT 2026
# EXPORTS: IndexRow, IndexRecord
# DEPENDENCIES: pydantic
# ============================================================================
"""
Index Models

INFORMATION_SCHEMA.STATISTICS exposes one row per (index, column). The
aggregator folds those rows into one IndexRecord per index name.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from core.contracts import IndexOrder
from core.models.catalog_row import CatalogRow


class IndexRow(CatalogRow):
    """
    One column of one index.

    Source: INFORMATION_SCHEMA.STATISTICS, ordered by TABLE_NAME, INDEX_NAME,
    SEQ_IN_INDEX
    """

    table_name: str
    index_name: str
    non_unique: int = 1
    column_name: Optional[str] = Field(default=None, description="NULL for functional key parts")
    seq_in_index: int = 1
    index_comment: Optional[str] = None
    collation: Optional[str] = Field(default=None, description="'A', 'D' or NULL")

    @property
    def order(self) -> IndexOrder:
        return IndexOrder.from_collation(self.collation)


class IndexRecord(BaseModel):
    """
    A grouped index.

    `orders` holds only descending columns; ascending is implicit.
    """

    name: str
    columns: List[str] = Field(default_factory=list)
    unique: bool = False
    orders: Dict[str, IndexOrder] = Field(default_factory=dict)
    comment: Optional[str] = None

    model_config = {"frozen": True}

    @property
    def is_single_column(self) -> bool:
        return len(self.columns) == 1
