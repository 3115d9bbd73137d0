# ============================================================================
# CHECK CONSTRAINT MODEL
# ============================================================================
# EPOCH: 1 - CATALOG DUMP
# STATUS: Core model - CHECK constraint rows
# PURPOSE: TABLE_CONSTRAINTS joined with CHECK_CONSTRAINTS (MySQL 8.0.16+)
# CREATED: 19 OCT 2026
# EXPORTS: CheckConstraintRow
# DEPENDENCIES: pydantic
# ============================================================================
"""
Check Constraint Model

`check_clause` is the raw catalog text, e.g. "(`price` > 0)". Normalization
(outer parentheses, quote unescaping) happens at render time.
"""

from core.models.catalog_row import CatalogRow


class CheckConstraintRow(CatalogRow):
    """
    Source: INFORMATION_SCHEMA.TABLE_CONSTRAINTS + CHECK_CONSTRAINTS,
    ordered by TABLE_NAME, CONSTRAINT_NAME
    """

    table_name: str
    constraint_name: str
    check_clause: str
