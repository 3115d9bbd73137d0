# ============================================================================
# BASE CONTRACTS & ENUMS
# ============================================================================
# EPOCH: 1 - CATALOG DUMP
# STATUS: Foundation - Core enums and domain errors
# PURPOSE: Dumper modes, SDL symbols and the errors raised while rendering
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: DumperMode, IndexOrder, SchemaDumpError, MalformedDefaultValueError,
#          SchemaMismatchError
# DEPENDENCIES: enum
# ============================================================================
"""
Base contracts for the fast schema dumper.

These define the values that cross boundaries:
- Environment / CLI (dumper mode selection)
- Catalog rows (index column direction)
- Rendering (errors raised while turning rows into SDL)

Catalog access errors live with the repositories
(see infrastructure.base_repository).
"""

from enum import Enum
from typing import Optional


# ============================================================================
# ENUMS
# ============================================================================

class DumperMode(str, Enum):
    """
    How the host migration tool obtains its schema text.

    Modes:
        FAST     -> catalog scan only (default)
        VERIFY   -> run reference and fast dumper, fail on any difference
        DISABLED -> reference dumper only
    """
    FAST = "fast"
    VERIFY = "verify"
    DISABLED = "disabled"

    @classmethod
    def parse(cls, value: Optional[str]) -> "DumperMode":
        """Parse a mode string; empty or unknown values select FAST."""
        if not value:
            return cls.FAST
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.FAST

    def uses_fast_dumper(self) -> bool:
        return self in (DumperMode.FAST, DumperMode.VERIFY)


class IndexOrder(str, Enum):
    """Per-column index direction as rendered in SDL (`order: :desc`)."""
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def from_collation(cls, collation: Optional[str]) -> "IndexOrder":
        """STATISTICS.COLLATION is 'A', 'D' or NULL; only 'D' is descending."""
        return cls.DESC if collation == "D" else cls.ASC


# ============================================================================
# ERRORS
# ============================================================================

class SchemaDumpError(Exception):
    """Base exception for rendering and verification failures."""

    def __init__(self, message: str, table: str = None, column: str = None):
        self.table = table
        self.column = column
        super().__init__(message)


class MalformedDefaultValueError(SchemaDumpError, ValueError):
    """Raised when a default literal cannot be canonicalized for its type."""

    def __init__(self, message: str, value: str = None, data_type: str = None, **kwargs):
        self.value = value
        self.data_type = data_type
        super().__init__(message, **kwargs)


class SchemaMismatchError(SchemaDumpError):
    """Raised in verify mode when fast and reference output differ."""

    def __init__(self, message: str, reference_path: str = None, fast_path: str = None):
        self.reference_path = reference_path
        self.fast_path = fast_path
        super().__init__(message)


__all__ = [
    "DumperMode",
    "IndexOrder",
    "SchemaDumpError",
    "MalformedDefaultValueError",
    "SchemaMismatchError",
]
