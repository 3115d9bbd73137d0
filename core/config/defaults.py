# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================
# EPOCH: 1 - CATALOG DUMP
# STATUS: Core - Default configuration values
# PURPOSE: Centralized constants the reference dumper bakes in, plus mode flags
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Defaults

Provides the values the reference dumper treats as implicit (string limit,
primary key type, generated constraint prefixes, ...). Output compatibility
depends on these, so they are only overridable for testing and for hosts that
configure the migration tool differently.

Design:
- Immutable dataclasses for defaults
- Environment variable overrides
- Type-safe access
"""

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

from core.contracts import DumperMode


@dataclass(frozen=True)
class SchemaDumpDefaults:
    """
    Implicit values of the reference dumper.

    Anything equal to these is elided from the SDL output.
    """
    # Bookkeeping tables owned by the migration tool itself
    internal_tables: Tuple[str, ...] = ("ar_internal_metadata", "schema_migrations")

    # Primary key
    primary_key_index: str = "PRIMARY"
    primary_key_column: str = "id"
    default_id_type: str = "bigint"

    # Columns
    default_string_limit: int = 255
    boolean_column_type: str = "tinyint(1)"
    notable_collation: str = "utf8mb4_bin"

    # Generated constraint name prefixes
    foreign_key_prefix: str = "fk_rails_"
    check_constraint_prefix: str = "chk_rails_"

    @classmethod
    def from_env(cls) -> "SchemaDumpDefaults":
        """Create from environment variables."""
        internal = os.getenv("FAST_SCHEMA_DUMPER_INTERNAL_TABLES")
        return cls(
            internal_tables=(
                tuple(t.strip() for t in internal.split(",") if t.strip())
                if internal else cls.internal_tables
            ),
            foreign_key_prefix=os.getenv("FAST_SCHEMA_DUMPER_FK_PREFIX", "fk_rails_"),
            check_constraint_prefix=os.getenv("FAST_SCHEMA_DUMPER_CHECK_PREFIX", "chk_rails_"),
        )


@dataclass(frozen=True)
class DumperModeDefaults:
    """
    Defaults for dumper strategy selection.

    Controls which dumper the host migration tool uses and where verify mode
    leaves its comparison artifacts.
    """
    mode: DumperMode = DumperMode.FAST
    suppress_message: bool = False
    reference_output_path: str = "orig.txt"
    fast_output_path: str = "fast.txt"

    @classmethod
    def from_env(cls) -> "DumperModeDefaults":
        """Create from environment variables."""
        return cls(
            mode=DumperMode.parse(os.getenv("FAST_SCHEMA_DUMPER_MODE")),
            suppress_message=os.getenv("FAST_SCHEMA_DUMPER_SUPPRESS_MESSAGE") == "1",
            reference_output_path=os.getenv("FAST_SCHEMA_DUMPER_REFERENCE_OUTPUT", "orig.txt"),
            fast_output_path=os.getenv("FAST_SCHEMA_DUMPER_FAST_OUTPUT", "fast.txt"),
        )


# ============================================================================
# GLOBAL DEFAULTS INSTANCE
# ============================================================================

@dataclass
class Defaults:
    """Container for all default configurations."""
    schema: SchemaDumpDefaults = field(default_factory=SchemaDumpDefaults)
    dumper: DumperModeDefaults = field(default_factory=DumperModeDefaults)

    @classmethod
    def from_env(cls) -> "Defaults":
        """Create all defaults from environment variables."""
        return cls(
            schema=SchemaDumpDefaults.from_env(),
            dumper=DumperModeDefaults.from_env(),
        )


_defaults: Optional[Defaults] = None


def get_defaults() -> Defaults:
    """Get global defaults instance."""
    global _defaults
    if _defaults is None:
        _defaults = Defaults.from_env()
    return _defaults


def reset_defaults() -> None:
    """Reset defaults (for testing)."""
    global _defaults
    _defaults = None


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "SchemaDumpDefaults",
    "DumperModeDefaults",
    "Defaults",
    "get_defaults",
    "reset_defaults",
]
