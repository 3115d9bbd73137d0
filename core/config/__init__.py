# ============================================================================
# CONFIGURATION MODULE
# ============================================================================
# EPOCH: 1 - CATALOG DUMP
# STATUS: Core - Configuration and defaults
# PURPOSE: Centralized configuration management
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Module

Provides centralized configuration and defaults for the fast schema dumper.
"""

from core.config.defaults import (
    SchemaDumpDefaults,
    DumperModeDefaults,
    Defaults,
    get_defaults,
    reset_defaults,
)
from core.config.database import (
    ConfigurationError,
    DatabaseConfig,
    resolve_environment,
)

__all__ = [
    "SchemaDumpDefaults",
    "DumperModeDefaults",
    "Defaults",
    "get_defaults",
    "reset_defaults",
    "ConfigurationError",
    "DatabaseConfig",
    "resolve_environment",
]
