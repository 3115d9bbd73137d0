# ============================================================================
# VERSION - FAST SCHEMA DUMPER
# ============================================================================
# EPOCH: 1 - CATALOG DUMP
# ============================================================================
"""
Version information for the fast schema dumper.

This is the single source of truth for the application version.
Updated manually for each release.
"""
# Version format: major.minor.patch
# Criteria for 0.1 - output matches the reference dumper on the golden schemas
__version__ = "0.1.3"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Build metadata
BUILD_DATE = "2026-10-19"

EPOCH = 1
CODENAME = "Fast Schema Dumper"
