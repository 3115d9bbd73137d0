# ============================================================================
# CATALOG ROW BASE MODEL
# ============================================================================
# EPOCH: 1 - CATALOG DUMP
# STATUS: Core model - Shared base for INFORMATION_SCHEMA rows
# PURPOSE: Normalize driver rows (key case, byte strings) into typed models
# CREATED: 19 OCT 2026
# EXPORTS: CatalogRow
# DEPENDENCIES: pydantic
# ============================================================================
"""
Catalog Row Base

Every catalog query has its own row model. They share this base so that
driver quirks are handled once:
- Column labels may come back upper-case (TABLE_NAME) or as aliased
  (table_name); keys are lower-cased before validation.
- Some MySQL server/connector combinations return INFORMATION_SCHEMA text
  columns as bytes or bytearray; these are decoded as UTF-8.
"""

from typing import Any, Dict, Mapping

from pydantic import BaseModel, field_validator


class CatalogRow(BaseModel):
    """Immutable, typed INFORMATION_SCHEMA row."""

    model_config = {"frozen": True, "extra": "ignore"}

    @field_validator("*", mode="before")
    @classmethod
    def _decode_bytes(cls, value: Any) -> Any:
        if isinstance(value, (bytes, bytearray)):
            return bytes(value).decode("utf-8")
        return value

    @classmethod
    def from_row(cls, row: Mapping[str, Any]):
        """Validate one driver row (dict cursor output)."""
        normalized: Dict[str, Any] = {str(k).lower(): v for k, v in row.items()}
        return cls.model_validate(normalized)
