# ============================================================================
# DUMPER STRATEGY
# ============================================================================
# EPOCH: 1 - CATALOG DUMP
# STATUS: Service - Host integration point
# PURPOSE: Choose between reference, fast and verifying schema dumpers
# CREATED: 19 OCT 2026
# ============================================================================
"""
Dumper Strategy

The host migration tool asks for a SchemaDumper and calls `.dump()` on it.
Which implementation it gets is decided here, from configuration, instead of
replacing the host's own dumper method at import time.

Modes (FAST_SCHEMA_DUMPER_MODE):
  - fast      FastSchemaDumper: catalog scan only (default)
  - verify    VerifyingSchemaDumper: run both, write orig.txt / fast.txt,
              raise SchemaMismatchError on any difference
  - disabled  ReferenceSchemaDumper: the host's own dumper

Usage:
    dumper = select_dumper(reference=host_dumper.dump)
    text = dumper.dump()
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Dict, Optional, Type, Union

from core.config.defaults import DumperModeDefaults, get_defaults
from core.contracts import DumperMode, SchemaMismatchError
from core.logging import ComponentType, get_logger, log_context
from services.schema_dump_service import SchemaDumpService

logger = get_logger(__name__, ComponentType.STRATEGY)

ReferenceDump = Callable[[], str]


class SchemaDumper(ABC):
    """Something that returns the full SDL document as text."""

    mode: DumperMode

    @abstractmethod
    def dump(self) -> str:
        """Return the SDL document."""


class ReferenceSchemaDumper(SchemaDumper):
    """The host's own (slow, per-object) dumper."""

    mode = DumperMode.DISABLED

    def __init__(self, reference: ReferenceDump):
        self.reference = reference

    def dump(self) -> str:
        return self.reference()


class FastSchemaDumper(SchemaDumper):
    """Bulk catalog dumper."""

    mode = DumperMode.FAST

    def __init__(self, service: Optional[SchemaDumpService] = None):
        self.service = service or SchemaDumpService()

    def dump(self) -> str:
        return self.service.dump_to_string()


class VerifyingSchemaDumper(SchemaDumper):
    """
    Run both dumpers and insist on identical text.

    Both outputs are written to disk before comparing so a mismatch can be
    inspected with any diff tool.
    """

    mode = DumperMode.VERIFY

    def __init__(
        self,
        reference: ReferenceDump,
        fast: Optional[FastSchemaDumper] = None,
        reference_path: str = "orig.txt",
        fast_path: str = "fast.txt",
    ):
        self.reference = reference
        self.fast = fast or FastSchemaDumper()
        self.reference_path = Path(reference_path)
        self.fast_path = Path(fast_path)

    def dump(self) -> str:
        with log_context(mode=self.mode.value, operation="verify"):
            original = self.reference()
            fast = self.fast.dump()

            self.reference_path.write_text(original, encoding="utf-8")
            self.fast_path.write_text(fast, encoding="utf-8")

            if original != fast:
                logger.error(
                    f"Schema mismatch: compare {self.reference_path} and {self.fast_path}"
                )
                raise SchemaMismatchError(
                    "Dumped schema do not match between the reference dumper and the "
                    "fast schema dumper. This is a fast schema dumper bug.",
                    reference_path=str(self.reference_path),
                    fast_path=str(self.fast_path),
                )

            logger.info("Fast schema dump verified against reference dumper")
            return fast


_STRATEGY_REGISTRY: Dict[DumperMode, Type[SchemaDumper]] = {
    DumperMode.DISABLED: ReferenceSchemaDumper,
    DumperMode.FAST: FastSchemaDumper,
    DumperMode.VERIFY: VerifyingSchemaDumper,
}


def select_dumper(
    mode: Union[DumperMode, str, None] = None,
    reference: Optional[ReferenceDump] = None,
    fast: Optional[FastSchemaDumper] = None,
    settings: Optional[DumperModeDefaults] = None,
) -> SchemaDumper:
    """
    Build the dumper for a mode.

    Args:
        mode: Explicit mode or mode name (defaults to FAST_SCHEMA_DUMPER_MODE)
        reference: The host's reference dump callable (required for
                   disabled and verify modes)
        fast: Optional preconfigured FastSchemaDumper
        settings: Mode settings (defaults to environment)

    Raises:
        ValueError: If the mode needs a reference dumper and none was given
    """
    settings = settings or get_defaults().dumper
    mode = DumperMode.parse(mode) if mode else settings.mode
    strategy = _STRATEGY_REGISTRY[mode]

    if mode in (DumperMode.DISABLED, DumperMode.VERIFY) and reference is None:
        raise ValueError(f"Dumper mode '{mode.value}' requires a reference dumper")

    if mode.uses_fast_dumper() and not settings.suppress_message:
        suffix = " in verify mode" if mode == DumperMode.VERIFY else ""
        logger.warning(f"fast schema dumper is enabled{suffix}")

    if mode == DumperMode.DISABLED:
        return strategy(reference)
    if mode == DumperMode.VERIFY:
        return strategy(
            reference,
            fast=fast,
            reference_path=settings.reference_output_path,
            fast_path=settings.fast_output_path,
        )
    return fast or strategy()


__all__ = [
    "SchemaDumper",
    "ReferenceSchemaDumper",
    "FastSchemaDumper",
    "VerifyingSchemaDumper",
    "select_dumper",
]
