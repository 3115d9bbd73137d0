# ============================================================================
# DUMPER STRATEGY TESTS
# ============================================================================
# EPOCH: 1 - CATALOG DUMP
# STATUS: Tests - Dumper selection
# PURPOSE: Verify fast / verify / disabled modes and verify artifacts
# CREATED: 19 OCT 2026
# ============================================================================
"""
Dumper Strategy Tests

Run with:
    pytest tests/test_dumper_strategy.py -v
"""

import logging
from unittest.mock import MagicMock

import pytest

from core.config.defaults import DumperModeDefaults
from core.contracts import DumperMode, SchemaMismatchError
from services.dumper_strategy import (
    FastSchemaDumper,
    ReferenceSchemaDumper,
    VerifyingSchemaDumper,
    select_dumper,
)


# ============================================================================
# HELPERS
# ============================================================================

SCHEMA_TEXT = 'create_table "users", force: :cascade do |t|\nend\n'


def _fast(text=SCHEMA_TEXT):
    service = MagicMock()
    service.dump_to_string.return_value = text
    return FastSchemaDumper(service)


def _settings(tmp_path, mode=DumperMode.FAST, suppress=False):
    return DumperModeDefaults(
        mode=mode,
        suppress_message=suppress,
        reference_output_path=str(tmp_path / "orig.txt"),
        fast_output_path=str(tmp_path / "fast.txt"),
    )


# ============================================================================
# MODE PARSING
# ============================================================================

class TestDumperMode:

    @pytest.mark.parametrize("raw,expected", [
        (None, DumperMode.FAST),
        ("", DumperMode.FAST),
        ("verify", DumperMode.VERIFY),
        ("DISABLED", DumperMode.DISABLED),
        (" fast ", DumperMode.FAST),
        ("turbo", DumperMode.FAST),
    ])
    def test_parse(self, raw, expected):
        assert DumperMode.parse(raw) == expected

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("FAST_SCHEMA_DUMPER_MODE", "verify")
        monkeypatch.setenv("FAST_SCHEMA_DUMPER_SUPPRESS_MESSAGE", "1")
        settings = DumperModeDefaults.from_env()
        assert settings.mode == DumperMode.VERIFY
        assert settings.suppress_message is True


# ============================================================================
# SELECTION
# ============================================================================

class TestSelectDumper:

    def test_fast_is_default(self, tmp_path):
        fast = _fast()
        dumper = select_dumper(fast=fast, settings=_settings(tmp_path))
        assert dumper is fast
        assert dumper.dump() == SCHEMA_TEXT

    def test_disabled_uses_reference(self, tmp_path):
        reference = MagicMock(return_value="reference text")
        dumper = select_dumper(
            reference=reference,
            settings=_settings(tmp_path, mode=DumperMode.DISABLED),
        )
        assert isinstance(dumper, ReferenceSchemaDumper)
        assert dumper.dump() == "reference text"

    def test_explicit_mode_overrides_settings(self, tmp_path):
        reference = MagicMock(return_value="reference text")
        dumper = select_dumper(
            mode=DumperMode.DISABLED,
            reference=reference,
            settings=_settings(tmp_path, mode=DumperMode.FAST),
        )
        assert isinstance(dumper, ReferenceSchemaDumper)

    def test_mode_name_accepted(self, tmp_path):
        dumper = select_dumper(
            mode="verify",
            reference=lambda: SCHEMA_TEXT,
            fast=_fast(),
            settings=_settings(tmp_path, suppress=True),
        )
        assert isinstance(dumper, VerifyingSchemaDumper)
        assert dumper.dump() == SCHEMA_TEXT

    @pytest.mark.parametrize("mode", [DumperMode.DISABLED, DumperMode.VERIFY])
    def test_reference_required(self, tmp_path, mode):
        with pytest.raises(ValueError):
            select_dumper(mode=mode, settings=_settings(tmp_path))

    def test_warning_logged(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING):
            select_dumper(fast=_fast(), settings=_settings(tmp_path))
        assert "fast schema dumper is enabled" in caplog.text

    def test_verify_warning_mentions_mode(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING):
            select_dumper(
                reference=lambda: SCHEMA_TEXT,
                fast=_fast(),
                settings=_settings(tmp_path, mode=DumperMode.VERIFY),
            )
        assert "fast schema dumper is enabled in verify mode" in caplog.text

    def test_warning_suppressed(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING):
            select_dumper(fast=_fast(), settings=_settings(tmp_path, suppress=True))
        assert "fast schema dumper" not in caplog.text


# ============================================================================
# VERIFY MODE
# ============================================================================

class TestVerifyingDumper:

    def test_match_returns_text_and_writes_artifacts(self, tmp_path):
        dumper = select_dumper(
            reference=lambda: SCHEMA_TEXT,
            fast=_fast(),
            settings=_settings(tmp_path, mode=DumperMode.VERIFY, suppress=True),
        )
        assert isinstance(dumper, VerifyingSchemaDumper)
        assert dumper.dump() == SCHEMA_TEXT
        assert (tmp_path / "orig.txt").read_text(encoding="utf-8") == SCHEMA_TEXT
        assert (tmp_path / "fast.txt").read_text(encoding="utf-8") == SCHEMA_TEXT

    def test_mismatch_raises(self, tmp_path):
        dumper = VerifyingSchemaDumper(
            reference=lambda: SCHEMA_TEXT,
            fast=_fast(SCHEMA_TEXT + "extra"),
            reference_path=str(tmp_path / "orig.txt"),
            fast_path=str(tmp_path / "fast.txt"),
        )
        with pytest.raises(SchemaMismatchError) as exc_info:
            dumper.dump()

        assert "fast schema dumper bug" in str(exc_info.value)
        assert exc_info.value.reference_path == str(tmp_path / "orig.txt")
        assert (tmp_path / "fast.txt").read_text(encoding="utf-8") == SCHEMA_TEXT + "extra"
