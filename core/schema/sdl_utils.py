# ============================================================================
# SDL UTILITIES
# ============================================================================
# EPOCH: 1 - CATALOG DUMP
# STATUS: Core - Shared formatting helpers for SDL generation
# PURPOSE: Escaping, literal quoting, number canonicalization, sort keys
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: escape_string, quote, singularize, balanced_parentheses,
#          strip_outer_parentheses, canonical_decimal, canonical_float,
#          index_sort_key
# DEPENDENCIES: decimal
# ============================================================================
"""
SDL Utilities - Shared Formatting Patterns.

Every free-text literal the dumper writes goes through `quote()` so that the
escaping rules live in one place. Number canonicalization follows the
reference dumper's runtime exactly: decimals print in plain notation with at
least one fractional digit, floats print as the shortest round-trip repr with
a mandatory fractional part ("1.0", "1.0e+20").

Usage:
    from core.schema.sdl_utils import quote, singularize

    quote('say "hi"')        # '"say \\"hi\\""'
    singularize("categories")  # 'category'
"""

import math
from decimal import Decimal, InvalidOperation
from typing import Sequence, Tuple


# ============================================================================
# STRINGS
# ============================================================================

# Order matters: the backslash must be doubled before any other substitution
# introduces new backslashes.
_ESCAPES: Tuple[Tuple[str, str], ...] = (
    ("\\", "\\\\"),
    ('"', '\\"'),
    ("\n", "\\n"),
    ("\r", "\\r"),
    ("\t", "\\t"),
)


def escape_string(text: str) -> str:
    """Escape text for embedding inside a double-quoted SDL literal."""
    for raw, escaped in _ESCAPES:
        text = text.replace(raw, escaped)
    return text


def quote(text: str) -> str:
    """Escaped, double-quoted SDL string literal."""
    return f'"{escape_string(text)}"'


def singularize(word: str) -> str:
    """
    Singularize a table name the way the migration tool infers FK columns.

    Only the handful of rules the reference dumper relies on:
        news        -> news
        categories  -> category
        addresses   -> address
        users       -> user
    """
    if word == "news":
        return word
    if word.endswith("ies"):
        return word[:-3] + "y"
    if word.endswith("ses"):
        return word[:-2]
    if word.endswith("s"):
        return word[:-1]
    return word


# ============================================================================
# PARENTHESES
# ============================================================================

def balanced_parentheses(text: str) -> bool:
    """True if parentheses never close before opening and all close."""
    depth = 0
    for char in text:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0


def strip_outer_parentheses(clause: str) -> str:
    """
    Drop one redundant outer pair of parentheses.

    "((a > 0) and (b > 0))" -> "(a > 0) and (b > 0)"
    "(a > 0) and (b > 0)"   -> unchanged (the outer characters are not a pair)
    """
    if clause.startswith("(") and clause.endswith(")"):
        inner = clause[1:-1]
        if balanced_parentheses(inner):
            return inner
    return clause


# ============================================================================
# NUMBERS
# ============================================================================

def canonical_decimal(raw: str) -> str:
    """
    Arbitrary-precision canonical form of a decimal literal.

    "1.50" -> "1.5", "10" -> "10.0", "0.000" -> "0.0"

    Raises:
        InvalidOperation / ValueError: If `raw` is not a finite number
    """
    value = Decimal(raw.strip())
    if not value.is_finite():
        raise InvalidOperation(f"non-finite decimal: {raw}")

    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0")
        if text.endswith("."):
            text += "0"
    else:
        text += ".0"
    return text


def canonical_float(raw: str) -> str:
    """
    Round-trip float form of a floating point literal.

    "1.50" -> "1.5", "3" -> "3.0", "1e20" -> "1.0e+20", "0.00001" -> "1.0e-05"

    Raises:
        ValueError: If `raw` is not a number
    """
    value = float(raw.strip())
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    text = repr(value)
    if "e" in text:
        mantissa, exponent = text.split("e")
        if "." not in mantissa:
            mantissa += ".0"
        return f"{mantissa}e{exponent}"
    return text


# ============================================================================
# ORDERING
# ============================================================================

# Real columns sort as (0, name); padding as (1, ""), after any real name.
_PAD = (1, "")


def index_sort_key(columns: Sequence[str], width: int) -> Tuple[Tuple[int, str], ...]:
    """
    Sort key for an index column tuple padded to `width`.

    A shorter tuple sorts after a longer one sharing its prefix:
        ["a", "b"] < ["a"] < ["b", "c"] < ["b"] < ["d"]
    """
    key = [(0, column) for column in columns]
    key.extend([_PAD] * (width - len(columns)))
    return tuple(key)


__all__ = [
    "escape_string",
    "quote",
    "singularize",
    "balanced_parentheses",
    "strip_outer_parentheses",
    "canonical_decimal",
    "canonical_float",
    "index_sort_key",
]
