"""
Internal helper functions and constants for the tempsort package.

This module is private API. Do not import directly.
"""

from __future__ import annotations

import math
import numbers
import operator
import re

# Fixed bounds of a record collection
MAX_ENTRIES = 10_000
MAX_TIMESTAMP_LEN = 19  # 20-byte field minus the terminator

# Literal marking the start of a candidate timestamp field
DEFAULT_ANCHOR = "2014-"

# ASCII quotes plus the typographic quotes that show up in pasted dumps
DELIMITERS = frozenset("\"'“”‘’")

# Characters that may open a numeric value field
VALUE_LEAD = frozenset("0123456789+-.")

# Longest finite decimal float prefix (no inf/nan, no hex floats)
_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


class TempsortError(Exception):
    """Base class for tempsort errors."""


class SourceUnavailableError(TempsortError):
    """The raw input text could not be obtained."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"cannot read {path!r}: {reason}")
        self.path = path
        self.reason = reason


class CapacityError(TempsortError):
    """A record was appended to a full collection."""


def _is_delimiter(ch: str) -> bool:
    return ch in DELIMITERS


def _is_blank(ch: str) -> bool:
    """ASCII control/space or any Unicode whitespace (NBSP, em space, ...)."""
    return ch <= " " or ch.isspace()


def _scan_float(text: str, pos: int) -> tuple[float, int] | None:
    """
    Parse the longest float prefix of text starting at pos.

    Args:
        text: Source text.
        pos: Index of the first character of the value field.

    Returns:
        (value, end) where end is the index just past the consumed
        characters, or None if nothing could be consumed.
    """
    m = _FLOAT_PREFIX.match(text, pos)
    if m is None:
        return None
    value = float(m.group())
    if not math.isfinite(value):
        # overflowing exponents like 1e999
        return None
    return value, m.end()


def _coerce_index(x: object) -> int:
    """
    Coerce x to a sequence index.

    Raises:
        TypeError: If x is bool or doesn't support __index__.
    """
    if isinstance(x, bool):
        raise TypeError("index must be int (bool not allowed)")
    return operator.index(x)


def _coerce_value(x: object) -> float:
    """
    Coerce x to a finite float reading.

    Raises:
        TypeError: If x is bool or not a real number.
        ValueError: If x is NaN or infinite.
    """
    if isinstance(x, bool) or not isinstance(x, numbers.Real):
        raise TypeError(f"value must be a real number, got {type(x).__name__}")
    value = float(x)
    if not math.isfinite(value):
        raise ValueError(f"value must be finite, got {value!r}")
    return value
