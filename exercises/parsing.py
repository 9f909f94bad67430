# -*- coding: utf-8 -*-
"""
Console Input Parsing Utilities.

Purpose:
- Centralizes the text -> number step every program starts with.
- Never raises for bad user text: returns `Failure(MALFORMED_INPUT)` so the
  caller can classify it before any validation runs.
- `None` (end of input stream) is treated like unparseable text.
- Integers beyond the 32-bit range come back as `Failure(UNCLASSIFIED)`.
"""

from __future__ import annotations

import math
import re
from typing import Optional

from .results import Failure, FailureKind, Outcome, Success

# 32-bit signed range, as the console programs accept
INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1

# ASCII digits only: no '_' separators, no full-width or other Unicode digits
_INT_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*", re.ASCII)
_FLOAT_PATTERN = re.compile(r"\s*[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\s*", re.ASCII)


def _malformed(text: Optional[str], expected: str) -> Failure:
    shown = "" if text is None else text.strip()
    return Failure(FailureKind.MALFORMED_INPUT, f"{shown!r} is not {expected}")


def parse_int(text: Optional[str]) -> Outcome:
    """
    Parse a signed 32-bit integer.

    Accepted: ASCII digits with optional surrounding whitespace and a
    leading '+' or '-'.
    Rejected as MALFORMED_INPUT: empty text, fractions ("1.5"), digit
    separators ("1_0"), non-ASCII digits, and anything non-numeric.
    Well-formed values outside [INT_MIN, INT_MAX] are UNCLASSIFIED
    overflow failures.
    """
    if text is None or not _INT_PATTERN.fullmatch(text):
        return _malformed(text, "an integer")
    value = int(text.strip())
    if not INT_MIN <= value <= INT_MAX:
        return Failure(FailureKind.UNCLASSIFIED, f"value {value} is outside the 32-bit integer range")
    return Success(value)


def parse_float(text: Optional[str]) -> Outcome:
    """Parse a finite real number in ASCII decimal or exponent notation."""
    if text is None or not _FLOAT_PATTERN.fullmatch(text):
        return _malformed(text, "a number")
    value = float(text.strip())
    if not math.isfinite(value):
        return _malformed(text, "a finite number")
    return Success(value)
