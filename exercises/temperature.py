# -*- coding: utf-8 -*-
"""Celsius to Fahrenheit conversion."""

from __future__ import annotations

from typing import Optional

from .parsing import parse_float
from .results import Outcome, Success


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 9.0 / 5 + 32


def format_temperature(value: float) -> str:
    """One decimal place; tiny negatives are shown as 0.0, not -0.0."""
    shown = f"{value:.1f}"
    return "0.0" if shown == "-0.0" else shown


def convert_text(text: Optional[str]) -> Outcome:
    """
    Convert a line of Celsius text to a formatted Fahrenheit string.

    Returns Success("32.0") for "0", or the MALFORMED_INPUT failure from
    parsing when the text is not a number.
    """
    parsed = parse_float(text)
    if not parsed.is_success:
        return parsed
    return Success(format_temperature(celsius_to_fahrenheit(parsed.value)))
