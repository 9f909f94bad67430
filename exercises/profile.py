# -*- coding: utf-8 -*-
"""
Name and age checks for the profile prompt.

A blank name is not an error: the user is greeted as a guest. The age must
parse as an integer (MALFORMED_INPUT otherwise) and must not be negative
(OUT_OF_RANGE).
"""

from __future__ import annotations

from typing import Optional

from . import messages
from .parsing import parse_int
from .results import Failure, FailureKind, Outcome, Success


def display_name(name: Optional[str]) -> str:
    name = (name or "").strip()
    return name if name else messages.text("profile.guest")


def greet(name: Optional[str]) -> str:
    return messages.text("profile.greeting", name=display_name(name))


def check_age(text: Optional[str]) -> Outcome:
    parsed = parse_int(text)
    if not parsed.is_success:
        return parsed
    if parsed.value < 0:
        return Failure(FailureKind.OUT_OF_RANGE, f"age {parsed.value} is negative")
    return Success(parsed.value)
