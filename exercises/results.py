# -*- coding: utf-8 -*-
"""
Outcome Types for Console Interactions.

Purpose:
- Give every interaction a closed set of results instead of exception-driven
  control flow: a `Success` carrying the value, or a `Failure` carrying a
  `FailureKind` and a human-readable reason.
- Let the console layer pick exactly one message per outcome by matching on
  the kind (see `classification`).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class FailureKind(Enum):
    """Failure classifications. OUT_OF_RANGE narrows INVALID_ARGUMENT (see `is_a`)."""

    BUSINESS_RULE = "business_rule"
    INVALID_ARGUMENT = "invalid_argument"
    OUT_OF_RANGE = "out_of_range"
    MALFORMED_INPUT = "malformed_input"
    UNCLASSIFIED = "unclassified"

    def is_a(self, other: "FailureKind") -> bool:
        """True if this kind is `other` or a narrower case of it."""
        kind = self
        while kind is not None:
            if kind is other:
                return True
            kind = _BROADER.get(kind)
        return False


# An out-of-range value is a specific kind of invalid argument
_BROADER = {
    FailureKind.OUT_OF_RANGE: FailureKind.INVALID_ARGUMENT,
}


@dataclass(frozen=True)
class Success:
    value: Any = None

    @property
    def is_success(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    reason: str = ""

    @property
    def is_success(self) -> bool:
        return False

    @classmethod
    def unclassified(cls, exc: BaseException) -> "Failure":
        """Wrap an unexpected exception caught at an interaction boundary."""
        return cls(FailureKind.UNCLASSIFIED, str(exc) or type(exc).__name__)


Outcome = Union[Success, Failure]
