# -*- coding: utf-8 -*-
"""
Outcome Classification Policy.

Each program declares an ordered list of (FailureKind, message key) rules.
A failure is matched against the rules top to bottom and the first rule
whose kind it `is_a` wins, so narrower kinds must come before broader ones.
Anything no rule claims falls through to the program's fallback message.
"""

from __future__ import annotations

from typing import List, Tuple

from . import messages
from .results import Failure, FailureKind, Outcome

Policy = List[Tuple[FailureKind, str]]

WITHDRAWAL_POLICY: Policy = [
    (FailureKind.BUSINESS_RULE, "outcome.business"),
    (FailureKind.INVALID_ARGUMENT, "outcome.usage"),
    (FailureKind.MALFORMED_INPUT, "outcome.malformed"),
]
WITHDRAWAL_FALLBACK = "outcome.fatal"

AGE_POLICY: Policy = [
    (FailureKind.MALFORMED_INPUT, "profile.age_malformed"),
    (FailureKind.OUT_OF_RANGE, "profile.age_out_of_range"),
]

TEMPERATURE_POLICY: Policy = [
    (FailureKind.MALFORMED_INPUT, "temperature.invalid"),
]

UNEXPECTED_FALLBACK = "outcome.unexpected"


def match(failure: Failure, policy: Policy, fallback: str) -> str:
    """Return the message key of the first rule that claims `failure`."""
    for kind, key in policy:
        if failure.kind.is_a(kind):
            return key
    return fallback


def describe(outcome: Outcome, policy: Policy, fallback: str = UNEXPECTED_FALLBACK) -> str:
    """Render the single message for a failed outcome."""
    if outcome.is_success:
        raise ValueError("describe() expects a Failure")
    key = match(outcome, policy, fallback)
    return messages.text(key, reason=messages.reason(outcome.reason))
