# -*- coding: utf-8 -*-
"""
Account Withdrawal - Explicit State

- The balance is plain data owned by the caller; `withdraw` takes it in and
  hands the new one back instead of mutating a hidden global.
- Argument misuse (negative amount) is checked before the business rule
  (insufficient funds), so the two are reported distinctly.
- The balance never goes negative: over-limit requests are rejected before
  any new balance is computed.
"""

from __future__ import annotations

import logging

from .results import Failure, FailureKind, Outcome, Success

logger = logging.getLogger(__name__)

INSUFFICIENT_FUNDS = "insufficient funds"
INVALID_OPERATION = "invalid operation"


def _require_int(name: str, value) -> None:
    # bool is an int subclass but never a meaningful amount
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")


def withdraw(amount: int, current_balance: int) -> Outcome:
    """
    Withdraw `amount` from `current_balance`.

    Returns `Success(new_balance)`, or a `Failure` of kind INVALID_ARGUMENT
    (amount < 0) or BUSINESS_RULE (amount > current_balance). Passing
    anything other than ints is a programming error and raises TypeError.
    """
    _require_int("amount", amount)
    _require_int("current_balance", current_balance)

    if amount < 0:
        logger.debug("rejected withdrawal of %d: negative amount", amount)
        return Failure(FailureKind.INVALID_ARGUMENT, INVALID_OPERATION)
    if amount > current_balance:
        logger.debug("rejected withdrawal of %d: balance is %d", amount, current_balance)
        return Failure(FailureKind.BUSINESS_RULE, INSUFFICIENT_FUNDS)
    return Success(current_balance - amount)
