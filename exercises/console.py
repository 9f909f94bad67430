# -*- coding: utf-8 -*-
"""
Console Program Runners.

Each runner is one pass of AwaitingInput -> Parsed -> Validated ->
{Succeeded, Rejected}: it reads at most one line per prompt, never
re-prompts, and prints exactly one outcome message per interaction.

`read` and `write` default to `input` and `print`; tests pass scripted
replacements. Unexpected exceptions stop at the runner: they are logged,
reported with the fallback message, and the runner returns normally.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from . import messages
from .account import withdraw
from .classification import (
    AGE_POLICY,
    TEMPERATURE_POLICY,
    UNEXPECTED_FALLBACK,
    WITHDRAWAL_FALLBACK,
    WITHDRAWAL_POLICY,
    describe,
)
from .fizzbuzz import fizzbuzz_sequence
from .parsing import parse_int
from .profile import check_age, greet
from .results import Failure, Outcome, Success
from .temperature import convert_text

logger = logging.getLogger(__name__)

Reader = Callable[[str], Optional[str]]
Writer = Callable[[str], None]


def read_line(read: Reader, prompt: str) -> Optional[str]:
    """Read one line; end of input yields None instead of raising."""
    try:
        return read(prompt)
    except EOFError:
        return None


def _guarded(name: str, step: Callable[[], Outcome]) -> Outcome:
    try:
        outcome = step()
    except Exception as exc:
        logger.exception("Unexpected failure in %s", name)
        return Failure.unclassified(exc)
    logger.debug("%s -> %r", name, outcome)
    return outcome


# ---------- programs ----------
def run_temperature(read: Reader = input, write: Writer = print) -> Outcome:
    def step() -> Outcome:
        return convert_text(read_line(read, messages.text("temperature.prompt")))

    outcome = _guarded("temperature", step)
    if outcome.is_success:
        write(messages.text("temperature.result", value=outcome.value))
    else:
        write(describe(outcome, TEMPERATURE_POLICY))
    return outcome


def run_fizzbuzz(write: Writer = print, start: Optional[int] = None, stop: Optional[int] = None) -> Outcome:
    def step() -> Outcome:
        count = 0
        for line in fizzbuzz_sequence(start, stop):
            write(line)
            count += 1
        return Success(count)

    outcome = _guarded("fizzbuzz", step)
    if not outcome.is_success:
        write(describe(outcome, []))
    return outcome


def run_profile(read: Reader = input, write: Writer = print) -> Outcome:
    """
    Greet the user, then read and check an age.

    The name and age steps are independent interactions: a failure in the
    first does not skip the second. The closing line is always printed.
    """
    def name_step() -> Outcome:
        return Success(greet(read_line(read, messages.text("profile.name_prompt"))))

    greeting = _guarded("profile.name", name_step)
    write(greeting.value if greeting.is_success else describe(greeting, []))

    def age_step() -> Outcome:
        return check_age(read_line(read, messages.text("profile.age_prompt")))

    try:
        outcome = _guarded("profile.age", age_step)
        if outcome.is_success:
            write(messages.text("profile.age_result", age=outcome.value))
        else:
            write(describe(outcome, AGE_POLICY, UNEXPECTED_FALLBACK))
    finally:
        write(messages.text("profile.done"))
    return outcome


def run_withdrawal(balance: int, read: Reader = input, write: Writer = print) -> int:
    """
    Ask for an amount and withdraw it from `balance`.

    Returns the new balance on success, otherwise `balance` unchanged.
    Malformed text is classified before `withdraw` is ever called.
    """
    def step() -> Outcome:
        parsed = parse_int(read_line(read, messages.text("withdrawal.prompt")))
        if not parsed.is_success:
            return parsed
        return withdraw(parsed.value, balance)

    outcome = _guarded("withdrawal", step)
    if outcome.is_success:
        write(messages.text("withdrawal.success"))
        return outcome.value
    write(describe(outcome, WITHDRAWAL_POLICY, WITHDRAWAL_FALLBACK))
    return balance
