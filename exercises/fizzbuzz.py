# -*- coding: utf-8 -*-
"""FizzBuzz."""

from __future__ import annotations

from typing import Iterator, Optional

import exercises.config as cfg


def fizzbuzz(n: int) -> str:
    if n % 15 == 0:
        return "FizzBuzz"
    if n % 3 == 0:
        return "Fizz"
    if n % 5 == 0:
        return "Buzz"
    return str(n)


def fizzbuzz_sequence(start: Optional[int] = None, stop: Optional[int] = None) -> Iterator[str]:
    """Yield FizzBuzz lines for start..stop inclusive (defaults from config)."""
    start = cfg.FIZZBUZZ_START if start is None else start
    stop = cfg.FIZZBUZZ_STOP if stop is None else stop
    for n in range(start, stop + 1):
        yield fizzbuzz(n)
