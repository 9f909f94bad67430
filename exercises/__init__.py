# -*- coding: utf-8 -*-
"""
Package for four small console exercises.

Each program (temperature converter, FizzBuzz, profile prompt, withdrawal)
is an independent read -> parse -> validate -> report pass. Expected
failures travel as values (see `results`), and only the console runners
turn them into printed messages.
"""

__version__ = "1.0.0"
