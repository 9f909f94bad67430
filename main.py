# -*- coding: utf-8 -*-
"""
Interactive Console Exercises

Purpose:
- Runs four small console programs from one menu:
  1) Temperature Converter (Celsius -> Fahrenheit)
  2) FizzBuzz (1..100)
  3) Profile Prompt (name greeting and age check)
  4) Withdrawal (balance check with classified error messages)
- Each program is a single interaction; a bad entry ends it with one
  diagnostic message and control returns to the menu.

State:
- The account balance lives here, starts at INITIAL_BALANCE each run, and is
  passed into and returned from every withdrawal.
- Supports safe exits (Ctrl+C or end of input).
"""


from __future__ import annotations

from typing import Optional

import exercises.config as cfg
from exercises.console import (
    Reader,
    Writer,
    read_line,
    run_fizzbuzz,
    run_profile,
    run_temperature,
    run_withdrawal,
)
from exercises.logging_config import setup_logging


def pause(read: Reader = input, write: Writer = print) -> None:
    """Pause for user input (safe in case of non-interactive piping)."""
    try:
        read("\nPress Enter to continue... ")
    except (EOFError, KeyboardInterrupt):
        write("")


def language_settings_menu(read: Reader = input, write: Writer = print) -> None:
    write(f"\nCurrent language: {cfg.SUPPORTED_LANGUAGES[cfg.LANGUAGE]} ({cfg.LANGUAGE})")
    for code, name in cfg.SUPPORTED_LANGUAGES.items():
        write(f"  {code}) {name}")
    s = (read_line(read, "Enter language code (blank=cancel): ") or "").strip().lower()
    if not s:
        return
    if s not in cfg.SUPPORTED_LANGUAGES:
        write("Invalid value.")
        return
    cfg.LANGUAGE = s
    write(f"Language set to: {cfg.SUPPORTED_LANGUAGES[s]}")


class Session:
    """Menu loop; owns the balance for the lifetime of the process."""

    def __init__(self, read: Reader = input, write: Writer = print, balance: Optional[int] = None):
        self.read = read
        self.write = write
        self.balance = cfg.INITIAL_BALANCE if balance is None else balance

    def withdraw(self) -> None:
        self.write(f"\nCurrent balance: {self.balance:,}")
        self.balance = run_withdrawal(self.balance, self.read, self.write)

    def run(self) -> None:
        write = self.write
        write("== Console Exercises ==")
        write(f"Language: {cfg.SUPPORTED_LANGUAGES[cfg.LANGUAGE]}")
        write(f"Starting balance: {self.balance:,}\n")

        while True:
            try:
                write("\n=== Main Menu ===")
                write("1) Temperature Converter")
                write("2) FizzBuzz")
                write("3) Profile Prompt")
                write("4) Withdrawal")
                write("5) Language Settings")
                write("0) Quit")
                sel = read_line(self.read, "Choice: ")
                if sel is None:
                    write("\nGoodbye.")
                    break
                sel = sel.strip()

                if sel == "0":
                    write("Goodbye.")
                    break
                elif sel == "1":
                    run_temperature(self.read, write)
                elif sel == "2":
                    run_fizzbuzz(write)
                elif sel == "3":
                    run_profile(self.read, write)
                elif sel == "4":
                    self.withdraw()
                elif sel == "5":
                    language_settings_menu(self.read, write)
                else:
                    write("Invalid choice.")
                pause(self.read, write)
            except KeyboardInterrupt:
                write("\nGoodbye.")
                break


def main() -> None:
    setup_logging()
    Session().run()


if __name__ == "__main__":
    main()
