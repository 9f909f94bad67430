# -*- coding: utf-8 -*-
"""
Unit and Scenario Tests for Withdrawals.

- `withdraw` is pure: the balance goes in and the new balance comes out.
- Negative amounts are argument misuse, over-limit amounts are a business
  rule violation, and neither changes the balance.
- The console runner classifies malformed text before `withdraw` runs.
"""

import unittest
from unittest import mock

import exercises.config as cfg
from exercises import console
from exercises.account import INSUFFICIENT_FUNDS, INVALID_OPERATION, withdraw
from exercises.console import run_withdrawal
from exercises.results import FailureKind

from scripted_console import ScriptedConsole


class TestWithdraw(unittest.TestCase):
    def test_amounts_within_balance_succeed(self):
        balance = 1000
        for amount in (0, 1, 250, 999, 1000):
            outcome = withdraw(amount, balance)
            self.assertTrue(outcome.is_success, amount)
            self.assertEqual(outcome.value, balance - amount)

    def test_amounts_over_balance_are_business_rule_failures(self):
        for amount in (1001, 1500, 10 ** 9):
            outcome = withdraw(amount, 1000)
            self.assertFalse(outcome.is_success)
            self.assertIs(outcome.kind, FailureKind.BUSINESS_RULE)
            self.assertEqual(outcome.reason, INSUFFICIENT_FUNDS)

    def test_negative_amounts_are_invalid_arguments(self):
        for amount in (-1, -5, -1001):
            outcome = withdraw(amount, 1000)
            self.assertIs(outcome.kind, FailureKind.INVALID_ARGUMENT)
            self.assertEqual(outcome.reason, INVALID_OPERATION)

    def test_negative_amount_checked_before_balance(self):
        # -5 against an empty account is still misuse, not insufficient funds
        self.assertIs(withdraw(-5, 0).kind, FailureKind.INVALID_ARGUMENT)

    def test_non_int_arguments_raise(self):
        with self.assertRaises(TypeError):
            withdraw("500", 1000)
        with self.assertRaises(TypeError):
            withdraw(1.5, 1000)
        with self.assertRaises(TypeError):
            withdraw(True, 1000)


class TestWithdrawalConsole(unittest.TestCase):
    def setUp(self):
        self._language = cfg.LANGUAGE
        cfg.LANGUAGE = "en"

    def tearDown(self):
        cfg.LANGUAGE = self._language

    def test_success_updates_balance(self):
        io = ScriptedConsole("500")
        self.assertEqual(run_withdrawal(1000, io.read, io.write), 500)
        self.assertEqual(io.output, ["Withdrawal complete"])

    def test_insufficient_funds_keeps_balance(self):
        io = ScriptedConsole("1500")
        self.assertEqual(run_withdrawal(1000, io.read, io.write), 1000)
        self.assertEqual(io.output, ["[Business error] insufficient funds"])

    def test_negative_amount_is_usage_error(self):
        io = ScriptedConsole("-5")
        self.assertEqual(run_withdrawal(1000, io.read, io.write), 1000)
        self.assertEqual(io.output, ["[System usage error] invalid operation"])

    def test_non_numeric_input_is_format_error(self):
        io = ScriptedConsole("abc")
        with mock.patch.object(console, "withdraw") as patched:
            self.assertEqual(run_withdrawal(1000, io.read, io.write), 1000)
        patched.assert_not_called()
        self.assertEqual(len(io.output), 1)
        self.assertTrue(io.output[0].startswith("[System usage error] Invalid input."))

    def test_end_of_input_is_format_error(self):
        io = ScriptedConsole()
        self.assertEqual(run_withdrawal(1000, io.read, io.write), 1000)
        self.assertTrue(io.output[0].startswith("[System usage error] Invalid input."))

    def test_number_separators_and_wide_digits_are_format_errors(self):
        for text in ("1_0", "５００", "1_0.5"):
            io = ScriptedConsole(text)
            with mock.patch.object(console, "withdraw") as patched:
                self.assertEqual(run_withdrawal(1000, io.read, io.write), 1000, text)
            patched.assert_not_called()
            self.assertTrue(io.output[0].startswith("[System usage error] Invalid input."), text)

    def test_overflowing_amount_is_fatal(self):
        io = ScriptedConsole("99999999999")
        with mock.patch.object(console, "withdraw") as patched:
            self.assertEqual(run_withdrawal(1000, io.read, io.write), 1000)
        patched.assert_not_called()
        self.assertEqual(len(io.output), 1)
        self.assertTrue(io.output[0].startswith("[Fatal error] A serious error occurred."))

    def test_unexpected_exception_is_reported_not_raised(self):
        io = ScriptedConsole("100")
        with mock.patch.object(console, "withdraw", side_effect=RuntimeError("boom")):
            with self.assertLogs("exercises.console", level="ERROR"):
                balance = run_withdrawal(1000, io.read, io.write)
        self.assertEqual(balance, 1000)
        self.assertEqual(io.output, ["[Fatal error] A serious error occurred. boom"])

    def test_japanese_messages(self):
        cfg.LANGUAGE = "ja"
        io = ScriptedConsole("1500")
        run_withdrawal(1000, io.read, io.write)
        self.assertEqual(io.output, ["【業務エラー】 残高が足りません。"])
        self.assertEqual(io.prompts, ["出金額を入力してください: "])


if __name__ == '__main__':
    unittest.main(verbosity=2)
