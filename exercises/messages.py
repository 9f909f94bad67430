# -*- coding: utf-8 -*-
"""
User-facing message catalogue.

Wording is not a compatibility surface; only the mapping from outcome to
message key is. The active locale is read from `config.LANGUAGE` on every
lookup so the main menu can switch it at runtime.
"""

from __future__ import annotations

from typing import Dict

import exercises.config as cfg

CATALOGUE: Dict[str, Dict[str, str]] = {
    "en": {
        "temperature.prompt": "Enter a temperature in Celsius:",
        "temperature.result": "=> Fahrenheit: {value}",
        "temperature.invalid": "Invalid input",
        "profile.name_prompt": "Enter your user name",
        "profile.guest": "Guest",
        "profile.greeting": "Hello, {name}",
        "profile.age_prompt": "Enter your age",
        "profile.age_result": "{age} years old",
        "profile.age_malformed": "Please enter a number",
        "profile.age_out_of_range": "That age is not valid",
        "profile.done": "Finished.",
        "withdrawal.prompt": "Enter the amount to withdraw: ",
        "withdrawal.success": "Withdrawal complete",
        "outcome.business": "[Business error] {reason}",
        "outcome.usage": "[System usage error] {reason}",
        "outcome.malformed": "[System usage error] Invalid input. {reason}",
        "outcome.fatal": "[Fatal error] A serious error occurred. {reason}",
        "outcome.unexpected": "An unexpected error occurred: {reason}",
    },
    "ja": {
        "temperature.prompt": "摂氏温度を入力:",
        "temperature.result": "=> 華氏温度: {value}",
        "temperature.invalid": "無効な入力",
        "profile.name_prompt": "ユーザー名の入力",
        "profile.guest": "ゲスト",
        "profile.greeting": "{name}さん",
        "profile.age_prompt": "年齢の入力",
        "profile.age_result": "{age}歳",
        "profile.age_malformed": "数字を入力してください",
        "profile.age_out_of_range": "年齢が正しくありません",
        "profile.done": "処理を終了します。",
        "withdrawal.prompt": "出金額を入力してください: ",
        "withdrawal.success": "出金完了",
        "outcome.business": "【業務エラー】 {reason}",
        "outcome.usage": "【システム利用エラー】 {reason}",
        "outcome.malformed": "【システム利用エラー】不正な入力です。{reason}",
        "outcome.fatal": "【致命的エラー】深刻なエラーが発生しました。{reason}",
        "outcome.unexpected": "予期せぬエラーが発生しました: {reason}",
    },
}

# Failure reasons produced in English by the domain functions
REASONS: Dict[str, Dict[str, str]] = {
    "ja": {
        "insufficient funds": "残高が足りません。",
        "invalid operation": "不正な操作です。",
    },
}


def current_language() -> str:
    lang = cfg.LANGUAGE
    return lang if lang in CATALOGUE else "en"


def text(key: str, **kwargs) -> str:
    """Look up `key` in the active locale, falling back to English."""
    table = CATALOGUE[current_language()]
    template = table.get(key, CATALOGUE["en"][key])
    return template.format(**kwargs) if kwargs else template


def reason(value: str) -> str:
    return REASONS.get(current_language(), {}).get(value, value)
