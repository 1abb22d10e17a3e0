"""Scorer: points for one answer, and answer comparison."""

import math
import string

BASE_POINTS = 10

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def normalize_answer(text: str) -> str:
    """Upper-case ASCII letters only. Whitespace is kept as typed."""
    return text.translate(_ASCII_UPPER)


def check_answer(user_answer: str, expected_answer: str) -> bool:
    return normalize_answer(user_answer) == normalize_answer(expected_answer)


def time_bonus(elapsed_seconds: float, limit_seconds: float) -> int:
    """Whole seconds left before the limit."""
    return int(math.floor(max(0.0, limit_seconds - elapsed_seconds)))


def score(correct: bool, elapsed_seconds: float, limit_seconds: float) -> int:
    """Points for one answer.

    A wrong answer, or any answer given at or after the limit, is worth 0.
    Otherwise the answer earns BASE_POINTS plus the time bonus.
    """
    if not correct:
        return 0
    if elapsed_seconds >= limit_seconds:
        return 0
    return BASE_POINTS + time_bonus(elapsed_seconds, limit_seconds)
