"""Decimal rounding and digit-by-digit comparison of floating point values."""

from __future__ import annotations

import math

_MAX_DIGITS = 16


def _exponent_of(text: str) -> int:
    for index, char in enumerate(text):
        if char in "eE":
            return int(text[index + 1:])
    return 0


def _sign(value: float) -> int:
    if value > 0.0:
        return 1
    if value < 0.0:
        return -1
    return 0


def round_f64_to_string(value: float, n: int) -> str:
    """Format ``value`` in scientific notation with ``n`` fraction digits.

    Ties in the decimal expansion are rounded away from zero, which plain
    formatting does not always do because decimals are inexact in binary.
    """
    if not 0 <= n <= _MAX_DIGITS:
        raise ValueError(f"number of digits must be within 0..{_MAX_DIGITS}, got {n}")

    text = f"{value:.{n}e}"
    if n == _MAX_DIGITS or not math.isfinite(value):
        return text

    full = f"{value:.15e}"
    last_digit_index = full.index(".") + n
    if ord(full[last_digit_index + 1]) - ord("0") > 4:
        exponent = last_digit_index + _exponent_of(full)
        bumped = value + _sign(value) * 10.0 ** (-exponent)
        return f"{bumped:.{n}e}"
    return text


def compare_f64_values(value: float, expected: float) -> int:
    """Return the largest number of fraction digits at which both values agree.

    Returns -1 when they do not agree even with no fraction digits.
    """
    for n in range(_MAX_DIGITS, -1, -1):
        if round_f64_to_string(value, n) == round_f64_to_string(expected, n):
            return n
    return -1