"""Arithmetic on non-negative integers written as decimal digit strings."""

from __future__ import annotations

import math
import re

_DIGITS = re.compile(r"[0-9]+")


def _parse(text: str) -> int:
    if not isinstance(text, str) or not _DIGITS.fullmatch(text):
        raise ValueError(f"not a non-negative decimal number: {text!r}")
    return int(text)


def add(a: str, b: str) -> str:
    """Return the sum of two digit strings as a digit string."""
    return str(_parse(a) + _parse(b))


def multiply(a: str, b: str) -> str:
    """Return the product of two digit strings, without leading zeros."""
    return str(_parse(a) * _parse(b))


def factorial(n: int) -> str:
    """Return ``n!`` as a digit string."""
    if n < 0:
        raise ValueError("n must not be negative")
    return str(math.factorial(n))