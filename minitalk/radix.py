"""Conversion of non-negative integers to text in an arbitrary base."""

from __future__ import annotations


def to_base(number: int, digits: str) -> str:
    """Write number using the characters of digits as the digit set."""
    base = len(digits)
    if base < 2:
        raise ValueError("a base needs at least two digits")
    if number < 0:
        raise ValueError("number must not be negative")
    if number == 0:
        return digits[0]
    out = []
    while number:
        number, rest = divmod(number, base)
        out.append(digits[rest])
    return "".join(reversed(out))