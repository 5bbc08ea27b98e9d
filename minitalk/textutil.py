"""String helpers with the conversion and splitting rules the tools rely on."""

from __future__ import annotations

INT_MIN = -2147483648
INT_MAX = 2147483647

_SPACES = " \t\n\v\f\r"
_DIGITS = "0123456789"


def atoi(text: str) -> int:
    """Parse a leading signed decimal integer.

    Leading whitespace is skipped and parsing stops at the first non-digit.
    A value below the 32-bit range yields 0, one above it yields -1.
    """
    rest = text.lstrip(_SPACES)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        result = result * 10 + int(ch)
        value = result * sign
        if value < INT_MIN:
            return 0
        if value > INT_MAX:
            return -1
    return result * sign


def itoa(number: int) -> str:
    """Return the decimal text of an integer."""
    if not isinstance(number, int):
        raise TypeError("itoa expects an integer")
    return str(number)


def split(text: str, separator: str) -> list[str]:
    """Split on a separator character, dropping empty pieces."""
    if not separator:
        return [text] if text else []
    return [word for word in text.split(separator) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in charset from both ends of text."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text beginning at start."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find needle within the first length characters of haystack.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack.find(needle, 0, min(length, len(haystack)))
    return None if index < 0 else index