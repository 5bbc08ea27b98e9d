"""Comparison and search over character data with terminator semantics."""

from __future__ import annotations

from typing import Sequence, Union

CharLike = Union[str, int]


def _codes(data: Union[str, bytes, bytearray, Sequence[int]]) -> list[int]:
    if isinstance(data, str):
        return [ord(ch) for ch in data]
    return list(data)


def _target(char: CharLike) -> int:
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError("expected a single character")
        return ord(char)
    return char % 256


def _visible(text: str) -> str:
    """The part of text before the first NUL character."""
    return text.split("\0", 1)[0]


def strncmp(first, second, count: int) -> int:
    """Compare at most count characters, stopping at the end of either string.

    Returns the difference of the first differing character codes, treating
    the end of a string as a zero code; 0 when the compared parts match.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    if count == 0:
        return 0
    left = _codes(first)
    right = _codes(second)

    def at(codes: list[int], index: int) -> int:
        return codes[index] if index < len(codes) else 0

    index = 0
    while (
        index < count - 1
        and at(left, index) == at(right, index)
        and at(left, index)
        and at(right, index)
    ):
        index += 1
    return at(left, index) - at(right, index)


def memcmp(first, second, count: int) -> int:
    """Compare the first count bytes of two buffers, ignoring terminators."""
    if count < 0:
        raise ValueError("count must not be negative")
    left = _codes(first)
    right = _codes(second)
    if count > len(left) or count > len(right):
        raise ValueError("count exceeds the length of a buffer")
    for a, b in zip(left[:count], right[:count]):
        if a != b:
            return (a & 0xFF) - (b & 0xFF)
    return 0


def strchr(text: str, char: CharLike) -> int | None:
    """Index of the first occurrence of char, or of the end for a NUL char."""
    visible = _visible(text)
    target = _target(char)
    for index, ch in enumerate(visible):
        if ord(ch) == target:
            return index
    raw = char if isinstance(char, int) else ord(char)
    if raw == 0:
        return len(visible)
    return None


def strrchr(text: str, char: CharLike) -> int | None:
    """Index of the last occurrence of char, or of the end for a NUL char."""
    visible = _visible(text)
    target = _target(char)
    if target == 0:
        return len(visible)
    index = visible.rfind(chr(target))
    return None if index < 0 else index