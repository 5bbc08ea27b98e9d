"""A small printf with the conversions c, s, p, x, X, d, i, u and %."""

from __future__ import annotations

import sys

from minitalk.radix import to_base

FORMAT_SPECIFIERS = "cspxXdiu%"

_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_DECIMAL = "0123456789"
_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


def _as_int(value) -> int:
    if isinstance(value, str) and len(value) == 1:
        return ord(value)
    if not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return value


def _char(value) -> str:
    return chr(_as_int(value) & 0xFF)


def _string(value) -> str:
    return "(null)" if value is None else str(value)


def _address(value) -> str:
    return "0x" + to_base(_as_int(value) & _ULONG_MASK, _HEX_LOWER)


def _hex_lower(value) -> str:
    return to_base(_as_int(value) & _UINT_MASK, _HEX_LOWER)


def _hex_upper(value) -> str:
    return to_base(_as_int(value) & _UINT_MASK, _HEX_UPPER)


def _signed(value) -> str:
    wrapped = ((_as_int(value) + 2**31) & _UINT_MASK) - 2**31
    return str(wrapped)


def _unsigned(value) -> str:
    return to_base(_as_int(value) & _UINT_MASK, _DECIMAL)


_CONVERSIONS = {
    "c": _char,
    "s": _string,
    "p": _address,
    "x": _hex_lower,
    "X": _hex_upper,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
}


def format_string(fmt: str, *args) -> str:
    """Expand fmt with args and return the resulting text.

    A lone '%' at the end of fmt is kept as is. An unknown conversion raises
    ValueError; too few arguments raise TypeError.
    """
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(enumerate(fmt))
    for index, ch in chars:
        if ch != "%" or index + 1 >= len(fmt):
            pieces.append(ch)
            continue
        _, conv = next(chars)
        if conv == "%":
            pieces.append("%")
            continue
        handler = _CONVERSIONS.get(conv)
        if handler is None:
            raise ValueError(f"unknown conversion %{conv}")
        try:
            value = next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{conv}") from None
        pieces.append(handler(value))
    return "".join(pieces)


def fprint(fmt: str, *args) -> int:
    """Write the expansion of fmt to standard output; return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)