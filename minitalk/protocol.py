"""Bit-level encoding used between client and server.

Every byte of a message travels as eight bits, most significant first, and
a zero byte marks the end of the message.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

BITS_PER_BYTE = 8
TERMINATOR = 0


def byte_to_bits(value: int) -> tuple[int, ...]:
    """Return the eight bits of a byte, most significant first."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    return tuple((value >> shift) & 1 for shift in range(BITS_PER_BYTE - 1, -1, -1))


def bits_to_byte(bits: Sequence[int]) -> int:
    """Rebuild a byte from eight bits, most significant first.

    Any non-zero entry counts as a set bit.
    """
    if len(bits) != BITS_PER_BYTE:
        raise ValueError(f"expected {BITS_PER_BYTE} bits, got {len(bits)}")
    value = 0
    for bit in bits:
        value = (value << 1) | (1 if bit else 0)
    return value


def _as_bytes(text: str | bytes | bytearray) -> bytes:
    if isinstance(text, str):
        return text.encode("utf-8", "surrogateescape")
    return bytes(text)


def encode_message(text: str | bytes | bytearray) -> Iterator[int]:
    """Yield the bits that carry text, followed by the terminating byte."""
    data = _as_bytes(text)
    for value in data:
        yield from byte_to_bits(value)
    yield from byte_to_bits(TERMINATOR)


class Decoder:
    """Collects bits into bytes and bytes into messages."""

    def __init__(self) -> None:
        self._bits: list[int] = []
        self._buffer = bytearray()

    def feed(self, bit: int) -> bytes | None:
        """Take one bit; return the finished message when a terminator arrives."""
        if bit not in (0, 1):
            raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
        self._bits.append(bit)
        if len(self._bits) < BITS_PER_BYTE:
            return None
        value = bits_to_byte(self._bits)
        self._bits.clear()
        if value == TERMINATOR:
            message = bytes(self._buffer)
            self._buffer.clear()
            return message
        self._buffer.append(value)
        return None

    def feed_all(self, bits: Iterable[int]) -> list[bytes]:
        """Feed many bits and return every message they complete."""
        messages = []
        for bit in bits:
            message = self.feed(bit)
            if message is not None:
                messages.append(message)
        return messages