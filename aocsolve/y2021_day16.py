"""2021 day 16: decoding BITS transmission packets."""

from __future__ import annotations

import math

_HEX_DIGITS = "0123456789ABCDEF"


def hex_to_bits(text: str) -> str:
    """Turn upper-case hexadecimal text into a string of bits, ignoring whitespace."""
    bits = []
    for char in text:
        if char.isspace():
            continue
        value = _HEX_DIGITS.find(char)
        if value < 0:
            raise ValueError(f"not a hexadecimal digit: {char!r}")
        bits.append(format(value, "04b"))
    return "".join(bits)


class _Reader:
    def __init__(self, bits: str) -> None:
        self._bits = bits
        self._pos = 0

    @property
    def exhausted(self) -> bool:
        return self._pos >= len(self._bits)

    def take_bits(self, count: int) -> str:
        end = self._pos + count
        if end > len(self._bits):
            raise ValueError("packet ends unexpectedly")
        chunk = self._bits[self._pos : end]
        self._pos = end
        return chunk

    def take(self, count: int) -> int:
        return int(self.take_bits(count), 2)


def _literal(reader: _Reader) -> int:
    value = 0
    more = True
    while more:
        more = reader.take(1) == 1
        value = (value << 4) | reader.take(4)
    return value


def _subpacket_values(reader: _Reader) -> list[int]:
    if reader.take(1) == 0:
        inner = _Reader(reader.take_bits(reader.take(15)))
        values = []
        while not inner.exhausted:
            values.append(_packet(inner))
        return values
    return [_packet(reader) for _ in range(reader.take(11))]


def _packet(reader: _Reader) -> int:
    reader.take(3)  # version
    type_id = reader.take(3)
    if type_id == 4:
        return _literal(reader)
    values = _subpacket_values(reader)
    if not values:
        raise ValueError(f"operator packet of type {type_id} has no sub-packets")
    if type_id == 0:
        return sum(values)
    if type_id == 1:
        return math.prod(values)
    if type_id == 2:
        return min(values)
    if type_id == 3:
        return max(values)
    if type_id == 5:
        return int(values[0] > values[-1])
    if type_id == 6:
        return int(values[0] < values[-1])
    return int(values[0] == values[-1])


def evaluate_packet(bits: str) -> int:
    """Evaluate the outermost packet of a bit string; trailing bits are padding."""
    return _packet(_Reader(bits))


def part1(text: str) -> int:
    """Value of the transmission's outermost packet."""
    return evaluate_packet(hex_to_bits(text))