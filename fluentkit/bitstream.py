"""A growable sequence of bits, written most significant bit first."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class BitStream:
    """An ordered sequence of bits that can be packed into bytes."""

    __slots__ = ("_bits",)

    def __init__(self, bits: Iterable[int] | None = None) -> None:
        self._bits: list[int] = []
        if bits is not None:
            for bit in bits:
                if bit not in (0, 1):
                    raise ValueError(f"bit values must be 0 or 1, got {bit!r}")
                self._bits.append(int(bit))

    def __len__(self) -> int:
        return len(self._bits)

    def __iter__(self) -> Iterator[int]:
        return iter(self._bits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitStream):
            return NotImplemented
        return self._bits == other._bits

    def __repr__(self) -> str:
        return f"BitStream({''.join(map(str, self._bits))!r})"

    def append(self, other: BitStream) -> None:
        """Append every bit of another stream."""
        if not isinstance(other, BitStream):
            raise TypeError("can only append another BitStream")
        self._bits.extend(other._bits)

    def append_num(self, bits: int, num: int) -> None:
        """Append the lowest ``bits`` bits of ``num``, most significant first."""
        if bits < 0:
            raise ValueError("bit count must not be negative")
        self._bits.extend((num >> shift) & 1 for shift in range(bits - 1, -1, -1))

    def append_bytes(self, data: bytes | bytearray | Iterable[int]) -> None:
        """Append each byte as eight bits, most significant first."""
        for byte in bytes(data):
            self.append_num(8, byte)

    def to_bytes(self) -> bytes:
        """Pack the bits into bytes; a trailing partial byte is padded with zeros."""
        out = bytearray()
        for start in range(0, len(self._bits), 8):
            chunk = self._bits[start:start + 8]
            value = 0
            for bit in chunk:
                value = (value << 1) | bit
            out.append(value << (8 - len(chunk)))
        return bytes(out)

    def reset(self) -> None:
        """Remove every bit."""
        self._bits.clear()