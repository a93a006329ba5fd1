"""Bit-level packing of bytes into fixed-width symbols.

This module treats a byte buffer as one contiguous bitstream, least
significant bit first within each byte, and cuts it into symbols of a fixed
bit width. The first bit consumed becomes bit 0 of a symbol.

A trailing partial symbol is emitted with its high bits zero. The number of
real bits in it can't be recovered from the symbols alone; a reader needs the
original byte length (carried in the framed packet header).
"""

from __future__ import annotations

from typing import Iterable

MAX_SYMBOL_BITS = 64


class SymbolPacker:
    """Packs bits into fixed-width unsigned symbols.

    Example:
        >>> packer = SymbolPacker(bit_width=3)
        >>> packer.write_bytes(b"\\xff")
        >>> packer.to_symbols()
        [7, 7, 3]
    """

    def __init__(self, bit_width: int) -> None:
        """Initialize an empty packer.

        Args:
            bit_width: Bits per symbol (1-64)

        Raises:
            ValueError: If bit_width is out of range
        """
        if bit_width < 1 or bit_width > MAX_SYMBOL_BITS:
            raise ValueError(f"bit_width must be 1-{MAX_SYMBOL_BITS}, got {bit_width}")

        self.bit_width = bit_width
        self._symbols: list[int] = []
        self._current = 0
        self._current_bits = 0

    def write_bit(self, bit: int) -> None:
        """Append one bit to the current symbol.

        Args:
            bit: 0 or 1

        Raises:
            ValueError: If bit is not 0 or 1
        """
        if bit not in (0, 1):
            raise ValueError(f"bit must be 0 or 1, got {bit}")

        self._current |= bit << self._current_bits
        self._current_bits += 1

        if self._current_bits == self.bit_width:
            self._symbols.append(self._current)
            self._current = 0
            self._current_bits = 0

    def write_byte(self, value: int) -> None:
        """Append the 8 bits of a byte, least significant first.

        Raises:
            ValueError: If value is not 0-255
        """
        if not 0 <= value <= 0xFF:
            raise ValueError(f"byte value must be 0-255, got {value}")

        for i in range(8):
            self.write_bit((value >> i) & 1)

    def write_bytes(self, data: Iterable[int]) -> None:
        """Append every byte of a buffer in order."""
        for byte in data:
            self.write_byte(byte)

    def bit_length(self) -> int:
        """Return the number of bits written so far."""
        return len(self._symbols) * self.bit_width + self._current_bits

    def to_symbols(self) -> list[int]:
        """Return packed symbols, including a trailing partial symbol.

        Returns:
            Symbols in [0, 2^bit_width); empty if nothing was written
        """
        symbols = list(self._symbols)
        if self._current_bits > 0:
            symbols.append(self._current)
        return symbols


def pack_symbols(data: bytes, bit_width: int) -> list[int]:
    """Pack a byte buffer into fixed-width symbols.

    Args:
        data: Bytes to pack
        bit_width: Bits per symbol (1-64)

    Returns:
        ceil(8 * len(data) / bit_width) symbols, empty for empty input

    Raises:
        ValueError: If bit_width is out of range

    Example:
        >>> pack_symbols(b"\\xff", 3)
        [7, 7, 3]
    """
    packer = SymbolPacker(bit_width)
    packer.write_bytes(data)
    return packer.to_symbols()
