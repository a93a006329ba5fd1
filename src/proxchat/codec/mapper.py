"""Symbol to offset mapping."""

from __future__ import annotations

from typing import Iterable, Optional

from ..exceptions import SymbolRangeError
from ..geometry.table import Offset, ReachabilityTable, get_default_table


def with_magic_prefix(symbols: Iterable[int], table: Optional[ReachabilityTable] = None) -> list[int]:
    """Prepend the table's two magic symbols to a symbol sequence.

    Raises:
        DegenerateTableError: If the table is too small for magic symbols
    """
    table = table if table is not None else get_default_table()
    return [*table.magic_symbols, *symbols]


def symbols_to_offsets(
    symbols: Iterable[int], table: Optional[ReachabilityTable] = None
) -> list[Offset]:
    """Translate symbols into the offsets they index.

    Args:
        symbols: Symbols, each in [0, table.size)
        table: Reachability table (defaults to the process-wide table)

    Returns:
        Offsets in the same order and count as the symbols

    Raises:
        SymbolRangeError: If a symbol is not an int, is negative, or is not below
            the table size
    """
    table = table if table is not None else get_default_table()
    size = table.size

    offsets = []
    for position, symbol in enumerate(symbols):
        if not isinstance(symbol, int) or not 0 <= symbol < size:
            raise SymbolRangeError(
                f"Symbol {symbol} at position {position} is outside table of size {size}"
            )
        offsets.append(table[symbol])

    return offsets
