"""Unit tests for symbol to offset mapping."""

from __future__ import annotations

import pytest

from proxchat.codec.mapper import symbols_to_offsets, with_magic_prefix
from proxchat.exceptions import DegenerateTableError, SymbolRangeError
from proxchat.geometry import Offset, ReachabilityTable, TableConfig, build_reachability_table


class TestSymbolsToOffsets:
    """Test symbols_to_offsets()."""

    def test_maps_by_index(self, table: ReachabilityTable) -> None:
        """Test each symbol selects its table entry."""
        assert symbols_to_offsets([0, 1, 2], table) == [
            Offset(0, 0, 0),
            Offset(0, 0, 1),
            Offset(0, 0, -1),
        ]

    def test_default_table(self, table: ReachabilityTable) -> None:
        """Test the default table is used when none is given."""
        assert symbols_to_offsets([610]) == [table[610]]

    def test_preserves_length_and_order(self, table: ReachabilityTable) -> None:
        """Test output has one offset per symbol, in order."""
        symbols = [5, 5, 511, 0, 300]
        offsets = symbols_to_offsets(symbols, table)

        assert len(offsets) == len(symbols)
        assert [table.index_of(o) for o in offsets] == symbols

    def test_empty(self, table: ReachabilityTable) -> None:
        """Test no symbols map to no offsets."""
        assert symbols_to_offsets([], table) == []

    def test_symbol_at_size(self, table: ReachabilityTable) -> None:
        """Test a symbol equal to the table size is a contract violation."""
        with pytest.raises(SymbolRangeError, match="outside table"):
            symbols_to_offsets([0, table.size], table)

    def test_negative_symbol(self, table: ReachabilityTable) -> None:
        """Test negative symbols never wrap around."""
        with pytest.raises(SymbolRangeError):
            symbols_to_offsets([-1], table)

    def test_range_error_is_index_error(self, table: ReachabilityTable) -> None:
        """Test out-of-range symbols are also IndexErrors."""
        with pytest.raises(IndexError):
            symbols_to_offsets([10_000], table)


    @pytest.mark.parametrize("symbol", [1.0, "1", None])
    def test_non_int_symbol(self, table: ReachabilityTable, symbol: object) -> None:
        """Test symbols that are not ints are range errors."""
        with pytest.raises(SymbolRangeError, match="outside table"):
            symbols_to_offsets([0, symbol], table)  # type: ignore[list-item]


class TestMagicPrefix:
    """Test with_magic_prefix()."""

    def test_prefix(self, table: ReachabilityTable) -> None:
        """Test the magic symbols come first."""
        assert with_magic_prefix([7, 8], table) == [610, 592, 7, 8]

    def test_prefix_only(self, table: ReachabilityTable) -> None:
        """Test empty data still gets the magic symbols."""
        assert with_magic_prefix([], table) == [table.size - 1, table.size - 19]

    def test_small_table(self) -> None:
        """Test a table with 19 entries or fewer cannot sync."""
        small = build_reachability_table(TableConfig(interaction_radius=2.0))
        with pytest.raises(DegenerateTableError):
            with_magic_prefix([0], small)
