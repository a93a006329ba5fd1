"""Property-based tests using hypothesis."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from proxchat import encode_chat_message, encode_packet, get_default_table
from proxchat.codec.bitpack import pack_symbols
from proxchat.framing import frame_packet, unframe_packet
from proxchat.geometry import Offset, ReachabilityTable
from proxchat.utils import symbol_count


def _join_symbols(symbols: list[int], bit_width: int) -> int:
    value = 0
    for i, symbol in enumerate(symbols):
        value |= symbol << (i * bit_width)
    return value


class TestBitPackProperties:
    """Property-based tests for symbol packing."""

    @given(data=st.binary(max_size=64), bit_width=st.integers(min_value=1, max_value=16))
    def test_symbols_in_range(self, data: bytes, bit_width: int) -> None:
        """Test every symbol fits the bit width."""
        symbols = pack_symbols(data, bit_width)

        assert len(symbols) == symbol_count(len(data), bit_width)
        assert all(0 <= s < (1 << bit_width) for s in symbols)

    @given(data=st.binary(max_size=64), bit_width=st.integers(min_value=1, max_value=16))
    def test_bits_preserved(self, data: bytes, bit_width: int) -> None:
        """Test concatenated symbols reproduce the LSB-first bitstream."""
        symbols = pack_symbols(data, bit_width)

        assert _join_symbols(symbols, bit_width) == int.from_bytes(data, "little")

    @given(data=st.binary(min_size=1, max_size=64), bit_width=st.integers(min_value=1, max_value=4))
    def test_power_of_two_table_roundtrip(self, data: bytes, bit_width: int) -> None:
        """Test symbols mapped through a 2^w table recover the input bits."""
        offsets = [Offset(i, 0, 0) for i in range(1 << bit_width)]
        table = ReachabilityTable(offsets)
        assert table.bit_width == bit_width

        symbols = pack_symbols(data, table.bit_width)
        mapped = [table[s] for s in symbols]
        recovered = [table.index_of(o) for o in mapped]

        total_bits = 8 * len(data)
        joined = _join_symbols(recovered, bit_width)
        assert joined & ((1 << total_bits) - 1) == int.from_bytes(data, "little")
        if total_bits % bit_width == 0:
            assert joined == int.from_bytes(data, "little")


class TestFramingProperties:
    """Property-based tests for framing."""

    @given(packet_id=st.integers(min_value=0, max_value=0xFFFF), data=st.binary(max_size=512))
    def test_frame_layout(self, packet_id: int, data: bytes) -> None:
        """Test framed packets carry length, id and data."""
        framed = frame_packet(packet_id, data)

        assert len(framed) == 5 + len(data)
        assert int.from_bytes(framed[0:3], "big") == 2 + len(data)
        assert int.from_bytes(framed[3:5], "big") == packet_id
        assert unframe_packet(framed) == (packet_id, data)


class TestEncoderProperties:
    """Property-based tests for the end-to-end encoder."""

    @given(packet_id=st.integers(min_value=0, max_value=0xFFFF), data=st.binary(max_size=128))
    def test_offsets_are_table_members(self, packet_id: int, data: bytes) -> None:
        """Test every produced offset is reachable and sync comes first."""
        table = get_default_table()
        offsets = encode_packet(packet_id, data, table)

        assert all(offset in table for offset in offsets)
        assert [table.index_of(o) for o in offsets[:2]] == list(table.magic_symbols)
        assert len(offsets) == 2 + symbol_count(5 + len(data), table.bit_width)

    @given(text=st.text(max_size=40))
    def test_deterministic(self, text: str) -> None:
        """Test encoding the same input twice gives the same offsets."""
        assert encode_chat_message(text) == encode_chat_message(text)
