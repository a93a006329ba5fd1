"""Unit tests for size calculation utilities."""

from __future__ import annotations

import pytest

from proxchat.codec.encoder import encode_chat_message
from proxchat.exceptions import DegenerateTableError
from proxchat.geometry import ReachabilityTable
from proxchat.models import ChatMessage
from proxchat.utils import encoded_offsets, offsets_for_payload, symbol_count


class TestSymbolCount:
    """Test symbol_count()."""

    @pytest.mark.parametrize(
        ("byte_length", "bit_width", "expected"),
        [(0, 9, 0), (1, 3, 3), (1, 8, 1), (9, 9, 8), (10, 9, 9), (3, 1, 24)],
    )
    def test_ceil_division(self, byte_length: int, bit_width: int, expected: int) -> None:
        """Test symbols needed is ceil(8n / w)."""
        assert symbol_count(byte_length, bit_width) == expected

    def test_invalid_arguments(self) -> None:
        """Test negative lengths and zero widths are rejected."""
        with pytest.raises(ValueError, match="byte_length"):
            symbol_count(-1, 9)

        with pytest.raises(ValueError, match="bit_width"):
            symbol_count(1, 0)


class TestOffsetCounts:
    """Test offsets_for_payload() and encoded_offsets()."""

    def test_chat_hi(self, table: ReachabilityTable) -> None:
        """Test the "hi" chat packet costs 10 offsets."""
        assert offsets_for_payload(4, table) == 10
        assert encoded_offsets(ChatMessage(text="hi")) == 10

    @pytest.mark.parametrize("text", ["", "hi", "hello there", "x" * 255])
    def test_matches_encoder(self, text: str) -> None:
        """Test the estimate matches the real encoding."""
        assert encoded_offsets(ChatMessage(text=text)) == len(encode_chat_message(text))

    def test_degenerate_table(self, tiny_table: ReachabilityTable) -> None:
        """Test sizing against a table that can't carry data."""
        with pytest.raises(DegenerateTableError):
            offsets_for_payload(4, tiny_table)
