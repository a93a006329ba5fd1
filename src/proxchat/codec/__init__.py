"""Symbol codec for proxchat.

This module turns framed packets into symbols and symbols into block offsets.
"""

from __future__ import annotations

from .bitpack import SymbolPacker, pack_symbols
from .encoder import bytes_to_symbols, encode_chat_message, encode_message, encode_packet
from .mapper import symbols_to_offsets, with_magic_prefix

__all__ = [
    "SymbolPacker",
    "pack_symbols",
    "bytes_to_symbols",
    "encode_chat_message",
    "encode_message",
    "encode_packet",
    "symbols_to_offsets",
    "with_magic_prefix",
]
