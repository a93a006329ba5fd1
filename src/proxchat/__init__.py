"""proxchat: Proximity Chat Offset Encoder

A Python library that turns small payloads (chat messages wrapped in a
length and id prefixed packet) into an ordered sequence of 3D block offsets.
Each offset is drawn from a fixed table of positions reachable from anywhere
inside the origin block, so an agent can act on them in order and an
observer who knows the same table can read the pattern back.

Key Features:
- Deterministic reachability table, built once per process
- Fixed-width symbol packing (floor(log2(table size)) bits per offset)
- Magic sync symbols marking the start of each transmission
- Pydantic-based message modeling

Quick Start:
    >>> from proxchat import encode_chat_message, get_default_table
    >>> offsets = encode_chat_message("hi")
    >>> offsets[0] == get_default_table()[get_default_table().size - 1]
    True
"""

from __future__ import annotations

from .codec import (
    SymbolPacker,
    bytes_to_symbols,
    encode_chat_message,
    encode_message,
    encode_packet,
    pack_symbols,
    symbols_to_offsets,
    with_magic_prefix,
)
from .constants import PACKET_ID_CHAT, PACKET_ID_EMOTE, PACKET_ID_PATPAT_ENTITY, PacketId
from .exceptions import (
    DegenerateTableError,
    EncodeError,
    FramingError,
    PayloadTooLargeError,
    ProxChatError,
    SymbolRangeError,
    TableError,
)
from .framing import frame_packet, unframe_packet
from .geometry import (
    DEFAULT_TABLE_CONFIG,
    Offset,
    ReachabilityTable,
    TableConfig,
    build_reachability_table,
    get_default_table,
)
from .models import BaseMessage, ChatMessage
from .utils import encoded_offsets, offsets_for_payload, symbol_count

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode_chat_message",
    "encode_message",
    "encode_packet",
    # Messages
    "BaseMessage",
    "ChatMessage",
    "PacketId",
    "PACKET_ID_CHAT",
    "PACKET_ID_PATPAT_ENTITY",
    "PACKET_ID_EMOTE",
    # Geometry
    "Offset",
    "ReachabilityTable",
    "TableConfig",
    "DEFAULT_TABLE_CONFIG",
    "build_reachability_table",
    "get_default_table",
    # Pipeline stages
    "frame_packet",
    "unframe_packet",
    "SymbolPacker",
    "pack_symbols",
    "bytes_to_symbols",
    "with_magic_prefix",
    "symbols_to_offsets",
    # Exceptions
    "ProxChatError",
    "EncodeError",
    "PayloadTooLargeError",
    "FramingError",
    "TableError",
    "DegenerateTableError",
    "SymbolRangeError",
    # Sizing
    "symbol_count",
    "offsets_for_payload",
    "encoded_offsets",
    # Version
    "__version__",
]
