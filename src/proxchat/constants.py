"""Wire-level constants shared by the framer and the encoder."""

from __future__ import annotations

import enum


class PacketId(enum.IntEnum):
    """Packet type identifiers carried in the 2-byte id field.

    Only CHAT is produced by this package; the others are reserved for
    external producers.
    """

    CHAT = 1
    PATPAT_ENTITY = 2
    EMOTE = 3


PACKET_ID_CHAT = PacketId.CHAT
PACKET_ID_PATPAT_ENTITY = PacketId.PATPAT_ENTITY
PACKET_ID_EMOTE = PacketId.EMOTE

# Framed packet header: 3-byte length + 2-byte id
LENGTH_FIELD_BYTES = 3
ID_FIELD_BYTES = 2
HEADER_BYTES = LENGTH_FIELD_BYTES + ID_FIELD_BYTES

MAX_FRAMED_LENGTH = (1 << (8 * LENGTH_FIELD_BYTES)) - 1
MAX_PACKET_ID = (1 << (8 * ID_FIELD_BYTES)) - 1

# Chat payload: [version flag, text length, text...]
CHAT_VERSION_FLAG = 0x00
MAX_CHAT_TEXT_BYTES = 0xFF

# Magic symbols sit this far below the table size
MAGIC_SYMBOL_OFFSETS = (1, 19)
