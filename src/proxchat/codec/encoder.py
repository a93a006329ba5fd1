"""End-to-end encoder from messages to block offsets.

Pipeline:
    payload -> frame_packet() -> pack_symbols() -> magic prefix
    -> symbols_to_offsets()

The resulting offsets are applied in order, relative to an external
reference position, by whoever performs the world actions.
"""

from __future__ import annotations

from typing import Optional

from ..exceptions import EncodeError
from ..framing.basic import frame_packet
from ..geometry.table import Offset, ReachabilityTable, get_default_table
from ..models.base import BaseMessage
from ..models.messages import ChatMessage
from .bitpack import pack_symbols
from .mapper import symbols_to_offsets, with_magic_prefix


def bytes_to_symbols(data: bytes, table: Optional[ReachabilityTable] = None) -> list[int]:
    """Pack bytes into symbols at the table's bit width.

    Raises:
        DegenerateTableError: If the table can't carry a single bit per symbol
    """
    table = table if table is not None else get_default_table()
    return pack_symbols(data, table.require_bit_width())


def encode_packet(
    packet_id: int, data: bytes, table: Optional[ReachabilityTable] = None
) -> list[Offset]:
    """Encode a raw (packet id, data) pair into an offset sequence.

    Args:
        packet_id: Packet type ID (0-65535)
        data: Payload bytes
        table: Reachability table (defaults to the process-wide table)

    Returns:
        Offsets: two magic offsets followed by the packed framed packet

    Raises:
        ValueError: If packet_id is out of range
        PayloadTooLargeError: If the framed length overflows 24 bits
        DegenerateTableError: If the table is too small to carry data
    """
    table = table if table is not None else get_default_table()

    framed = frame_packet(packet_id, data)
    symbols = with_magic_prefix(bytes_to_symbols(framed, table), table)

    return symbols_to_offsets(symbols, table)


def encode_message(message: BaseMessage, table: Optional[ReachabilityTable] = None) -> list[Offset]:
    """Encode a message model into an offset sequence.

    Args:
        message: Message instance; its class's prox_id becomes the packet id
        table: Reachability table (defaults to the process-wide table)

    Returns:
        Ordered offsets

    Raises:
        EncodeError: If the message class defines no prox_id
        PayloadTooLargeError: If the payload overflows a length field
        DegenerateTableError: If the table is too small to carry data
    """
    packet_id = getattr(type(message), "prox_id", None)
    if packet_id is None:
        raise EncodeError(f"{type(message).__name__} has no prox_id")

    return encode_packet(packet_id, message.to_payload(), table)


def encode_chat_message(text: str, table: Optional[ReachabilityTable] = None) -> list[Offset]:
    """Encode a chat message into an offset sequence.

    Args:
        text: Message text (UTF-8 encoded, at most 255 bytes)
        table: Reachability table (defaults to the process-wide table)

    Returns:
        Ordered offsets

    Raises:
        PayloadTooLargeError: If the encoded text exceeds 255 bytes

    Example:
        >>> offsets = encode_chat_message("hi")
        >>> len(offsets)  # 2 magic + 72 bits / 9 bits per symbol
        10
    """
    return encode_message(ChatMessage(text=text), table)
