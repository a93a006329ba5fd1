"""Packet framing for prox transmissions.

This module wraps a payload with a length prefix and a packet id before it
is bit-packed into symbols.

Frame structure (all integers big-endian):
    [Length (3 bytes)] [Packet ID (2 bytes)] [Data]

The length counts the id and the data, not itself.
"""

from __future__ import annotations

import struct

from ..constants import HEADER_BYTES, ID_FIELD_BYTES, MAX_FRAMED_LENGTH, MAX_PACKET_ID
from ..exceptions import FramingError, PayloadTooLargeError


def frame_packet(packet_id: int, data: bytes) -> bytes:
    """Frame a payload with its length and packet id.

    Args:
        packet_id: Packet type ID (0-65535)
        data: Payload bytes, copied unmodified

    Returns:
        Framed packet of 5 + len(data) bytes

    Raises:
        ValueError: If packet_id is out of range
        PayloadTooLargeError: If id + data don't fit the 24-bit length field

    Example:
        >>> frame_packet(1, b"")
        b'\\x00\\x00\\x02\\x00\\x01'
    """
    if not 0 <= packet_id <= MAX_PACKET_ID:
        raise ValueError(f"Packet ID must be 0-{MAX_PACKET_ID}, got {packet_id}")

    length = ID_FIELD_BYTES + len(data)
    if length > MAX_FRAMED_LENGTH:
        raise PayloadTooLargeError("Framed packet", length, MAX_FRAMED_LENGTH)

    result = bytearray()
    # 24-bit length: high byte of a 32-bit big-endian int is always zero here
    result.extend(struct.pack(">I", length)[1:])
    result.extend(struct.pack(">H", packet_id))
    result.extend(data)

    return bytes(result)


def unframe_packet(framed: bytes) -> tuple[int, bytes]:
    """Split a framed packet into its packet id and payload.

    Args:
        framed: Framed packet as produced by frame_packet()

    Returns:
        Tuple of (packet_id, data)

    Raises:
        FramingError: If the header is truncated or the length field
            disagrees with the buffer

    Example:
        >>> unframe_packet(frame_packet(3, b"wave"))
        (3, b'wave')
    """
    if len(framed) < HEADER_BYTES:
        raise FramingError(f"Frame too short for header: {len(framed)} bytes")

    length = struct.unpack(">I", b"\x00" + bytes(framed[0:3]))[0]
    if length < ID_FIELD_BYTES:
        raise FramingError(f"Length field {length} is smaller than the packet ID")

    actual = len(framed) - 3
    if actual != length:
        raise FramingError(
            f"Length mismatch: prefix says {length} bytes, but got {actual} bytes"
        )

    packet_id = struct.unpack(">H", bytes(framed[3:5]))[0]
    return packet_id, bytes(framed[5:])
