"""Transmission size calculation utilities.

This module provides functions to calculate how many symbols (and therefore
world actions) a payload costs, without encoding it.
"""

from __future__ import annotations

from typing import Optional

from ..constants import HEADER_BYTES, MAGIC_SYMBOL_OFFSETS
from ..geometry.table import ReachabilityTable, get_default_table
from ..models.base import BaseMessage


def symbol_count(byte_length: int, bit_width: int) -> int:
    """Calculate how many symbols a buffer packs into.

    Args:
        byte_length: Buffer length in bytes
        bit_width: Bits per symbol

    Returns:
        ceil(8 * byte_length / bit_width)

    Raises:
        ValueError: If byte_length is negative or bit_width < 1

    Example:
        >>> symbol_count(1, 3)
        3
    """
    if byte_length < 0:
        raise ValueError(f"byte_length must be >= 0, got {byte_length}")
    if bit_width < 1:
        raise ValueError(f"bit_width must be >= 1, got {bit_width}")

    return -(-8 * byte_length // bit_width)


def offsets_for_payload(data_length: int, table: Optional[ReachabilityTable] = None) -> int:
    """Calculate the offset count of a framed transmission.

    Args:
        data_length: Payload length in bytes (before framing)
        table: Reachability table (defaults to the process-wide table)

    Returns:
        Magic symbols plus the symbols of the framed packet

    Raises:
        DegenerateTableError: If the table can't carry a single bit per symbol

    Example:
        >>> offsets_for_payload(4)  # "hi" chat payload
        10
    """
    table = table if table is not None else get_default_table()
    framed_length = HEADER_BYTES + data_length
    return len(MAGIC_SYMBOL_OFFSETS) + symbol_count(framed_length, table.require_bit_width())


def encoded_offsets(message: BaseMessage, table: Optional[ReachabilityTable] = None) -> int:
    """Calculate the offset count of a message.

    Raises:
        PayloadTooLargeError: If the payload overflows a length field
    """
    return offsets_for_payload(len(message.to_payload()), table)
