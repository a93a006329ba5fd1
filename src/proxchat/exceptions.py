"""Exception hierarchy for proxchat.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from ProxChatError for easy catching of any proxchat-specific error.
"""

from __future__ import annotations


class ProxChatError(Exception):
    """Base exception for all proxchat errors."""

    pass


class EncodeError(ProxChatError):
    """Raised when a payload cannot be turned into an offset sequence.

    Examples:
        - Message text does not fit the one-byte length field
        - Framed packet does not fit the 24-bit length field
    """

    pass


class PayloadTooLargeError(EncodeError):
    """Raised when a payload exceeds the range of its length field.

    Attributes:
        length: Offending length in bytes
        limit: Largest length the field can hold
    """

    def __init__(self, what: str, length: int, limit: int) -> None:
        self.length = length
        self.limit = limit
        super().__init__(f"{what} payload too large: {length} bytes (max: {limit})")


class FramingError(ProxChatError):
    """Raised when a framed packet cannot be parsed.

    Examples:
        - Buffer shorter than the 5-byte header
        - Length field inconsistent with the buffer
    """

    pass


class TableError(ProxChatError):
    """Raised when a reachability table cannot serve a request."""

    pass


class DegenerateTableError(TableError):
    """Raised when a table is too small to carry data.

    Examples:
        - Table holds fewer than 2 offsets, so the symbol bit width is 0
        - Table holds 19 offsets or fewer, so the magic symbols don't exist
    """

    pass


class SymbolRangeError(ProxChatError, IndexError):
    """Raised when a symbol does not index a table entry.

    This is a contract violation between the packer and the mapper, never
    a recoverable condition.
    """

    pass
