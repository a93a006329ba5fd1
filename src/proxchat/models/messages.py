"""Message types produced by this package."""

from __future__ import annotations

from typing import ClassVar

from ..constants import CHAT_VERSION_FLAG, MAX_CHAT_TEXT_BYTES, PacketId
from ..exceptions import PayloadTooLargeError
from .base import BaseMessage


class ChatMessage(BaseMessage):
    """Proximity chat message.

    Payload layout: ``[0x00, text_length, text...]``. The leading byte is a
    reserved version flag; the text is UTF-8 and its encoded length must fit
    in one byte.

    Example:
        >>> ChatMessage(text="hi").to_payload()
        b'\\x00\\x02hi'
    """

    text: str

    prox_id: ClassVar[int] = PacketId.CHAT

    def encoded_text(self) -> bytes:
        return self.text.encode("utf-8")

    def to_payload(self) -> bytes:
        """Serialize as version flag, length byte and UTF-8 text.

        Raises:
            PayloadTooLargeError: If the UTF-8 text exceeds 255 bytes
        """
        raw = self.encoded_text()
        if len(raw) > MAX_CHAT_TEXT_BYTES:
            raise PayloadTooLargeError("Chat message", len(raw), MAX_CHAT_TEXT_BYTES)

        return bytes([CHAT_VERSION_FLAG, len(raw)]) + raw
