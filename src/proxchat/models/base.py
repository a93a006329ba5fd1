"""Base message class and proxchat-specific Pydantic configuration.

This module provides the BaseMessage class that every encodable payload
inherits from.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict


class BaseMessage(BaseModel):
    """Base class for all proxchat messages.

    Subclasses declare their packet type with the ``prox_id`` class variable
    and serialize their fields in ``to_payload()``. The encoder frames that
    payload with ``prox_id`` and turns it into offsets.

    Example:
        >>> from typing import ClassVar
        >>> class Wave(BaseMessage):
        ...     emote: str
        ...     prox_id: ClassVar[int] = 3
        ...
        ...     def to_payload(self) -> bytes:
        ...         return self.emote.encode("utf-8")

    Attributes:
        prox_id: Packet type ID written to the 2-byte id field
    """

    model_config = ConfigDict(
        strict=False,
        validate_assignment=True,
        extra="forbid",
    )

    prox_id: ClassVar[int]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Check that concrete subclasses carry a valid prox_id."""
        super().__init_subclass__(**kwargs)

        msg_id = getattr(cls, "prox_id", None)
        if msg_id is not None and not 0 <= int(msg_id) <= 0xFFFF:
            raise ValueError(f"{cls.__name__}.prox_id must be 0-65535, got {msg_id}")

    def to_payload(self) -> bytes:
        """Serialize the message body (without framing).

        Raises:
            NotImplementedError: On the base class
        """
        raise NotImplementedError(f"{type(self).__name__} does not define to_payload()")
