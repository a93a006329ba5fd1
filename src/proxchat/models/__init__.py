"""Pydantic message modeling for proxchat.

This module provides the BaseMessage class and the message types the
encoder knows how to produce.
"""

from __future__ import annotations

from .base import BaseMessage
from .messages import ChatMessage

__all__ = [
    "BaseMessage",
    "ChatMessage",
]
