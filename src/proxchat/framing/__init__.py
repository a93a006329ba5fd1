"""Packet framing utilities for proxchat.

This module provides the length and id prefix wrapped around every payload.
"""

from __future__ import annotations

from .basic import frame_packet, unframe_packet

__all__ = [
    "frame_packet",
    "unframe_packet",
]
