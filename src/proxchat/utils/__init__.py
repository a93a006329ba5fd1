"""Utility functions for proxchat.

This module provides size calculation helpers.
"""

from __future__ import annotations

from .sizing import encoded_offsets, offsets_for_payload, symbol_count

__all__ = [
    "encoded_offsets",
    "offsets_for_payload",
    "symbol_count",
]
