"""Reachability geometry for proxchat.

This module builds the ordered table of block offsets that serves as the
symbol alphabet, and caches the process-wide default table.
"""

from __future__ import annotations

from .config import DEFAULT_AXIS_OFFSETS, DEFAULT_TABLE_CONFIG, TableConfig
from .table import (
    Offset,
    ReachabilityTable,
    bit_width_for,
    build_reachability_table,
    generate_offsets,
    get_default_table,
    is_reachable,
    max_prox_data_unit,
    packet_magic,
    storable_bit_count,
)

__all__ = [
    "DEFAULT_AXIS_OFFSETS",
    "DEFAULT_TABLE_CONFIG",
    "TableConfig",
    "Offset",
    "ReachabilityTable",
    "bit_width_for",
    "build_reachability_table",
    "generate_offsets",
    "get_default_table",
    "is_reachable",
    "max_prox_data_unit",
    "packet_magic",
    "storable_bit_count",
]
