"""Reachability table: the alphabet of block offsets.

Every symbol the encoder emits is an index into an ordered table of integer
offsets. An offset belongs to the table when its block center lies within the
interaction radius of all eight corners of the origin block, so it can be
reached from anywhere inside that block.

The table order is part of the wire contract: an observer decodes an offset
back to a symbol by looking up its position in the same table.
"""

from __future__ import annotations

import logging
import threading
from itertools import product
from typing import Iterator, NamedTuple, Optional, Sequence

from ..constants import MAGIC_SYMBOL_OFFSETS
from ..exceptions import DegenerateTableError
from .config import DEFAULT_TABLE_CONFIG, TableConfig

logger = logging.getLogger(__name__)


class Offset(NamedTuple):
    """Integer block offset from the origin block."""

    x: int
    y: int
    z: int

    def center(self) -> tuple[float, float, float]:
        """Return the center point of the offset block."""
        return (self.x + 0.5, self.y + 0.5, self.z + 0.5)


def _distance_squared(a: Sequence[float], b: Sequence[float]) -> float:
    return sum((ai - bi) * (ai - bi) for ai, bi in zip(a, b))


def is_reachable(offset: Offset, config: TableConfig = DEFAULT_TABLE_CONFIG) -> bool:
    """Check whether an offset's center is within reach of every origin corner.

    Args:
        offset: Offset to test
        config: Table constants

    Returns:
        True if no corner is farther than the interaction radius
    """
    center = offset.center()
    limit = config.radius_squared
    # Stops at the first corner out of reach
    return all(_distance_squared(corner, center) <= limit for corner in config.origin_corners)


def generate_offsets(config: TableConfig = DEFAULT_TABLE_CONFIG) -> Iterator[Offset]:
    """Yield reachable offsets in canonical order (x outer, y middle, z inner)."""
    for x, y, z in product(config.axis_offsets, repeat=3):
        offset = Offset(x, y, z)
        if is_reachable(offset, config):
            yield offset


def bit_width_for(size: int) -> int:
    """Return the number of bits every symbol can carry for a table size.

    This is floor(log2(size)), the largest width for which every symbol in
    [0, 2^width) is a valid index. An empty table yields 0.

    Args:
        size: Number of table entries

    Returns:
        Bits per symbol

    Raises:
        ValueError: If size is negative
    """
    if size < 0:
        raise ValueError(f"Table size must be >= 0, got {size}")
    if size == 0:
        return 0
    return size.bit_length() - 1


class ReachabilityTable:
    """Immutable ordered table of reachable offsets.

    This is the handle every encoding operation takes. It carries the
    ordered offsets, the reverse lookup, the symbol bit width and the
    magic symbols that mark the start of a transmission.

    Attributes:
        config: Constants the table was built from
        offsets: Ordered offsets, indexed by symbol
        bit_width: Bits per packed symbol (floor(log2(size)))

    Example:
        >>> table = get_default_table()
        >>> table.size, table.bit_width
        (611, 9)
        >>> table[0]
        Offset(x=0, y=0, z=0)
        >>> table.index_of(Offset(0, 0, 1))
        1
    """

    __slots__ = ("config", "offsets", "bit_width", "_lookup")

    def __init__(self, offsets: Sequence[Offset], config: TableConfig = DEFAULT_TABLE_CONFIG) -> None:
        """Wrap an ordered offset sequence.

        Args:
            offsets: Offsets in canonical order
            config: Constants the offsets were generated from
        """
        ordered = tuple(offsets)
        object.__setattr__(self, "config", config)
        object.__setattr__(self, "offsets", ordered)
        object.__setattr__(self, "bit_width", bit_width_for(len(ordered)))
        object.__setattr__(
            self, "_lookup", {offset: index for index, offset in enumerate(ordered)}
        )

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable, cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable, cannot delete {name!r}")

    @property
    def size(self) -> int:
        """Number of offsets in the table."""
        return len(self.offsets)

    @property
    def max_symbol(self) -> int:
        """Largest symbol the bit packer can produce."""
        return (1 << self.bit_width) - 1

    @property
    def magic_symbols(self) -> tuple[int, int]:
        """Sync symbols prepended to every transmission (size-1, size-19).

        Raises:
            DegenerateTableError: If the table holds 19 offsets or fewer
        """
        first, second = MAGIC_SYMBOL_OFFSETS
        if self.size <= second:
            raise DegenerateTableError(
                f"Table of {self.size} offsets is too small for magic symbols "
                f"(need more than {second})"
            )
        return (self.size - first, self.size - second)

    @property
    def lookup(self) -> dict[Offset, int]:
        """Copy of the offset to index mapping."""
        return dict(self._lookup)

    def index_of(self, offset: Sequence[int]) -> int:
        """Return the symbol an offset stands for.

        Raises:
            KeyError: If the offset is not in the table
        """
        return self._lookup[Offset(*offset)]

    def require_bit_width(self) -> int:
        """Return the bit width, failing fast on a degenerate table.

        Raises:
            DegenerateTableError: If the table cannot carry a single bit
        """
        if self.bit_width < 1:
            raise DegenerateTableError(
                f"Table of {self.size} offsets carries no bits per symbol"
            )
        return self.bit_width

    def __len__(self) -> int:
        return len(self.offsets)

    def __getitem__(self, index: int) -> Offset:
        return self.offsets[index]

    def __iter__(self) -> Iterator[Offset]:
        return iter(self.offsets)

    def __contains__(self, offset: object) -> bool:
        return offset in self._lookup

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReachabilityTable):
            return NotImplemented
        return self.offsets == other.offsets

    def __hash__(self) -> int:
        return hash(self.offsets)

    def __repr__(self) -> str:
        return f"ReachabilityTable(size={self.size}, bit_width={self.bit_width})"


def build_reachability_table(config: TableConfig = DEFAULT_TABLE_CONFIG) -> ReachabilityTable:
    """Build a reachability table from fixed constants.

    This is a pure, deterministic function: equal configs always produce
    equal tables in the same order.

    Args:
        config: Table constants (defaults to the standard 6-block reach)

    Returns:
        New ReachabilityTable
    """
    table = ReachabilityTable(list(generate_offsets(config)), config)
    logger.debug(
        "Built reachability table: size=%d bit_width=%d radius=%s",
        table.size,
        table.bit_width,
        config.interaction_radius,
    )
    return table


_default_table: Optional[ReachabilityTable] = None
_default_table_lock = threading.Lock()


def get_default_table() -> ReachabilityTable:
    """Return the process-wide table, building it on first access.

    The table is built exactly once and never mutated, so callers may share
    it freely across threads.
    """
    global _default_table
    if _default_table is None:
        with _default_table_lock:
            if _default_table is None:
                _default_table = build_reachability_table(DEFAULT_TABLE_CONFIG)
                logger.debug("Initialized default reachability table")
    return _default_table


def storable_bit_count() -> int:
    """Bits per symbol of the default table."""
    return get_default_table().bit_width


def max_prox_data_unit() -> int:
    """Size of the default table (one past the largest valid symbol)."""
    return get_default_table().size


def packet_magic() -> tuple[int, int]:
    """Magic symbols of the default table."""
    return get_default_table().magic_symbols
