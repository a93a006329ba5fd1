"""Configuration for reachability table generation.

This module provides the constants that fully determine the reachability
table: the interaction radius and the candidate offsets tried on each axis.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import product

DEFAULT_AXIS_OFFSETS: tuple[int, ...] = (0, 1, -1, 2, -2, 3, -3, 4, -4, 5, -5, 6, -6)


@dataclass(frozen=True)
class TableConfig:
    """Constants for building a reachability table.

    The defaults describe a player that can interact with blocks up to 6
    blocks away, standing anywhere inside the origin block.

    Attributes:
        interaction_radius: Maximum distance from every origin corner to a
            block center (default 6.0, compared squared).
        axis_offsets: Candidate values tried on each axis. Their order is the
            canonical iteration order (x outer, y middle, z inner) and so
            fixes the table's index order.
        origin_corners: The 8 corners of the origin unit cube, derived.

    Examples:
        ```python
        from proxchat.geometry import TableConfig, build_reachability_table

        # Shorter reach, smaller table
        table = build_reachability_table(TableConfig(interaction_radius=4.5))
        ```
    """

    interaction_radius: float = 6.0
    axis_offsets: tuple[int, ...] = DEFAULT_AXIS_OFFSETS
    origin_corners: tuple[tuple[float, float, float], ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.interaction_radius <= 0:
            raise ValueError(f"interaction_radius must be > 0, got {self.interaction_radius}")

        if not self.axis_offsets:
            raise ValueError("axis_offsets must not be empty")

        if len(set(self.axis_offsets)) != len(self.axis_offsets):
            raise ValueError(f"axis_offsets must be unique, got {self.axis_offsets}")

        corners = tuple(
            (float(x), float(y), float(z)) for x, y, z in product((0, 1), repeat=3)
        )
        object.__setattr__(self, "axis_offsets", tuple(int(v) for v in self.axis_offsets))
        object.__setattr__(self, "origin_corners", corners)

    @property
    def radius_squared(self) -> float:
        """Squared interaction radius used for distance checks."""
        return self.interaction_radius * self.interaction_radius


DEFAULT_TABLE_CONFIG = TableConfig()
