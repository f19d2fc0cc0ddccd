"""
Move Module - A single recolor of one region.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, order=True)
class Move:
    """
    Recolor a region to a new color.

    Ordering follows (region_id, color), which is the generator's
    deterministic output order.

    Attributes:
        region_id: ID of the region being recolored
        color: Target color index
    """
    region_id: int
    color: int

    @classmethod
    def from_tuple(cls, pair: Tuple[int, int]) -> 'Move':
        """Create a Move from a (region_id, color) pair."""
        region_id, color = pair
        return cls(region_id=int(region_id), color=int(color))

    def as_tuple(self) -> Tuple[int, int]:
        """Get the move as a (region_id, color) pair."""
        return (self.region_id, self.color)

    def __str__(self) -> str:
        return f"region {self.region_id} -> color {self.color}"
