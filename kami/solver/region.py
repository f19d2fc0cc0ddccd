"""
Region Module - One maximal same-colored area of the puzzle.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, Optional, Tuple


@dataclass(frozen=True)
class Region:
    """
    Immutable region node of the puzzle graph.

    Attributes:
        id: Region identifier, stable for the absorbing region across merges
        color: Color index
        size: Number of triangles in the region
        adjacent: IDs of neighboring regions
        position: Optional (col, row) of one triangle in the region, used
                  only for rendering
    """
    id: int
    color: int
    size: int
    adjacent: FrozenSet[int] = field(default_factory=frozenset)
    position: Optional[Tuple[int, int]] = None

    @classmethod
    def create(cls, id: int, color: int, size: int,
               adjacent: Iterable[int] = (),
               position: Optional[Tuple[int, int]] = None) -> 'Region':
        """
        Create a Region, converting adjacency to a frozenset.

        Args:
            id: Region ID
            color: Color index
            size: Triangle count
            adjacent: Iterable of neighbor IDs
            position: Optional (col, row) anchor

        Returns:
            Region instance
        """
        if position is not None:
            position = (int(position[0]), int(position[1]))
        return cls(id=int(id), color=int(color), size=int(size),
                   adjacent=frozenset(int(r) for r in adjacent),
                   position=position)

    @property
    def signature(self) -> Tuple[int, int, int, Tuple[int, ...]]:
        """(id, color, size, sorted adjacency) tuple used for state dedup."""
        return (self.id, self.color, self.size, tuple(sorted(self.adjacent)))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the interchange shape."""
        data: Dict[str, Any] = {
            "id": self.id,
            "color": self.color,
            "size": self.size,
            "adjacent": sorted(self.adjacent),
        }
        if self.position is not None:
            data["position"] = list(self.position)
        return data

    def __str__(self) -> str:
        return f"[{self.id}][c{self.color}] -> {sorted(self.adjacent)}"
