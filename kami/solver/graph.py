"""
Region Graph Module - Immutable puzzle state and the recolor-and-merge transition.
"""

import hashlib
import logging
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Set, Tuple

from .errors import InvalidMoveError, MalformedGraphError
from .move import Move
from .region import Region

logger = logging.getLogger(__name__)

Signature = Tuple[Tuple[int, int, int, Tuple[int, ...]], ...]


@dataclass(frozen=True)
class RegionGraph:
    """
    Immutable snapshot of the puzzle: regions keyed by ID.

    Regions are stored as a tuple sorted by ID, with a lookup index built
    on construction. Every move produces a new RegionGraph; nothing is
    modified in place.

    Attributes:
        regions: Regions sorted by ID
        palette: Optional hex color codes ("#rrggbb") indexed by color
    """
    regions: Tuple[Region, ...]
    palette: Tuple[str, ...] = ()
    _index: Mapping[int, Region] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        index: Dict[int, Region] = {}
        for region in self.regions:
            if region.id in index:
                raise MalformedGraphError(f"Duplicate region id: {region.id}")
            index[region.id] = region
        object.__setattr__(self, "regions", tuple(sorted(self.regions, key=lambda r: r.id)))
        object.__setattr__(self, "_index", index)

    @classmethod
    def from_regions(cls, regions: Iterable[Region],
                     palette: Iterable[str] = ()) -> 'RegionGraph':
        """
        Create a RegionGraph from regions.

        Args:
            regions: Region objects with unique IDs
            palette: Optional color codes indexed by color

        Returns:
            RegionGraph instance

        Raises:
            MalformedGraphError: If two regions share an ID
        """
        return cls(regions=tuple(regions), palette=tuple(palette))

    @classmethod
    def from_dicts(cls, data: Iterable[Mapping[str, Any]],
                   palette: Iterable[str] = ()) -> 'RegionGraph':
        """
        Create a RegionGraph from the interchange shape.

        Args:
            data: Sequence of {id, color, size, adjacent[, position]} dicts
            palette: Optional color codes indexed by color

        Returns:
            RegionGraph instance

        Raises:
            MalformedGraphError: If a required key is missing or not an int,
                or adjacency or position is not a list
        """
        regions = []
        for item in data:
            if not isinstance(item, dict):
                raise MalformedGraphError(f"Region entry must be an object: {item!r}")
            adjacent = item.get("adjacent", [])
            if not isinstance(adjacent, (list, tuple)):
                raise MalformedGraphError(f"Region adjacency must be a list: {item!r}")
            position = item.get("position")
            if position is not None and (not isinstance(position, (list, tuple))
                                         or len(position) != 2):
                raise MalformedGraphError(f"Region position must be [col, row]: {item!r}")
            try:
                regions.append(Region.create(
                    id=item["id"],
                    color=item["color"],
                    size=item["size"],
                    adjacent=adjacent,
                    position=position,
                ))
            except (KeyError, IndexError, TypeError, ValueError) as e:
                raise MalformedGraphError(f"Invalid region entry {item!r}: {e}") from e
        return cls.from_regions(regions, palette)

    def to_dicts(self) -> List[Dict[str, Any]]:
        """Convert to the interchange shape, ordered by region ID."""
        return [region.to_dict() for region in self.regions]

    def __len__(self) -> int:
        return len(self.regions)

    def __iter__(self) -> Iterator[Region]:
        return iter(self.regions)

    def __contains__(self, region_id: object) -> bool:
        return region_id in self._index

    def __getitem__(self, region_id: int) -> Region:
        return self._index[region_id]

    def get_region(self, region_id: int) -> Optional[Region]:
        """Get region by ID, or None if it does not exist."""
        return self._index.get(region_id)

    @property
    def region_ids(self) -> Tuple[int, ...]:
        """Region IDs in ascending order."""
        return tuple(region.id for region in self.regions)

    @property
    def total_size(self) -> int:
        """Total triangle count across all regions."""
        return sum(region.size for region in self.regions)

    def colors(self) -> Set[int]:
        """Distinct colors currently present."""
        return {region.color for region in self.regions}

    def color_code(self, color: int) -> str:
        """
        Get the hex color code for a color index.

        Falls back to a neutral gray when the palette does not cover it.
        """
        if 0 <= color < len(self.palette):
            return self.palette[color]
        return "#808080"

    def is_solved(self) -> bool:
        """True if every region shares one color."""
        return len(self.colors()) <= 1

    def signature(self) -> Signature:
        """
        Canonical, order-independent encoding of this state.

        Two graphs with equal signatures are the same search state, even
        when reached by different move sequences. Region IDs are part of
        the encoding, so relabeled but isomorphic graphs stay distinct.
        """
        return tuple(region.signature for region in self.regions)

    def digest(self) -> str:
        """SHA-1 hex digest of the signature."""
        return hashlib.sha1(repr(self.signature()).encode("utf-8")).hexdigest()

    def validate(self) -> None:
        """
        Check graph invariants.

        Raises:
            MalformedGraphError: On non-positive size, self adjacency,
                dangling adjacency or asymmetric adjacency
        """
        for region in self.regions:
            if region.size < 1:
                raise MalformedGraphError(
                    f"Region {region.id} has size {region.size}, expected >= 1"
                )
            if region.id in region.adjacent:
                raise MalformedGraphError(f"Region {region.id} is adjacent to itself")
            for other_id in region.adjacent:
                other = self._index.get(other_id)
                if other is None:
                    raise MalformedGraphError(
                        f"Region {region.id} references missing region {other_id}"
                    )
                if region.id not in other.adjacent:
                    raise MalformedGraphError(
                        f"Adjacency {region.id} -> {other_id} is not symmetric"
                    )

    def absorbed_by(self, move: Move) -> List[Region]:
        """
        Neighbors that a move would merge into the recolored region.

        Args:
            move: Move to inspect

        Returns:
            Neighbor regions holding the move's target color, sorted by ID
        """
        region = self._index[move.region_id]
        return [
            self._index[neighbor_id]
            for neighbor_id in sorted(region.adjacent)
            if self._index[neighbor_id].color == move.color
        ]

    def apply_move(self, move: Move) -> 'RegionGraph':
        """
        Recolor a region and merge it with its same-colored neighbors.

        The absorbing region keeps its ID and position, takes the target
        color, gains the absorbed sizes, and inherits their neighbors.
        Absorbed regions are removed, and references to them elsewhere are
        rewritten to the absorbing region.

        Args:
            move: Move to apply

        Returns:
            New RegionGraph; this graph is unchanged

        Raises:
            InvalidMoveError: If the region is unknown or already has the
                target color
        """
        region = self._index.get(move.region_id)
        if region is None:
            raise InvalidMoveError(f"Unknown region id: {move.region_id}")
        if region.color == move.color:
            raise InvalidMoveError(
                f"Region {region.id} already has color {move.color}"
            )

        absorbed = self.absorbed_by(move)
        absorbed_ids = frozenset(r.id for r in absorbed)

        new_adjacent = set(region.adjacent - absorbed_ids)
        for other in absorbed:
            new_adjacent |= other.adjacent
        new_adjacent -= absorbed_ids
        new_adjacent.discard(region.id)

        merged = replace(
            region,
            color=move.color,
            size=region.size + sum(r.size for r in absorbed),
            adjacent=frozenset(new_adjacent),
        )

        new_regions: List[Region] = []
        for other in self.regions:
            if other.id == region.id:
                new_regions.append(merged)
            elif other.id in absorbed_ids:
                continue
            elif other.adjacent & absorbed_ids:
                adjacent = (other.adjacent - absorbed_ids) | {region.id}
                new_regions.append(replace(other, adjacent=frozenset(adjacent)))
            else:
                new_regions.append(other)

        return RegionGraph(regions=tuple(new_regions), palette=self.palette)

    def __hash__(self):
        """Enable using RegionGraph as dict key or in sets."""
        return hash(self.signature())

    def __eq__(self, other):
        """Graphs are equal when their signatures match."""
        if not isinstance(other, RegionGraph):
            return False
        return self.signature() == other.signature()

    def __str__(self) -> str:
        return "\n".join(str(region) for region in self.regions)


def apply_move(graph: RegionGraph, region_id: int, color: int) -> RegionGraph:
    """
    Apply a recolor to a graph.

    Args:
        graph: Current graph
        region_id: Region to recolor
        color: Target color

    Returns:
        New RegionGraph after the merge
    """
    return graph.apply_move(Move(region_id=region_id, color=color))
