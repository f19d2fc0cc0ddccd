"""
Heuristic Module - Scores candidate moves for best-first ordering.

A score of 0 or less means the move is pruned. Scores favor absorbing more
regions first, then absorbing more triangles.
"""

from dataclasses import dataclass
from typing import Any, List, Mapping, Sequence, Tuple

from .graph import RegionGraph
from .move import Move


@dataclass(frozen=True)
class HeuristicWeights:
    """
    Tunable weights for move scoring.

    Attributes:
        regions_absorbed: Weight per neighbor region absorbed
        size_absorbed: Weight per triangle absorbed
    """
    regions_absorbed: int = 1000
    size_absorbed: int = 1

    def __post_init__(self):
        if self.regions_absorbed <= self.size_absorbed:
            raise ValueError(
                f"regions_absorbed ({self.regions_absorbed}) must exceed "
                f"size_absorbed ({self.size_absorbed})"
            )

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> 'HeuristicWeights':
        """
        Build weights from a settings dictionary.

        Args:
            settings: Settings with optional weight_regions_absorbed and
                      weight_size_absorbed keys

        Returns:
            HeuristicWeights instance
        """
        return cls(
            regions_absorbed=int(settings.get("weight_regions_absorbed", cls.regions_absorbed)),
            size_absorbed=int(settings.get("weight_size_absorbed", cls.size_absorbed)),
        )


DEFAULT_WEIGHTS = HeuristicWeights()


def is_feasible(graph: RegionGraph, moves_remaining: int) -> bool:
    """
    Check whether the remaining budget could still unify the graph.

    Each move removes at most one color, so k colors need at least k - 1 moves.
    """
    return len(graph.colors()) <= moves_remaining + 1


def evaluate(graph: RegionGraph, move: Move, moves_remaining: int,
             weights: HeuristicWeights = DEFAULT_WEIGHTS) -> int:
    """
    Score a candidate move.

    Args:
        graph: Graph the move applies to
        move: Candidate move
        moves_remaining: Moves left in the budget, including this one
        weights: Scoring weights

    Returns:
        Score; 0 or less means prune
    """
    if not is_feasible(graph, moves_remaining):
        return 0

    absorbed = graph.absorbed_by(move)
    return (weights.regions_absorbed * len(absorbed)
            + weights.size_absorbed * sum(r.size for r in absorbed))


def rank_moves(graph: RegionGraph, moves: Sequence[Move], moves_remaining: int,
               weights: HeuristicWeights = DEFAULT_WEIGHTS) -> List[Tuple[Move, int]]:
    """
    Score moves, drop pruned ones, and order by descending score.

    Ties keep their input order.

    Returns:
        List of (move, score) tuples
    """
    if not is_feasible(graph, moves_remaining):
        return []

    scored = [(move, evaluate(graph, move, moves_remaining, weights)) for move in moves]
    scored = [(move, score) for move, score in scored if score > 0]
    scored.sort(key=lambda x: x[1], reverse=True)
    return scored
