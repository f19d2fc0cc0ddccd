"""
Base Strategy Module - Abstract base class for solving strategies and the
move generator they share.
"""

import time
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple

from .context import SolutionContext
from .graph import RegionGraph
from .heuristic import DEFAULT_WEIGHTS, HeuristicWeights, rank_moves
from .move import Move
from .solution import SearchResult, SolutionMetrics


def enumerate_moves(graph: RegionGraph) -> List[Move]:
    """
    Find every move that merges at least one neighbor.

    A region may be recolored to any color held by one of its neighbors,
    other than its own. Recoloring to a color no neighbor holds merges
    nothing and is never generated.

    Args:
        graph: Current graph

    Returns:
        Moves sorted by (region_id, color)
    """
    moves = []
    for region in graph:
        neighbor_colors = {graph[neighbor_id].color for neighbor_id in region.adjacent}
        neighbor_colors.discard(region.color)
        for color in sorted(neighbor_colors):
            moves.append(Move(region_id=region.id, color=color))
    return moves


class SolverStrategy(ABC):
    """
    Abstract base class for all solving strategies.

    Subclasses must implement the solve() method and define
    name and description class attributes. Strategy instances hold only
    configuration; all search state lives in the SolutionContext.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description
    """
    name: str = "base"
    description: str = "Base strategy"

    def __init__(self, weights: Optional[HeuristicWeights] = None):
        """
        Initialize strategy.

        Args:
            weights: Heuristic weights for move ordering (defaults if None)
        """
        self.weights = weights or DEFAULT_WEIGHTS

    @abstractmethod
    def solve(self, context: SolutionContext) -> SearchResult:
        """
        Search for a move sequence that solves context.graph.

        Must check context.is_cancelled() at each node and stop when True.

        Args:
            context: Solution context with graph, budget and cancellation

        Returns:
            SearchResult with moves and counters
        """
        pass

    def find_all_valid_moves(self, graph: RegionGraph) -> List[Move]:
        """Find all moves that merge at least one region."""
        return enumerate_moves(graph)

    def candidate_moves(self, graph: RegionGraph, moves_remaining: int) -> List[Tuple[Move, int]]:
        """
        Generate, score and order the moves worth exploring.

        Args:
            graph: Current graph
            moves_remaining: Budget left at this node

        Returns:
            (move, score) tuples with score > 0, best first
        """
        moves = self.find_all_valid_moves(graph)
        return rank_moves(graph, moves, moves_remaining, self.weights)

    def _check_cancelled(self, context: SolutionContext) -> bool:
        """
        Convenience method to check cancellation.

        Args:
            context: Solution context

        Returns:
            True if strategy should stop
        """
        return context.is_cancelled()

    def _build_result(
        self,
        context: SolutionContext,
        moves: Optional[Sequence[Move]],
        start_time: float
    ) -> SearchResult:
        """Build SearchResult from the context counters and found moves."""
        elapsed_ms = (time.perf_counter() - start_time) * 1000

        graph_states = [context.graph]
        if moves is not None:
            for move in moves:
                graph_states.append(graph_states[-1].apply_move(move))

        return SearchResult(
            nodes_evaluated=context.nodes_evaluated,
            duplicate_nodes_culled=context.duplicate_nodes_culled,
            moves=list(moves) if moves is not None else None,
            solved=moves is not None,
            cancelled=moves is None and context.cancel_observed,
            graph_states=graph_states,
            metrics=SolutionMetrics(
                computation_time_ms=elapsed_ms,
                strategy_name=self.name
            )
        )
