"""
Depth-First Strategy - Bounded, best-first ordered depth-first search.

Explores candidate moves in descending heuristic score, one branch at a
time, and returns the first solution found. This is not an exhaustive
search for the shortest solution: a state already expanded is treated as
a dead end on every later visit, even if it is reached with more budget.
"""

import logging
import time
from typing import Optional

from ..base import SolverStrategy
from ..context import SolutionContext
from ..graph import RegionGraph
from ..solution import CANCELLED, DUPLICATE, EXHAUSTED, SOLVED, NodeResult, SearchOutcome, SearchResult
from ..factory import register_strategy

logger = logging.getLogger(__name__)


@register_strategy
class DepthFirstStrategy(SolverStrategy):
    """
    Bounded depth-first search with heuristic move ordering.

    Algorithm, per node:
        1. Stop if cancellation was requested
        2. Stop if the state was already expanded (duplicate)
        3. Return success if every region shares one color
        4. Stop if the move budget is spent
        5. Mark visited, rank candidate moves, and recurse into each in
           order, returning the first child that solves
    """
    name = "dfs"
    description = "Depth-first search - First solution along best-first ordering"

    def solve(self, context: SolutionContext) -> SearchResult:
        """
        Search for a solution within context.max_moves.

        Args:
            context: Solution context with graph, budget and cancellation

        Returns:
            SearchResult with moves and counters

        Raises:
            MalformedGraphError: If the input graph breaks an invariant
        """
        start_time = time.perf_counter()
        context.graph.validate()

        result = self._search_root(context, context.max_moves)
        moves = list(result.moves) if result.solved else None

        logger.info(
            f"[DFS] {'Solved' if result.solved else 'Not solved'} in "
            f"{len(moves) if moves else 0} moves (budget {context.max_moves}), "
            f"{context.nodes_evaluated} nodes, "
            f"{context.duplicate_nodes_culled} duplicates culled"
        )

        return self._build_result(context, moves, start_time)

    def _search_root(self, context: SolutionContext, max_moves: int) -> NodeResult:
        """
        Run the node search from context.graph with progress reporting.

        Mirrors _search for the root node, reporting progress after each
        top-level candidate.
        """
        graph = context.graph

        early = self._enter_node(context, graph, max_moves)
        if early is not None:
            return early

        candidates = self.candidate_moves(graph, max_moves)
        logger.debug(
            f"[DFS] Root: {len(graph)} regions, {len(graph.colors())} colors, "
            f"{len(candidates)} candidate moves"
        )

        for i, (move, score) in enumerate(candidates):
            logger.debug(f"[DFS] Trying {move} (score {score})")
            child = self._search(context, graph.apply_move(move), max_moves - 1)
            context.report_progress(
                (i + 1) / len(candidates),
                f"{i + 1}/{len(candidates)} first moves, {context.nodes_evaluated} nodes"
            )
            if child.solved:
                return child.prepend(move)
            if child.outcome is SearchOutcome.CANCELLED:
                return CANCELLED

        return EXHAUSTED

    def _search(self, context: SolutionContext, graph: RegionGraph,
                moves_remaining: int) -> NodeResult:
        """
        Recursive node search.

        Args:
            context: Shared search context for this solve
            graph: Graph at this node
            moves_remaining: Budget left at this node

        Returns:
            NodeResult; SOLVED carries the moves from this node onward
        """
        early = self._enter_node(context, graph, moves_remaining)
        if early is not None:
            return early

        for move, _ in self.candidate_moves(graph, moves_remaining):
            child = self._search(context, graph.apply_move(move), moves_remaining - 1)
            if child.solved:
                return child.prepend(move)
            if child.outcome is SearchOutcome.CANCELLED:
                return CANCELLED

        return EXHAUSTED

    def _enter_node(self, context: SolutionContext, graph: RegionGraph,
                    moves_remaining: int) -> Optional[NodeResult]:
        """
        Apply the terminal checks for a node.

        Returns:
            A terminal NodeResult, or None if the node should be expanded
            (in which case it has been marked visited)
        """
        if self._check_cancelled(context):
            return CANCELLED

        signature = graph.signature()
        if signature in context.visited:
            context.duplicate_nodes_culled += 1
            return DUPLICATE

        context.nodes_evaluated += 1

        if graph.is_solved():
            return SOLVED

        if moves_remaining <= 0:
            return EXHAUSTED

        context.visited.add(signature)
        return None
