"""
Iterative Deepening Strategy - Depth-first search with a growing budget.

Runs the depth-first node search with budgets from the fewest moves that
could possibly unify the colors up to max_moves, returning the first
solution found. Solutions tend to be shorter than a single deep pass, at
the cost of re-exploring shallow states.
"""

import logging
import time

from ..context import SolutionContext
from ..solution import SearchOutcome, SearchResult
from ..factory import register_strategy
from .depth_first import DepthFirstStrategy

logger = logging.getLogger(__name__)


@register_strategy
class DeepeningStrategy(DepthFirstStrategy):
    """
    Iterative deepening over the depth-first node search.

    The visited set is cleared between passes, since a state expanded with
    a smaller budget must be explored again with a larger one. Node and
    duplicate counters accumulate across passes.
    """
    name = "deepening"
    description = "Iterative deepening - Shortest budget first, slower"

    def solve(self, context: SolutionContext) -> SearchResult:
        """
        Search for a solution, raising the budget one move at a time.

        Args:
            context: Solution context with graph, budget and cancellation

        Returns:
            SearchResult with moves and counters
        """
        start_time = time.perf_counter()
        context.graph.validate()

        first_budget = min(context.max_moves, max(0, len(context.graph.colors()) - 1))
        moves = None

        for budget in range(first_budget, context.max_moves + 1):
            context.reset_visited()
            result = self._search_root(context, budget)
            logger.debug(
                f"[Deepening] Budget {budget}: {result.outcome.name}, "
                f"{context.nodes_evaluated} nodes so far"
            )
            if result.solved:
                moves = list(result.moves)
                break
            if result.outcome is SearchOutcome.CANCELLED:
                break

        logger.info(
            f"[Deepening] {'Solved' if moves is not None else 'Not solved'} "
            f"(budget {context.max_moves}), {context.nodes_evaluated} nodes, "
            f"{context.duplicate_nodes_culled} duplicates culled"
        )

        return self._build_result(context, moves, start_time)
