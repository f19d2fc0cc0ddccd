"""
Solver Package - Region-merge search for the Kami 2 coloring puzzle.

Recoloring a region merges it with its same-colored neighbors; the puzzle
is solved when every region shares one color. This package holds the
immutable graph model, the merge transition, the move generator and
heuristic, and pluggable search strategies.

Public API:
    - Region: Immutable region node
    - RegionGraph: Immutable puzzle state with apply_move()
    - Move: (region_id, color) recolor
    - SearchResult: Result of a solve
    - SolutionContext: Per-solve search state
    - SolverStrategy: Abstract base for strategies
    - enumerate_moves(), evaluate(), rank_moves(): Move generation and scoring
    - solve(), start_solve(), solve_with_timeout(): Entry points
    - create_strategy(): Factory function

Usage:
    from kami.solver import RegionGraph, solve

    graph = RegionGraph.from_dicts(regions)
    result = solve(graph, max_moves=4)

    if result.solved:
        for move in result.moves:
            print(f"Recolor region {move.region_id} to {move.color}")
"""

# Core data structures
from .errors import KamiError, InvalidMoveError, MalformedGraphError
from .region import Region
from .graph import RegionGraph, apply_move
from .move import Move
from .solution import SearchOutcome, NodeResult, SearchResult, SolutionMetrics
from .context import SolutionContext
from .heuristic import HeuristicWeights, DEFAULT_WEIGHTS, evaluate, rank_moves, is_feasible

# Strategy framework
from .base import SolverStrategy, enumerate_moves
from .factory import (
    create_strategy,
    get_strategy_names,
    get_default_strategy_name,
    register_strategy,
)

# Import strategies to register them
from . import strategies

from .runner import SolveWorker, solve, start_solve, solve_with_timeout

__all__ = [
    # Errors
    "KamiError",
    "InvalidMoveError",
    "MalformedGraphError",
    # Data structures
    "Region",
    "RegionGraph",
    "apply_move",
    "Move",
    "SearchOutcome",
    "NodeResult",
    "SearchResult",
    "SolutionMetrics",
    "SolutionContext",
    # Move generation and scoring
    "HeuristicWeights",
    "DEFAULT_WEIGHTS",
    "enumerate_moves",
    "evaluate",
    "rank_moves",
    "is_feasible",
    # Strategy framework
    "SolverStrategy",
    "create_strategy",
    "get_strategy_names",
    "get_default_strategy_name",
    "register_strategy",
    # Entry points
    "SolveWorker",
    "solve",
    "start_solve",
    "solve_with_timeout",
]
