"""
Solution Module - Search outcomes and the result of a solve.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Tuple

from .graph import RegionGraph
from .move import Move


class SearchOutcome(Enum):
    """
    Outcome of one search node.

    States:
        CANCELLED: Cancellation observed at node entry
        DUPLICATE: State already expanded in this search
        SOLVED: A solving move sequence was found from this node
        EXHAUSTED: No solution within the remaining budget
    """
    CANCELLED = auto()
    DUPLICATE = auto()
    SOLVED = auto()
    EXHAUSTED = auto()


@dataclass(frozen=True)
class NodeResult:
    """
    Tagged result returned by each recursive search call.

    Attributes:
        outcome: What happened at this node
        moves: Moves from this node to a solved state (SOLVED only)
    """
    outcome: SearchOutcome
    moves: Tuple[Move, ...] = ()

    @property
    def solved(self) -> bool:
        return self.outcome is SearchOutcome.SOLVED

    def prepend(self, move: Move) -> 'NodeResult':
        """Return a SOLVED result with move placed before the child's moves."""
        return NodeResult(SearchOutcome.SOLVED, (move,) + self.moves)


CANCELLED = NodeResult(SearchOutcome.CANCELLED)
DUPLICATE = NodeResult(SearchOutcome.DUPLICATE)
EXHAUSTED = NodeResult(SearchOutcome.EXHAUSTED)
SOLVED = NodeResult(SearchOutcome.SOLVED)


@dataclass
class SolutionMetrics:
    """
    Performance metrics for a solve.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        strategy_name: Name of strategy that computed this result
    """
    computation_time_ms: float = 0.0
    strategy_name: str = ""


@dataclass
class SearchResult:
    """
    Result of a solve.

    Attributes:
        nodes_evaluated: Non-duplicate search nodes entered
        duplicate_nodes_culled: Nodes skipped as already visited
        moves: Solving moves in the order applied, or None if not solved
        solved: True if a solution was found within the budget
        cancelled: True if the search stopped on cancellation or timeout
        metrics: Performance statistics
        graph_states: Initial graph followed by the graph after each move
    """
    nodes_evaluated: int = 0
    duplicate_nodes_culled: int = 0
    moves: Optional[List[Move]] = None
    solved: bool = False
    cancelled: bool = False
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)
    graph_states: List[RegionGraph] = field(default_factory=list)

    @property
    def move_count(self) -> int:
        """Number of moves in the solution (0 if not solved)."""
        return len(self.moves) if self.moves else 0

    @property
    def final_graph(self) -> Optional[RegionGraph]:
        """Graph after the last move, or the initial graph."""
        return self.graph_states[-1] if self.graph_states else None

    @property
    def status(self) -> str:
        """Short status label: solved, cancelled or unsolved."""
        if self.solved:
            return "solved"
        if self.cancelled:
            return "cancelled"
        return "unsolved"
