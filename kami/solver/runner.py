"""
Runner Module - Synchronous and background entry points for solving.

Every call builds its own SolutionContext, so concurrent or repeated solves
never share a visited set or counters.
"""

import logging
import threading
from typing import Callable, Optional

from .context import SolutionContext
from .factory import create_strategy
from .graph import RegionGraph
from .heuristic import HeuristicWeights
from .solution import SearchResult

logger = logging.getLogger(__name__)


def _build_context(
    graph: RegionGraph,
    max_moves: int,
    cancel_flag: Optional[threading.Event],
    timeout_sec: Optional[float],
    progress_callback: Optional[Callable[[float, str], None]]
) -> SolutionContext:
    context = SolutionContext(
        graph=graph,
        max_moves=max_moves,
        timeout_sec=timeout_sec,
        progress_callback=progress_callback,
    )
    if cancel_flag is not None:
        context.cancel_flag = cancel_flag
    return context


def solve(
    graph: RegionGraph,
    max_moves: int,
    strategy_name: Optional[str] = None,
    weights: Optional[HeuristicWeights] = None,
    cancel_flag: Optional[threading.Event] = None,
    timeout_sec: Optional[float] = None,
    progress_callback: Optional[Callable[[float, str], None]] = None
) -> SearchResult:
    """
    Solve a puzzle on the calling thread.

    Args:
        graph: Initial region graph
        max_moves: Move budget
        strategy_name: Registered strategy name (default "dfs")
        weights: Heuristic weights (defaults if None)
        cancel_flag: Optional event that cancels the search when set
        timeout_sec: Optional wall-clock limit checked at each node
        progress_callback: Optional callback(percent, message)

    Returns:
        SearchResult; not being solved or being cancelled is not an error

    Raises:
        MalformedGraphError: If the graph breaks an invariant
        ValueError: If the strategy name is unknown
    """
    strategy = create_strategy(strategy_name, weights=weights)
    context = _build_context(graph, max_moves, cancel_flag, timeout_sec, progress_callback)
    return strategy.solve(context)


class SolveWorker(threading.Thread):
    """
    Background thread running one solve.

    The result is available only after the thread finishes. Cancellation
    is cooperative: request_stop() sets the event and the search stops at
    its next node.

    Example:
        worker = start_solve(graph, max_moves=5)
        if not worker.wait(10.0):
            worker.request_stop()
            worker.wait()
        result = worker.result
    """

    def __init__(
        self,
        graph: RegionGraph,
        max_moves: int,
        strategy_name: Optional[str] = None,
        weights: Optional[HeuristicWeights] = None,
        timeout_sec: Optional[float] = None,
        progress_callback: Optional[Callable[[float, str], None]] = None
    ):
        """
        Initialize the worker.

        Args:
            graph: Initial region graph
            max_moves: Move budget
            strategy_name: Registered strategy name (default "dfs")
            weights: Heuristic weights (defaults if None)
            timeout_sec: Optional wall-clock limit checked at each node
            progress_callback: Optional callback(percent, message)

        Raises:
            ValueError: If the strategy name is unknown
        """
        super().__init__(name="kami-solve", daemon=True)
        self.cancel_flag = threading.Event()
        self._strategy = create_strategy(strategy_name, weights=weights)
        self._solve_context = _build_context(graph, max_moves, self.cancel_flag, timeout_sec, progress_callback)
        self._result: Optional[SearchResult] = None
        self._error: Optional[BaseException] = None

    def run(self):
        """Run the search. Called when the thread starts."""
        logger.debug(f"Solve worker started ({self._strategy.name}, budget {self._solve_context.max_moves})")
        try:
            self._result = self._strategy.solve(self._solve_context)
        except Exception as e:
            logger.exception("Error in solve worker")
            self._error = e
        logger.debug("Solve worker finished")

    def request_stop(self) -> None:
        """Request cancellation. The search stops at its next node."""
        logger.info("Stop requested")
        self.cancel_flag.set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """
        Block until the search finishes or the timeout expires.

        Returns:
            True if the search has finished
        """
        self.join(timeout)
        return not self.is_alive()

    def is_running(self) -> bool:
        """True while the search thread is alive."""
        return self.is_alive()

    @property
    def done(self) -> bool:
        """True once the search thread has finished."""
        return self.ident is not None and not self.is_alive()

    @property
    def result(self) -> Optional[SearchResult]:
        """
        Final result, or None while the search is still running.

        Raises:
            Exception: Whatever the search raised in the worker thread
        """
        if not self.done:
            return None
        if self._error is not None:
            raise self._error
        return self._result


def start_solve(
    graph: RegionGraph,
    max_moves: int,
    strategy_name: Optional[str] = None,
    weights: Optional[HeuristicWeights] = None,
    timeout_sec: Optional[float] = None,
    progress_callback: Optional[Callable[[float, str], None]] = None
) -> SolveWorker:
    """
    Start a solve on a background thread.

    Returns:
        The started SolveWorker, which is the handle, live result and
        cancel controller for this search
    """
    worker = SolveWorker(graph, max_moves, strategy_name, weights, timeout_sec, progress_callback)
    worker.start()
    return worker


def solve_with_timeout(
    graph: RegionGraph,
    max_moves: int,
    timeout_sec: float,
    strategy_name: Optional[str] = None,
    weights: Optional[HeuristicWeights] = None
) -> SearchResult:
    """
    Solve in the background, cancelling after timeout_sec.

    Args:
        graph: Initial region graph
        max_moves: Move budget
        timeout_sec: Seconds to wait before requesting cancellation
        strategy_name: Registered strategy name (default "dfs")
        weights: Heuristic weights (defaults if None)

    Returns:
        SearchResult; cancelled is True if the timeout interrupted the search
    """
    worker = start_solve(graph, max_moves, strategy_name, weights)
    if not worker.wait(timeout_sec):
        logger.warning(f"Solve did not finish within {timeout_sec}s, cancelling")
        worker.request_stop()
        worker.wait()
    return worker.result
