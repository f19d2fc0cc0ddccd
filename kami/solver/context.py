"""
Solution Context Module - Per-solve search state passed to strategies.
"""

import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Optional, Set

from .graph import RegionGraph, Signature


@dataclass
class SolutionContext:
    """
    Search state for one top-level solve.

    A new context is built for every solve call, so the visited set and
    counters are never shared between searches.

    Attributes:
        graph: Initial graph to solve
        max_moves: Move budget
        cancel_flag: Threading event for cooperative cancellation
        timeout_sec: Optional wall-clock limit, checked with the cancel flag
        start_time: When computation started
        progress_callback: Optional callback for progress updates
        visited: Signatures of states already expanded
        nodes_evaluated: Non-duplicate nodes entered
        duplicate_nodes_culled: Nodes skipped as already visited
        cancel_observed: True once a node saw the cancellation
    """
    graph: RegionGraph
    max_moves: int
    cancel_flag: threading.Event = field(default_factory=threading.Event)
    timeout_sec: Optional[float] = None
    start_time: float = field(default_factory=time.time)
    progress_callback: Optional[Callable[[float, str], None]] = None
    visited: Set[Signature] = field(default_factory=set)
    nodes_evaluated: int = 0
    duplicate_nodes_culled: int = 0
    cancel_observed: bool = False

    def is_cancelled(self) -> bool:
        """
        Check if cancellation requested or timeout exceeded.

        Returns:
            True if the search should stop
        """
        if self.cancel_flag.is_set():
            self.cancel_observed = True
            return True
        if self.timeout_sec is not None and time.time() - self.start_time > self.timeout_sec:
            self.cancel_observed = True
            return True
        return False

    def cancel(self) -> None:
        """Request cancellation."""
        self.cancel_flag.set()

    def report_progress(self, percent: float, message: str = "") -> None:
        """
        Report progress to the caller.

        Args:
            percent: Progress from 0.0 to 1.0
            message: Optional status message
        """
        if self.progress_callback:
            self.progress_callback(percent, message)

    def reset_visited(self) -> None:
        """Forget visited states (counters are kept)."""
        self.visited.clear()

    def elapsed_time(self) -> float:
        """Seconds elapsed since computation started."""
        return time.time() - self.start_time
