"""
Strategy Registry - Maps strategy names from settings and the CLI to classes.

Strategies register themselves when kami.solver.strategies is imported.
The default name comes from the "strategy_name" setting.
"""

from typing import Dict, List, Optional, Type

from ..settings import DEFAULT_SETTINGS
from .base import SolverStrategy
from .heuristic import HeuristicWeights

_STRATEGIES: Dict[str, Type[SolverStrategy]] = {}


def register_strategy(cls: Type[SolverStrategy]) -> Type[SolverStrategy]:
    """Class decorator adding a strategy under its name."""
    _STRATEGIES[cls.name] = cls
    return cls


def get_default_strategy_name() -> str:
    """Name used when no strategy is given."""
    return DEFAULT_SETTINGS["strategy_name"]


def get_strategy_names() -> List[str]:
    """Registered names, for CLI choices."""
    return list(_STRATEGIES)


def create_strategy(name: Optional[str] = None,
                    weights: Optional[HeuristicWeights] = None) -> SolverStrategy:
    """
    Build a strategy configured with heuristic weights.

    Args:
        name: Registered strategy name (default from settings)
        weights: Move ordering weights (defaults if None)

    Returns:
        Strategy instance holding only configuration

    Raises:
        ValueError: If the name is not registered
    """
    name = name or get_default_strategy_name()
    try:
        cls = _STRATEGIES[name]
    except KeyError:
        raise ValueError(
            f"Unknown strategy: {name}. Available: {', '.join(_STRATEGIES)}"
        ) from None
    return cls(weights=weights)
