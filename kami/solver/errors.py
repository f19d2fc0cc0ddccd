"""
Errors Module - Contract violations raised by the solver.

Expected search outcomes (solved, not solved, cancelled) are reported through
SearchResult and never raised.
"""


class KamiError(Exception):
    """Base class for solver errors."""


class InvalidMoveError(KamiError, ValueError):
    """Move recolors a region to its own color, or names an unknown region."""


class MalformedGraphError(KamiError, ValueError):
    """Region graph breaks an adjacency, size or id invariant."""
