"""
Kami Solver - Search for move sequences that unify a Kami 2 puzzle.
"""

__version__ = "0.1.0"
