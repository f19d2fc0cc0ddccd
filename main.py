"""
Kami Solver - Entry Point

Loads a region graph from JSON, searches for a solving move sequence in a
background worker, and cancels the search when the timeout expires.

Example:
    python main.py puzzles/1743.json
    python main.py puzzles/1743.json --max-moves 4 --timeout 30
    python main.py puzzles/1743.json --dot graph.dot --render graph.png
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import List, Optional

from kami.settings import load_settings, SETTINGS_FILE
from kami.puzzle_io import load_puzzle
from kami.export import write_dot, render_graph_image
from kami.solver import (
    HeuristicWeights,
    SearchResult,
    get_strategy_names,
    solve_with_timeout,
)

logger = logging.getLogger(__name__)

EXIT_SOLVED = 0
EXIT_UNSOLVED = 1
EXIT_CANCELLED = 2
EXIT_ERROR = 3


def configure_logging(debug: bool = False) -> None:
    """Configure logging - output to both console and file."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.StreamHandler(),  # Console output
            logging.FileHandler("solver.log", mode='w', encoding='utf-8')  # File output
        ]
    )


def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Kami Solver - Find a move sequence that unifies a Kami 2 puzzle"
    )
    parser.add_argument(
        "puzzle",
        help="Puzzle JSON file (list of regions, or {colors, regions})"
    )
    parser.add_argument(
        "--max-moves", "-m",
        type=int,
        default=None,
        help="Move budget (default from settings)"
    )
    parser.add_argument(
        "--timeout", "-t",
        type=float,
        default=None,
        help="Seconds before the search is cancelled (default from settings)"
    )
    parser.add_argument(
        "--strategy", "-s",
        choices=get_strategy_names(),
        default=None,
        help="Search strategy (default from settings)"
    )
    parser.add_argument(
        "--config", "-c",
        default=str(SETTINGS_FILE),
        help=f"Settings file (default: {SETTINGS_FILE})"
    )
    parser.add_argument(
        "--dot",
        default=None,
        help="Write the final graph as a DOT file"
    )
    parser.add_argument(
        "--render",
        default=None,
        help="Save a PNG debug image of the final graph"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )
    return parser.parse_args(argv)


def print_result(result: SearchResult) -> None:
    """Print the outcome and moves of a solve."""
    print(f"Result: {result.status}")
    print(f"  Nodes evaluated: {result.nodes_evaluated}")
    print(f"  Duplicates culled: {result.duplicate_nodes_culled}")
    print(f"  Time: {result.metrics.computation_time_ms:.1f}ms ({result.metrics.strategy_name})")
    if result.moves:
        print(f"  Moves ({result.move_count}):")
        for i, move in enumerate(result.moves):
            print(f"    {i + 1}. {move}")


def run(args, settings) -> int:
    """
    Solve the puzzle named by parsed arguments.

    Args:
        args: Parsed command line arguments
        settings: Loaded settings dictionary

    Returns:
        Exit code
    """
    max_moves = args.max_moves if args.max_moves is not None else int(settings["max_moves"])
    timeout_sec = args.timeout if args.timeout is not None else float(settings["timeout_sec"])
    strategy_name = args.strategy or settings["strategy_name"]
    weights = HeuristicWeights.from_settings(settings)

    graph = load_puzzle(args.puzzle)
    print(f"Puzzle has {len(graph.colors())} colors and {len(graph)} regions")

    logger.info(
        f"Solving with {strategy_name}, budget {max_moves} moves, timeout {timeout_sec}s"
    )
    result = solve_with_timeout(graph, max_moves, timeout_sec, strategy_name, weights)
    print_result(result)

    final_graph = result.final_graph or graph
    if args.dot:
        write_dot(final_graph, args.dot)
    if args.render:
        render_graph_image(final_graph, args.render)

    if result.solved:
        return EXIT_SOLVED
    if result.cancelled:
        return EXIT_CANCELLED
    return EXIT_UNSOLVED


def main(argv: Optional[List[str]] = None) -> int:
    """Initialize and run the Kami Solver."""
    args = parse_args(argv)
    settings = load_settings(Path(args.config))
    configure_logging(debug=args.debug or settings.get("debug_enabled", False))

    # MalformedGraphError and rejected heuristic weights are both ValueErrors
    try:
        return run(args, settings)
    except (ValueError, OSError) as e:
        logger.error(f"Error: {e}")
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
