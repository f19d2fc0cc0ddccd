"""
Puzzle I/O Module - JSON interchange for region graphs.

Accepted file shapes:
    [{"id": 0, "color": 1, "size": 3, "adjacent": [1, 2]}, ...]
    {"colors": ["#rrggbb", ...], "regions": [ ...as above... ]}

The optional "position" key holds a [col, row] anchor used for rendering.
"""

import json
import re
import logging
from pathlib import Path
from typing import Any, Dict, Union

from .solver import MalformedGraphError, RegionGraph

logger = logging.getLogger(__name__)

HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


def graph_from_json(data: Any) -> RegionGraph:
    """
    Build a RegionGraph from decoded JSON.

    Args:
        data: List of region dicts, or {"colors": [...], "regions": [...]}

    Returns:
        RegionGraph instance (not yet validated)

    Raises:
        MalformedGraphError: If the shape is not recognized
    """
    if isinstance(data, list):
        return RegionGraph.from_dicts(data)

    if isinstance(data, dict) and isinstance(data.get("regions"), list):
        colors = data.get("colors") or []
        if not all(isinstance(c, str) and HEX_COLOR.match(c) for c in colors):
            raise MalformedGraphError(f"Puzzle colors must be #rrggbb strings: {colors!r}")
        return RegionGraph.from_dicts(data["regions"], palette=colors)

    raise MalformedGraphError("Puzzle must be a list of regions or an object with 'regions'")


def graph_to_json(graph: RegionGraph) -> Union[list, Dict[str, Any]]:
    """Convert a RegionGraph to its interchange shape."""
    if graph.palette:
        return {"colors": list(graph.palette), "regions": graph.to_dicts()}
    return graph.to_dicts()


def load_puzzle(path: Union[str, Path]) -> RegionGraph:
    """
    Load a puzzle graph from a JSON file and validate it.

    Args:
        path: JSON file path

    Returns:
        Validated RegionGraph

    Raises:
        MalformedGraphError: If the file is not valid JSON or the graph
            breaks an invariant
        OSError: If the file cannot be read
    """
    path = Path(path)
    with open(path, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise MalformedGraphError(f"Invalid puzzle JSON in {path}: {e}") from e

    graph = graph_from_json(data)
    graph.validate()
    logger.info(
        f"Loaded puzzle {path.name}: {len(graph)} regions, "
        f"{len(graph.colors())} colors, {graph.total_size} triangles"
    )
    return graph


def save_puzzle(graph: RegionGraph, path: Union[str, Path]) -> None:
    """
    Save a puzzle graph to a JSON file.

    Args:
        graph: Graph to save
        path: Output file path
    """
    path = Path(path)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(graph_to_json(graph), f, indent=2)
    logger.debug(f"Puzzle saved: {path}")
