"""
Export Utilities

Functions for writing a region graph as a Graphviz DOT file and saving a
debug image of the graph. Both only read the graph.
"""

import math
import logging
from pathlib import Path
from typing import Dict, Iterator, List, Tuple, Union

from PIL import Image, ImageColor, ImageDraw, ImageFont

from .solver import Region, RegionGraph

logger = logging.getLogger(__name__)

# Debug image settings
IMAGE_SIZE = 800
NODE_RADIUS = 18
BACKGROUND = "white"
EDGE_COLOR = "#404040"
UNKNOWN_FILL = (128, 128, 128)


def iter_edges(graph: RegionGraph) -> Iterator[Tuple[int, int]]:
    """Yield each adjacent pair of region IDs once, smaller ID first."""
    for region in graph:
        for other_id in sorted(region.adjacent):
            if region.id < other_id:
                yield (region.id, other_id)


def to_dot(graph: RegionGraph) -> str:
    """
    Convert a region graph to DOT source.

    Each region becomes a filled node named r_<id>, colored with the
    graph palette; each adjacency becomes one undirected edge.

    Args:
        graph: Graph to export

    Returns:
        DOT source text
    """
    lines = ["strict graph kami_puzzle {", "    // labels"]
    for region in graph:
        lines.append(
            f'    r_{region.id} [style="filled", fillcolor="{graph.color_code(region.color)}"]'
        )
    lines.append("    // edges")
    for a, b in iter_edges(graph):
        lines.append(f"    r_{a} -- r_{b}")
    lines.append("}")
    return "\n".join(lines) + "\n"


def write_dot(graph: RegionGraph, path: Union[str, Path]) -> None:
    """
    Write a region graph as a DOT file.

    Args:
        graph: Graph to export
        path: Output file path
    """
    Path(path).write_text(to_dot(graph), encoding="utf-8")
    logger.info(f"DOT graph written: {path}")


def _layout(regions: List[Region], size: int) -> Dict[int, Tuple[float, float]]:
    """Place regions evenly on a circle, in ID order."""
    center = size / 2
    if len(regions) == 1:
        return {regions[0].id: (center, center)}

    radius = size / 2 - NODE_RADIUS * 3
    positions = {}
    for i, region in enumerate(regions):
        angle = 2 * math.pi * i / len(regions) - math.pi / 2
        positions[region.id] = (center + radius * math.cos(angle),
                                center + radius * math.sin(angle))
    return positions


def _fill_rgb(code: str) -> Tuple[int, int, int]:
    """Resolve a palette entry to RGB, using gray for unreadable codes."""
    try:
        return ImageColor.getrgb(code)[:3]
    except ValueError:
        logger.warning(f"Unreadable palette color {code!r}, drawing gray")
        return UNKNOWN_FILL


def _text_color(rgb: Tuple[int, int, int]) -> str:
    """Pick black or white text for legibility on a fill color."""
    r, g, b = rgb
    luminance = 0.299 * r + 0.587 * g + 0.114 * b
    return "black" if luminance > 140 else "white"


def render_graph_image(
    graph: RegionGraph,
    path: Union[str, Path],
    size: int = IMAGE_SIZE
) -> None:
    """
    Save a debug image of the region graph.

    Regions are drawn as circles filled with their palette color and
    labeled with their ID and size; adjacencies are drawn as lines.

    Args:
        graph: Graph to render
        path: Output PNG path
        size: Image width and height in pixels
    """
    image = Image.new("RGB", (size, size), BACKGROUND)
    draw = ImageDraw.Draw(image)

    # Try to load a font, fall back to default
    try:
        font = ImageFont.truetype("arial.ttf", 12)
    except OSError:
        font = ImageFont.load_default()

    regions = list(graph)
    positions = _layout(regions, size) if regions else {}

    for a, b in iter_edges(graph):
        draw.line([positions[a], positions[b]], fill=EDGE_COLOR, width=2)

    for region in regions:
        x, y = positions[region.id]
        fill = _fill_rgb(graph.color_code(region.color))
        draw.ellipse(
            [x - NODE_RADIUS, y - NODE_RADIUS, x + NODE_RADIUS, y + NODE_RADIUS],
            fill=fill, outline="black", width=2
        )
        draw.text((x - NODE_RADIUS / 2, y - 6), str(region.id),
                  fill=_text_color(fill), font=font)
        draw.text((x + NODE_RADIUS + 2, y - 6), f"x{region.size}",
                  fill="black", font=font)

    summary = f"Regions: {len(graph)}, Colors: {len(graph.colors())}, Triangles: {graph.total_size}"
    draw.text((10, 10), summary, fill="blue", font=font)

    image.save(str(path), "PNG")
    logger.info(f"Graph image saved: {path}")
