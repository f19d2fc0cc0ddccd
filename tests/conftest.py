"""
Shared fixtures.
"""

import pytest


def grid_regions(rows, cols, colors=3):
    """
    Region dicts for a rows x cols grid of single-cell regions.

    Cell colors follow (row + 2 * col) % colors, so no two neighbors share
    a color. One extra isolated region holds a color no cell has, which
    makes the puzzle unsolvable while leaving a huge search space.
    """
    def cell_id(r, c):
        return r * cols + c

    regions = []
    for r in range(rows):
        for c in range(cols):
            adjacent = []
            for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
                nr, nc = r + dr, c + dc
                if 0 <= nr < rows and 0 <= nc < cols:
                    adjacent.append(cell_id(nr, nc))
            regions.append({
                "id": cell_id(r, c),
                "color": (r + 2 * c) % colors,
                "size": 1,
                "adjacent": adjacent,
                "position": [c, r],
            })
    regions.append({"id": rows * cols, "color": colors, "size": 1, "adjacent": []})
    return regions


@pytest.fixture
def unsolvable_grid_dicts():
    return grid_regions(10, 10)
