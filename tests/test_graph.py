"""
Tests for the region graph model.

Covers:
- Region construction and interchange dicts
- RegionGraph ordering, lookup and canonical signature
- Invariant validation
- Solved detection
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from kami.solver import (
    MalformedGraphError,
    Move,
    Region,
    RegionGraph,
)


@pytest.fixture
def ring_dicts():
    """2x2 ring alternating two colors: 0-1-2-3-0."""
    return [
        {"id": 0, "color": 0, "size": 1, "adjacent": [1, 3]},
        {"id": 1, "color": 1, "size": 1, "adjacent": [0, 2]},
        {"id": 2, "color": 0, "size": 1, "adjacent": [1, 3]},
        {"id": 3, "color": 1, "size": 1, "adjacent": [2, 0]},
    ]


# ============================================================================
# Region
# ============================================================================

def test_region_create_converts_adjacency():
    region = Region.create(id=4, color=2, size=3, adjacent=[1, 5, 1], position=[3, 7])

    assert region.adjacent == frozenset({1, 5})
    assert region.position == (3, 7)
    assert region.signature == (4, 2, 3, (1, 5))


def test_region_to_dict():
    region = Region.create(id=1, color=0, size=2, adjacent=[3, 2])
    assert region.to_dict() == {"id": 1, "color": 0, "size": 2, "adjacent": [2, 3]}

    positioned = Region.create(id=1, color=0, size=2, position=(0, 5))
    assert positioned.to_dict()["position"] == [0, 5]


# ============================================================================
# RegionGraph
# ============================================================================

def test_graph_sorted_by_id(ring_dicts):
    graph = RegionGraph.from_dicts(list(reversed(ring_dicts)))

    assert graph.region_ids == (0, 1, 2, 3)
    assert [r.id for r in graph] == [0, 1, 2, 3]
    assert len(graph) == 4


def test_graph_lookup(ring_dicts):
    graph = RegionGraph.from_dicts(ring_dicts)

    assert 2 in graph
    assert 9 not in graph
    assert graph[2].color == 0
    assert graph.get_region(9) is None
    assert graph.colors() == {0, 1}
    assert graph.total_size == 4


def test_signature_is_order_independent(ring_dicts):
    forward = RegionGraph.from_dicts(ring_dicts)
    backward = RegionGraph.from_dicts(list(reversed(ring_dicts)))

    assert forward.signature() == backward.signature()
    assert forward == backward
    assert hash(forward) == hash(backward)
    assert forward.digest() == backward.digest()


def test_signature_distinguishes_relabeled_graphs():
    a = RegionGraph.from_dicts([
        {"id": 0, "color": 0, "size": 1, "adjacent": [1]},
        {"id": 1, "color": 1, "size": 1, "adjacent": [0]},
    ])
    b = RegionGraph.from_dicts([
        {"id": 0, "color": 1, "size": 1, "adjacent": [1]},
        {"id": 1, "color": 0, "size": 1, "adjacent": [0]},
    ])

    assert a.signature() != b.signature()
    assert a != b


def test_digest_changes_after_move(ring_dicts):
    graph = RegionGraph.from_dicts(ring_dicts)
    after = graph.apply_move(Move(0, 1))

    assert len(graph.digest()) == 40
    assert graph.digest() != after.digest()


def test_to_dicts_round_trip(ring_dicts):
    graph = RegionGraph.from_dicts(ring_dicts)
    again = RegionGraph.from_dicts(graph.to_dicts())

    assert again == graph
    assert graph.to_dicts()[3]["adjacent"] == [0, 2]


def test_color_code_uses_palette():
    graph = RegionGraph.from_dicts(
        [{"id": 0, "color": 1, "size": 1, "adjacent": []}],
        palette=["#ff0000", "#00ff00"]
    )

    assert graph.color_code(1) == "#00ff00"
    assert graph.color_code(5) == "#808080"


# ============================================================================
# Validation
# ============================================================================

def test_duplicate_ids_rejected():
    with pytest.raises(MalformedGraphError):
        RegionGraph.from_regions([
            Region.create(id=0, color=0, size=1),
            Region.create(id=0, color=1, size=1),
        ])


def test_missing_key_rejected():
    with pytest.raises(MalformedGraphError):
        RegionGraph.from_dicts([{"id": 0, "color": 0}])


@pytest.mark.parametrize("entry", [
    # Adjacency given as a string of digits
    {"id": 0, "color": 0, "size": 1, "adjacent": "12"},
    # Adjacency given as a single number
    {"id": 0, "color": 0, "size": 1, "adjacent": 1},
    # Position too short
    {"id": 0, "color": 0, "size": 1, "adjacent": [], "position": [3]},
    # Position too long
    {"id": 0, "color": 0, "size": 1, "adjacent": [], "position": [3, 4, 5]},
    # Position not a list
    {"id": 0, "color": 0, "size": 1, "adjacent": [], "position": "3,4"},
    # Non-numeric field
    {"id": 0, "color": "red", "size": 1, "adjacent": []},
    # Not an object
    [0, 0, 1],
])
def test_malformed_entry_rejected(entry):
    with pytest.raises(MalformedGraphError):
        RegionGraph.from_dicts([entry])


def test_valid_graph_passes(ring_dicts):
    RegionGraph.from_dicts(ring_dicts).validate()


@pytest.mark.parametrize("regions", [
    # Dangling reference
    [{"id": 0, "color": 0, "size": 1, "adjacent": [7]}],
    # Asymmetric adjacency
    [
        {"id": 0, "color": 0, "size": 1, "adjacent": [1]},
        {"id": 1, "color": 1, "size": 1, "adjacent": []},
    ],
    # Self adjacency
    [{"id": 0, "color": 0, "size": 1, "adjacent": [0]}],
    # Empty region
    [{"id": 0, "color": 0, "size": 0, "adjacent": []}],
])
def test_malformed_graph_rejected(regions):
    graph = RegionGraph.from_dicts(regions)
    with pytest.raises(MalformedGraphError):
        graph.validate()


# ============================================================================
# Solved detection
# ============================================================================

def test_single_region_is_solved():
    graph = RegionGraph.from_dicts([{"id": 3, "color": 2, "size": 9, "adjacent": []}])
    assert graph.is_solved()


def test_same_color_regions_are_solved():
    graph = RegionGraph.from_dicts([
        {"id": 0, "color": 1, "size": 1, "adjacent": []},
        {"id": 1, "color": 1, "size": 2, "adjacent": []},
    ])
    assert graph.is_solved()


def test_mixed_colors_not_solved(ring_dicts):
    assert not RegionGraph.from_dicts(ring_dicts).is_solved()
