"""
Tests for move generation and heuristic scoring.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from kami.solver import (
    DEFAULT_WEIGHTS,
    HeuristicWeights,
    Move,
    RegionGraph,
    enumerate_moves,
    evaluate,
    is_feasible,
    rank_moves,
)


@pytest.fixture
def star():
    return RegionGraph.from_dicts([
        {"id": 0, "color": 0, "size": 2, "adjacent": [1, 2, 3]},
        {"id": 1, "color": 1, "size": 3, "adjacent": [0, 4]},
        {"id": 2, "color": 1, "size": 1, "adjacent": [0, 4]},
        {"id": 3, "color": 2, "size": 4, "adjacent": [0, 5]},
        {"id": 4, "color": 0, "size": 1, "adjacent": [1, 2]},
        {"id": 5, "color": 2, "size": 2, "adjacent": [3]},
    ])


# ============================================================================
# Move generation
# ============================================================================

def test_enumerate_moves(star):
    moves = enumerate_moves(star)
    assert moves == [
        Move(0, 1), Move(0, 2),
        Move(1, 0),
        Move(2, 0),
        Move(3, 0),
        Move(4, 1),
    ]


def test_moves_only_use_neighbor_colors(star):
    for move in enumerate_moves(star):
        region = star[move.region_id]
        assert move.color != region.color
        assert move.color in {star[n].color for n in region.adjacent}


def test_region_with_same_color_neighbors_has_no_moves(star):
    assert not [m for m in enumerate_moves(star) if m.region_id == 5]


def test_disconnected_graph_has_no_moves():
    graph = RegionGraph.from_dicts([
        {"id": 0, "color": 0, "size": 1, "adjacent": []},
        {"id": 1, "color": 1, "size": 1, "adjacent": []},
    ])
    assert enumerate_moves(graph) == []


def test_move_helpers():
    move = Move.from_tuple((3, 1))
    assert move == Move(region_id=3, color=1)
    assert move.as_tuple() == (3, 1)
    assert str(move) == "region 3 -> color 1"


# ============================================================================
# Heuristic
# ============================================================================

def test_evaluate_counts_regions_then_size(star):
    assert evaluate(star, Move(0, 1), 5) == 2 * 1000 + 4
    assert evaluate(star, Move(0, 2), 5) == 1000 + 4
    assert evaluate(star, Move(3, 0), 5) == 1000 + 2


def test_evaluate_custom_weights(star):
    weights = HeuristicWeights(regions_absorbed=10, size_absorbed=1)
    assert evaluate(star, Move(0, 1), 5, weights) == 24


def test_infeasible_budget_scores_zero(star):
    # Three colors need at least two moves
    assert not is_feasible(star, 1)
    assert is_feasible(star, 2)
    assert evaluate(star, Move(0, 1), 1) == 0
    assert evaluate(star, Move(0, 1), 2) > 0


def test_noop_move_scores_zero(star):
    assert evaluate(star, Move(0, 7), 5) == 0


def test_more_regions_beat_bigger_region():
    graph = RegionGraph.from_dicts([
        {"id": 0, "color": 0, "size": 1, "adjacent": [1, 2, 3]},
        {"id": 1, "color": 1, "size": 1, "adjacent": [0]},
        {"id": 2, "color": 1, "size": 1, "adjacent": [0]},
        {"id": 3, "color": 2, "size": 100, "adjacent": [0]},
    ])
    assert evaluate(graph, Move(0, 1), 5) > evaluate(graph, Move(0, 2), 5)


def test_rank_moves_orders_by_score(star):
    ranked = rank_moves(star, enumerate_moves(star), 5)

    assert ranked == [
        (Move(0, 1), 2004),
        (Move(4, 1), 2004),
        (Move(1, 0), 2003),
        (Move(2, 0), 2003),
        (Move(0, 2), 1004),
        (Move(3, 0), 1002),
    ]


def test_rank_moves_drops_pruned(star):
    assert rank_moves(star, enumerate_moves(star), 1) == []
    assert rank_moves(star, [Move(0, 7)], 5) == []


@pytest.mark.parametrize("regions,size", [(1000, 1000), (1, 1000)])
def test_weights_must_favor_regions(regions, size):
    with pytest.raises(ValueError):
        HeuristicWeights(regions_absorbed=regions, size_absorbed=size)


def test_weights_from_settings():
    weights = HeuristicWeights.from_settings({"weight_regions_absorbed": 500})
    assert weights == HeuristicWeights(regions_absorbed=500, size_absorbed=1)
    assert HeuristicWeights.from_settings({}) == DEFAULT_WEIGHTS
