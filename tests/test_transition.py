"""
Tests for the recolor-and-merge transition.

The star fixture:

    4(c0) -- 1(c1) -- 0(c0) -- 3(c2) -- 5(c2)
       \\              /
        `---- 2(c1) -'
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from kami.solver import (
    InvalidMoveError,
    Move,
    RegionGraph,
    apply_move,
    enumerate_moves,
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
    ], palette=["#ff0000", "#00ff00", "#0000ff"])


def test_merge_absorbs_target_colored_neighbors(star):
    after = star.apply_move(Move(0, 1))

    assert after.region_ids == (0, 3, 4, 5)
    merged = after[0]
    assert merged.color == 1
    assert merged.size == 6
    assert merged.adjacent == frozenset({3, 4})


def test_references_to_absorbed_regions_rewritten(star):
    after = star.apply_move(Move(0, 1))

    assert after[4].adjacent == frozenset({0})
    assert after[3].adjacent == frozenset({0, 5})
    assert after[5].adjacent == frozenset({3})
    after.validate()


def test_size_conserved_and_count_reduced(star):
    after = star.apply_move(Move(0, 1))

    assert after.total_size == star.total_size == 13
    assert len(after) == len(star) - 2


def test_input_graph_unchanged(star):
    before = star.signature()
    star.apply_move(Move(0, 1))

    assert star.signature() == before
    assert star[0].color == 0


def test_palette_carried_forward(star):
    after = star.apply_move(Move(3, 0))
    assert after.palette == star.palette


def test_position_kept_by_absorbing_region():
    graph = RegionGraph.from_dicts([
        {"id": 0, "color": 0, "size": 1, "adjacent": [1], "position": [2, 4]},
        {"id": 1, "color": 1, "size": 1, "adjacent": [0], "position": [3, 4]},
    ])
    after = graph.apply_move(Move(1, 0))

    assert after.region_ids == (1,)
    assert after[1].position == (3, 4)


def test_recolor_to_own_color_rejected(star):
    with pytest.raises(InvalidMoveError):
        star.apply_move(Move(0, 0))


def test_unknown_region_rejected(star):
    with pytest.raises(InvalidMoveError):
        star.apply_move(Move(42, 1))


def test_noop_recolor_merges_nothing(star):
    after = star.apply_move(Move(0, 3))

    assert len(after) == len(star)
    assert after[0].color == 3
    assert after[0].size == 2
    assert after[0].adjacent == star[0].adjacent
    after.validate()


def test_absorbed_neighbors_sharing_neighbors():
    # Three regions around a hub; absorbed 1 and 2 are adjacent to each other
    # and both touch 3.
    graph = RegionGraph.from_dicts([
        {"id": 0, "color": 0, "size": 1, "adjacent": [1, 2]},
        {"id": 1, "color": 1, "size": 1, "adjacent": [0, 2, 3]},
        {"id": 2, "color": 1, "size": 1, "adjacent": [0, 1, 3]},
        {"id": 3, "color": 2, "size": 5, "adjacent": [1, 2]},
    ])
    after = graph.apply_move(Move(0, 1))

    assert after.region_ids == (0, 3)
    assert after[0].adjacent == frozenset({3})
    assert after[3].adjacent == frozenset({0})
    assert after[0].size == 3


def test_module_level_apply_move(star):
    assert apply_move(star, 0, 1) == star.apply_move(Move(0, 1))


def test_every_generated_move_keeps_invariants(star):
    for move in enumerate_moves(star):
        absorbed = star.absorbed_by(move)
        after = star.apply_move(move)

        after.validate()
        assert after.total_size == star.total_size
        assert len(after) == len(star) - len(absorbed)
        for region in absorbed:
            assert region.id not in after
