import math

import numpy as np
import pytest

from shanshui.brushes.branch import generate_branch, grow_branch_levels, grow_branches
from shanshui.brushes.config import BranchCfg
from shanshui.core import PRNG, PerlinNoise, Point
from shanshui.core.primitives import as_array, distance

SCENARIO = BranchCfg(height=300, width=6, angle=-math.pi / 2, bend=0)


def _scenario():
    return generate_branch(PRNG("test-42"), PerlinNoise(), SCENARIO)


def test_scenario_rail_lengths():
    left, right = _scenario()
    assert len(left) == len(right) == 3 * 10


def test_scenario_root_and_tip_width():
    left, right = _scenario()
    root = distance(left[0], right[0]) / 2
    assert 6.0 <= root < 12.0
    tip = distance(left[-1], right[-1]) / 2
    assert math.isclose(tip, 6 * (1 / 30 * 0.5 + 0.5))


def test_scenario_is_bit_identical():
    assert _scenario() == _scenario()


def test_rails_stay_on_their_side():
    left, right = _scenario()
    # straight trunk pointing up along x == 0
    assert all(p.x >= -1e-9 for p in left)
    assert all(p.x <= 1e-9 for p in right)
    assert min(p.y for p in left) < -250


def test_gap_tapers_except_at_joints():
    left, right = _scenario()
    gaps = [distance(l, r) / 2 for l, r in zip(left, right)]
    for i, g in enumerate(gaps):
        base = 6 * ((30 - i) / 30 * 0.5 + 0.5)
        if i % 10:
            assert math.isclose(g, base)
        else:
            assert base <= g < base + 6


def test_origin_translates_rails():
    cfg = BranchCfg(height=100, width=3)
    a = generate_branch(PRNG(5), PerlinNoise(), cfg)
    b = generate_branch(PRNG(5), PerlinNoise(), cfg, origin=Point(100, 200))
    assert np.allclose(as_array(b[0]), as_array(a[0]) + [100, 200])
    assert np.allclose(as_array(b[1]), as_array(a[1]) + [100, 200])


def test_grow_branches_depth_zero_is_trunk(prng, noise):
    rails = grow_branches(prng, noise, Point(0, 0), BranchCfg(height=50, width=2), depth=0)
    assert len(rails) == 1


def test_grow_branches_counts(prng, noise):
    rails = grow_branches(prng, noise, Point(0, 0), BranchCfg(height=50, width=2), depth=2)
    assert 3 <= len(rails) <= 7
    always = grow_branches(prng, noise, Point(0, 0), BranchCfg(height=50, width=2), depth=2,
                           fork_probability=1.0)
    assert len(always) == 7
    never = grow_branches(prng, noise, Point(0, 0), BranchCfg(height=50, width=2), depth=3,
                          fork_probability=0.0)
    assert len(never) == 4


def test_grow_branch_levels_mark_terminal_twigs(prng, noise):
    grown = grow_branch_levels(prng, noise, Point(0, 0), BranchCfg(height=50, width=2), depth=2,
                               fork_probability=1.0)
    assert [level for _, level in grown] == [2, 1, 0, 0, 1, 0, 0]


def test_children_are_smaller(prng, noise):
    rails = grow_branches(prng, noise, Point(0, 0), BranchCfg(height=50, width=2), depth=1,
                          fork_probability=0.0, shrink=(0.5, 0.5))
    trunk, child = rails
    assert len(trunk[0]) == len(child[0])
    assert distance(child[0][-1], child[1][-1]) < distance(trunk[0][-1], trunk[1][-1])


def test_grow_branches_depth_is_mandatory(prng, noise):
    with pytest.raises(TypeError):
        grow_branches(prng, noise, Point(0, 0), BranchCfg())
    with pytest.raises(ValueError):
        grow_branches(prng, noise, Point(0, 0), BranchCfg(), depth=-1)
