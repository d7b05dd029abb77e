import math

import numpy as np

from shanshui.core.primitives import Bound, Point, Range, Vector, as_array, distance, from_array


def test_vector_ops():
    v = Vector(3, 4)
    assert v.length() == 5
    assert v.scale(2) == Vector(6, 8)
    assert v.move(Vector(1, 1)) == Vector(4, 5)
    u = Vector.unit(math.pi / 2)
    assert math.isclose(u.x, 0.0, abs_tol=1e-12) and math.isclose(u.y, 1.0)


def test_point_ops():
    p = Point(1, 2)
    q = p.move(Vector(2, -1))
    assert q == Point(3, 1)
    assert p.to(q) == Vector(2, -1)
    assert q.from_(p) == Vector(2, -1)
    assert Vector(1, 1).move_from(p) == Point(2, 3)
    assert p.copy() == p and p.copy() is not p
    assert Point.from_array(p.to_array()) == p
    assert Point.origin() == Point()
    assert distance(Point(0, 0), Point(3, 4)) == 5


def test_point_finiteness():
    assert Point(1, 2).is_finite()
    assert not Point(float("nan"), 0).is_finite()
    assert not Point(0, float("inf")).is_finite()


def test_range_mapping():
    r = Range(0, 10)
    assert r.length == 10
    assert r.map_value(5, Range(0, 100)) == 50
    assert r.map_to_ratio(2.5) == 0.25
    assert Range.from_array([1, 3]).map_from_ratio(0.5) == 2


def test_bound_geometry():
    b = Bound(0, 4, -2, 2)
    assert b.width == 4 and b.height == 4
    assert b.center == Point(2, 0)


def test_numpy_bridge():
    assert as_array([]).shape == (0, 2)
    pts = [Point(0, 1), Point(2, 3)]
    arr = as_array(pts)
    assert np.allclose(arr, [[0, 1], [2, 3]])
    assert from_array(arr) == pts
