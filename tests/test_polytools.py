import math

import numpy as np
import pytest

from shanshui.core.primitives import Bound, Point, as_array
from shanshui.errors import InsufficientPointsError
from shanshui.geometry.polytools import (
    bounding_box,
    flip_polyline,
    is_local_maximum,
    midpoint,
    polygon_area,
    transform_along_line,
    triangulate,
    un_nan,
)

SQUARE = [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]
ELL = [Point(0, 0), Point(20, 0), Point(20, 10), Point(10, 10), Point(10, 20), Point(0, 20)]


def test_midpoint_and_bbox():
    assert midpoint(SQUARE) == Point(5, 5)
    assert bounding_box(ELL) == Bound(0, 20, 0, 20)
    with pytest.raises(InsufficientPointsError):
        bounding_box([])


def test_flip_polyline():
    pts = [Point(1, 2), Point(-3, 4)]
    assert flip_polyline(pts, True) == [Point(-1, 2), Point(3, 4)]
    assert flip_polyline(pts, False) == pts


def test_transform_along_line():
    local = [Point(0, 1), Point(1, 0)]
    out = transform_along_line(Point(0, 0), Point(0, 10), local)
    assert np.allclose(as_array(out), [[0, 10], [-10, 0]], atol=1e-9)
    assert local == [Point(0, 1), Point(1, 0)]


def test_transform_along_line_translates():
    out = transform_along_line(Point(5, 5), Point(10, 5), [Point(0, 1)])
    assert np.allclose(out[0].to_array(), [10, 5])


def test_polygon_area():
    assert polygon_area(SQUARE) == 100
    assert polygon_area(ELL) == 300
    with pytest.raises(InsufficientPointsError):
        polygon_area(SQUARE[:2])


@pytest.mark.parametrize("poly,area", [(SQUARE, 100.0), (ELL, 300.0)])
def test_triangulate_covers_polygon(poly, area):
    tris = triangulate(poly, max_area=1000)
    assert len(tris) == len(poly) - 2
    assert math.isclose(sum(polygon_area(t) for t in tris), area)


def test_triangulate_respects_max_area():
    tris = triangulate(ELL, max_area=20, optimize=True)
    assert all(polygon_area(t) < 20 for t in tris)
    assert math.isclose(sum(polygon_area(t) for t in tris), 300.0)


def test_triangulate_convex_shortcut():
    tris = triangulate(SQUARE, max_area=100, convex=True)
    assert math.isclose(sum(polygon_area(t) for t in tris), 100.0)


def test_triangulate_degenerate_inputs():
    assert triangulate([], 100) == []
    assert triangulate(SQUARE, 0) == []
    with pytest.raises(InsufficientPointsError):
        triangulate(SQUARE[:2])


def test_triangulate_repairs_non_finite_vertices():
    tris = triangulate([Point(0, 0), Point(float("inf"), 0), Point(10, 10)], 100)
    assert len(tris) == 1
    assert all(p.is_finite() for t in tris for p in t)
    assert tris[0][1] == Point(0, 0)


def test_un_nan():
    pts = [Point(float("nan"), 1), Point(1, 2), Point(3, float("-inf"))]
    assert un_nan(pts) == [Point(0, 0), Point(1, 2), Point(0, 0)]


def test_is_local_maximum():
    f = lambda v: -(v - 3) ** 2
    assert is_local_maximum(3, f, 2)
    assert not is_local_maximum(1, f, 2)
