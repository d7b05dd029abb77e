"""Polygon utilities: bounds, transforms, triangulation and guards."""
from __future__ import annotations

import math
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from ..core.primitives import Bound, Point, as_array, distance, from_array
from ..errors import InsufficientPointsError, require_points
from ..utils.logging import logger as _root_logger

logger = _root_logger.getChild("geometry")

Triangle = List[Point]


def midpoint(points: Sequence[Point]) -> Point:
    """Mean of ``points``."""
    require_points(points, 1, "midpoint")
    m = as_array(points).mean(axis=0)
    return Point(float(m[0]), float(m[1]))


def bounding_box(points: Sequence[Point]) -> Bound:
    require_points(points, 1, "bounding_box")
    P = as_array(points)
    lo = P.min(axis=0)
    hi = P.max(axis=0)
    return Bound(float(lo[0]), float(hi[0]), float(lo[1]), float(hi[1]))


def flip_polyline(points: Sequence[Point], horizontal_flip: bool) -> List[Point]:
    """Mirror ``points`` about the y axis when ``horizontal_flip`` is set."""
    if not horizontal_flip:
        return list(points)
    return [Point(-p.x, p.y) for p in points]


def transform_along_line(p0: Point, p1: Point, points: Sequence[Point]) -> List[Point]:
    """Place a local shape onto the segment ``p0 -> p1``.

    In local coordinates the segment runs along +y with unit length.  Each
    point is mirrored in x, rotated by ``atan2(p1 - p0) - pi/2`` and scaled
    by ``|p1 - p0|`` before being translated to ``p0``.
    """
    if len(points) == 0:
        return []
    ang = math.atan2(p1.y - p0.y, p1.x - p0.x) - math.pi / 2
    scl = distance(p0, p1)
    P = as_array(points)
    x = -P[:, 0]
    y = P[:, 1]
    d = np.hypot(x, y)
    a = np.arctan2(y, x)
    Q = np.stack([p0.x + d * scl * np.cos(ang + a), p0.y + d * scl * np.sin(ang + a)], axis=1)
    return from_array(Q)


def polygon_area(points: Sequence[Point]) -> float:
    """Unsigned shoelace area."""
    require_points(points, 3, "polygon_area")
    P = as_array(points)
    x, y = P[:, 0], P[:, 1]
    return 0.5 * abs(float(np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))))


def un_nan(points: Sequence[Point]) -> List[Point]:
    """Replace every non-finite point with the origin."""
    out = [p if p.is_finite() else Point() for p in points]
    if len(points) and any(not p.is_finite() for p in points):
        logger.debug("un_nan: repaired %d non-finite point(s)",
                     sum(1 for p in points if not p.is_finite()))
    return out


def is_local_maximum(x: float, fn: Callable[[float], float], radius: float) -> bool:
    """True when ``fn(x)`` is not exceeded at any unit step within ``radius``."""
    fx = fn(x)
    i = x - radius
    while i <= x + radius:
        if fx < fn(i):
            return False
        i += 1
    return True


# ---------------------------------------------------------------------------
# triangulation
# ---------------------------------------------------------------------------

def _orient(a: Point, b: Point, c: Point) -> float:
    return (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)


def _segments_cross(a: Point, b: Point, c: Point, d: Point) -> bool:
    o1 = _orient(a, b, c)
    o2 = _orient(a, b, d)
    o3 = _orient(c, d, a)
    o4 = _orient(c, d, b)
    return (o1 > 0) != (o2 > 0) and (o3 > 0) != (o4 > 0) and o1 * o2 < 0 and o3 * o4 < 0


def _point_in_polygon(p: Point, poly: Sequence[Point]) -> bool:
    inside = False
    n = len(poly)
    for i in range(n):
        a = poly[i]
        b = poly[(i + 1) % n]
        if (a.y > p.y) != (b.y > p.y):
            xc = a.x + (p.y - a.y) * (b.x - a.x) / (b.y - a.y)
            if p.x < xc:
                inside = not inside
    return inside


def _diagonal_inside(a: Point, b: Point, poly: Sequence[Point], eps: float = 0.01) -> bool:
    # shrink the diagonal slightly so touching its own endpoints is not a hit
    s = Point(a.x * (1 - eps) + b.x * eps, a.y * (1 - eps) + b.y * eps)
    e = Point(a.x * eps + b.x * (1 - eps), a.y * eps + b.y * (1 - eps))
    n = len(poly)
    for i in range(n):
        if _segments_cross(s, e, poly[i], poly[(i + 1) % n]):
            return False
    return _point_in_polygon(Point((a.x + b.x) / 2, (a.y + b.y) / 2), poly)


def _perimeter(points: Sequence[Point]) -> float:
    n = len(points)
    return sum(distance(points[i], points[(i + 1) % n]) for i in range(n))


def _sliver_ratio(tri: Triangle) -> float:
    per = _perimeter(tri)
    return polygon_area(tri) / per if per > 0 else 0.0


def _find_ear(poly: List[Point], convex: bool, optimize: bool) -> Tuple[Optional[Triangle], List[Point]]:
    best: Tuple[Optional[Triangle], List[Point]] = (None, poly)
    best_ratio = -1.0
    n = len(poly)
    for i in range(n):
        prev_p = poly[i - 1]
        next_p = poly[(i + 1) % n]
        if not (convex or _diagonal_inside(prev_p, next_p, poly)):
            continue
        ear = [prev_p, poly[i], next_p]
        rest = poly[:i] + poly[i + 1:]
        if not optimize:
            return ear, rest
        ratio = _sliver_ratio(ear)
        if ratio >= best_ratio:
            best, best_ratio = (ear, rest), ratio
    return best


def _shatter(tri: Triangle, max_area: float) -> List[Triangle]:
    """Split ``tri`` along its longest side until every piece is below ``max_area``."""
    if max_area <= 0:
        return []
    out: List[Triangle] = []
    stack = [tri]
    while stack:
        t = stack.pop()
        area = polygon_area(t)
        if not math.isfinite(area):
            logger.debug("triangulate: dropped triangle with non-finite area")
            continue
        if area < max_area:
            out.append(t)
            continue
        sides = [distance(t[i], t[(i + 1) % 3]) for i in range(3)]
        i = int(np.argmax(sides))
        j, k = (i + 1) % 3, (i + 2) % 3
        m = Point((t[i].x + t[j].x) / 2, (t[i].y + t[j].y) / 2)
        stack.append([t[k], t[j], m])
        stack.append([t[i], m, t[k]])
    return out


def triangulate(
    points: Sequence[Point],
    max_area: float = 100.0,
    convex: bool = False,
    optimize: bool = False,
) -> List[Triangle]:
    """Ear-clip ``points`` into triangles no larger than ``max_area``.

    Parameters
    ----------
    points:
        Simple polygon, open (the closing edge is implied).
    max_area:
        Upper bound on each triangle's area; ``0`` yields no triangles.
    convex:
        Skip the diagonal-inside test (every vertex is an ear).
    optimize:
        Clip the ear with the best area/perimeter ratio instead of the first.
    """
    if len(points) == 0:
        return []
    if len(points) < 3:
        raise InsufficientPointsError("triangulate", 3, len(points))

    poly = un_nan(points)
    tris: List[Triangle] = []
    while len(poly) > 3:
        ear, rest = _find_ear(poly, convex, optimize)
        if ear is None:
            # self-intersecting input: clip the first vertex anyway
            logger.debug("triangulate: no valid ear among %d vertices", len(poly))
            ear, rest = [poly[-1], poly[0], poly[1]], poly[1:]
        tris.extend(_shatter(ear, max_area))
        poly = rest
    tris.extend(_shatter(poly, max_area))
    return tris


__all__ = [
    "Triangle",
    "midpoint",
    "bounding_box",
    "flip_polyline",
    "transform_along_line",
    "polygon_area",
    "un_nan",
    "is_local_maximum",
    "triangulate",
]
