"""Brush strokes: closed, width-modulated ribbons around a centerline."""
from __future__ import annotations

import math
from typing import Callable, List, Optional, Sequence, Tuple

from ..core.noise import PerlinNoise
from ..core.primitives import Point
from ..core.prng import PRNG
from ..errors import require_points
from ..geometry.polytools import un_nan
from ..svg.elements import Polyline
from .config import StrokeCfg


def _normal_angle(prev: Point, cur: Point, nxt: Point) -> float:
    """Bisector of the incoming and outgoing segments at ``cur``."""
    a1 = math.atan2(cur.y - prev.y, cur.x - prev.x)
    a2 = math.atan2(cur.y - nxt.y, cur.x - nxt.x)
    a = (a1 + a2) / 2
    if a < a2:
        a += math.pi
    return a


def _offset(p: Point, angle: float, w: float) -> Tuple[Point, Point]:
    dx, dy = w * math.cos(angle), w * math.sin(angle)
    return Point(p.x + dx, p.y + dy), Point(p.x - dx, p.y - dy)


def stroke_points(
    prng: PRNG,
    noise: PerlinNoise,
    points: Sequence[Point],
    cfg: Optional[StrokeCfg] = None,
) -> List[Point]:
    """Outline ``points`` as a closed ribbon.

    The polygon runs first point, left rail, last point, right rail
    reversed, first point.  One jitter offset is drawn from ``prng`` per
    call.  Negative profile values count as zero width.
    """
    cfg = cfg or StrokeCfg()
    require_points(points, 3, "stroke")

    n0 = prng.random(0, 10)
    last = len(points) - 1
    rail0: List[Point] = []
    rail1: List[Point] = []
    for i in range(1, last):
        w = cfg.width * max(0.0, cfg.profile(i / len(points)))
        w = w * (1 - cfg.noise) + w * cfg.noise * noise(prng, i * 0.5, n0)
        a = _normal_angle(points[i - 1], points[i], points[i + 1])
        left, right = _offset(points[i], a, w)
        rail0.append(left)
        rail1.append(right)

    outline = [points[0], *rail0, points[last], *reversed(rail1), points[0]]
    return un_nan(outline)


def generate_stroke(
    prng: PRNG,
    noise: PerlinNoise,
    points: Sequence[Point],
    cfg: Optional[StrokeCfg] = None,
    x_offset: float = 0.0,
    y_offset: float = 0.0,
) -> Polyline:
    cfg = cfg or StrokeCfg()
    return Polyline(
        stroke_points(prng, noise, points, cfg),
        x_offset,
        y_offset,
        fill=cfg.fill,
        stroke=cfg.color,
        stroke_width=cfg.stroke_width,
    )


def expand(
    points: Sequence[Point],
    width_fn: Callable[[float], float],
) -> Tuple[List[Point], List[Point]]:
    """Noise-free left/right rails for every point of ``points``.

    Interior points use the segment bisector; the endpoints are offset
    perpendicular to their end segment by ``width_fn(0)`` and ``width_fn(1)``.
    """
    require_points(points, 2, "expand")
    n = len(points)
    last = n - 1
    rail0: List[Point] = [points[0]] * n
    rail1: List[Point] = [points[0]] * n

    for i in range(1, last):
        a = _normal_angle(points[i - 1], points[i], points[i + 1])
        rail0[i], rail1[i] = _offset(points[i], a, width_fn(i / n))

    a0 = math.atan2(points[1].y - points[0].y, points[1].x - points[0].x) - math.pi / 2
    a1 = math.atan2(points[last].y - points[last - 1].y, points[last].x - points[last - 1].x) - math.pi / 2
    rail0[0], rail1[0] = _offset(points[0], a0, width_fn(0))
    rail0[last], rail1[last] = _offset(points[last], a1, width_fn(1))
    return un_nan(rail0), un_nan(rail1)


__all__ = ["stroke_points", "generate_stroke", "expand"]
