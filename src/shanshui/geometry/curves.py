"""Polyline resampling, curve fitting and noise-series normalisation."""
from __future__ import annotations

from typing import List, Sequence

import numpy as np

from ..core.primitives import Point, as_array, from_array
from ..errors import InsufficientPointsError, require_points

BEZIER_SAMPLES = 20


def subdivide(points: Sequence[Point], resolution: int) -> List[Point]:
    """Linearly resample ``points`` with ``resolution`` steps per segment.

    ``N`` input points give ``(N-1)*resolution + 1`` output points; both
    endpoints are kept exactly.  A single point is returned unchanged.
    """
    require_points(points, 1, "subdivide")
    resolution = int(resolution)
    if resolution < 1:
        raise ValueError(f"resolution must be >= 1, got {resolution}")
    if len(points) == 1:
        return [points[0]]

    P = as_array(points)
    total = (P.shape[0] - 1) * resolution
    idx = np.arange(total)
    seg = idx // resolution
    t = ((idx % resolution) / resolution)[:, None]
    Q = P[seg] * (1.0 - t) + P[seg + 1] * t

    out = from_array(Q)
    out[0] = points[0]
    out.append(points[-1])
    return out


def _mid(a: Point, b: Point) -> Point:
    return Point((a.x + b.x) / 2.0, (a.y + b.y) / 2.0)


def fit_curve(control_points: Sequence[Point], samples: int = BEZIER_SAMPLES) -> List[Point]:
    """Chain of quadratic Bezier pieces through ``control_points``.

    Each interior control point is the handle of one piece whose ends are the
    midpoints to its neighbours; the first and last pieces start/end on the
    true extremities.  ``samples`` points are emitted per piece, plus the
    final endpoint.  Two control points get a synthetic middle handle.
    """
    require_points(control_points, 2, "fit_curve")
    cps = list(control_points)
    if len(cps) == 2:
        cps = [cps[0], _mid(cps[0], cps[1]), cps[1]]

    t_all = np.arange(samples + 1) / samples
    last = len(cps) - 3
    pieces: list[np.ndarray] = []
    for j in range(len(cps) - 2):
        p0 = cps[j] if j == 0 else _mid(cps[j], cps[j + 1])
        p1 = cps[j + 1]
        p2 = cps[j + 2] if j == last else _mid(cps[j + 1], cps[j + 2])

        t = t_all if j == last else t_all[:-1]
        a0 = (1 - t) * (1 - t)
        a1 = 2 * t * (1 - t)
        a2 = t * t
        xs = a0 * p0.x + a1 * p1.x + a2 * p2.x
        ys = a0 * p0.y + a1 * p1.y + a2 * p2.y
        pieces.append(np.stack([xs, ys], axis=1))

    return from_array(np.concatenate(pieces, axis=0))


def normalize_noise(series: Sequence[float]) -> List[float]:
    """Detrend ``series`` so it loops, then rescale it into ``[0, 1]``.

    The ramp ``(last - first) * (n-1-i)/(n-1)`` is added so the first value
    equals the last; the result is min/max scaled.  A flat series maps to
    ``0.5`` everywhere.
    """
    if len(series) < 2:
        raise InsufficientPointsError("normalize_noise", 2, len(series))
    a = np.asarray(series, dtype=float)
    n = a.shape[0]
    dif = a[-1] - a[0]
    a = a + dif * (n - 1 - np.arange(n)) / (n - 1)

    lo, hi = float(a.min()), float(a.max())
    if not hi > lo:
        return [0.5] * n
    return ((a - lo) / (hi - lo)).tolist()


def drift(series: Sequence[float]) -> float:
    """End-to-end drift ``last - first`` of a series."""
    return float(series[-1]) - float(series[0])


__all__ = ["subdivide", "fit_curve", "normalize_noise", "drift", "BEZIER_SAMPLES"]
