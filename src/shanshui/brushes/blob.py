"""Blobs: radially sampled, noise-jittered closed leaf/rock shapes."""
from __future__ import annotations

import math
from typing import List, Optional

from ..core.noise import PerlinNoise
from ..core.primitives import Point
from ..core.prng import PRNG
from ..geometry.curves import normalize_noise
from ..geometry.polytools import un_nan
from ..svg.elements import Polyline
from .config import BlobCfg


def generate_blob_points(
    prng: PRNG,
    noise: PerlinNoise,
    center: Point,
    cfg: Optional[BlobCfg] = None,
) -> List[Point]:
    """Sample ``cfg.resolution`` outline points around ``center``.

    Sample ``i`` sits at profile parameter ``p = 2i/resolution``: the local
    offset is ``(L/2 - |p-1| L, profile(p) W/2)``, its radius is scaled by
    ``noise * n_i + (1 - noise)`` where ``n`` is a normalized noise series,
    and the result is rotated by ``cfg.angle``.  A non-positive length
    collapses the blob onto ``center``.
    """
    cfg = cfg or BlobCfg()
    reso = int(cfg.resolution)
    if reso < 2:
        raise ValueError(f"blob resolution must be >= 2, got {reso}")
    if cfg.length <= 0:
        return [center] * reso

    polar = []
    for i in range(reso):
        p = i / reso * 2
        xo = cfg.length / 2 - abs(p - 1) * cfg.length
        yo = cfg.profile(p) * cfg.width / 2
        polar.append((math.hypot(xo, yo), math.atan2(yo, xo)))

    n0 = prng.random(0, 10)
    ns = normalize_noise([noise(prng, i * 0.05, n0) for i in range(reso)])

    out = []
    for (l, a), n in zip(polar, ns):
        r = l * (n * cfg.noise + (1 - cfg.noise))
        out.append(Point(center.x + math.cos(a + cfg.angle) * r, center.y + math.sin(a + cfg.angle) * r))
    return un_nan(out)


def generate_blob(
    prng: PRNG,
    noise: PerlinNoise,
    center: Point,
    cfg: Optional[BlobCfg] = None,
) -> Polyline:
    cfg = cfg or BlobCfg()
    return Polyline(generate_blob_points(prng, noise, center, cfg), fill=cfg.fill, stroke=cfg.fill)


__all__ = ["generate_blob_points", "generate_blob"]
