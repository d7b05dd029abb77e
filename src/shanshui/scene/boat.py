"""Boats: a hull polygon traced by a brush stroke."""
from __future__ import annotations

import math
from typing import List

from ..brushes.config import StrokeCfg
from ..brushes.stroke import generate_stroke
from ..core.noise import PerlinNoise
from ..core.primitives import Point
from ..core.prng import PRNG
from ..geometry.polytools import flip_polyline
from ..svg.elements import Chunk, Polyline

HULL_STEP = 5


def hull(scale: float, length: int, flip: bool = False) -> List[Point]:
    """Closed hull outline: deck from bow to stern, keel back to the bow."""
    n = int(length) // HULL_STEP
    deck: List[Point] = []
    keel: List[Point] = []
    for i in range(n):
        t = i * HULL_STEP / length
        lobe = math.sqrt(max(0.0, math.sin(t * math.pi)))
        hop = i * HULL_STEP * scale
        deck.append(Point(hop, lobe * 7 * scale))
        keel.append(Point(hop, lobe * 10 * scale))
    return flip_polyline(deck + keel[::-1], flip)


def boat_chunk(
    prng: PRNG,
    noise: PerlinNoise,
    x: float,
    y: float,
    *,
    scale: float = 1.0,
    flip: bool = False,
    length: int = 120,
    fill: str = "rgba(255,255,255,1)",
    stroke_color: str = "rgba(100,100,100,0.4)",
    stroke_width: float = 1.0,
    stroke_noise: float = 0.5,
) -> Chunk:
    chunk = Chunk("boat", x, y)
    outline = hull(scale, length, flip)
    chunk.add(Polyline(outline, x, y, fill=fill))
    cfg = StrokeCfg(
        fill=stroke_color,
        color=stroke_color,
        width=stroke_width,
        noise=stroke_noise,
        stroke_width=1.0,
        profile=lambda t: abs(math.sin(t * math.pi * 2)),
    )
    chunk.add(generate_stroke(prng, noise, outline, cfg, x, y))
    return chunk
