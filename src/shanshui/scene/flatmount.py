"""Flat-topped mountains: ridges clipped to a plateau, with plateau strokes."""
from __future__ import annotations

import math
from typing import List, Optional, Tuple

from ..brushes.config import StrokeCfg
from ..brushes.stroke import generate_stroke
from ..core.noise import PerlinNoise
from ..core.primitives import Point
from ..core.prng import PRNG
from ..geometry.curves import subdivide
from ..svg.elements import Chunk, Polyline
from .mount import WHITE

PLATEAU_COLOR = "rgba(100,100,100,0.2)"


def flatmount_chunk(
    prng: PRNG,
    noise: PerlinNoise,
    x: float,
    y: float,
    *,
    height: Optional[float] = None,
    height_range: Tuple[float, float] = (40.0, 440.0),
    width: Optional[float] = None,
    width_range: Tuple[float, float] = (400.0, 600.0),
    flatness: float = 0.5,
    plateau: float = 100.0,
    layers: int = 5,
    samples: int = 50,
    noise_seed: float = 0.0,
    outline_color: str = "rgba(100,100,100,0.3)",
    outline_width: float = 3.0,
    outline_noise: float = 1.0,
) -> Chunk:
    """Ridges whose peaks are cut at ``plateau * flatness`` above their base.

    The start and end of every cut run are collected so the flat tops can
    be drawn as separate strokes.
    """
    if height is None:
        height = prng.random(*height_range)
    if width is None:
        width = prng.random(*width_range)

    chunk = Chunk("flatmount", x, y)
    lines: List[List[Point]] = []
    flats: List[List[Point]] = []
    lift = 0.0
    for j in range(layers):
        lift += prng.random(0, max(0.0, y) / 100)
        p = 1 - j / layers * 0.6
        ridge: List[Point] = []
        cuts: List[Point] = []
        for i in range(samples):
            u = (i / samples - 0.5) * math.pi
            v = (math.cos(u * 2) + 1) * noise(prng, u + 10, j * 0.1, noise_seed)
            px = u / math.pi * width * p
            py = -v * height * p + lift
            top = -plateau * flatness + lift
            if py < top:
                py = top
                if len(cuts) % 2 == 0:
                    cuts.append(Point(px, py))
            elif len(cuts) % 2 == 1:
                cuts.append(ridge[-1])
            ridge.append(Point(px, py))
        if len(cuts) % 2 == 1:
            cuts.append(ridge[-1])
        lines.append(ridge)
        flats.append(cuts)

    outer = lines[0]
    chunk.add(Polyline(outer + [Point(0, layers * 4)], x, y, fill=WHITE, stroke="none"))
    outline = StrokeCfg(fill=outline_color, color=outline_color, width=outline_width, noise=outline_noise)
    chunk.add(generate_stroke(prng, noise, outer, outline, x, y))

    plateau_cfg = StrokeCfg(fill=PLATEAU_COLOR, color=PLATEAU_COLOR, width=3.0)
    for cuts in flats:
        for start, end in zip(cuts[::2], cuts[1::2]):
            if start == end:
                continue
            chunk.add(generate_stroke(prng, noise, subdivide([start, end], 10), plateau_cfg, x, y))
    return chunk
