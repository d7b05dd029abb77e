"""Mountains: nested noise ridges with an outline stroke and rocks."""
from __future__ import annotations

import math
from typing import List, Optional, Tuple

from ..brushes.blob import generate_blob
from ..brushes.config import BlobCfg, StrokeCfg
from ..brushes.stroke import generate_stroke
from ..core.noise import PerlinNoise
from ..core.primitives import Point
from ..core.prng import PRNG
from ..svg.elements import Chunk, Polyline

WHITE = "rgba(255,255,255,1)"


def ridges(
    prng: PRNG,
    noise: PerlinNoise,
    y: float,
    height: float,
    width: float,
    layers: int,
    samples: int,
    noise_seed: float,
) -> List[List[Point]]:
    """Nested ridge lines, outermost first, in chunk-local coordinates."""
    out: List[List[Point]] = []
    lift = 0.0
    for j in range(layers):
        lift += prng.random(0, max(0.0, y) / 100)
        p = 1 - j / layers
        ridge = []
        for i in range(samples):
            u = (i / samples - 0.5) * math.pi
            v = math.cos(u) * noise(prng, u + 10, j * 0.15, noise_seed)
            ridge.append(Point(u / math.pi * width * p, -v * height * p + lift))
        out.append(ridge)
    return out


def mount_chunk(
    prng: PRNG,
    noise: PerlinNoise,
    x: float,
    y: float,
    *,
    height: Optional[float] = None,
    height_range: Tuple[float, float] = (100.0, 500.0),
    width: Optional[float] = None,
    width_range: Tuple[float, float] = (400.0, 600.0),
    layers: int = 10,
    samples: int = 50,
    rocks: int = 5,
    noise_seed: float = 0.0,
    outline_color: str = "rgba(100,100,100,0.3)",
    outline_width: float = 3.0,
    outline_noise: float = 1.0,
) -> Chunk:
    if height is None:
        height = prng.random(*height_range)
    if width is None:
        width = prng.random(*width_range)

    chunk = Chunk("mount", x, y)
    lines = ridges(prng, noise, y, height, width, layers, samples, noise_seed)
    outer = lines[0]

    chunk.add(Polyline(outer + [Point(0, layers * 4)], x, y, fill=WHITE, stroke="none"))

    outline = StrokeCfg(fill=outline_color, color=outline_color, width=outline_width, noise=outline_noise)
    chunk.add(generate_stroke(prng, noise, outer, outline, x, y))

    for line in lines[1::3]:
        shade = f"rgba(100,100,100,{prng.random(0.1, 0.3):.3f})"
        chunk.add(generate_stroke(prng, noise, line, StrokeCfg(fill=shade, color=shade, width=1.5), x, y))

    for _ in range(rocks):
        anchor = outer[int(prng.random(0.2, 0.8) * samples)]
        center = Point(x + anchor.x, y + anchor.y + prng.random(10, 40))
        cfg = BlobCfg(
            length=prng.random(8, 20),
            width=prng.random(3, 7),
            angle=prng.random(-0.3, 0.3),
            fill=f"rgba(100,100,100,{prng.random(0.3, 0.6):.3f})",
        )
        chunk.add(generate_blob(prng, noise, center, cfg))
    return chunk
