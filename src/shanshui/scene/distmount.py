"""Distant mountains: a long noise ridge filled with shaded triangles."""
from __future__ import annotations

import math

from ..core.noise import PerlinNoise
from ..core.primitives import Point
from ..core.prng import PRNG
from ..geometry.polytools import midpoint, triangulate
from ..svg.elements import Chunk, Polyline


def distmount_chunk(
    prng: PRNG,
    noise: PerlinNoise,
    x: float,
    y: float,
    *,
    height: float = 300.0,
    length: float = 2000.0,
    segments: int = 5,
    span: float = 10.0,
    noise_seed: float = 0.0,
    max_area: float = 100.0,
) -> Chunk:
    """Ridge of ``length`` split into groups of ``segments`` steps of ``span``.

    Each group is closed with a shallow base line, drawn as one polygon and
    then as convex-triangulated patches shaded by noise.
    """
    chunk = Chunk("distmount", x, y)
    steps = length / span

    def _at(i: int, j: int, amplitude: float, exponent: float, nz: float) -> Point:
        k = i * segments + j
        envelope = max(0.0, math.sin(math.pi * k / steps)) ** exponent
        return Point(x + k * span, y + amplitude * noise(prng, k * 0.05, nz) * envelope)

    def _shade(p: Point) -> str:
        c = round(noise(prng, p.x * 0.02, p.y * 0.02, y) * 55 + 200)
        return f"rgb({c},{c},{c})"

    for i in range(math.ceil(steps / segments)):
        ridge = [_at(i, j, -height, 0.5, noise_seed) for j in range(segments + 1)]
        base = [_at(i, j * 2, 24, 1, 2) for j in range(math.ceil(segments / 2 + 1))]
        group = list(reversed(base)) + ridge

        chunk.add(Polyline(group, fill=_shade(group[-1]), stroke="none", stroke_width=1))
        for tri in triangulate(group, max_area, convex=True, optimize=False):
            c = _shade(midpoint(tri))
            chunk.add(Polyline(tri, fill=c, stroke=c, stroke_width=1))
    return chunk
