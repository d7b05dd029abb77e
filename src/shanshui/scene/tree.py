"""Trees: a fractal branch skeleton with blob leaves at the terminal twigs."""
from __future__ import annotations

import math
from typing import Tuple

from ..brushes.blob import generate_blob
from ..brushes.branch import grow_branch_levels
from ..brushes.config import BlobCfg, BranchCfg
from ..core.noise import PerlinNoise
from ..core.primitives import Point
from ..core.prng import PRNG
from ..geometry.polytools import midpoint
from ..svg.elements import Chunk, Polyline
from .mount import WHITE

BARK = "rgba(100,100,100,0.5)"


def tree_chunk(
    prng: PRNG,
    noise: PerlinNoise,
    x: float,
    y: float,
    *,
    height: float = 80.0,
    width: float = 2.0,
    depth: int = 3,
    fork_probability: float = 0.5,
    shrink: Tuple[float, float] = (0.6, 0.75),
    spread: float = 0.2,
    leaf_length: float = 6.0,
    leaf_width: float = 2.0,
    leaf_color: str = "rgba(100,100,100,0.6)",
) -> Chunk:
    """Trunk rooted at ``(x, y)`` growing upward, ``depth`` levels of branches."""
    chunk = Chunk("tree", x, y)
    lean = prng.normalized_random(-1, 1) * math.pi * 0.05
    trunk = BranchCfg(height=height, width=width, angle=-math.pi / 2 + lean, bend=0.2 * math.pi)
    grown = grow_branch_levels(
        prng,
        noise,
        Point(x, y),
        trunk,
        depth=depth,
        fork_probability=fork_probability,
        shrink=tuple(shrink),
        spread=spread,
    )

    for (left, right), _ in grown:
        chunk.add(Polyline(left + right[::-1], fill=WHITE, stroke=BARK, stroke_width=1))

    twigs = [rails for rails, level in grown if level == 0]
    for left, right in twigs:
        tip = midpoint([left[-1], right[-1]])
        cfg = BlobCfg(
            length=leaf_length,
            width=leaf_width,
            angle=-math.pi / 2 + prng.random(-1, 1),
            fill=leaf_color,
        )
        chunk.add(generate_blob(prng, noise, tip, cfg))
    return chunk
