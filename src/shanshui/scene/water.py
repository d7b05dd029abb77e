"""Water: clusters of thin, fading wave strokes."""
from __future__ import annotations

import math

import numpy as np

from ..brushes.config import StrokeCfg
from ..brushes.stroke import generate_stroke
from ..core.noise import PerlinNoise
from ..core.primitives import Point
from ..core.prng import PRNG
from ..svg.elements import Chunk
from ..utils.logging import logger as _root_logger

logger = _root_logger.getChild("scene.water")

WAVE_STEP = 5


def water_chunk(
    prng: PRNG,
    noise: PerlinNoise,
    x: float,
    y: float,
    *,
    height: float = 2.0,
    width: float = 800.0,
    clusters: int = 10,
    color_prefix: str = "rgba(100,100,100,",
) -> Chunk:
    chunk = Chunk("water", x, y)
    yk = 0.0
    waves = []
    for _ in range(clusters):
        xk = prng.random(-0.5, 0.5) * width / 8
        lk = width * prng.random(0.25, 0.5)
        yk += prng.random(0, 5)
        waves.append([
            Point(j + xk, math.sin(j * 0.2) * height * noise(prng, j * 0.1) - 20 + yk)
            for j in np.arange(-lk, lk, WAVE_STEP).tolist()
        ])

    for wave in waves:
        if len(wave) < 3:
            logger.debug("water: wave of %d point(s) skipped", len(wave))
            continue
        color = f"{color_prefix}{prng.random(0.3, 0.6):.3f})"
        chunk.add(generate_stroke(prng, noise, wave, StrokeCfg(fill=color, color=color), x, y))
    return chunk
