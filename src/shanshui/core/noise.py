"""Multi-octave value noise over a lazily built lattice.

Adapted from the processing/p5.js noise routine: a 4096-entry lattice of
uniform draws, cosine-eased interpolation between the eight lattice corners
around a query point, and octave summation with halving amplitude.  The y and
z axes are folded into the one-dimensional lattice by bit shifts.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..utils.logging import logger as _root_logger
from .prng import PRNG

logger = _root_logger.getChild("noise")


@dataclass(frozen=True)
class NoiseCfg:
    size: int = 4095  # index mask; the lattice holds size + 1 values
    octaves: int = 4
    amp_falloff: float = 0.5
    y_wrap_bits: int = 4
    z_wrap_bits: int = 8

    @property
    def y_wrap(self) -> int:
        return 1 << self.y_wrap_bits

    @property
    def z_wrap(self) -> int:
        return 1 << self.z_wrap_bits


def ease(t: float) -> float:
    """Cosine easing ``0.5 * (1 - cos(pi t))``."""
    return 0.5 * (1.0 - math.cos(t * math.pi))


def _mirror(v: float) -> float:
    v = float(v)
    if not math.isfinite(v):
        logger.debug("non-finite noise coordinate %r sampled as 0", v)
        return 0.0
    return abs(v)


class PerlinNoise:
    """Noise field owned by one pipeline.

    The lattice is filled from the generator passed to the first
    :meth:`noise` call and is never rebuilt; later calls only use their
    generator argument for logging.  Create a new instance to get a fresh
    lattice.
    """

    def __init__(self, cfg: Optional[NoiseCfg] = None):
        self.cfg = cfg or NoiseCfg()
        self._lattice: Optional[np.ndarray] = None
        self._owner_id: Optional[int] = None

    @property
    def lattice(self) -> Optional[np.ndarray]:
        """Read-only view of the lattice, ``None`` before the first query."""
        if self._lattice is None:
            return None
        view = self._lattice.view()
        view.flags.writeable = False
        return view

    def _ensure_lattice(self, prng: PRNG) -> np.ndarray:
        if self._lattice is None:
            n = self.cfg.size + 1
            self._lattice = np.fromiter((prng.random() for _ in range(n)), dtype=float, count=n)
            self._owner_id = id(prng)
            logger.debug("noise lattice built (%d values, seed=%r)", n, prng.seed)
        elif id(prng) != self._owner_id:
            logger.debug("noise lattice already owned; ignoring generator seed=%r", prng.seed)
        return self._lattice

    def noise(self, prng: PRNG, x: float, y: float = 0.0, z: float = 0.0) -> float:
        """Sample the field at ``(x, y, z)``.

        Coordinates are mirrored to their absolute value.  The result lies in
        ``[0, 1)`` for the default four octaves.
        """
        perlin = self._ensure_lattice(prng)
        cfg = self.cfg
        mask = cfg.size
        ywrap, zwrap = cfg.y_wrap, cfg.z_wrap

        x, y, z = (_mirror(v) for v in (x, y, z))
        xi, yi, zi = int(math.floor(x)), int(math.floor(y)), int(math.floor(z))
        xf, yf, zf = x - xi, y - yi, z - zi

        r = 0.0
        ampl = 0.5
        for _ in range(cfg.octaves):
            of = xi + (yi << cfg.y_wrap_bits) + (zi << cfg.z_wrap_bits)
            rxf = ease(xf)
            ryf = ease(yf)

            n1 = perlin[of & mask]
            n1 += rxf * (perlin[(of + 1) & mask] - n1)
            n2 = perlin[(of + ywrap) & mask]
            n2 += rxf * (perlin[(of + ywrap + 1) & mask] - n2)
            n1 += ryf * (n2 - n1)

            of += zwrap
            n2 = perlin[of & mask]
            n2 += rxf * (perlin[(of + 1) & mask] - n2)
            n3 = perlin[(of + ywrap) & mask]
            n3 += rxf * (perlin[(of + ywrap + 1) & mask] - n3)
            n2 += ryf * (n3 - n2)

            n1 += ease(zf) * (n2 - n1)
            r += float(n1) * ampl
            ampl *= cfg.amp_falloff

            xi <<= 1
            xf *= 2
            yi <<= 1
            yf *= 2
            zi <<= 1
            zf *= 2
            if xf >= 1.0:
                xi += 1
                xf -= 1
            if yf >= 1.0:
                yi += 1
                yf -= 1
            if zf >= 1.0:
                zi += 1
                zf -= 1
        return r

    __call__ = noise


__all__ = ["PerlinNoise", "NoiseCfg", "ease"]
