"""Dataclasses for brush configuration."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

Profile = Callable[[float], float]

DEFAULT_COLOR = "rgba(200,200,200,0.9)"


def sine_taper(t: float) -> float:
    """``sin(pi t)``: zero at both ends, one in the middle."""
    return math.sin(t * math.pi)


def half_sine_lobe(p: float) -> float:
    """Signed lobe over ``p`` in ``[0, 2)``; the second half mirrors the first below the axis."""
    if p <= 1:
        return math.sqrt(max(0.0, math.sin(p * math.pi)))
    return -math.sqrt(max(0.0, math.sin((p + 1) * math.pi)))


@dataclass(frozen=True)
class StrokeCfg:
    """Configuration for a width-modulated ribbon along a centerline.

    ``noise`` is the mix factor between the plain profile width and the
    noise-modulated width; ``0`` gives a clean taper.
    """
    fill: str = DEFAULT_COLOR
    color: str = DEFAULT_COLOR
    width: float = 2.0
    noise: float = 0.5
    stroke_width: float = 1.0
    profile: Profile = sine_taper


@dataclass(frozen=True)
class BlobCfg:
    """Configuration for a radially sampled leaf/rock silhouette."""
    length: float = 20.0
    width: float = 5.0
    angle: float = 0.0
    noise: float = 0.5
    fill: str = DEFAULT_COLOR
    resolution: int = 15
    profile: Profile = half_sine_lobe


@dataclass(frozen=True)
class BranchCfg:
    """Configuration for a tapering, bending trunk segment.

    ``detail`` is the number of rail samples per centerline segment;
    ``burl`` scales the random bump added at segment joints and
    ``jitter_scale`` the noise wobble (relative to ``width * height``).
    """
    height: float = 300.0
    width: float = 6.0
    angle: float = 0.0
    bend: float = 0.2
    detail: int = 10
    segments: int = 3
    jitter_scale: float = 1.0 / 80.0
    burl: float = 1.0


__all__ = [
    "Profile",
    "DEFAULT_COLOR",
    "sine_taper",
    "half_sine_lobe",
    "StrokeCfg",
    "BlobCfg",
    "BranchCfg",
]
