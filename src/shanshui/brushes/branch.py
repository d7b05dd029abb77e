"""Tapering, bending branch rails and an explicit-depth fractal grower."""
from __future__ import annotations

import math
from dataclasses import replace
from typing import List, Optional, Tuple

import numpy as np

from ..core.noise import PerlinNoise
from ..core.primitives import Point, as_array, from_array
from ..core.prng import PRNG
from ..geometry.polytools import un_nan
from ..utils.logging import logger as _root_logger
from .config import BranchCfg

logger = _root_logger.getChild("branch")

Rails = Tuple[List[Point], List[Point]]


def _centerline(prng: PRNG, cfg: BranchCfg) -> np.ndarray:
    """Randomly bent polyline from the origin, turned so its chord points at ``cfg.angle``."""
    g = int(cfg.segments)
    step = cfg.height / g
    pts = np.zeros((g + 1, 2))
    heading = 0.0
    for i in range(g):
        heading += prng.random(1, 2) * cfg.bend / 2 * prng.random_sign()
        pts[i + 1, 0] = pts[i, 0] + math.cos(heading) * step
        pts[i + 1, 1] = pts[i, 1] - math.sin(heading) * step

    theta = cfg.angle - math.atan2(pts[-1, 1], pts[-1, 0])
    c, s = math.cos(theta), math.sin(theta)
    R = np.array([[c, -s], [s, c]])
    return pts @ R.T


def _rails(prng: PRNG, noise: PerlinNoise, cfg: BranchCfg) -> Tuple[Rails, Point]:
    spine = _centerline(prng, cfg)
    detail = int(cfg.detail)
    if detail < 1:
        raise ValueError(f"branch detail must be >= 1, got {detail}")
    total = (spine.shape[0] - 1) * detail

    idx = np.arange(total)
    seg = idx // detail
    t = ((idx % detail) / detail)[:, None]
    samples = spine[seg] * (1 - t) + spine[seg + 1] * t

    w = cfg.width
    left: List[Point] = []
    right: List[Point] = []
    prev = samples[0]
    for i in range(total):
        cur = samples[i]
        ref = spine[1] - spine[0] if i == 0 else cur - prev
        angle = math.atan2(ref[1], ref[0])

        half = w * ((total - i) / total * 0.5 + 0.5)
        jitter = (noise(prng, i * 0.3) - 0.5) * w * cfg.height * cfg.jitter_scale
        jitter = min(max(jitter, -half), half)
        burl = prng.random() * w * cfg.burl if i % detail == 0 else 0.0

        dl = half + jitter + burl
        dr = half - jitter + burl
        ul = (math.cos(angle + math.pi / 2), math.sin(angle + math.pi / 2))
        ur = (math.cos(angle - math.pi / 2), math.sin(angle - math.pi / 2))
        left.append(Point(cur[0] + ul[0] * dl, cur[1] + ul[1] * dl))
        right.append(Point(cur[0] + ur[0] * dr, cur[1] + ur[1] * dr))
        prev = cur

    tip = Point(float(spine[-1, 0]), float(spine[-1, 1]))
    return (un_nan(left), un_nan(right)), tip


def _translate(points: List[Point], origin: Point) -> List[Point]:
    return from_array(as_array(points) + np.array([origin.x, origin.y]))


def generate_branch(
    prng: PRNG,
    noise: PerlinNoise,
    cfg: Optional[BranchCfg] = None,
    origin: Optional[Point] = None,
) -> Rails:
    """Left and right rails of one branch rooted at ``origin``.

    Each rail holds ``segments * detail`` points.  The half gap between
    the rails tapers from ``width`` at the root to ``width / 2`` at the tip,
    plus a random burl at every segment joint.  Noise jitter shifts both
    rails sideways but never past the centerline.
    """
    cfg = cfg or BranchCfg()
    (left, right), _ = _rails(prng, noise, cfg)
    if origin is not None:
        left, right = _translate(left, origin), _translate(right, origin)
    return left, right


def grow_branch_levels(
    prng: PRNG,
    noise: PerlinNoise,
    origin: Point,
    cfg: BranchCfg,
    *,
    depth: int,
    fork_probability: float = 0.5,
    shrink: Tuple[float, float] = (0.8, 0.9),
    spread: float = 0.2,
) -> List[Tuple[Rails, int]]:
    """Grow a fractal skeleton ``depth`` levels below the trunk.

    Parameters
    ----------
    origin:
        Root of the trunk.
    cfg:
        Trunk configuration; children inherit it with ``height`` and
        ``width`` scaled by a factor drawn from ``shrink``.
    depth:
        Levels of children; ``0`` yields only the trunk.
    fork_probability:
        Chance that a branch splits in two instead of continuing as one.
    spread:
        Fork half-angle as a fraction of ``pi``.

    Returns
    -------
    list of ((left, right), level)
        Rails in pre-order, parent before its children, each with the
        number of levels still below it; ``0`` marks a terminal twig.
    """
    if depth < 0:
        raise ValueError(f"depth must be >= 0, got {depth}")

    out: List[Tuple[Rails, int]] = []
    stack: List[Tuple[Point, BranchCfg, int]] = [(origin, cfg, depth)]
    while stack:
        root, bcfg, level = stack.pop()
        (left, right), tip = _rails(prng, noise, bcfg)
        out.append(((_translate(left, root), _translate(right, root)), level))
        if level == 0:
            continue

        end = Point(root.x + tip.x, root.y + tip.y)
        if prng.random() < fork_probability:
            angles = [
                bcfg.angle + math.pi * spread * prng.normalized_random(-1, -0.5),
                bcfg.angle + math.pi * spread * prng.normalized_random(0.5, 1),
            ]
        else:
            angles = [bcfg.angle + math.pi * spread * prng.normalized_random(-0.25, 0.25)]

        children = []
        for a in angles:
            k = prng.normalized_random(*shrink)
            children.append((end, replace(bcfg, angle=a, height=bcfg.height * k, width=bcfg.width * k), level - 1))
        stack.extend(reversed(children))

    logger.debug("grew %d branch(es) to depth %d", len(out), depth)
    return out


def grow_branches(
    prng: PRNG,
    noise: PerlinNoise,
    origin: Point,
    cfg: BranchCfg,
    *,
    depth: int,
    fork_probability: float = 0.5,
    shrink: Tuple[float, float] = (0.8, 0.9),
    spread: float = 0.2,
) -> List[Rails]:
    """Rails of :func:`grow_branch_levels` without the levels."""
    grown = grow_branch_levels(
        prng,
        noise,
        origin,
        cfg,
        depth=depth,
        fork_probability=fork_probability,
        shrink=shrink,
        spread=spread,
    )
    return [rails for rails, _ in grown]


__all__ = ["Rails", "generate_branch", "grow_branch_levels", "grow_branches"]
