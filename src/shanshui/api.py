"""Generation call surface: one seeded call per placed scene object."""
from __future__ import annotations

from typing import Any, Optional, Tuple

from .config.loader import load_profile
from .config.schema import Profile
from .core.noise import PerlinNoise
from .core.prng import PRNG, Seed
from .errors import UnknownKindError
from .scene import COMPOSERS
from .svg.elements import Chunk
from .utils.logging import logger as _root_logger

logger = _root_logger.getChild("api")

SCENE_KINDS: Tuple[str, ...] = tuple(COMPOSERS)


def generate_scene(
    seed: Optional[Seed],
    kind: str,
    x: float,
    y: float,
    *,
    prng: Optional[PRNG] = None,
    noise: Optional[PerlinNoise] = None,
    profile: Optional[Profile] = None,
    **params: Any,
) -> Chunk:
    """Build one chunk of ``kind`` anchored at ``(x, y)``.

    The same ``seed``, ``kind``, coordinates and parameters always give the
    same markup.  A seed is mandatory unless a ready ``prng`` is passed,
    in which case the seed is ignored and the generator's current state is
    used.  Pass one ``noise`` instance to several calls to share a lattice.
    Keyword ``params`` override the profile's defaults for ``kind`` and are
    validated against them.
    """
    composer = COMPOSERS.get(kind)
    if composer is None:
        raise UnknownKindError(f"unknown scene kind {kind!r}; expected one of {SCENE_KINDS}")
    if prng is None:
        if seed is None:
            raise ValueError("generate_scene() needs an explicit seed for reproducible output")
        prng = PRNG(seed)
    if noise is None:
        noise = PerlinNoise()
    if profile is None:
        profile = load_profile()

    section = getattr(profile.chunks, kind)
    merged = type(section).model_validate({**section.model_dump(), **params}).model_dump()

    chunk = composer(prng, noise, x, y, **merged)
    logger.debug("generated %s at (%g, %g): %d element(s)", kind, x, y, len(chunk))
    return chunk


__all__ = ["SCENE_KINDS", "generate_scene"]
