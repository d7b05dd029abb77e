"""shanshui: deterministic generative geometry for landscape vector art.

External users can simply ``from shanshui import generate_scene``.
"""

from .api import SCENE_KINDS, generate_scene
from .core import PRNG, PerlinNoise, Point, Vector
from .errors import DistributionError, InsufficientPointsError, ShanshuiError, UnknownKindError
from .svg import Chunk, Composite, Polyline, Text, render_layers

__all__ = [
    "generate_scene",
    "SCENE_KINDS",
    "PRNG",
    "PerlinNoise",
    "Point",
    "Vector",
    "Chunk",
    "Composite",
    "Polyline",
    "Text",
    "render_layers",
    "ShanshuiError",
    "InsufficientPointsError",
    "DistributionError",
    "UnknownKindError",
]
