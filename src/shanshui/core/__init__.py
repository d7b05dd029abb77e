"""Deterministic randomness and planar value types."""
from .noise import NoiseCfg, PerlinNoise
from .primitives import Bound, Point, Range, Vector, as_array, distance, from_array
from .prng import PRNG

__all__ = [
    "PRNG",
    "PerlinNoise",
    "NoiseCfg",
    "Point",
    "Vector",
    "Range",
    "Bound",
    "distance",
    "as_array",
    "from_array",
]
