"""Planar value types: points, vectors, numeric ranges and bounds.

All operations return new objects; nothing here draws random numbers.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Sequence

import numpy as np

Array = np.ndarray


@dataclass(frozen=True)
class Vector:
    """A displacement in the plane."""

    x: float
    y: float

    def to_array(self) -> list[float]:
        return [self.x, self.y]

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def move_from(self, source: "Point") -> "Point":
        return source.move(self)

    def move(self, vector: "Vector") -> "Vector":
        return Vector(self.x + vector.x, self.y + vector.y)

    def scale(self, ratio: float) -> "Vector":
        return Vector(self.x * ratio, self.y * ratio)

    @staticmethod
    def unit(angle: float = 0.0) -> "Vector":
        """Unit vector pointing at ``angle`` radians."""
        return Vector(math.cos(angle), math.sin(angle))

    @staticmethod
    def from_array(array: Sequence[float]) -> "Vector":
        return Vector(float(array[0]), float(array[1]))


@dataclass(frozen=True)
class Point:
    """A location in the plane.  Coordinates may be non-finite until guarded."""

    x: float = 0.0
    y: float = 0.0

    def to_array(self) -> list[float]:
        return [self.x, self.y]

    def to(self, destination: "Point") -> Vector:
        """Vector from this point to ``destination``."""
        return Vector(destination.x - self.x, destination.y - self.y)

    def from_(self, source: "Point") -> Vector:
        """Vector from ``source`` to this point."""
        return source.to(self)

    def move(self, vector: Vector) -> "Point":
        return Point(self.x + vector.x, self.y + vector.y)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def copy(self) -> "Point":
        return Point(self.x, self.y)

    @staticmethod
    def from_array(array: Sequence[float]) -> "Point":
        return Point(float(array[0]), float(array[1]))

    @staticmethod
    def origin() -> "Point":
        return Point(0.0, 0.0)


def distance(p0: Point, p1: Point) -> float:
    """Euclidean distance between two points."""
    return p0.to(p1).length()


@dataclass(frozen=True)
class Range:
    """Closed numeric interval ``[left, right]`` used for linear remapping."""

    left: float = 0.0
    right: float = 1.0

    @property
    def length(self) -> float:
        return self.right - self.left

    def map_to_ratio(self, value: float) -> float:
        return (value - self.left) / self.length

    def map_from_ratio(self, ratio: float) -> float:
        return ratio * self.length + self.left

    def map_value(self, value: float, output_range: "Range") -> float:
        """Map ``value`` from this range onto ``output_range`` linearly."""
        return output_range.map_from_ratio(self.map_to_ratio(value))

    @staticmethod
    def from_array(array: Sequence[float]) -> "Range":
        return Range(float(array[0]), float(array[1]))


@dataclass(frozen=True)
class Bound:
    """Axis-aligned bounding box."""

    x_min: float = 0.0
    x_max: float = 0.0
    y_min: float = 0.0
    y_max: float = 0.0

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    @property
    def center(self) -> Point:
        return Point(0.5 * (self.x_min + self.x_max), 0.5 * (self.y_min + self.y_max))


# ---------------------------------------------------------------------------
# numpy bridge
# ---------------------------------------------------------------------------

def as_array(points: Iterable[Point]) -> Array:
    """Stack ``points`` into an ``(N,2)`` float array."""
    pts = [(p.x, p.y) for p in points]
    if not pts:
        return np.zeros((0, 2), float)
    return np.asarray(pts, dtype=float)


def from_array(arr: Array) -> List[Point]:
    """Inverse of :func:`as_array`."""
    a = np.asarray(arr, dtype=float).reshape(-1, 2)
    return [Point(float(x), float(y)) for x, y in a]


__all__ = [
    "Array",
    "Point",
    "Vector",
    "Range",
    "Bound",
    "distance",
    "as_array",
    "from_array",
]
