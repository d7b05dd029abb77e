"""Exception types raised by the geometry engine."""
from __future__ import annotations

__all__ = [
    "ShanshuiError",
    "InsufficientPointsError",
    "DistributionError",
    "UnknownKindError",
]


class ShanshuiError(Exception):
    """Base class for all errors raised by :mod:`shanshui`."""


class InsufficientPointsError(ShanshuiError, ValueError):
    """A polyline has fewer points than the operation needs."""

    def __init__(self, what: str, required: int, got: int):
        self.what = what
        self.required = int(required)
        self.got = int(got)
        super().__init__(f"insufficient points for {what}: need >= {required}, got {got}")


def require_points(points, required: int, what: str) -> None:
    n = len(points)
    if n < required:
        raise InsufficientPointsError(what, required, n)


class DistributionError(ShanshuiError, RuntimeError):
    """Rejection sampling gave up before accepting a draw."""


class UnknownKindError(ShanshuiError, KeyError):
    """``generate_scene`` was asked for a kind it does not know."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "unknown scene kind"
