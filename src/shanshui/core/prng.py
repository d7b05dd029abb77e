"""Seeded quadratic-residue pseudo-random sequence.

The state is squared modulo the product of two large primes on every draw
(a Blum-Blum-Shub style generator).  For a fixed seed the whole stream is
reproducible bit for bit; one instance must not be shared between
concurrent callers since :meth:`PRNG.next` mutates the state without locking.
"""
from __future__ import annotations

import json
import math
import time
from typing import Callable, Optional, Sequence, TypeVar, Union

from ..errors import DistributionError
from ..utils.logging import logger as _root_logger
from .primitives import Range

logger = _root_logger.getChild("prng")

T = TypeVar("T")
Seed = Union[str, int, float]

PRIME_ONE = 999979
PRIME_TWO = 999983
SEMIPRIME = PRIME_ONE * PRIME_TWO

# draws thrown away after seeding; the first squares of a small state are poor
_WARMUP_DRAWS = 10
_HASH_RADIX = 128
DEFAULT_MAX_ATTEMPTS = 10_000


def hash_seed(value: Seed) -> int:
    """Hash ``value`` to a non-negative integer.

    The JSON text of the seed is read character by character, each code
    weighted by ``128**i``.  Python integers are unbounded, so long strings
    keep every character's contribution.  Whole-number floats hash like
    the matching integer (``1.0`` as ``1``) and non-ASCII text is kept as is,
    matching JavaScript's ``JSON.stringify``.
    """
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    text = json.dumps(value, ensure_ascii=False)
    return sum(ord(ch) * _HASH_RADIX ** i for i, ch in enumerate(text))


def _is_degenerate(state: int) -> bool:
    return state in (0, 1) or state % PRIME_ONE == 0 or state % PRIME_TWO == 0


class PRNG:
    """Deterministic stream of floats in ``(0, 1)``.

    Parameters
    ----------
    seed:
        String or number.  ``None`` seeds from the wall clock, which makes the
        stream non-reproducible; callers that must regenerate a scene always
        pass a seed.
    """

    def __init__(self, seed: Optional[Seed] = None):
        self._state = 0
        self._seed: Optional[Seed] = None
        self.set_seed(seed)

    @property
    def seed(self) -> Optional[Seed]:
        """The seed value last applied."""
        return self._seed

    @property
    def state(self) -> int:
        return self._state

    def set_seed(self, value: Optional[Seed]) -> None:
        """Reset the stream so it is fully determined by ``value``."""
        if value is None:
            value = int(time.time() * 1000)
            logger.debug("seeding from wall clock (%d); stream is not reproducible", value)

        base = hash_seed(value)
        z = 0
        state = base % SEMIPRIME
        while _is_degenerate(state):
            z += 1
            state = (base + z) % SEMIPRIME

        self._seed = value
        self._state = state
        for _ in range(_WARMUP_DRAWS):
            self.next()

    def next(self) -> float:
        self._state = (self._state * self._state) % SEMIPRIME
        return self._state / SEMIPRIME

    def random(self, lo: float = 0.0, hi: float = 1.0) -> float:
        """Uniform draw in ``[lo, hi)``."""
        return self.next() * (hi - lo) + lo

    def random_sign(self) -> int:
        return -1 if self.random() > 0.5 else 1

    def random_choice(self, items: Sequence[T]) -> T:
        if len(items) == 0:
            raise ValueError("random_choice() needs a non-empty sequence")
        return items[int(math.floor(self.random(0, len(items))))]

    def normalized_random(self, lo: float, hi: float) -> float:
        """A draw mapped from ``[0, 1)`` onto ``[lo, hi)``."""
        return Range(0.0, 1.0).map_value(self.random(), Range(lo, hi))

    def weighted_random(
        self,
        weight: Callable[[float], float],
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> float:
        """Rejection-sample ``x`` in ``[0, 1)`` with density proportional to ``weight``.

        Each attempt draws ``x`` then ``y`` and accepts ``x`` when
        ``y < weight(x)``.  Raises :class:`DistributionError` once
        ``max_attempts`` draws were rejected.
        """
        for _ in range(int(max_attempts)):
            x = self.random()
            y = self.random()
            if y < weight(x):
                return x
        raise DistributionError(
            f"distribution did not converge after {max_attempts} attempts"
        )

    def gaussian_random(self) -> float:
        """Bell-shaped draw in ``[-1, 1]``."""
        value = self.weighted_random(lambda x: math.exp(-24.0 * (x - 0.5) ** 2))
        return value * 2.0 - 1.0

    def __repr__(self) -> str:
        return f"PRNG(seed={self._seed!r})"


__all__ = ["PRNG", "Seed", "hash_seed", "PRIME_ONE", "PRIME_TWO", "SEMIPRIME"]
