import math

import pytest

from shanshui.core import PRNG, PerlinNoise, Point


@pytest.fixture
def prng(): return PRNG("test-seed")

@pytest.fixture
def noise(): return PerlinNoise()

@pytest.fixture
def make_line():
    """Horizontal polyline of ``n`` points spaced ``step`` apart."""
    def _fn(n=10, step=10.0, y=0.0):
        return [Point(i * step, y) for i in range(n)]
    return _fn

@pytest.fixture
def wavy_line():
    return [Point(i * 8.0, 20 * math.sin(i * 0.4)) for i in range(25)]
