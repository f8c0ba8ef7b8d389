"""
Random capability consumed by shape factories and the renderer.

The generator is passed in explicitly rather than reached through module
state, so a seeded ``RandomSource`` (or any object with the same two
methods) makes drawing fully reproducible.
"""

import numpy as np

from rastershapes.errors import InvalidParameterError
from rastershapes.shapes._types import Color


class RandomSource:
    """Thin wrapper over ``numpy.random.Generator``."""

    def __init__(self, seed=None):
        self._gen = np.random.default_rng(seed)

    def next_int_in_range(self, lo: int, hi: int) -> int:
        """Uniform integer in ``[lo, hi)``."""
        if lo >= hi:
            raise InvalidParameterError(f"empty range [{lo}, {hi})")
        return int(self._gen.integers(lo, hi))

    def next_u8_triple(self) -> Color:
        r, g, b = self._gen.integers(0, 256, 3)
        return Color(int(r), int(g), int(b))
