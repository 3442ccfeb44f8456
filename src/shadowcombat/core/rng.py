"""Deterministic random source built on top of random.Random."""
from __future__ import annotations

from random import Random


class RNG:
    """Seeded random source. Calling an instance draws the next float in [0.0, 1.0)."""

    def __init__(self, seed: int) -> None:
        self._random = Random(seed)

    def __call__(self) -> float:
        return self.random()

    def random(self) -> float:
        return self._random.random()
