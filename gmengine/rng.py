"""A seedable random number generator for integers and floats in a range."""

from __future__ import annotations

import random
import time
from typing import Optional


class EngineRandom:
    """Random values in closed integer ranges and half-open float ranges.

    Without a seed the generator is seeded from the current time in seconds.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._gen = random.Random(int(time.time()) if seed is None else seed)

    def set_seed(self, seed: int) -> None:
        """Restart the sequence from ``seed``."""
        self._gen = random.Random(seed)

    def random_int(self, low: int, high: int) -> int:
        """An integer in [low, high]; the bounds may be given in either order."""
        if high < low:
            low, high = high, low
        return self._gen.randint(low, high)

    def random_float(self, low: float, high: float) -> float:
        """A float in [low, high); the bounds may be given in either order."""
        if high < low:
            low, high = high, low
        if low == high:
            return low
        value = low + (high - low) * self._gen.random()
        # Rounding can land exactly on the upper bound; keep the range half-open.
        return low if value >= high else value