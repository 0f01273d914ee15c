"""Seedable pseudo-random numbers in the style of the C library's rand()."""

from __future__ import annotations

import random
import time

RAND_MAX = (1 << 31) - 1


class Random:
    """A pseudo-random source yielding non-negative ints up to RAND_MAX."""

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = time.perf_counter_ns()
        self._source = random.Random(seed)

    def next(self) -> int:
        """Return the next value in 0..RAND_MAX."""
        return self._source.getrandbits(31)

    def between(self, low: int, high: int) -> int:
        """Return a value in low..high, both ends included."""
        if high < low:
            raise ValueError(f"empty range: {low}..{high}")
        return low + self.next() % (high - low + 1)