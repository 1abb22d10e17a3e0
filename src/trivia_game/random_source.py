"""RandomSource: seeded pseudo-random generator used to permute questions."""

import logging
import time
from typing import MutableSequence, Optional

import numpy as np

logger = logging.getLogger(__name__)


class RandomSource:
    """Uniform integer generator driving an in-place Fisher-Yates shuffle."""

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = time.time_ns()
        self.seed = seed
        self._rng = np.random.default_rng(seed)
        logger.debug(f"RandomSource seeded with {seed}")

    def randint(self, low: int, high: int) -> int:
        """Return a uniform integer in the inclusive range [low, high]."""
        if high < low:
            raise ValueError(f"Empty range: [{low}, {high}]")
        return int(self._rng.integers(low, high, endpoint=True))

    def shuffle(self, items: MutableSequence) -> None:
        """Permute ``items`` in place, visiting each index exactly once."""
        for i in range(len(items) - 1, 0, -1):
            j = self.randint(0, i)
            items[i], items[j] = items[j], items[i]
