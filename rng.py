"""
Randomness source shared by the generators.

Wraps a NumPy Generator so a generator call can be handed a seeded source
and produce reproducible output. A module-level default source is used
when the caller passes nothing.
"""

import logging
import threading
import time
from typing import List, Optional

import numpy as np


logger = logging.getLogger(__name__)


class RandomSource:
    """Uniform permutations and bounded integers, safe to share across threads."""

    def __init__(self, seed: Optional[int] = None):
        self._lock = threading.Lock()
        self._gen = np.random.default_rng(self._resolve(seed))

    @staticmethod
    def _resolve(seed: Optional[int]) -> int:
        if seed is None:
            return time.time_ns()
        return seed

    def seed(self, seed: Optional[int] = None) -> None:
        """Reseed; with no seed, use the high-resolution clock."""
        value = self._resolve(seed)
        with self._lock:
            self._gen = np.random.default_rng(value)
        logger.debug("random source reseeded with %d", value)

    def permutation(self, n: int) -> List[int]:
        """Uniform random permutation of 0..n-1."""
        with self._lock:
            return [int(i) for i in self._gen.permutation(n)]

    def uniform_int(self, n: int) -> int:
        """Uniform integer in [0, n)."""
        if n <= 0:
            raise ValueError("n must be positive")
        with self._lock:
            return int(self._gen.integers(0, n))


_default_source = RandomSource()


def get_default_source() -> RandomSource:
    return _default_source


def reseed(seed: Optional[int] = None) -> None:
    """Reseed the process-wide default source (from the clock if seed is None)."""
    _default_source.seed(seed)


def resolve_source(seed: Optional[int] = None, rng: Optional[RandomSource] = None) -> RandomSource:
    """
    Pick the source a generator call should draw from.

    An explicit rng wins; otherwise a seed builds a private source for the
    call; otherwise the default source is used.
    """
    if rng is not None:
        return rng
    if seed is not None:
        return RandomSource(seed)
    return _default_source
