"""
Random sources for the exploration jitter on the home feed and shorts feed.

A random source is any zero-argument callable returning a float in [0, 1).
Production uses an unseeded numpy Generator; tests inject a seeded or constant one.
"""

from typing import Callable, Optional

import numpy as np

RandomSource = Callable[[], float]


def seeded_random_source(seed: Optional[int] = None) -> RandomSource:
    """Random source backed by numpy.random.default_rng(seed)."""
    rng = np.random.default_rng(seed)
    return lambda: float(rng.random())


def default_random_source() -> RandomSource:
    return seeded_random_source(None)


def constant_random_source(value: float = 0.0) -> RandomSource:
    """Always returns value; makes jittered rankings deterministic."""
    if not 0.0 <= value < 1.0:
        raise ValueError(f"random source values must be in [0, 1), got {value}")
    return lambda: value


def resolve_random_source(rng: Optional[RandomSource]) -> RandomSource:
    """Return rng or a fresh default source when none is provided."""
    return rng if rng is not None else default_random_source()
