"""Shared utilities for scoring arithmetic and randomness."""

from .random_source import (
    RandomSource,
    constant_random_source,
    default_random_source,
    resolve_random_source,
    seeded_random_source,
)
from .scores import (
    capped_ratio,
    days_since,
    freshness_score,
    safe_ratio,
    view_magnitude_closeness,
)

__all__ = [
    "RandomSource",
    "capped_ratio",
    "constant_random_source",
    "days_since",
    "default_random_source",
    "freshness_score",
    "resolve_random_source",
    "safe_ratio",
    "seeded_random_source",
    "view_magnitude_closeness",
]
