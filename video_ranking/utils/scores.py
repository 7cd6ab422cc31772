"""
Score helpers: age, guarded ratios, and the normalisations shared by all surfaces.
"""

import logging
import math
from datetime import datetime, timezone
from typing import Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60


def _utc(dt: datetime) -> datetime:
    return dt.replace(tzinfo=timezone.utc) if dt.tzinfo is None else dt


def days_since(date_str: str, now: Optional[datetime] = None) -> float:
    """
    Fractional days since an ISO date string.

    Returns math.inf when the date cannot be parsed, so unknown upload dates
    rank as the oldest possible content. Future dates give negative ages.
    """
    now = _utc(now) if now is not None else datetime.now(timezone.utc)
    try:
        dt = _utc(datetime.fromisoformat((date_str or "").replace("Z", "+00:00")))
    except ValueError:
        logger.debug("[scores] UNPARSEABLE_DATE value=%r", date_str)
        return math.inf
    return (now - dt).total_seconds() / SECONDS_PER_DAY


def safe_ratio(numerator: float, denominator: float) -> float:
    """numerator / denominator, or 0.0 when the denominator is not positive."""
    return numerator / denominator if denominator > 0 else 0.0


def capped_ratio(value: float, cap: float) -> float:
    """min(value / cap, 1)."""
    return min(safe_ratio(value, cap), 1.0)


def freshness_score(
    days_old: float,
    buckets: Sequence[Tuple[float, float]],
    floor: float,
) -> float:
    """Step function over age: score of the first bucket whose max age exceeds days_old."""
    for max_age, score in buckets:
        if days_old < max_age:
            return score
    return floor


def view_magnitude_closeness(
    views: int,
    reference_views: int,
    max_closeness: float = 10.0,
    slope: float = 2.0,
) -> float:
    """
    Reward similar view-count magnitude: max(0, max - slope * |log10(v+1) - log10(ref+1)|).

    Equal orders of magnitude score max_closeness; the score drops linearly per
    decade of difference.
    """
    diff = abs(math.log10(max(views, 0) + 1) - math.log10(max(reference_views, 0) + 1))
    return max(0.0, max_closeness - slope * diff)
