"""
Trending ranking: view velocity times engagement rate within a recency window.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union

from ...models.config import RecommendationConfig, resolve_config
from ...models.scoring import ScoredVideo
from ...models.video import Video, ensure_videos
from ...utils.scores import days_since, safe_ratio
from ..candidate_pool import long_form_candidates, uploaded_within
from .ordering import sort_by_score, top_videos

logger = logging.getLogger(__name__)

DEFAULT_TIMEFRAME = "week"


def trending_window_days(timeframe: str, config: RecommendationConfig) -> float:
    """Cutoff in days for timeframe ("day", "week", "month")."""
    try:
        return config.trending_window_days[timeframe]
    except KeyError:
        raise ValueError(
            f"Unknown trending timeframe {timeframe!r}; "
            f"expected one of {sorted(config.trending_window_days)}"
        ) from None


def trending_score(
    video: Video,
    config: RecommendationConfig,
    now: Optional[datetime] = None,
) -> float:
    """views / max(age, min_age) * (likes + w * comments) / max(views, 1) * scale."""
    age = max(days_since(video.upload_date, now), config.trending_min_age_days)
    velocity = safe_ratio(video.views, age)
    engagement_rate = (
        video.likes + config.trending_comment_weight * video.comment_count
    ) / max(video.views, 1)
    return velocity * engagement_rate * config.trending_scale


def rank_trending(
    videos: List[Union[Dict[str, Any], Video]],
    timeframe: str = DEFAULT_TIMEFRAME,
    config: Optional[RecommendationConfig] = None,
    now: Optional[datetime] = None,
) -> List[ScoredVideo]:
    config = resolve_config(config)
    window = trending_window_days(timeframe, config)
    videos = ensure_videos(videos)
    now = now or datetime.now(timezone.utc)

    candidates = uploaded_within(long_form_candidates(videos), window, now)
    scored = [
        ScoredVideo(video=v, score=trending_score(v, config, now))
        for v in candidates
    ]
    logger.debug(
        "[trending] RANKED timeframe=%s window_days=%s candidates=%d",
        timeframe, window, len(candidates),
    )
    return sort_by_score(scored)


def get_trending_videos(
    videos: List[Union[Dict[str, Any], Video]],
    timeframe: str = DEFAULT_TIMEFRAME,
    limit: Optional[int] = None,
    *,
    config: Optional[RecommendationConfig] = None,
    now: Optional[datetime] = None,
) -> List[Video]:
    """
    Trending shelf: fast-rising long-form videos uploaded within the timeframe.

    Raises ValueError for a timeframe other than "day", "week" or "month".
    """
    config = resolve_config(config)
    limit = config.trending_limit if limit is None else limit
    return top_videos(rank_trending(videos, timeframe, config, now), limit)
