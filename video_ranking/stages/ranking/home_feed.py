"""
Home feed ranking: additive multi-factor score over long-form candidates.

score = category affinity + engagement + freshness + popularity
      + subscription bonus + diversity penalty + continue-watching boost + jitter
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Union

from ...models.config import RecommendationConfig, resolve_config
from ...models.scoring import ScoredVideo
from ...models.user import User, ensure_user
from ...models.video import Video, ensure_videos
from ...utils.random_source import RandomSource, resolve_random_source
from ..candidate_pool import long_form_candidates
from .factors import (
    category_affinity,
    continue_watching_boost,
    diversity_penalty,
    engagement_score,
    history_category_counts,
    home_freshness,
    popularity_score,
    subscription_bonus,
)
from .ordering import sort_by_score, top_videos
from .reasons import home_feed_reasons

logger = logging.getLogger(__name__)


def rank_home_feed(
    videos: List[Union[Dict[str, Any], Video]],
    user: Union[Dict[str, Any], User, None],
    exclude_ids: Iterable[str] = (),
    config: Optional[RecommendationConfig] = None,
    rng: Optional[RandomSource] = None,
    now: Optional[datetime] = None,
) -> List[ScoredVideo]:
    """
    Score every eligible long-form video for the home feed and sort descending.

    Returns the full ranked list with per-factor components and reasons;
    get_recommendations truncates it.
    """
    config = resolve_config(config)
    rng = resolve_random_source(rng)
    videos = ensure_videos(videos)
    user = ensure_user(user)
    now = now or datetime.now(timezone.utc)

    # User-side signals, computed once per call
    category_by_id = {v.id: v.category for v in videos}
    counts = history_category_counts(user, category_by_id, config)
    history_length = len(user.watch_history_detailed)
    subscribed = user.subscribed_channel_ids()
    recent_ids = user.recent_watch_ids(config.diversity_window)
    detailed_by_id = user.detailed_by_video_id()

    candidates = long_form_candidates(videos, exclude_ids)
    scored: List[ScoredVideo] = []
    for video in candidates:
        components = {
            "category": category_affinity(video, counts, history_length, config),
            "engagement": engagement_score(video, config),
            "freshness": home_freshness(video, config, now),
            "popularity": popularity_score(video, config),
            "subscription": subscription_bonus(video, subscribed, config),
            "diversity": diversity_penalty(video, recent_ids, config),
            "continue_watching": continue_watching_boost(video, detailed_by_id, config),
            "jitter": rng() * config.home_jitter,
        }
        scored.append(
            ScoredVideo(
                video=video,
                score=sum(components.values()),
                reasons=home_feed_reasons(components, config),
                components=components,
            )
        )

    ranked = sort_by_score(scored)
    logger.debug(
        "[home_feed] RANKED user=%s pool=%d candidates=%d",
        user.id, len(videos), len(candidates),
    )
    return ranked


def get_recommendations(
    videos: List[Union[Dict[str, Any], Video]],
    user: Union[Dict[str, Any], User, None],
    exclude_ids: Iterable[str] = (),
    limit: Optional[int] = None,
    *,
    config: Optional[RecommendationConfig] = None,
    rng: Optional[RandomSource] = None,
    now: Optional[datetime] = None,
) -> List[Video]:
    """
    Home feed: top `limit` long-form videos (default config.home_limit = 20).

    Excluded ids and shorts never appear. Cold-start users are ranked by
    engagement, freshness, and popularity alone.
    """
    config = resolve_config(config)
    limit = config.home_limit if limit is None else limit
    ranked = rank_home_feed(videos, user, exclude_ids, config, rng, now)
    return top_videos(ranked, limit)
