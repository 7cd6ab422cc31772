"""
Shorts feed ranking: exploration jitter plus liked-category, subscription,
and like-rate terms over short-form videos only.
"""

import logging
from typing import Any, Dict, List, Optional, Set, Union

from ...models.config import RecommendationConfig, resolve_config
from ...models.scoring import ScoredVideo
from ...models.user import User, ensure_user
from ...models.video import Video, ensure_videos
from ...utils.random_source import RandomSource, resolve_random_source
from ...utils.scores import safe_ratio
from ..candidate_pool import short_form_candidates
from .ordering import sort_by_score, top_videos
from .reasons import shorts_reasons

logger = logging.getLogger(__name__)


def liked_categories(videos: List[Video], user: User) -> Set[str]:
    """Categories of the user's liked videos that are present in the pool."""
    category_by_id = {v.id: v.category for v in videos}
    found = {category_by_id[vid] for vid in user.liked_videos if vid in category_by_id}
    missing = len(set(user.liked_videos) - set(category_by_id))
    if missing:
        logger.debug("[shorts] LIKED_NOT_IN_POOL user=%s count=%d", user.id, missing)
    return found


def rank_shorts(
    videos: List[Union[Dict[str, Any], Video]],
    user: Union[Dict[str, Any], User, None],
    config: Optional[RecommendationConfig] = None,
    rng: Optional[RandomSource] = None,
) -> List[ScoredVideo]:
    config = resolve_config(config)
    rng = resolve_random_source(rng)
    videos = ensure_videos(videos)
    user = ensure_user(user)

    categories = liked_categories(videos, user)
    subscribed = user.subscribed_channel_ids()

    scored = []
    for short in short_form_candidates(videos):
        components = {
            "jitter": rng() * config.shorts_jitter,
            "liked_category": (
                config.shorts_liked_category_bonus if short.category in categories else 0.0
            ),
            "subscription": (
                config.shorts_subscription_bonus if short.channel_id in subscribed else 0.0
            ),
            "engagement": safe_ratio(short.likes, short.views) * config.shorts_engagement_weight,
        }
        scored.append(
            ScoredVideo(
                video=short,
                score=sum(components.values()),
                reasons=shorts_reasons(components),
                components=components,
            )
        )
    logger.debug("[shorts] RANKED user=%s candidates=%d", user.id, len(scored))
    return sort_by_score(scored)


def get_personalized_shorts(
    videos: List[Union[Dict[str, Any], Video]],
    user: Union[Dict[str, Any], User, None],
    limit: Optional[int] = None,
    *,
    config: Optional[RecommendationConfig] = None,
    rng: Optional[RandomSource] = None,
) -> List[Video]:
    """Shorts feed: top `limit` short-form videos (default 30)."""
    config = resolve_config(config)
    limit = config.shorts_limit if limit is None else limit
    return top_videos(rank_shorts(videos, user, config, rng), limit)
