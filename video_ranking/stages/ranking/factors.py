"""
Home feed scoring factors.

Each factor scores one video against one signal; home_feed sums them.
Signals derived from the user (subscriptions, recent ids, detailed records,
category counts) are computed once per call by the caller and passed in.
"""

from collections import Counter
from datetime import datetime
from typing import Dict, List, Optional, Set

from ...models.config import RecommendationConfig
from ...models.user import User, WatchHistoryItem
from ...models.video import Video
from ...utils.scores import capped_ratio, days_since, freshness_score, safe_ratio


def history_category_counts(
    user: User,
    category_by_id: Dict[str, str],
    config: RecommendationConfig,
) -> Counter:
    """
    Count detailed watch-history entries per affinity key.

    In "category" mode the key is the watched video's category (entries for
    videos missing from the pool are skipped). In "legacy_video_id" mode the
    key is the watched video id itself.
    """
    if config.category_affinity_mode == "legacy_video_id":
        return Counter(item.video_id for item in user.watch_history_detailed)
    return Counter(
        category_by_id[item.video_id]
        for item in user.watch_history_detailed
        if item.video_id in category_by_id
    )


def category_affinity(
    video: Video,
    counts: Counter,
    history_length: int,
    config: RecommendationConfig,
) -> float:
    """Share of the detailed history in the video's category (capped at 1), times category_weight."""
    if history_length == 0:
        return 0.0
    share = min(safe_ratio(counts.get(video.category, 0), history_length), 1.0)
    return share * config.category_weight


def engagement_score(video: Video, config: RecommendationConfig) -> float:
    """Engagement per view plus like ratio; per-view terms are 0 when views is 0."""
    view_engagement = safe_ratio(
        video.likes + video.views * config.engagement_view_factor, video.views
    )
    like_ratio = video.likes / max(video.likes + video.dislikes, 1)
    comment_density = safe_ratio(video.comment_count, video.views)
    return (
        view_engagement * config.engagement_view_weight
        + like_ratio * config.engagement_like_ratio_weight
        + comment_density * config.engagement_comment_weight
    )


def home_freshness(
    video: Video,
    config: RecommendationConfig,
    now: Optional[datetime] = None,
) -> float:
    return freshness_score(
        days_since(video.upload_date, now),
        config.freshness_buckets,
        config.freshness_floor,
    )


def popularity_score(video: Video, config: RecommendationConfig) -> float:
    return (
        capped_ratio(video.views, config.popularity_view_cap) * config.popularity_view_weight
        + capped_ratio(video.likes, config.popularity_like_cap) * config.popularity_like_weight
    )


def subscription_bonus(
    video: Video,
    subscribed: Set[str],
    config: RecommendationConfig,
) -> float:
    return config.subscription_bonus if video.channel_id in subscribed else 0.0


def diversity_penalty(
    video: Video,
    recent_ids: List[str],
    config: RecommendationConfig,
) -> float:
    """Negative adjustment for videos among the user's most recently watched."""
    return -config.diversity_penalty if video.id in recent_ids else 0.0


def continue_watching_boost(
    video: Video,
    detailed_by_id: Dict[str, WatchHistoryItem],
    config: RecommendationConfig,
) -> float:
    """Bonus for a started (completion > 0) but unfinished video."""
    item = detailed_by_id.get(video.id)
    if item is None:
        return 0.0
    if 0 < item.completion_rate < config.continue_watching_max_completion:
        return config.continue_watching_bonus
    return 0.0
