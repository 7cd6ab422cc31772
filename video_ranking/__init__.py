"""
Video Ranking: heuristic recommendations for a video-sharing app

Single entry point for the package:
- models/: Video, User, WatchHistoryItem, ScoredVideo, RecommendationConfig
- stages/: candidate_pool, ranking (home feed, trending, similar, shorts), continue_watching
- utils/: score arithmetic and injectable random sources
- config_loader: RecommendationConfig from JSON / environment
"""

from .config_loader import load_config
from .models import (
    DEFAULT_CONFIG,
    RecommendationConfig,
    ScoredVideo,
    Subscription,
    User,
    Video,
    WatchHistoryItem,
    ensure_user,
    ensure_videos,
    record_watch,
)
from .recommendation_engine import (
    filter_by_category,
    get_continue_watching,
    get_personalized_shorts,
    get_recommendations,
    get_similar_videos,
    get_trending_videos,
    rank_home_feed,
    rank_shorts,
    rank_similar,
    rank_trending,
)
from .utils.random_source import (
    RandomSource,
    constant_random_source,
    default_random_source,
    seeded_random_source,
)

__all__ = [
    "DEFAULT_CONFIG",
    "RandomSource",
    "RecommendationConfig",
    "ScoredVideo",
    "Subscription",
    "User",
    "Video",
    "WatchHistoryItem",
    "constant_random_source",
    "default_random_source",
    "ensure_user",
    "ensure_videos",
    "filter_by_category",
    "get_continue_watching",
    "get_personalized_shorts",
    "get_recommendations",
    "get_similar_videos",
    "get_trending_videos",
    "load_config",
    "rank_home_feed",
    "rank_shorts",
    "rank_similar",
    "rank_trending",
    "record_watch",
    "seeded_random_source",
]
