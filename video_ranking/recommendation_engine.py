"""
Video Recommendation Engine

Thin facade over the ranking stages:
- get_recommendations: home feed
- get_trending_videos: trending shelf
- get_similar_videos: related videos rail
- get_personalized_shorts: shorts feed
- get_continue_watching: continue watching shelf

Every function is pure given its inputs; pass rng (see utils.random_source)
and now to make jittered or time-dependent rankings reproducible.
"""

from .models.config import DEFAULT_CONFIG, RecommendationConfig
from .models.scoring import ScoredVideo
from .stages.candidate_pool import filter_by_category
from .stages.continue_watching import get_continue_watching
from .stages.ranking import (
    get_personalized_shorts,
    get_recommendations,
    get_similar_videos,
    get_trending_videos,
    rank_home_feed,
    rank_shorts,
    rank_similar,
    rank_trending,
)

__all__ = [
    "DEFAULT_CONFIG",
    "RecommendationConfig",
    "ScoredVideo",
    "filter_by_category",
    "get_continue_watching",
    "get_personalized_shorts",
    "get_recommendations",
    "get_similar_videos",
    "get_trending_videos",
    "rank_home_feed",
    "rank_shorts",
    "rank_similar",
    "rank_trending",
]
