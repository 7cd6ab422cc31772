"""Pipeline stages: candidate selection, per-surface ranking, continue-watching shelf."""

from .candidate_pool import filter_by_category
from .continue_watching import get_continue_watching
from .ranking import (
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
