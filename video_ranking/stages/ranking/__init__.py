"""
Ranking surfaces: home feed, trending, similar videos, shorts feed.

Public API: get_recommendations, get_trending_videos, get_similar_videos,
get_personalized_shorts, and their rank_* counterparts returning ScoredVideo lists.
- factors: home feed scoring factors.
- reasons: explanation labels.
- ordering: stable descending sort and truncation.
"""

from .home_feed import get_recommendations, rank_home_feed
from .shorts import get_personalized_shorts, rank_shorts
from .similar import get_similar_videos, rank_similar
from .trending import get_trending_videos, rank_trending

__all__ = [
    "get_personalized_shorts",
    "get_recommendations",
    "get_similar_videos",
    "get_trending_videos",
    "rank_home_feed",
    "rank_shorts",
    "rank_similar",
    "rank_trending",
]
