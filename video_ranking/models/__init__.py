"""Data models for the ranking engine."""

from .config import DEFAULT_CONFIG, RecommendationConfig, resolve_config
from .scoring import ScoredVideo
from .user import (
    WATCH_HISTORY_LIMIT,
    Subscription,
    User,
    WatchHistoryItem,
    ensure_user,
    record_watch,
)
from .video import Video, ensure_video, ensure_videos

__all__ = [
    "DEFAULT_CONFIG",
    "RecommendationConfig",
    "ScoredVideo",
    "Subscription",
    "User",
    "Video",
    "WATCH_HISTORY_LIMIT",
    "WatchHistoryItem",
    "ensure_user",
    "ensure_video",
    "ensure_videos",
    "record_watch",
    "resolve_config",
]
