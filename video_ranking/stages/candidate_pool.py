"""
Candidate selection: filters applied before any surface scores its pool.

Filters: exclusion list, short vs long form, upload recency window, category chip.
All filters preserve input order.
"""

from datetime import datetime
from typing import Iterable, List, Optional, Set

from ..models.video import Video, ensure_videos
from ..utils.scores import days_since

ALL_CATEGORIES = "All"


def _not_excluded(video: Video, excluded_ids: Set[str]) -> bool:
    return video.id not in excluded_ids


def long_form_candidates(
    videos: List[Video],
    excluded_ids: Optional[Iterable[str]] = (),
) -> List[Video]:
    """Long-form videos whose id is not excluded."""
    excluded = set(excluded_ids or ())
    return [v for v in videos if not v.is_short and _not_excluded(v, excluded)]


def short_form_candidates(videos: List[Video]) -> List[Video]:
    return [v for v in videos if v.is_short]


def uploaded_within(
    videos: List[Video],
    window_days: float,
    now: Optional[datetime] = None,
) -> List[Video]:
    """Videos uploaded no earlier than window_days before now. Unknown dates are dropped."""
    return [v for v in videos if days_since(v.upload_date, now) <= window_days]


def filter_by_category(videos: List[Video], category: Optional[str]) -> List[Video]:
    """
    Category chip filter for the home screen.

    "All", "" and None return the input unchanged; otherwise only videos in category.
    """
    videos = ensure_videos(videos)
    if not category or category == ALL_CATEGORIES:
        return videos
    return [v for v in videos if v.category == category]
