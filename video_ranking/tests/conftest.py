"""Shared fixtures: a fixed clock, deterministic jitter, and video/user factories."""

from datetime import datetime, timedelta, timezone
from itertools import count

import pytest

from video_ranking.models import User, Video
from video_ranking.utils.random_source import constant_random_source

NOW = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def zero_rng():
    return constant_random_source(0.0)


@pytest.fixture
def days_ago():
    """ISO timestamp `days` before NOW."""
    def _days_ago(days: float) -> str:
        return (NOW - timedelta(days=days)).isoformat()
    return _days_ago


@pytest.fixture
def make_video(days_ago):
    """
    Video factory with neutral defaults: long-form, 100 views, 10 likes,
    uploaded 200 days ago, channel "ch-other", category "General".
    """
    ids = count(1)

    def _make_video(**overrides) -> Video:
        fields = {
            "id": f"v{next(ids)}",
            "title": "video",
            "category": "General",
            "tags": [],
            "channel_id": "ch-other",
            "views": 100,
            "likes": 10,
            "dislikes": 0,
            "comment_count": 0,
            "upload_date": days_ago(200),
            "is_short": False,
        }
        fields.update(overrides)
        return Video(**fields)

    return _make_video


@pytest.fixture
def cold_user():
    return User(id="u-cold")
