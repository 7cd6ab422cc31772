"""
Trending Tests

Tests the trending shelf: recency window per timeframe, short exclusion,
velocity × engagement scoring, and limits.

Windows:
--------
- day: 1 day, week: 7 days (default), month: 30 days

Run:
----
    pytest video_ranking/tests/test_trending.py -v
"""

from datetime import datetime

import pytest

from video_ranking import get_trending_videos, rank_trending
from video_ranking.stages.ranking import trending as trending_module
from video_ranking.models import DEFAULT_CONFIG
from video_ranking.stages.ranking.trending import trending_score


class TestWindow:

    @pytest.mark.parametrize("timeframe,included,excluded", [
        ("day", {"h12"}, {"d3", "d20", "d40"}),
        ("week", {"h12", "d3"}, {"d20", "d40"}),
        ("month", {"h12", "d3", "d20"}, {"d40"}),
    ])
    def test_cutoff(self, make_video, days_ago, now, timeframe, included, excluded):
        videos = [
            make_video(id="h12", upload_date=days_ago(0.5)),
            make_video(id="d3", upload_date=days_ago(3)),
            make_video(id="d20", upload_date=days_ago(20)),
            make_video(id="d40", upload_date=days_ago(40)),
        ]
        ids = {v.id for v in get_trending_videos(videos, timeframe, now=now)}
        assert ids == included
        assert not ids & excluded

    @pytest.mark.parametrize("timeframe,days", [("day", 1), ("week", 7), ("month", 30)])
    def test_upload_exactly_at_cutoff_included(self, make_video, days_ago, now, timeframe, days):
        videos = [
            make_video(id="edge", upload_date=days_ago(days)),
            make_video(id="past", upload_date=days_ago(days + 0.01)),
        ]
        assert [v.id for v in get_trending_videos(videos, timeframe, now=now)] == ["edge"]

    def test_default_timeframe_is_week(self, make_video, days_ago, now):
        videos = [make_video(id="d3", upload_date=days_ago(3)), make_video(id="d9", upload_date=days_ago(9))]
        assert [v.id for v in get_trending_videos(videos, now=now)] == ["d3"]

    def test_shorts_and_unknown_dates_excluded(self, make_video, days_ago, now):
        videos = [
            make_video(id="short", is_short=True, upload_date=days_ago(1)),
            make_video(id="nodate", upload_date=""),
            make_video(id="ok", upload_date=days_ago(1)),
        ]
        assert [v.id for v in get_trending_videos(videos, "week", now=now)] == ["ok"]

    def test_wall_clock_read_once(self, make_video, days_ago, now, monkeypatch):
        calls = []

        class FrozenDatetime(datetime):
            @classmethod
            def now(cls, tz=None):
                calls.append(tz)
                return now

        monkeypatch.setattr(trending_module, "datetime", FrozenDatetime)
        videos = [make_video(id=f"v{i}", upload_date=days_ago(i)) for i in range(5)]
        ranked = rank_trending(videos, "week")
        assert len(ranked) == 5
        assert len(calls) == 1

    def test_unknown_timeframe(self, make_video, now):
        with pytest.raises(ValueError):
            get_trending_videos([make_video()], "year", now=now)


class TestScore:

    def test_velocity_times_engagement(self, make_video, days_ago, now):
        video = make_video(views=1000, likes=100, comment_count=50, upload_date=days_ago(2))
        # velocity 500/day, engagement (100 + 2*50) / 1000 = 0.2
        assert trending_score(video, DEFAULT_CONFIG, now) == pytest.approx(100_000)

    def test_same_day_upload_uses_age_floor(self, make_video, now):
        video = make_video(views=100, likes=10, upload_date=now.isoformat())
        # velocity 100 / 0.1, engagement 10 / 100
        assert trending_score(video, DEFAULT_CONFIG, now) == pytest.approx(100_000)

    def test_zero_views(self, make_video, days_ago, now):
        video = make_video(views=0, likes=0, upload_date=days_ago(1))
        assert trending_score(video, DEFAULT_CONFIG, now) == 0

    def test_ranked_descending(self, make_video, days_ago, now):
        videos = [
            make_video(id="slow", views=1000, likes=10, upload_date=days_ago(6)),
            make_video(id="fast", views=50_000, likes=5000, upload_date=days_ago(1)),
            make_video(id="mid", views=5000, likes=200, upload_date=days_ago(2)),
        ]
        ranked = rank_trending(videos, "week", now=now)
        assert [s.video_id for s in ranked] == ["fast", "mid", "slow"]


class TestLimits:

    def test_default_limit_20(self, make_video, days_ago, now):
        videos = [make_video(upload_date=days_ago(1)) for _ in range(25)]
        assert len(get_trending_videos(videos, now=now)) == 20

    def test_limit_override(self, make_video, days_ago, now):
        videos = [make_video(upload_date=days_ago(1)) for _ in range(25)]
        assert len(get_trending_videos(videos, "week", 5, now=now)) == 5

    def test_empty_pool(self, now):
        assert get_trending_videos([], "day", now=now) == []
