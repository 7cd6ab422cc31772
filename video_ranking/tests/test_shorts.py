"""
Shorts Feed Tests

Tests the shorts feed: short-only pool, liked-category and subscription
bonuses, guarded like rate, jitter reproducibility, and limits.

Run:
----
    pytest video_ranking/tests/test_shorts.py -v
"""

import pytest

from video_ranking import (
    User,
    get_personalized_shorts,
    rank_shorts,
    seeded_random_source,
)


class TestFiltering:

    def test_only_shorts_returned(self, make_video, cold_user):
        videos = [make_video(is_short=i % 2 == 0) for i in range(10)]
        result = get_personalized_shorts(videos, cold_user)
        assert len(result) == 5
        assert all(v.is_short for v in result)

    def test_no_shorts(self, make_video, cold_user):
        assert get_personalized_shorts([make_video()], cold_user) == []


class TestScoring:

    def test_liked_category_bonus(self, make_video, zero_rng):
        liked_long = make_video(id="liked", category="Gaming")
        gaming = make_video(id="s-gaming", category="Gaming", is_short=True, views=0, likes=0)
        cooking = make_video(id="s-cooking", category="Cooking", is_short=True, views=0, likes=0)
        user = User(liked_videos=["liked", "not-in-pool"])
        ranked = rank_shorts([cooking, gaming, liked_long], user, rng=zero_rng)
        assert [s.video_id for s in ranked] == ["s-gaming", "s-cooking"]
        assert ranked[0].components["liked_category"] == 40
        assert ranked[0].score == pytest.approx(40)

    def test_subscription_bonus(self, make_video, zero_rng):
        short = make_video(id="s", is_short=True, channel_id="C1", views=0)
        user = User(subscriptions=["C1"])
        scored = rank_shorts([short], user, rng=zero_rng)[0]
        assert scored.components["subscription"] == 35
        assert "From subscribed channel" in scored.reasons

    def test_like_rate(self, make_video, cold_user, zero_rng):
        short = make_video(is_short=True, views=200, likes=50)
        assert rank_shorts([short], cold_user, rng=zero_rng)[0].score == pytest.approx(6.25)

    def test_zero_views_guarded(self, make_video, cold_user, zero_rng):
        short = make_video(is_short=True, views=0, likes=3)
        assert rank_shorts([short], cold_user, rng=zero_rng)[0].components["engagement"] == 0

    def test_seeded_jitter_reproducible(self, make_video, cold_user):
        videos = [make_video(is_short=True) for _ in range(20)]
        first = get_personalized_shorts(videos, cold_user, rng=seeded_random_source(42))
        second = get_personalized_shorts(videos, cold_user, rng=seeded_random_source(42))
        assert [v.id for v in first] == [v.id for v in second]

    def test_scores_descending(self, make_video, cold_user):
        videos = [make_video(is_short=True, likes=i) for i in range(20)]
        scores = [s.score for s in rank_shorts(videos, cold_user)]
        assert scores == sorted(scores, reverse=True)


class TestLimits:

    def test_default_limit_30(self, make_video, cold_user):
        videos = [make_video(is_short=True) for _ in range(40)]
        assert len(get_personalized_shorts(videos, cold_user)) == 30

    def test_explicit_limit(self, make_video, cold_user):
        videos = [make_video(is_short=True) for _ in range(40)]
        assert len(get_personalized_shorts(videos, cold_user, 7)) == 7
