"""
Ranking configuration: weights, thresholds, and default limits for every surface.

RecommendationConfig defaults are defined here. Callers may pass a dict
(e.g. from a config.json loaded by config_loader); from_dict() merges it with
these defaults.
"""

from typing import Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, model_validator


class RecommendationConfig(BaseModel):
    """Configuration for the ranking surfaces."""

    # -------------------------------------------------------------------------
    # Home feed (get_recommendations)
    # -------------------------------------------------------------------------

    home_limit: int = 20

    # Max contribution of category affinity (share of detailed history in the
    # video's category, capped at 1).
    category_weight: float = 30.0
    # "category": count history entries whose video has the same category.
    # "legacy_video_id": count history by video id and look it up by category.
    category_affinity_mode: Literal["category", "legacy_video_id"] = "category"

    # engagement = ((likes + view_factor * views) / views) * view_weight
    #            + (likes / (likes + dislikes)) * like_ratio_weight
    #            + (comments / views) * comment_weight
    engagement_view_factor: float = 0.1
    engagement_view_weight: float = 20.0
    engagement_like_ratio_weight: float = 25.0
    engagement_comment_weight: float = 10.0

    # Freshness step function: first bucket whose max age (days) exceeds the
    # video's age wins; older videos get freshness_floor.
    freshness_buckets: List[Tuple[float, float]] = [
        (1, 25.0),
        (7, 20.0),
        (30, 15.0),
        (90, 10.0),
    ]
    freshness_floor: float = 5.0

    # popularity = min(views / view_cap, 1) * view_weight + min(likes / like_cap, 1) * like_weight
    popularity_view_cap: float = 100_000
    popularity_view_weight: float = 15.0
    popularity_like_cap: float = 10_000
    popularity_like_weight: float = 10.0

    subscription_bonus: float = 30.0

    # Subtracted when the video is among the last diversity_window watched ids.
    diversity_penalty: float = 50.0
    diversity_window: int = 10

    # Added when a detailed record has 0 < completion < continue_watching_max_completion.
    continue_watching_bonus: float = 20.0
    continue_watching_max_completion: float = 0.9

    # Uniform noise in [0, home_jitter).
    home_jitter: float = 5.0

    # Reason labels are attached when a factor exceeds these values.
    reason_category_threshold: float = 5.0
    reason_freshness_threshold: float = 15.0
    reason_popularity_threshold: float = 10.0

    # -------------------------------------------------------------------------
    # Trending (get_trending_videos)
    # -------------------------------------------------------------------------

    trending_limit: int = 20
    trending_window_days: Dict[str, float] = {"day": 1, "week": 7, "month": 30}
    # Floor on age when computing view velocity (same-day uploads).
    trending_min_age_days: float = 0.1
    trending_comment_weight: float = 2.0
    trending_scale: float = 1000.0

    # -------------------------------------------------------------------------
    # Similar videos (get_similar_videos)
    # -------------------------------------------------------------------------

    similar_limit: int = 10
    similar_same_category: float = 40.0
    similar_per_shared_tag: float = 15.0
    similar_same_channel: float = 30.0
    # closeness = max(0, max_closeness - slope * |log10(v+1) - log10(ref+1)|)
    similar_view_closeness_max: float = 10.0
    similar_view_closeness_slope: float = 2.0

    # -------------------------------------------------------------------------
    # Shorts feed (get_personalized_shorts)
    # -------------------------------------------------------------------------

    shorts_limit: int = 30
    shorts_jitter: float = 30.0
    shorts_liked_category_bonus: float = 40.0
    shorts_subscription_bonus: float = 35.0
    shorts_engagement_weight: float = 25.0

    # -------------------------------------------------------------------------
    # Continue watching shelf (get_continue_watching)
    # -------------------------------------------------------------------------

    continue_watching_limit: int = 10
    # Shelf shows records with shelf_min < completion < shelf_max.
    continue_watching_shelf_min: float = 0.05
    continue_watching_shelf_max: float = 0.9

    @model_validator(mode="after")
    def check_ranges(self):
        ages = [age for age, _ in self.freshness_buckets]
        if any(b <= a for a, b in zip(ages, ages[1:])):
            raise ValueError(f"freshness_buckets ages must be strictly ascending, got {ages}")
        limits = {
            "home_limit": self.home_limit,
            "trending_limit": self.trending_limit,
            "similar_limit": self.similar_limit,
            "shorts_limit": self.shorts_limit,
            "continue_watching_limit": self.continue_watching_limit,
        }
        for name, value in limits.items():
            if value < 1:
                raise ValueError(f"{name} must be >= 1, got {value}")
        if not 0 <= self.continue_watching_shelf_min < self.continue_watching_shelf_max <= 1:
            raise ValueError(
                "continue watching shelf bounds must satisfy 0 <= min < max <= 1, got "
                f"{self.continue_watching_shelf_min}, {self.continue_watching_shelf_max}"
            )
        if self.trending_min_age_days <= 0:
            raise ValueError("trending_min_age_days must be positive")
        return self

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "RecommendationConfig":
        """
        Create config from a dictionary (e.g., loaded from JSON).

        Section keys are prefixed with their surface name, so
        {"similar": {"limit": 5}} sets similar_limit; the "home" section
        maps onto unprefixed home feed keys except "limit" and "jitter".
        Flat top-level keys are applied as-is. Unknown keys are ignored.
        """
        flat = {k: v for k, v in config_dict.items() if not isinstance(v, dict)}
        for section in ("trending", "similar", "shorts", "continue_watching"):
            for key, value in (config_dict.get(section) or {}).items():
                flat[f"{section}_{key}"] = value
        for key, value in (config_dict.get("home") or {}).items():
            flat[f"home_{key}" if key in ("limit", "jitter") else key] = value
        if isinstance(config_dict.get("trending_window_days"), dict):
            flat["trending_window_days"] = config_dict["trending_window_days"]
        allowed = set(cls.model_fields)
        filtered = {k: v for k, v in flat.items() if k in allowed}
        return cls.model_validate(filtered)


DEFAULT_CONFIG = RecommendationConfig()


def resolve_config(config: Optional["RecommendationConfig"]) -> "RecommendationConfig":
    """Return config or DEFAULT_CONFIG when none is provided."""
    return config if config is not None else DEFAULT_CONFIG
