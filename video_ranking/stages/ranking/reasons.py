"""
Human-readable reasons shown next to a recommendation ("Popular video", ...).

Derived from the per-factor components of a ScoredVideo; never used for ordering.
"""

from typing import Dict, List

from ...models.config import RecommendationConfig

MATCHES_INTERESTS = "Matches your interests"
RECENTLY_UPLOADED = "Recently uploaded"
POPULAR_VIDEO = "Popular video"
FROM_SUBSCRIBED_CHANNEL = "From subscribed channel"
CONTINUE_WATCHING = "Continue watching"

SAME_CATEGORY = "Same category"
SHARED_TAGS = "Shared tags"
SAME_CHANNEL = "Same channel"

LIKED_CATEGORY = "Similar to videos you liked"


def home_feed_reasons(components: Dict[str, float], config: RecommendationConfig) -> List[str]:
    """
    Reasons for a home feed item, in factor order.

    Adds a reason when category affinity, freshness, or popularity exceed
    their configured thresholds, and whenever the subscription or
    continue-watching bonus applied.
    """
    reasons = []
    if components.get("category", 0) > config.reason_category_threshold:
        reasons.append(MATCHES_INTERESTS)
    if components.get("freshness", 0) > config.reason_freshness_threshold:
        reasons.append(RECENTLY_UPLOADED)
    if components.get("popularity", 0) > config.reason_popularity_threshold:
        reasons.append(POPULAR_VIDEO)
    if components.get("subscription", 0) > 0:
        reasons.append(FROM_SUBSCRIBED_CHANNEL)
    if components.get("continue_watching", 0) > 0:
        reasons.append(CONTINUE_WATCHING)
    return reasons


def similar_reasons(components: Dict[str, float]) -> List[str]:
    reasons = []
    if components.get("category", 0) > 0:
        reasons.append(SAME_CATEGORY)
    if components.get("tags", 0) > 0:
        reasons.append(SHARED_TAGS)
    if components.get("channel", 0) > 0:
        reasons.append(SAME_CHANNEL)
    return reasons


def shorts_reasons(components: Dict[str, float]) -> List[str]:
    reasons = []
    if components.get("liked_category", 0) > 0:
        reasons.append(LIKED_CATEGORY)
    if components.get("subscription", 0) > 0:
        reasons.append(FROM_SUBSCRIBED_CHANNEL)
    return reasons
