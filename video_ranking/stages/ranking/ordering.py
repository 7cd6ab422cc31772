"""
Ordering shared by every surface: descending score, ties kept in input order.
"""

from typing import List

from ...models.scoring import ScoredVideo
from ...models.video import Video


def sort_by_score(scored: List[ScoredVideo]) -> List[ScoredVideo]:
    """Stable sort by score, highest first. Not mutated."""
    return sorted(scored, key=lambda s: s.score, reverse=True)


def top_videos(ranked: List[ScoredVideo], limit: int) -> List[Video]:
    """Videos of the first limit ranked items."""
    return [s.video for s in ranked[: max(limit, 0)]]
