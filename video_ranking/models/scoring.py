"""
Scoring model: a video with its ranking score for one surface.
"""

from typing import Dict, List

from pydantic import BaseModel, Field

from .video import Video


class ScoredVideo(BaseModel):
    """
    A video with its total score, the per-factor breakdown that produced it,
    and the human-readable reasons shown next to it.

    Ephemeral: built during ranking and dropped once the list is truncated.
    """

    video: Video
    score: float
    reasons: List[str] = Field(default_factory=list)
    components: Dict[str, float] = Field(default_factory=dict)

    @property
    def video_id(self) -> str:
        return self.video.id
