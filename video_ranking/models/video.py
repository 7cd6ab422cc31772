"""
Video model: typed representation of a video for the ranking pipeline.

Used by candidate_pool and every ranking surface instead of raw dicts.
Built from app/backend dicts via Video.model_validate(d); camelCase keys
(channelId, uploadDate, isShort) are accepted as aliases.
"""

from typing import Any, Dict, List, Set, Union

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic.alias_generators import to_camel


class Video(BaseModel):
    """
    Video payload used across the ranking stages.

    All fields except id are optional; missing or null counters are read as 0
    so partially loaded records still rank.
    """

    model_config = ConfigDict(
        extra="allow",
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    id: str
    title: str = ""
    category: str = ""
    tags: List[str] = []
    channel_id: str = ""
    views: int = 0
    likes: int = 0
    dislikes: int = 0
    comment_count: int = 0
    upload_date: str = ""
    duration: float = 0
    is_short: bool = False

    @model_validator(mode="before")
    @classmethod
    def derive_comment_count(cls, data: Any) -> Any:
        """Use len(comments) when the payload carries the list but no count."""
        if not isinstance(data, dict):
            return data
        has_count = data.get("comment_count") is not None or data.get("commentCount") is not None
        comments = data.get("comments")
        if not has_count and isinstance(comments, list):
            data = dict(data)
            data["comment_count"] = len(comments)
        return data

    @field_validator("views", "likes", "dislikes", "comment_count", "duration", mode="before")
    @classmethod
    def none_as_zero(cls, v: Any) -> Any:
        return 0 if v is None else v

    @field_validator("title", "category", "channel_id", "upload_date", mode="before")
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("tags", mode="before")
    @classmethod
    def none_as_no_tags(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("is_short", mode="before")
    @classmethod
    def none_as_long_form(cls, v: Any) -> Any:
        return False if v is None else v

    def tag_set(self) -> Set[str]:
        return set(self.tags)


def ensure_videos(videos: List[Union[Dict[str, Any], "Video"]]) -> List["Video"]:
    """Convert list of dicts or Videos to list of Video models for use in the pipeline."""
    return [
        Video.model_validate(v) if isinstance(v, dict) else v
        for v in videos
    ]


def ensure_video(video: Union[Dict[str, Any], "Video"]) -> "Video":
    return Video.model_validate(video) if isinstance(video, dict) else video
