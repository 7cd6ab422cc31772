"""
User model: the affinity signals the ranking surfaces read.

Watch history comes in two forms kept in sync by record_watch():
- watch_history: video ids, most recent first
- watch_history_detailed: WatchHistoryItem records with playback position

Both are capped at WATCH_HISTORY_LIMIT entries.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Set, Union

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

WATCH_HISTORY_LIMIT = 100


class WatchHistoryItem(BaseModel):
    """Playback state for one watched video. position and duration are in ms."""

    model_config = ConfigDict(extra="allow", alias_generator=to_camel, populate_by_name=True)

    video_id: str
    last_watched_at: str = ""
    position: float = 0
    duration: float = 0

    @field_validator("position", "duration", mode="before")
    @classmethod
    def none_as_zero(cls, v: Any) -> Any:
        return 0 if v is None else v

    @property
    def completion_rate(self) -> float:
        """position / duration; 0 when the duration is unknown."""
        return self.position / self.duration if self.duration > 0 else 0.0


class Subscription(BaseModel):
    model_config = ConfigDict(extra="allow", alias_generator=to_camel, populate_by_name=True)

    channel_id: str
    subscribed_at: str = ""
    notifications: bool = False


class User(BaseModel):
    """
    A viewer profile. Empty collections are valid (cold-start user).

    subscriptions accepts Subscription objects, dicts, or bare channel id strings.
    """

    model_config = ConfigDict(extra="allow", alias_generator=to_camel, populate_by_name=True)

    id: str = ""
    watch_history: List[str] = []
    watch_history_detailed: List[WatchHistoryItem] = []
    subscriptions: List[Subscription] = []
    liked_videos: List[str] = []

    @field_validator("watch_history", "watch_history_detailed", "liked_videos", mode="before")
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("subscriptions", mode="before")
    @classmethod
    def channel_ids_as_subscriptions(cls, v: Any) -> Any:
        if v is None:
            return []
        return [{"channel_id": s} if isinstance(s, str) else s for s in v]

    def subscribed_channel_ids(self) -> Set[str]:
        return {s.channel_id for s in self.subscriptions}

    def recent_watch_ids(self, n: int) -> List[str]:
        """The n most recent entries of the simple watch history."""
        return self.watch_history[:n]

    def detailed_by_video_id(self) -> Dict[str, WatchHistoryItem]:
        """Detailed records keyed by video id; the first (most recent) record wins."""
        by_id: Dict[str, WatchHistoryItem] = {}
        for item in self.watch_history_detailed:
            by_id.setdefault(item.video_id, item)
        return by_id

    def watch_position(self, video_id: str) -> float:
        """Last playback position for video_id, 0 when never watched."""
        item = self.detailed_by_video_id().get(video_id)
        return item.position if item else 0


def record_watch(
    user: User,
    video_id: str,
    position: float = 0,
    duration: float = 0,
    now: Optional[datetime] = None,
) -> User:
    """
    Return a copy of user with video_id recorded in both watch histories.

    Simple history: left as is when the id is already present, otherwise the id
    is prepended. Detailed history: an existing record is replaced in place,
    otherwise a new record is prepended. Both lists are capped at
    WATCH_HISTORY_LIMIT. The input user is not mutated.
    """
    now = now or datetime.now(timezone.utc)
    if video_id in user.watch_history:
        simple = list(user.watch_history)
    else:
        simple = [video_id, *user.watch_history][:WATCH_HISTORY_LIMIT]

    item = WatchHistoryItem(
        video_id=video_id,
        last_watched_at=now.isoformat(),
        position=position or 0,
        duration=duration or 0,
    )
    detailed = list(user.watch_history_detailed)
    existing = next(
        (i for i, h in enumerate(detailed) if h.video_id == video_id), None
    )
    if existing is not None:
        detailed[existing] = item
    else:
        detailed = [item, *detailed][:WATCH_HISTORY_LIMIT]

    return user.model_copy(
        update={"watch_history": simple, "watch_history_detailed": detailed}
    )


def ensure_user(user: Union[Dict[str, Any], "User", None]) -> "User":
    """Convert a dict (or None, for an anonymous viewer) to a User model."""
    if user is None:
        return User()
    return User.model_validate(user) if isinstance(user, dict) else user
