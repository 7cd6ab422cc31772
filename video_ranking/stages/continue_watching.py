"""
Continue watching shelf: partially watched videos, most recently watched first.
"""

from typing import Any, Dict, List, Optional, Union

from ..models.config import RecommendationConfig, resolve_config
from ..models.user import User, ensure_user
from ..models.video import Video, ensure_videos


def get_continue_watching(
    videos: List[Union[Dict[str, Any], Video]],
    user: Union[Dict[str, Any], User, None],
    limit: Optional[int] = None,
    *,
    config: Optional[RecommendationConfig] = None,
) -> List[Video]:
    """
    Videos from the detailed watch history with shelf_min < completion < shelf_max.

    Records with unknown duration or for videos missing from the pool are skipped.
    """
    config = resolve_config(config)
    limit = config.continue_watching_limit if limit is None else limit
    if limit <= 0:
        return []
    by_id = {v.id: v for v in ensure_videos(videos)}
    user = ensure_user(user)

    shelf: List[Video] = []
    seen = set()
    for item in user.watch_history_detailed:
        if item.duration <= 0 or item.video_id in seen:
            continue
        if not config.continue_watching_shelf_min < item.completion_rate < config.continue_watching_shelf_max:
            continue
        video = by_id.get(item.video_id)
        if video is None:
            continue
        seen.add(item.video_id)
        shelf.append(video)
        if len(shelf) >= limit:
            break
    return shelf
