"""
Similar videos ranking for the "up next" rail of a video being watched.

score = same category + shared tags + same channel + view-magnitude closeness
"""

import logging
from typing import Any, Dict, List, Optional, Union

from ...models.config import RecommendationConfig, resolve_config
from ...models.scoring import ScoredVideo
from ...models.video import Video, ensure_video, ensure_videos
from ...utils.scores import view_magnitude_closeness
from ..candidate_pool import long_form_candidates
from .ordering import sort_by_score, top_videos
from .reasons import similar_reasons

logger = logging.getLogger(__name__)


def similarity_components(
    candidate: Video,
    reference: Video,
    config: RecommendationConfig,
) -> Dict[str, float]:
    shared_tags = len(candidate.tag_set() & reference.tag_set())
    return {
        "category": config.similar_same_category if candidate.category == reference.category else 0.0,
        "tags": shared_tags * config.similar_per_shared_tag,
        "channel": config.similar_same_channel if candidate.channel_id == reference.channel_id else 0.0,
        "views": view_magnitude_closeness(
            candidate.views,
            reference.views,
            config.similar_view_closeness_max,
            config.similar_view_closeness_slope,
        ),
    }


def rank_similar(
    video: Union[Dict[str, Any], Video],
    all_videos: List[Union[Dict[str, Any], Video]],
    config: Optional[RecommendationConfig] = None,
) -> List[ScoredVideo]:
    config = resolve_config(config)
    reference = ensure_video(video)
    candidates = long_form_candidates(ensure_videos(all_videos), excluded_ids=[reference.id])

    scored = []
    for candidate in candidates:
        components = similarity_components(candidate, reference, config)
        scored.append(
            ScoredVideo(
                video=candidate,
                score=sum(components.values()),
                reasons=similar_reasons(components),
                components=components,
            )
        )
    logger.debug(
        "[similar] RANKED reference=%s candidates=%d", reference.id, len(candidates)
    )
    return sort_by_score(scored)


def get_similar_videos(
    video: Union[Dict[str, Any], Video],
    all_videos: List[Union[Dict[str, Any], Video]],
    limit: Optional[int] = None,
    *,
    config: Optional[RecommendationConfig] = None,
) -> List[Video]:
    """Related long-form videos for `video`, never including `video` itself (default limit 10)."""
    config = resolve_config(config)
    limit = config.similar_limit if limit is None else limit
    return top_videos(rank_similar(video, all_videos, config), limit)
