"""
Episode classification and ordering against show patterns.
"""

import logging
from typing import Iterable, List, Optional

from .models import EpisodeRecord, RawItem, ShowPattern

logger = logging.getLogger(__name__)


def classify_item(show: ShowPattern, item: RawItem) -> Optional[EpisodeRecord]:
    """Match a show pattern against an item title.

    Returns an EpisodeRecord when the capture group yields a non-negative
    base-10 integer, otherwise None.
    """
    match = show.matcher.search(item.title)
    if not match:
        return None

    captured = match.group(1)
    if not captured:
        return None
    try:
        episode_number = int(captured, 10)
    except ValueError:
        logger.debug(
            "Ignoring %r for %s: %r is not a number",
            item.title,
            show.label,
            captured,
        )
        return None
    if episode_number < 0:
        return None

    return EpisodeRecord(
        name=item.title,
        link=item.enclosure_url,
        episode_number=episode_number,
    )


def classify_items(
    show: ShowPattern, items: Iterable[RawItem]
) -> List[EpisodeRecord]:
    """Classify every item for one show, dropping the ones that don't match."""
    episodes: List[EpisodeRecord] = []
    for item in items:
        episode = classify_item(show, item)
        if episode is not None:
            episodes.append(episode)
    logger.debug("%s: %d matching items", show.label, len(episodes))
    return episodes


def order_episodes(episodes: Iterable[EpisodeRecord]) -> List[EpisodeRecord]:
    """Sort episodes by number, ascending.

    The sort is stable and duplicates are kept, so re-uploaded episodes
    with the same number are all returned in feed order.
    """
    ordered = sorted(episodes, key=lambda episode: episode.episode_number)

    seen = set()
    for episode in ordered:
        if episode.episode_number in seen:
            logger.warning(
                "Episode number %d appears more than once (%s)",
                episode.episode_number,
                episode.name,
            )
        seen.add(episode.episode_number)

    return ordered
