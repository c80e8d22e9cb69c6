"""
Test helpers for building episodes and faking the tagger.
"""

from typing import List, Optional, Tuple

from show_fetch.models import EpisodeRecord, RawItem
from show_fetch.tagger import TagResult


def create_test_episode(
    name: str = "MAG 1 - Test Episode",
    link: str = "http://test.com/1.mp3",
    episode_number: int = 1,
) -> EpisodeRecord:
    """Create an EpisodeRecord with sensible defaults."""
    return EpisodeRecord(name=name, link=link, episode_number=episode_number)


def create_test_item(
    title: str = "MAG 1 - Test Episode", enclosure_url: str = "http://test.com/1.mp3"
) -> RawItem:
    """Create a RawItem with sensible defaults."""
    return RawItem(title=title, enclosure_url=enclosure_url)


class FakeTagger:
    """Records tagging calls and returns a configurable result."""

    def __init__(self, fail_for: Optional[str] = None) -> None:
        self.fail_for = fail_for
        self.calls: List[Tuple[str, int, str]] = []

    def set_metadata(
        self, path: str, track_number: int, title: str
    ) -> TagResult:
        self.calls.append((path, track_number, title))
        if self.fail_for is not None and self.fail_for == title:
            return TagResult(success=False, error="tagging failed")
        return TagResult(success=True)
