"""
Main orchestration class for classifying and downloading shows.
"""

import logging
from typing import Dict, List, Sequence

from .classifier import classify_items, order_episodes
from .episode_downloader import DownloadSummary, EpisodeDownloader
from .models import EpisodeRecord, RawItem, ShowPattern


class ShowManager:
    """
    Splits one feed's items into per-show episode lists and downloads
    them using dependency injection.
    """

    def __init__(
        self,
        items: List[RawItem],
        shows: Sequence[ShowPattern],
        downloader: EpisodeDownloader,
    ):
        """Initialize with dependencies."""
        self.logger = logging.getLogger(__name__)
        self.items = items
        self.shows = list(shows)
        self.downloader = downloader

        self.logger.info(
            "Initializing ShowManager with %d items and %d shows",
            len(self.items),
            len(self.shows),
        )

    def get_show_episodes(self, show: ShowPattern) -> List[EpisodeRecord]:
        """Get the ordered episodes of one show."""
        episodes = order_episodes(classify_items(show, self.items))
        self.logger.info(
            "Found %d %s episodes out of %d items",
            len(episodes),
            show.label,
            len(self.items),
        )
        return episodes

    def get_all_show_episodes(self) -> Dict[str, List[EpisodeRecord]]:
        """Get ordered episodes for every show, keyed by label."""
        return {show.label: self.get_show_episodes(show) for show in self.shows}

    def download_show(self, show: ShowPattern) -> DownloadSummary:
        """Download and tag every episode of one show."""
        return self.downloader.download_multiple(self.get_show_episodes(show))

    def download_all(self) -> Dict[str, DownloadSummary]:
        """Download every show in configured order."""
        return {show.label: self.download_show(show) for show in self.shows}
