"""
Factory functions for creating ShowManager instances.

This module provides simple factory functions that wire up dependencies
clearly.
"""

import logging
from typing import Optional, Sequence

from .config import DEFAULT_TIMEOUT
from .downloader import download_rss_from_url
from .episode_downloader import EpisodeDownloader
from .manager import ShowManager
from .models import ShowPattern
from .parser import FeedParser
from .path_manager import PathManager
from .tagger import MutagenTagger, Tagger


def create_episode_downloader(
    output_dir: Optional[str] = None,
    tagger: Optional[Tagger] = None,
    show_progress: bool = True,
    timeout: int = DEFAULT_TIMEOUT,
) -> EpisodeDownloader:
    """Create an EpisodeDownloader.

    The output directory is created when the first batch is downloaded.
    """
    path_manager = PathManager(output_dir)
    return EpisodeDownloader(
        path_manager,
        tagger or MutagenTagger(),
        show_progress=show_progress,
        timeout=timeout,
    )


def create_manager_from_rss(
    rss_url: str,
    shows: Sequence[ShowPattern],
    output_dir: Optional[str] = None,
    tagger: Optional[Tagger] = None,
    show_progress: bool = True,
    timeout: int = DEFAULT_TIMEOUT,
) -> ShowManager:
    """Create ShowManager by downloading and parsing RSS feed.

    Raises:
        NetworkError: If the feed cannot be fetched.
        ParseError: If the feed is not well-formed XML.
    """
    logger = logging.getLogger(__name__)
    logger.info("Creating ShowManager from RSS URL: %s", rss_url)

    downloader = create_episode_downloader(
        output_dir, tagger, show_progress, timeout
    )

    rss_content = download_rss_from_url(rss_url, timeout=timeout)
    items = FeedParser().parse(rss_content)

    manager = ShowManager(items, shows, downloader)
    logger.info(
        "Successfully created ShowManager for '%s' with %d items",
        rss_url,
        len(items),
    )
    return manager
