"""
Show fetch package - Downloads an RSS feed, picks out the episodes of
one or more numbered shows, downloads their audio and tags each file
with its episode number.

The package is split into small components for parsing, classification,
downloading and tagging that are wired together by the factory.
"""

from .classifier import classify_item, classify_items, order_episodes
from .episode_downloader import DownloadResult, DownloadSummary, EpisodeDownloader
from .factory import create_episode_downloader, create_manager_from_rss
from .manager import ShowManager
from .models import EpisodeRecord, RawItem, ShowPattern
from .parser import FeedParser

__all__ = [
    "classify_item",
    "classify_items",
    "order_episodes",
    "create_episode_downloader",
    "create_manager_from_rss",
    "DownloadResult",
    "DownloadSummary",
    "EpisodeDownloader",
    "EpisodeRecord",
    "FeedParser",
    "RawItem",
    "ShowManager",
    "ShowPattern",
]
