"""
Download service for classified episodes.

Episodes are downloaded one at a time, in the order given, and each
downloaded file is tagged before the next episode starts. A failure on
one episode is recorded in its result and never stops the batch.
"""

import logging
import os
from dataclasses import dataclass
from typing import List, Optional

from .config import DEFAULT_TIMEOUT
from .downloader import download_file_to_path
from .exceptions import FileSystemError, NetworkError
from .models import EpisodeRecord
from .path_manager import PathManager
from .tagger import Tagger


@dataclass
class DownloadResult:
    """Result of downloading and tagging one episode."""

    episode: EpisodeRecord
    success: bool
    file_path: Optional[str] = None
    error: Optional[str] = None
    bytes_written: int = 0
    tagged: bool = False
    tag_error: Optional[str] = None


@dataclass
class DownloadSummary:
    """Summary of multiple download operations."""

    successful: int
    failed: int
    tag_failed: int
    total_bytes: int
    results: List[DownloadResult]

    @classmethod
    def from_results(cls, results: List[DownloadResult]) -> "DownloadSummary":
        """Create summary from list of results."""
        successful = sum(1 for r in results if r.success)
        failed = sum(1 for r in results if not r.success)
        tag_failed = sum(1 for r in results if r.success and not r.tagged)
        total_bytes = sum(r.bytes_written for r in results)

        return cls(
            successful=successful,
            failed=failed,
            tag_failed=tag_failed,
            total_bytes=total_bytes,
            results=results,
        )


class EpisodeDownloader:
    """Service for downloading and tagging episodes."""

    def __init__(
        self,
        path_manager: PathManager,
        tagger: Tagger,
        show_progress: bool = True,
        timeout: int = DEFAULT_TIMEOUT,
    ):
        """Initialize with path manager and tagger."""
        self.path_manager = path_manager
        self.tagger = tagger
        self.show_progress = show_progress
        self.timeout = timeout
        self.logger = logging.getLogger(__name__)

    def download_episode(self, episode: EpisodeRecord) -> DownloadResult:
        """Download a single episode, then tag it."""
        self.logger.info("Title: %s", episode.name)
        self.logger.info("Link: %s", episode.link)
        self.logger.info("Episode Number: %d", episode.episode_number)

        target_path = self.path_manager.get_episode_audio_path(episode)
        try:
            bytes_written = download_file_to_path(
                episode.link,
                target_path,
                show_progress=self.show_progress,
                timeout=self.timeout,
            )
        except (NetworkError, FileSystemError) as e:
            self.logger.error("Failed: %s - %s", episode.name, e)
            return DownloadResult(episode=episode, success=False, error=str(e))
        except Exception as e:  # pylint: disable=broad-except
            self.logger.error(
                "Download error for episode %s: %s", episode.name, e
            )
            _remove_leftover(target_path)
            return DownloadResult(episode=episode, success=False, error=str(e))

        self.logger.info("Downloaded: %s", target_path)
        result = DownloadResult(
            episode=episode,
            success=True,
            file_path=target_path,
            bytes_written=bytes_written,
        )

        tag_result = self.tagger.set_metadata(
            target_path, episode.episode_number, episode.name
        )
        result.tagged = tag_result.success
        result.tag_error = tag_result.error
        if tag_result.success:
            self.logger.info("Track number set successfully.")
        else:
            self.logger.error(
                "Error setting track number for %s: %s",
                episode.name,
                tag_result.error,
            )
        return result

    def download_multiple(
        self, episodes: List[EpisodeRecord]
    ) -> DownloadSummary:
        """Download episodes sequentially, in the given order.

        Raises:
            FileSystemError: If the output directory cannot be created.
        """
        self.path_manager.ensure_output_dir_exists()
        results: List[DownloadResult] = []

        for i, episode in enumerate(episodes, 1):
            self.logger.debug(
                "Downloading episode %d/%d: %s", i, len(episodes), episode.name
            )
            results.append(self.download_episode(episode))
            self.logger.info("----------------------")

        summary = DownloadSummary.from_results(results)
        self._log_download_results(summary)
        return summary

    def _log_download_results(self, summary: DownloadSummary) -> None:
        """Log the download results summary."""
        self.logger.info(
            "Download results: %d successful, %d failed, %d not tagged",
            summary.successful,
            summary.failed,
            summary.tag_failed,
        )


def _remove_leftover(path: str) -> None:
    """Remove a file left behind by an unexpected download failure."""
    if os.path.exists(path):
        try:
            os.remove(path)
        except OSError:
            logging.getLogger(__name__).warning("Could not remove %s", path)
