"""
File downloading functionality for RSS feeds and episode audio files.
"""

import logging
import os
from typing import Optional

import requests
from tqdm import tqdm

from .config import DEFAULT_TIMEOUT
from .exceptions import FileSystemError, NetworkError


# RSS Download Functions
def download_rss_from_url(rss_url: str, timeout: int = DEFAULT_TIMEOUT) -> bytes:
    """Download RSS content from URL.

    Raises:
        NetworkError: On connection failure, timeout, non-2xx status or
            an empty response body.
    """
    logger = logging.getLogger(__name__)
    logger.info("Downloading RSS from %s", rss_url)
    try:
        with requests.get(rss_url, timeout=timeout) as response:
            response.raise_for_status()
            content = response.content
    except requests.exceptions.RequestException as e:
        logger.error("RSS download error: %s", e)
        raise NetworkError(f"Could not fetch feed {rss_url}: {e}") from e

    if not content:
        logger.error("Failed to download RSS content - response was empty")
        raise NetworkError(f"Feed {rss_url} returned an empty response")

    logger.info("Successfully downloaded RSS content (%d bytes)", len(content))
    return content


# Episode Download Functions
def download_file_to_path(
    file_url: str,
    output_path: str,
    show_progress: bool = True,
    timeout: int = DEFAULT_TIMEOUT,
) -> int:
    """Stream a file from URL to a specific path.

    An existing file at ``output_path`` is overwritten. A partially
    written file is removed when the transfer fails.

    Returns:
        Number of bytes written.

    Raises:
        NetworkError: If the URL is empty or the transfer fails.
        FileSystemError: If the output file cannot be opened or written.
    """
    logger = logging.getLogger(__name__)
    output_filename = os.path.basename(output_path)

    if not file_url:
        raise NetworkError(f"No enclosure URL for {output_filename}")

    logger.debug("Downloading %s from %s", output_filename, file_url)
    bytes_written = 0
    try:
        with requests.get(file_url, stream=True, timeout=timeout) as response:
            response.raise_for_status()

            content_length = _parse_content_length(
                response.headers.get("content-length")
            )
            logger.debug("Content length: %d bytes", content_length)

            with open(output_path, "wb") as output_file:
                with tqdm(
                    total=content_length,
                    unit="B",
                    unit_scale=True,
                    desc=output_filename,
                    leave=False,
                    disable=not show_progress,
                ) as progress_bar:
                    for chunk in response.iter_content(chunk_size=8192):
                        if chunk:  # Filter out keep-alive chunks
                            output_file.write(chunk)
                            bytes_written += len(chunk)
                            progress_bar.update(len(chunk))
    except requests.exceptions.RequestException as e:
        # RequestException is an IOError, so it must be handled first.
        _remove_partial_file(output_path)
        raise NetworkError(f"Download failed for {output_filename}: {e}") from e
    except OSError as e:
        _remove_partial_file(output_path)
        raise FileSystemError(
            f"Could not write {output_path}: {e}"
        ) from e

    logger.debug("Download complete: %s (%d bytes)", output_filename, bytes_written)
    return bytes_written


# Helper Functions
def _parse_content_length(value: Optional[str]) -> int:
    """Parse a Content-Length header, returning 0 when it is unusable."""
    try:
        return max(int(value or 0), 0)
    except (TypeError, ValueError):
        logging.getLogger(__name__).debug(
            "Ignoring invalid Content-Length: %r", value
        )
        return 0


def _remove_partial_file(output_path: str) -> None:
    """Delete a partially written download, if any."""
    logger = logging.getLogger(__name__)
    if os.path.exists(output_path):
        try:
            os.remove(output_path)
            logger.debug("Cleaned up partial file: %s", output_path)
        except OSError as e:
            logger.warning("Could not remove partial file %s: %s", output_path, e)
