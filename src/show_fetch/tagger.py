"""
Audio metadata taggers.

A tagger sets the track number and title of a downloaded file. Failures
are returned as a TagResult, never raised, so a bad file does not stop
the remaining downloads.
"""

import logging
import subprocess
from dataclasses import dataclass
from typing import Optional, Protocol

from mutagen import MutagenError
from mutagen.id3 import ID3, TIT2, TRCK, ID3NoHeaderError

from .exceptions import TaggingError


@dataclass
class TagResult:
    """Result of a tagging operation."""

    success: bool
    error: Optional[str] = None


class Tagger(Protocol):
    """Capability for writing track metadata to an audio file."""

    def set_metadata(
        self, path: str, track_number: int, title: str
    ) -> TagResult:
        """Set the track number and title of ``path``."""
        ...  # pylint: disable=unnecessary-ellipsis


class MutagenTagger:
    """Writes ID3 TRCK and TIT2 frames with mutagen."""

    def __init__(self) -> None:
        self.logger = logging.getLogger(__name__)

    def set_metadata(
        self, path: str, track_number: int, title: str
    ) -> TagResult:
        """Set ID3 track number and title, adding a tag header if missing."""
        try:
            self._write_tags(path, track_number, title)
        except TaggingError as e:
            self.logger.error("Error setting track number: %s", e)
            return TagResult(success=False, error=str(e))
        self.logger.debug("Tagged %s as track %d", path, track_number)
        return TagResult(success=True)

    def _write_tags(self, path: str, track_number: int, title: str) -> None:
        try:
            try:
                tags = ID3(path)
            except ID3NoHeaderError:
                tags = ID3()
            tags.add(TRCK(encoding=3, text=str(track_number)))
            tags.add(TIT2(encoding=3, text=title))
            tags.save(path)
        except (MutagenError, OSError) as e:
            raise TaggingError(f"Could not tag {path}: {e}") from e


class Id3v2Tagger:
    """Runs the ``id3v2`` command-line tool."""

    def __init__(self, executable: str = "id3v2") -> None:
        self.executable = executable
        self.logger = logging.getLogger(__name__)

    def set_metadata(
        self, path: str, track_number: int, title: str
    ) -> TagResult:
        """Invoke ``id3v2 --track N --song TITLE PATH``."""
        command = [
            self.executable,
            "--track",
            str(track_number),
            "--song",
            title,
            path,
        ]
        try:
            completed = subprocess.run(
                command, capture_output=True, text=True, check=False
            )
        except OSError as e:
            self.logger.error("Could not run %s: %s", self.executable, e)
            return TagResult(success=False, error=str(e))

        if completed.returncode != 0:
            error = (
                completed.stderr.strip()
                or f"{self.executable} exited with {completed.returncode}"
            )
            self.logger.error("Error setting track number: %s", error)
            return TagResult(success=False, error=error)

        return TagResult(success=True)


TAGGERS = {
    "mutagen": MutagenTagger,
    "id3v2": Id3v2Tagger,
}


def create_tagger(name: str = "mutagen") -> Tagger:
    """Create a tagger by name."""
    try:
        return TAGGERS[name]()
    except KeyError as e:
        raise ValueError(
            f"Unknown tagger {name!r}, choose from {', '.join(TAGGERS)}"
        ) from e
