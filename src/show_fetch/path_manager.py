"""
Centralized authority for the output directory and episode file paths.
"""

import logging
import os
from typing import Optional, Set

from .config import AUDIO_SUFFIX, DEFAULT_OUTPUT_DIR
from .exceptions import FileSystemError
from .models import EpisodeRecord
from .utils import sanitize_filename


class PathManager:
    """Resolves episode file paths inside one output directory.

    File names handed out during a run are remembered so two episodes
    with the same title never write to the same file.
    """

    def __init__(self, output_dir: Optional[str] = None):
        """Initialize with optional output directory."""
        self.output_dir = output_dir or DEFAULT_OUTPUT_DIR
        self.logger = logging.getLogger(__name__)
        self.assigned_names: Set[str] = set()

    def ensure_output_dir_exists(self) -> None:
        """Create the output directory if it doesn't exist."""
        try:
            os.makedirs(self.output_dir, exist_ok=True)
        except OSError as e:
            raise FileSystemError(
                f"Could not create output directory {self.output_dir}: {e}"
            ) from e

    def get_episode_audio_path(self, episode: EpisodeRecord) -> str:
        """Reserve and return the audio file path for an episode."""
        base_name = sanitize_filename(episode.name)
        file_name = self.handle_collision(base_name, self.assigned_names)
        if file_name != base_name:
            self.logger.warning(
                "File name %r already used in this run, saving as %r",
                base_name + AUDIO_SUFFIX,
                file_name + AUDIO_SUFFIX,
            )
        self.assigned_names.add(file_name)
        return os.path.join(self.output_dir, file_name + AUDIO_SUFFIX)

    def handle_collision(self, base_name: str, existing_names: Set[str]) -> str:
        """Handle file name collisions by appending numbers."""
        if base_name not in existing_names:
            return base_name

        counter = 1
        while f"{base_name}_{counter}" in existing_names:
            counter += 1

        return f"{base_name}_{counter}"
