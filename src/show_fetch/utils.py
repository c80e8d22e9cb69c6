"""
Small helpers shared across the package.
"""

import re

_INVALID_FILENAME_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')


def sanitize_filename(name: str) -> str:
    """Make an episode title safe to use as a file name."""
    sanitized = _INVALID_FILENAME_CHARS.sub("_", name).strip().rstrip(".")
    return sanitized or "episode"


def format_bytes(num_bytes: float) -> str:
    """Format a byte count as a human readable string."""
    for unit in ("B", "KB", "MB", "GB"):
        if abs(num_bytes) < 1024:
            return f"{num_bytes:.1f} {unit}"
        num_bytes /= 1024
    return f"{num_bytes:.1f} TB"
