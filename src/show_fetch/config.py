"""
Runtime configuration: environment defaults and show pattern parsing.
"""

import os
from typing import List, Sequence

from .exceptions import UsageError
from .models import ShowPattern

DEFAULT_OUTPUT_DIR = os.getenv("SHOW_FETCH_OUTPUT_DIR", "Downloads")
DEFAULT_TIMEOUT = 30
# Validated by parse_timeout when the command line is parsed.
TIMEOUT_SETTING = os.getenv("SHOW_FETCH_TIMEOUT", str(DEFAULT_TIMEOUT))

AUDIO_SUFFIX = ".mp3"

# Processed in this order when no --show option is given.
DEFAULT_SHOWS: List[ShowPattern] = [
    ShowPattern.compile("MAG", r"MAG (\d+)"),
    ShowPattern.compile("The Magnus Protocol", r"The Magnus Protocol (\d+)"),
]


def parse_show_option(value: str) -> ShowPattern:
    """Parse a ``LABEL=REGEX`` command-line value into a ShowPattern."""
    label, sep, expression = value.partition("=")
    label = label.strip()
    if not sep or not label or not expression:
        raise UsageError(
            f"Invalid show {value!r}: expected LABEL=REGEX, "
            f"e.g. 'MAG=MAG (\\d+)'"
        )
    try:
        return ShowPattern.compile(label, expression)
    except ValueError as e:
        raise UsageError(str(e)) from e


def parse_show_options(values: Sequence[str]) -> List[ShowPattern]:
    """Parse every ``--show`` value, keeping their order."""
    shows = [parse_show_option(value) for value in values]
    labels = [show.label for show in shows]
    duplicates = sorted({label for label in labels if labels.count(label) > 1})
    if duplicates:
        raise UsageError(f"Duplicate show labels: {', '.join(duplicates)}")
    return shows


def parse_timeout(value: str) -> int:
    """Parse a timeout in seconds, which must be a positive integer."""
    try:
        timeout = int(value)
    except (TypeError, ValueError) as e:
        raise UsageError(
            f"Invalid timeout {value!r}: expected a whole number of seconds"
        ) from e
    if timeout <= 0:
        raise UsageError(f"Invalid timeout {value!r}: must be greater than 0")
    return timeout
