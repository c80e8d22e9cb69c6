"""
Data models for feed items, classified episodes and show patterns.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Pattern


@dataclass(frozen=True)
class RawItem:
    """A single ``<item>`` from the feed, before classification."""

    title: str
    enclosure_url: str


@dataclass(frozen=True)
class EpisodeRecord:
    """An item that matched a show pattern.

    ``episode_number`` is always non-negative; items without a usable
    number never become records.
    """

    name: str
    link: str
    episode_number: int


@dataclass(frozen=True)
class ShowPattern:
    """A show label plus the title pattern that selects and numbers it."""

    label: str
    matcher: Pattern[str]

    @classmethod
    def compile(cls, label: str, expression: str) -> "ShowPattern":
        """Build a case-insensitive pattern with exactly one capture group."""
        if not label:
            raise ValueError("Show label must not be empty")
        try:
            matcher = re.compile(expression, re.IGNORECASE)
        except re.error as e:
            raise ValueError(f"Invalid pattern for {label!r}: {e}") from e
        if matcher.groups != 1:
            raise ValueError(
                f"Pattern for {label!r} must have exactly one capturing "
                f"group, found {matcher.groups}"
            )
        return cls(label=label, matcher=matcher)
