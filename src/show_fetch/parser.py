"""
RSS feed parser that turns feed bytes into raw items.
"""

import io
import logging
import xml.sax
from typing import Any, List

import feedparser

from .exceptions import ParseError
from .models import RawItem


class FeedParser:
    """Parses RSS content into RawItem records using feedparser."""

    def __init__(self) -> None:
        self.logger = logging.getLogger(__name__)

    def parse(self, content: bytes) -> List[RawItem]:
        """Parse feed bytes into one RawItem per item node.

        Items keep document order. Missing titles or enclosures become
        empty strings rather than failing the parse.

        Raises:
            ParseError: If the document is not well-formed XML.
        """
        # Wrap in a stream so feedparser never treats content as a URL or path.
        parsed = feedparser.parse(io.BytesIO(content))

        if parsed.bozo:
            exc = parsed.get("bozo_exception")
            if isinstance(exc, xml.sax.SAXException):
                self.logger.error("Error parsing XML: %s", exc)
                raise ParseError(f"Error parsing XML: {exc}") from exc
            # Encoding overrides and similar are recoverable.
            self.logger.debug("Feed parsed with warning: %s", exc)

        items = [self._parse_entry(entry) for entry in parsed.entries]
        self.logger.info("Parsed %d items from feed", len(items))
        return items

    def _parse_entry(self, entry: Any) -> RawItem:
        """Extract title and enclosure URL from a feedparser entry."""
        title = entry.get("title", "") or ""
        enclosure_url = ""
        enclosures = entry.get("enclosures") or []
        if enclosures:
            enclosure_url = enclosures[0].get("href", "") or ""
        if not enclosure_url:
            self.logger.debug("Item %r has no enclosure URL", title)
        return RawItem(title=title, enclosure_url=enclosure_url)
