"""
Error types raised while fetching a feed and processing its episodes.
"""


class ShowFetchError(Exception):
    """Base class for all show-fetch errors."""


class UsageError(ShowFetchError):
    """Bad or missing command-line input."""


class NetworkError(ShowFetchError):
    """A transfer failed (connection, HTTP status, timeout, empty URL)."""


class ParseError(ShowFetchError):
    """The feed document is not well-formed XML."""


class FileSystemError(ShowFetchError):
    """A directory or file could not be created or written."""


class TaggingError(ShowFetchError):
    """The metadata tagger could not update a file."""
