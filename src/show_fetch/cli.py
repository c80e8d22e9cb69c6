"""
Command-line interface for the show downloader.
"""

import argparse
import logging
import sys
from typing import List, Optional

from tqdm.contrib.logging import logging_redirect_tqdm

from .config import (
    DEFAULT_OUTPUT_DIR,
    DEFAULT_SHOWS,
    TIMEOUT_SETTING,
    parse_show_options,
    parse_timeout,
)
from .exceptions import ShowFetchError, UsageError
from .factory import create_manager_from_rss
from .tagger import TAGGERS, create_tagger
from .utils import format_bytes


def _timeout_arg(value: str) -> int:
    """Argparse type for --timeout and SHOW_FETCH_TIMEOUT."""
    try:
        return parse_timeout(value)
    except UsageError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description=(
            "Download and tag numbered podcast episodes from an RSS feed"
        )
    )
    parser.add_argument("rss_url", help="URL of the podcast RSS feed")
    parser.add_argument(
        "--show",
        action="append",
        default=[],
        metavar="LABEL=REGEX",
        help=(
            "Show to download; REGEX needs one capturing group for the "
            "episode number. Repeatable. Defaults to the MAG and "
            "The Magnus Protocol shows."
        ),
    )
    parser.add_argument(
        "--output-dir",
        default=DEFAULT_OUTPUT_DIR,
        help="Directory for downloaded episodes (default: %(default)s)",
    )
    parser.add_argument(
        "--tagger",
        choices=sorted(TAGGERS),
        default="mutagen",
        help="How to write track metadata (default: %(default)s)",
    )
    parser.add_argument(
        "--timeout",
        type=_timeout_arg,
        default=TIMEOUT_SETTING,
        help=(
            "HTTP timeout in seconds (default: %(default)s, "
            "or SHOW_FETCH_TIMEOUT)"
        ),
    )
    parser.add_argument(
        "--list-only",
        action="store_true",
        help="List matching episodes without downloading",
    )
    parser.add_argument(
        "--no-progress", action="store_true", help="Disable progress bars"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point for the show downloader."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stdout,
    )

    try:
        shows = parse_show_options(args.show) if args.show else DEFAULT_SHOWS
    except UsageError as e:
        parser.error(str(e))

    print(args.rss_url)

    try:
        manager = create_manager_from_rss(
            args.rss_url,
            shows,
            output_dir=args.output_dir,
            tagger=create_tagger(args.tagger),
            show_progress=not args.no_progress,
            timeout=args.timeout,
        )

        if args.list_only:
            for label, episodes in manager.get_all_show_episodes().items():
                print(f"{label}: {len(episodes)} episodes")
                for episode in episodes:
                    print(f"  {episode.episode_number}. {episode.name}")
            return

        with logging_redirect_tqdm():
            summaries = manager.download_all()

        print("\nDownload complete:")
        for label, summary in summaries.items():
            print(
                f"  {label}: {summary.successful} downloaded "
                f"({format_bytes(summary.total_bytes)}), "
                f"{summary.failed} failed, {summary.tag_failed} not tagged"
            )

    except KeyboardInterrupt:
        print("\nDownload interrupted by user", file=sys.stderr)
        sys.exit(130)
    except ShowFetchError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
