"""
Tests for episode classification and ordering.
"""

import unittest

from show_fetch.classifier import classify_item, classify_items, order_episodes
from show_fetch.models import EpisodeRecord, ShowPattern

from tests.utils import create_test_episode, create_test_item


class TestShowPattern(unittest.TestCase):
    """Test suite for ShowPattern construction."""

    def test_compile_is_case_insensitive(self) -> None:
        """Test that compiled patterns ignore case."""
        show = ShowPattern.compile("MAG", r"MAG (\d+)")

        self.assertIsNotNone(show.matcher.search("mag 12"))

    def test_compile_rejects_missing_group(self) -> None:
        """Test that a pattern without a capture group is rejected."""
        with self.assertRaises(ValueError):
            ShowPattern.compile("MAG", r"MAG \d+")

    def test_compile_rejects_extra_groups(self) -> None:
        """Test that a pattern with two capture groups is rejected."""
        with self.assertRaises(ValueError):
            ShowPattern.compile("MAG", r"(MAG) (\d+)")

    def test_compile_rejects_invalid_regex(self) -> None:
        """Test that an invalid regular expression is rejected."""
        with self.assertRaises(ValueError):
            ShowPattern.compile("MAG", r"MAG (\d+")


class TestClassifier(unittest.TestCase):
    """Test suite for classify_item and classify_items."""

    def setUp(self) -> None:
        self.mag = ShowPattern.compile("MAG", r"MAG (\d+)")
        self.protocol = ShowPattern.compile(
            "The Magnus Protocol", r"The Magnus Protocol (\d+)"
        )

    def test_match_extracts_number(self) -> None:
        """Test that the captured group becomes the episode number."""
        item = create_test_item("MAG 427: Something", "http://test.com/427.mp3")

        episode = classify_item(self.mag, item)

        self.assertEqual(
            episode,
            EpisodeRecord(
                name="MAG 427: Something",
                link="http://test.com/427.mp3",
                episode_number=427,
            ),
        )

    def test_no_match_is_excluded(self) -> None:
        """Test that an unmatched title produces no record."""
        self.assertIsNone(classify_item(self.mag, create_test_item("Bonus Episode")))
        self.assertEqual(
            classify_items(self.mag, [create_test_item("Bonus Episode")]), []
        )

    def test_case_insensitive_match(self) -> None:
        """Test that titles match regardless of case."""
        episode = classify_item(self.mag, create_test_item("mag 003 - Lower"))

        self.assertIsNotNone(episode)
        if episode:
            self.assertEqual(episode.episode_number, 3)

    def test_non_numeric_capture_is_no_match(self) -> None:
        """Test that a capture that isn't an integer is treated as no match."""
        show = ShowPattern.compile("MAG", r"MAG (\w+)")

        self.assertIsNone(classify_item(show, create_test_item("MAG abc")))

    def test_negative_capture_is_no_match(self) -> None:
        """Test that negative numbers never become episode numbers."""
        show = ShowPattern.compile("MAG", r"MAG (-?\d+)")

        self.assertIsNone(classify_item(show, create_test_item("MAG -4")))

    def test_optional_group_not_taken(self) -> None:
        """Test that a group that did not participate is no match."""
        show = ShowPattern.compile("MAG", r"MAG(?: (\d+))?")

        self.assertIsNone(classify_item(show, create_test_item("MAG Special")))

    def test_item_matches_patterns_independently(self) -> None:
        """Test that each show is classified from the same items separately."""
        items = [
            create_test_item("The Magnus Protocol 5 - Topic", "http://t/5.mp3"),
            create_test_item("MAG 101 - Topic", "http://t/101.mp3"),
        ]

        mag_episodes = classify_items(self.mag, items)
        protocol_episodes = classify_items(self.protocol, items)

        self.assertEqual([e.episode_number for e in mag_episodes], [101])
        self.assertEqual([e.episode_number for e in protocol_episodes], [5])

    def test_duplicates_are_kept(self) -> None:
        """Test that two items with the same number are both classified."""
        items = [
            create_test_item("MAG 10 - Original", "http://t/a.mp3"),
            create_test_item("MAG 10 - Re-upload", "http://t/b.mp3"),
        ]

        episodes = classify_items(self.mag, items)

        self.assertEqual(len(episodes), 2)
        self.assertEqual({e.link for e in episodes}, {"http://t/a.mp3", "http://t/b.mp3"})


class TestOrderEpisodes(unittest.TestCase):
    """Test suite for order_episodes."""

    def test_sorts_ascending(self) -> None:
        """Test that episodes are sorted by number."""
        episodes = [
            create_test_episode(name="c", episode_number=30),
            create_test_episode(name="a", episode_number=1),
            create_test_episode(name="b", episode_number=2),
        ]

        ordered = order_episodes(episodes)

        self.assertEqual([e.name for e in ordered], ["a", "b", "c"])

    def test_ties_keep_input_order(self) -> None:
        """Test that equal numbers preserve their relative order."""
        episodes = [
            create_test_episode(name="second", episode_number=2),
            create_test_episode(name="first-a", episode_number=1),
            create_test_episode(name="first-b", episode_number=1),
        ]

        ordered = order_episodes(episodes)

        self.assertEqual(
            [e.name for e in ordered], ["first-a", "first-b", "second"]
        )

    def test_idempotent(self) -> None:
        """Test that sorting twice equals sorting once."""
        episodes = [
            create_test_episode(name=str(n), episode_number=n % 4)
            for n in range(10)
        ]

        once = order_episodes(episodes)

        self.assertEqual(order_episodes(once), once)

    def test_empty(self) -> None:
        """Test ordering an empty collection."""
        self.assertEqual(order_episodes([]), [])


if __name__ == "__main__":
    unittest.main()
