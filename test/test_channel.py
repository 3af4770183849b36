import unittest
from unittest.mock import patch

from penthicken.kernel.channel import Channel


class TestChannel(unittest.TestCase):
    """Tests the message channel used for progress output."""

    def setUp(self):
        self.channel = Channel("test_channel")
        self.messages = []

    def collector(self, msg):
        self.messages.append(msg)

    def test_channel_initialization(self):
        channel = Channel("basic")
        self.assertEqual(channel.name, "basic")
        self.assertEqual(channel.watchers, [])
        self.assertIn("basic", repr(channel))

    def test_basic_messaging(self):
        self.channel.watch(self.collector)
        self.channel("test message", indent=False)
        self.assertEqual(self.messages, ["test message"])

    def test_indent_default(self):
        """Messages are indented unless asked otherwise, including continuation lines."""
        self.channel.watch(self.collector)
        self.channel("Path length: 1.00\nsecond")
        self.assertEqual(self.messages, ["    Path length: 1.00\n    second"])

    def test_no_watchers(self):
        self.channel("nobody listens")
        self.assertEqual(self.messages, [])

    def test_watcher_deduplication(self):
        self.channel.watch(self.collector)
        self.channel.watch(self.collector)
        self.channel("message", indent=False)
        self.assertEqual(self.messages, ["message"])

    def test_unwatch(self):
        self.channel.watch(self.collector)
        self.channel("one", indent=False)
        self.channel.unwatch(self.collector)
        self.channel("two", indent=False)
        self.assertEqual(self.messages, ["one"])

    def test_unwatch_unknown_warns(self):
        with patch("penthicken.kernel.channel.logger") as mock_logger:
            self.channel.unwatch(self.collector)
            mock_logger.warning.assert_called_once()

    def test_broken_watcher_isolated(self):
        def broken(msg):
            raise RuntimeError("boom")

        self.channel.watch(broken)
        self.channel.watch(self.collector)
        with patch("penthicken.kernel.channel.logger") as mock_logger:
            self.channel("still delivered", indent=False)
            mock_logger.warning.assert_called_once()
        self.assertEqual(self.messages, ["still delivered"])
