"""Tests for clipboard output."""

import threading
import unittest
from unittest.mock import MagicMock, patch

import pyperclip

from tests.test_base import BaseTestCase, RecordingWriter
from url_regex.core.clipboard import (COPIED_MESSAGE, EMPTY_MESSAGE, ClipboardDispatcher,
                                      ClipboardOutcome, CopyStatus, copy_text, paste_text,
                                      write_clipboard)
from url_regex.exceptions import ClipboardError


class TestWriteClipboard(BaseTestCase):
    """Test outcome reporting for single writes"""

    def test_success(self):
        writer = RecordingWriter()
        outcome = write_clipboard("a$|b$", writer)
        self.assertEqual(outcome, ClipboardOutcome.copied())
        self.assertEqual(outcome.message, COPIED_MESSAGE)
        self.assertEqual(writer.writes, ["a$|b$"])

    def test_empty_text_is_not_copied(self):
        writer = RecordingWriter()
        outcome = write_clipboard("", writer)
        self.assertEqual(outcome.status, CopyStatus.EMPTY)
        self.assertEqual(outcome.message, EMPTY_MESSAGE)
        self.assertEqual(writer.writes, [])

    def test_backend_failure(self):
        writer = RecordingWriter(side_effect=pyperclip.PyperclipException("no xclip"))
        with self.assertNotRaises(Exception):
            outcome = write_clipboard("a$", writer)
        self.assertEqual(outcome.status, CopyStatus.FAILED)
        self.assertEqual(outcome.detail, "no xclip")
        self.assertEqual(outcome.message, "Failed to copy output to clipboard: no xclip")

    def test_os_error_failure(self):
        writer = RecordingWriter(side_effect=OSError("broken pipe"))
        self.assertEqual(write_clipboard("a$", writer).status, CopyStatus.FAILED)

    def test_defaults_to_pyperclip(self):
        with patch("url_regex.core.clipboard.pyperclip.copy") as mock_copy:
            outcome = write_clipboard("x$")
        mock_copy.assert_called_once_with("x$")
        self.assertEqual(outcome.status, CopyStatus.COPIED)


class TestCopyAndPaste(unittest.TestCase):

    def test_copy_wraps_backend_error(self):
        error = pyperclip.PyperclipException("missing")
        with self.assertRaises(ClipboardError) as ctx:
            copy_text("x", RecordingWriter(side_effect=error))
        self.assertIs(ctx.exception.original_error, error)
        self.assertIn("PyperclipException", str(ctx.exception))

    def test_paste(self):
        self.assertEqual(paste_text(lambda: "http://a.com"), "http://a.com")
        self.assertEqual(paste_text(lambda: None), "")

    def test_paste_failure(self):
        reader = MagicMock(side_effect=pyperclip.PyperclipException("missing"))
        with self.assertRaises(ClipboardError):
            paste_text(reader)


class TestClipboardDispatcher(BaseTestCase):
    """Test background writes and last-write-wins reporting"""

    def setUp(self):
        self.release = threading.Event()
        self.writes = []

        def writer(text):
            if text == "slow$":
                self.release.wait(timeout=5.0)
            self.writes.append(text)

        self.dispatcher = ClipboardDispatcher(writer)
        self.addCleanup(self.dispatcher.close)

    def test_single_write(self):
        callback = MagicMock()
        future = self.dispatcher.submit("a$", callback)
        future.result(timeout=5.0)
        callback.assert_called_once_with(ClipboardOutcome.copied())
        self.assertEqual(self.writes, ["a$"])

    def test_stale_outcome_is_dropped(self):
        slow_callback = MagicMock()
        fast_callback = MagicMock()

        slow = self.dispatcher.submit("slow$", slow_callback)
        fast = self.dispatcher.submit("fast$", fast_callback)
        fast.result(timeout=5.0)
        self.release.set()
        slow.result(timeout=5.0)

        fast_callback.assert_called_once_with(ClipboardOutcome.copied())
        slow_callback.assert_not_called()
        self.assertEqual(self.dispatcher.latest_run, 2)
        self.assertEqual(sorted(self.writes), ["fast$", "slow$"])

    def test_empty_pattern_reports_empty(self):
        callback = MagicMock()
        self.dispatcher.submit("", callback).result(timeout=5.0)
        callback.assert_called_once_with(ClipboardOutcome.empty())

    def test_close_stops_loop(self):
        self.dispatcher.close()
        self.assertTrue(self.wait_for_condition(lambda: not self.dispatcher.thread.is_alive()))


if __name__ == '__main__':
    unittest.main()
