"""Clipboard output for finished patterns."""

import asyncio
import itertools
import logging
import threading
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Optional

import pyperclip

from url_regex.exceptions import ClipboardError

logger = logging.getLogger(__name__)

COPIED_MESSAGE = "Output automatically copied to clipboard!"
FAILED_MESSAGE = "Failed to copy output to clipboard: {detail}"
EMPTY_MESSAGE = "No URLs to process or output is empty."


class CopyStatus(Enum):
    """Result of one clipboard write attempt"""
    COPIED = auto()
    FAILED = auto()
    EMPTY = auto()


@dataclass(frozen=True)
class ClipboardOutcome:
    status: CopyStatus
    detail: str = ""

    @classmethod
    def copied(cls):
        return cls(CopyStatus.COPIED)

    @classmethod
    def failed(cls, detail):
        return cls(CopyStatus.FAILED, str(detail))

    @classmethod
    def empty(cls):
        return cls(CopyStatus.EMPTY)

    @property
    def message(self):
        """User-facing status line"""
        if self.status is CopyStatus.COPIED:
            return COPIED_MESSAGE
        if self.status is CopyStatus.FAILED:
            return FAILED_MESSAGE.format(detail=self.detail)
        return EMPTY_MESSAGE


def copy_text(text: str, writer: Callable[[str], None] = None) -> None:
    """Put ``text`` on the clipboard.

    Raises:
        ClipboardError: If the clipboard backend rejects the write.
    """
    writer = writer or pyperclip.copy
    try:
        writer(text)
    except (pyperclip.PyperclipException, OSError) as e:
        raise ClipboardError("Clipboard write failed", original_error=e) from e


def paste_text(reader: Callable[[], str] = None) -> str:
    """Read the current clipboard text"""
    reader = reader or pyperclip.paste
    try:
        return reader() or ""
    except (pyperclip.PyperclipException, OSError) as e:
        raise ClipboardError("Clipboard read failed", original_error=e) from e


def write_clipboard(text: str, writer: Callable[[str], None] = None) -> ClipboardOutcome:
    """Copy a finished pattern and report what happened.

    Never raises: an empty pattern is reported as EMPTY without touching the
    clipboard, and backend errors come back as FAILED with their detail.
    """
    if not text:
        return ClipboardOutcome.empty()
    try:
        copy_text(text, writer)
    except ClipboardError as e:
        logger.warning(f"Clipboard write failed: {e}")
        return ClipboardOutcome.failed(e.original_error or e)
    logger.debug(f"Copied {len(text)} characters to clipboard")
    return ClipboardOutcome.copied()


class ClipboardDispatcher:
    """Runs clipboard writes on a background event loop.

    Each submission gets a new run id; its callback only fires while that
    id is still the latest one, so a slow earlier write never overwrites the
    status of a later run.
    """

    def __init__(self, writer: Callable[[str], None] = None):
        self.writer = writer
        self.loop = asyncio.new_event_loop()
        self.thread = threading.Thread(target=self.run_async_loop, daemon=True)
        self._run_ids = itertools.count(1)
        self._latest_run = 0
        self._lock = threading.Lock()
        self.thread.start()

    def run_async_loop(self):
        """Run asyncio event loop in a separate thread"""
        asyncio.set_event_loop(self.loop)
        self.loop.run_forever()

    @property
    def latest_run(self):
        with self._lock:
            return self._latest_run

    async def _write(self, run_id, text, callback):
        outcome = await self.loop.run_in_executor(None, write_clipboard, text, self.writer)
        if run_id != self.latest_run:
            logger.debug(f"Dropping clipboard outcome of stale run {run_id}")
            return
        if callback:
            callback(outcome)

    def submit(self, text: str,
               callback: Optional[Callable[[ClipboardOutcome], None]] = None):
        """Schedule one clipboard write and return its future"""
        with self._lock:
            run_id = next(self._run_ids)
            self._latest_run = run_id
        return asyncio.run_coroutine_threadsafe(self._write(run_id, text, callback), self.loop)

    def close(self):
        """Stop the background loop"""
        if self.loop.is_running():
            self.loop.call_soon_threadsafe(self.loop.stop)
        self.thread.join(timeout=1.0)
        if not self.loop.is_running():
            self.loop.close()
