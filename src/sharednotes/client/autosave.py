"""
Client-side autosave for a single note.

The controller keeps the local draft, pushes it to the server after a quiet
period (trailing-edge debounce) and tracks saving/connectivity state for
display. Failed loads and saves are surfaced through a notifier callback and
never raise out of the controller; the next edit is the implicit retry.
"""

import asyncio
from datetime import datetime, timezone
from typing import Callable, Optional, Set

from ..config import get_settings
from ..core.logging import get_logger
from .api import NotesApiClient, NotesApiError

logger = get_logger("client.autosave")

# (title, description) -> None, e.g. a toast in a UI
Notifier = Callable[[str, str], None]


def _log_notification(title: str, description: str) -> None:
    logger.warning(f"{title}: {description}")


class AutosaveController:
    """Draft state plus debounced saves for one note view.

    Must be used from a running event loop. At most one debounce timer is
    pending at any time; saves are not serialised, so several may be in
    flight, but a response older than the newest applied one never moves
    ``last_saved`` backwards.
    """

    def __init__(
        self,
        api: NotesApiClient,
        note_name: str,
        *,
        delay: Optional[float] = None,
        notify: Optional[Notifier] = None,
    ):
        self.api = api
        self.note_name = note_name
        self.delay = delay if delay is not None else get_settings().autosave_delay_seconds
        self.notify = notify or _log_notification

        self.content = ""
        self.is_connected = True
        self.last_saved: Optional[datetime] = None

        self._timer: Optional[asyncio.TimerHandle] = None
        self._tasks: Set[asyncio.Task] = set()
        self._in_flight = 0
        self._sent_seq = 0
        self._applied_seq = 0
        self._closed = False

    async def __aenter__(self) -> "AutosaveController":
        return self

    async def __aexit__(self, *exc_info) -> None:
        self.close()

    @property
    def is_saving(self) -> bool:
        return self._in_flight > 0

    @property
    def has_pending_save(self) -> bool:
        return self._timer is not None

    @property
    def status_text(self) -> str:
        """Short status line for the note header."""
        if self.is_saving:
            return "Saving..."
        if not self.is_connected:
            return "Offline"
        if self.last_saved is None:
            return "Ready"
        return f"Saved {self.last_saved.astimezone().strftime('%H:%M:%S')}"

    async def load(self) -> None:
        """Fetch the current note once; a missing note is a fresh empty one."""
        try:
            snapshot = await self.api.get_note(self.note_name)
        except NotesApiError as exc:
            logger.error("Error loading note", extra={"note_name": self.note_name, "error": str(exc)})
            self.is_connected = False
            self.notify("Error loading note", "Couldn't load your note. Check your connection.")
            return

        if snapshot is None:
            self.content = ""
            self.last_saved = None
        else:
            self.content = snapshot.content
            if snapshot.updated_at is not None:
                self.last_saved = snapshot.updated_at
        self.is_connected = True

    def edit(self, text: str) -> None:
        """Apply a local change now and restart the debounce window."""
        self.content = text
        self._cancel_timer()
        if self._closed:
            return
        loop = asyncio.get_running_loop()
        self._timer = loop.call_later(self.delay, self._on_timer)

    async def flush(self) -> None:
        """Send a pending save immediately and wait for all in-flight saves."""
        if self._timer is not None:
            self._cancel_timer()
            self._start_save()
        if self._tasks:
            await asyncio.gather(*self._tasks)

    def close(self) -> None:
        """Tear down the view: drop the pending save, leave in-flight ones alone."""
        self._closed = True
        self._cancel_timer()

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _on_timer(self) -> None:
        self._timer = None
        self._start_save()

    def _start_save(self) -> None:
        self._sent_seq += 1
        self._in_flight += 1
        task = asyncio.get_running_loop().create_task(self._save(self.content, self._sent_seq))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _save(self, text: str, seq: int) -> None:
        try:
            snapshot = await self.api.put_note(self.note_name, text)
        except NotesApiError as exc:
            logger.error("Error saving note", extra={"note_name": self.note_name, "error": str(exc)})
            self.is_connected = False
            self.notify("Save failed", "Couldn't save your note. Check your connection.")
        else:
            if seq > self._applied_seq:
                self._applied_seq = seq
                self.last_saved = snapshot.updated_at or datetime.now(timezone.utc)
            else:
                logger.debug("Ignoring stale save response", extra={"seq": seq, "applied_seq": self._applied_seq})
            self.is_connected = True
        finally:
            self._in_flight -= 1
