from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, Tuple

from ..attendance.model import CodeUpdate
from ..core.constants import DEFAULT_DEBOUNCE_SECONDS

logger = logging.getLogger(__name__)

SendFn = Callable[[str, str, str], None]
_Key = Tuple[str, str]


class DebouncedSyncTransport:
    """Trailing-edge debounce of single-field deltas, keyed by (week, session).

    Repeated calls for the same key inside the quiet window collapse into one
    send carrying the last value. Different keys are debounced independently,
    so an edit to one session never cancels the pending sync of another.

    Sends are best effort: a failure is logged and dropped, never retried.
    """

    def __init__(self, send: SendFn, *, quiet_seconds: float = DEFAULT_DEBOUNCE_SECONDS):
        self._send = send
        self._quiet_seconds = float(quiet_seconds)
        self._lock = threading.Lock()
        self._pending: Dict[_Key, Tuple[CodeUpdate, threading.Timer]] = {}

    @property
    def quiet_seconds(self) -> float:
        return self._quiet_seconds

    def schedule_sync(self, week_id: str, session_id: str, value: str) -> None:
        key = (week_id, session_id)
        update = CodeUpdate(week_id=week_id, session_id=session_id, value=value)
        timer = threading.Timer(self._quiet_seconds, self._fire, args=(key, update))
        timer.daemon = True

        with self._lock:
            previous = self._pending.get(key)
            if previous is not None:
                previous[1].cancel()
            self._pending[key] = (update, timer)
        timer.start()

    def pending(self) -> int:
        with self._lock:
            return len(self._pending)

    def flush(self) -> int:
        """Send every pending delta now, on the calling thread. Returns how many were sent."""
        with self._lock:
            items = list(self._pending.values())
            self._pending.clear()

        for update, timer in items:
            timer.cancel()
            self._deliver(update)
        return len(items)

    def cancel_all(self) -> None:
        with self._lock:
            items = list(self._pending.values())
            self._pending.clear()
        for _, timer in items:
            timer.cancel()

    def _fire(self, key: _Key, update: CodeUpdate) -> None:
        with self._lock:
            current = self._pending.get(key)
            # A newer call (or a flush) already took over this key.
            if current is None or current[0] is not update:
                return
            del self._pending[key]
        self._deliver(update)

    def _deliver(self, update: CodeUpdate) -> None:
        try:
            self._send(update.week_id, update.session_id, update.value)
        except Exception:
            logger.exception("Failed to sync %s/%s with server", update.week_id, update.session_id)
        else:
            logger.debug("Synced %s/%s=%r", update.week_id, update.session_id, update.value)
