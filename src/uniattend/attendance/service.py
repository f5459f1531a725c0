from __future__ import annotations

import contextlib
import logging
import threading
from typing import Any, ContextManager

from ..common.codes import normalize_code
from ..common.validators import require_non_empty, require_store_document
from ..core.enums import ConcurrencyPolicy
from .model import AttendanceStore, copy_store
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Authoritative attendance store.

    Every write is a read-modify-write over the whole persisted document. With
    ``ConcurrencyPolicy.SERIALIZED`` the cycles run one at a time behind a lock;
    with ``ConcurrencyPolicy.LAST_WRITE_WINS`` overlapping cycles may interleave
    and the last save replaces the whole file.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        policy: ConcurrencyPolicy = ConcurrencyPolicy.SERIALIZED,
    ):
        self._attendance = attendance
        self._policy = ConcurrencyPolicy(policy)
        self._lock = threading.Lock()

    @property
    def policy(self) -> ConcurrencyPolicy:
        return self._policy

    def _write_guard(self) -> ContextManager:
        if self._policy == ConcurrencyPolicy.SERIALIZED:
            return self._lock
        return contextlib.nullcontext()

    def read_all(self) -> AttendanceStore:
        return copy_store(self._attendance.load())

    def overwrite_all(self, new_store: Any) -> None:
        store = require_store_document(new_store)
        with self._write_guard():
            self._attendance.save(copy_store(store))
        logger.info("Attendance store replaced (%d weeks)", len(store))

    def merge_field(self, week_id: Any, session_id: Any, value: Any) -> AttendanceStore:
        week_id = require_non_empty(week_id, "weekId")
        session_id = require_non_empty(session_id, "sessionId")
        code = normalize_code(value)

        with self._write_guard():
            store = self._attendance.load()
            week = store.get(week_id)
            if not isinstance(week, dict):
                week = {}
                store[week_id] = week
            week[session_id] = code
            self._attendance.save(store)

        logger.debug("Merged %s/%s=%r", week_id, session_id, code)
        return copy_store(store)
