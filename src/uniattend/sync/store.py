from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import List, Optional, Protocol

import requests

from ..attendance.model import AttendanceStore, WeekRecord, copy_store
from ..common.codes import is_unset, normalize_code
from ..common.validators import require_store_document
from ..core.constants import UNSET_CODE
from ..core.enums import ClientState
from ..core.exceptions import ImportFormatError, StoreNotReadyError

logger = logging.getLogger(__name__)


class AttendanceApi(Protocol):
    def fetch_all(self) -> AttendanceStore:
        raise NotImplementedError

    def replace_all(self, store: AttendanceStore) -> None:
        raise NotImplementedError


class SyncTransport(Protocol):
    def schedule_sync(self, week_id: str, session_id: str, value: str) -> None:
        raise NotImplementedError

    def flush(self) -> int:
        raise NotImplementedError


@dataclass(frozen=True)
class Divergence:
    """A field where the local copy and the server disagreed at reconcile time."""

    week_id: str
    session_id: str
    local: str
    remote: str


class ClientAttendanceStore:
    """Optimistic client-side copy of the attendance store.

    Local mutations apply immediately and are never rolled back; each one
    schedules a delta through the sync transport.
    """

    def __init__(self, api: AttendanceApi, transport: SyncTransport):
        self._api = api
        self._transport = transport
        self._state = ClientState.LOADING
        self._data: AttendanceStore = {}

    @property
    def state(self) -> ClientState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return self._state == ClientState.LOADING

    def hydrate(self) -> None:
        """Load the full store from the server once. Falls back to empty on failure."""
        try:
            data = self._api.fetch_all()
        except (requests.exceptions.RequestException, ValueError) as e:
            logger.error("Failed to fetch attendance from server: %s", e)
            data = {}
        self._data = copy_store(data)
        self._state = ClientState.READY
        logger.info("Attendance store hydrated (%d weeks)", len(self._data))

    def _require_ready(self) -> None:
        if self._state != ClientState.READY:
            raise StoreNotReadyError("Attendance data is still loading")

    # Reads

    def _record(self, week_id: str) -> WeekRecord:
        # Imports are not schema-checked, so a week may hold something other than a mapping.
        return _as_record(self._data.get(week_id))

    def get_code(self, week_id: str, session_id: str) -> str:
        code = self._record(week_id).get(session_id)
        return UNSET_CODE if is_unset(code) else code

    def week(self, week_id: str) -> WeekRecord:
        return dict(self._record(week_id))

    def snapshot(self) -> AttendanceStore:
        return copy_store(self._data)

    # Mutations

    def set_code(self, week_id: str, session_id: str, raw_value: Optional[str]) -> str:
        self._require_ready()
        code = normalize_code(raw_value)

        week = dict(self._record(week_id))
        week[session_id] = code
        self._data = {**self._data, week_id: week}

        self._transport.schedule_sync(week_id, session_id, code)
        return code

    def clear_week(self, week_id: str) -> None:
        self._require_ready()
        previous = self._record(week_id)
        self._data = {**self._data, week_id: {}}

        for session_id, code in previous.items():
            if not is_unset(code):
                self._transport.schedule_sync(week_id, session_id, UNSET_CODE)

    # Import / export

    def export_json(self) -> str:
        return json.dumps(self._data, indent=2, ensure_ascii=False)

    def import_json(self, text: str) -> None:
        """Replace the whole store with a JSON backup and push it to the server."""
        self._require_ready()
        try:
            document = json.loads(text)
        except (TypeError, ValueError) as e:
            raise ImportFormatError("The selected file is not a valid attendance backup") from e
        store = require_store_document(document)

        self._data = copy_store(store)
        try:
            self._api.replace_all(self.snapshot())
        except requests.exceptions.RequestException as e:
            logger.error("Failed to push imported attendance to server: %s", e)

    # Reconciliation

    def reconcile(self) -> List[Divergence]:
        """Pull the server copy, report fields that differ and adopt the server copy."""
        self._require_ready()
        self._transport.flush()
        try:
            remote = self._api.fetch_all()
        except (requests.exceptions.RequestException, ValueError) as e:
            logger.warning("Reconcile skipped, server unavailable: %s", e)
            return []

        divergences = diff_stores(self._data, remote)
        if divergences:
            logger.info("Reconcile found %d diverged fields", len(divergences))
        self._data = copy_store(remote)
        return divergences


def diff_stores(local: AttendanceStore, remote: AttendanceStore) -> List[Divergence]:
    out: List[Divergence] = []
    for week_id in sorted(set(local) | set(remote)):
        local_week = _as_record(local.get(week_id))
        remote_week = _as_record(remote.get(week_id))
        for session_id in sorted(set(local_week) | set(remote_week)):
            a = local_week.get(session_id) or UNSET_CODE
            b = remote_week.get(session_id) or UNSET_CODE
            if a != b:
                out.append(Divergence(week_id=week_id, session_id=session_id, local=a, remote=b))
    return out


def _as_record(value) -> WeekRecord:
    return value if isinstance(value, dict) else {}
