from __future__ import annotations

from typing import Optional

import requests

from ..attendance.model import AttendanceStore, CodeUpdate
from ..core.constants import DEFAULT_SYNC_TIMEOUT_SECONDS


class AttendanceApiClient:
    """Thin wrapper over the attendance HTTP API.

    Every method raises ``requests.exceptions.RequestException`` on network
    failure or a non-2xx response.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = DEFAULT_SYNC_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = float(timeout)
        self._session = session or requests.Session()

    def _url(self, path: str) -> str:
        return f"{self._base_url}{path}"

    def fetch_all(self) -> AttendanceStore:
        response = self._session.get(self._url("/api/attendance"), timeout=self._timeout)
        response.raise_for_status()
        data = response.json()
        if not isinstance(data, dict):
            raise ValueError("Server returned a non-object attendance store")
        return data

    def replace_all(self, store: AttendanceStore) -> None:
        response = self._session.post(self._url("/api/attendance"), json=store, timeout=self._timeout)
        response.raise_for_status()

    def update_field(self, week_id: str, session_id: str, value: str) -> None:
        payload = CodeUpdate(week_id=week_id, session_id=session_id, value=value).to_payload()
        response = self._session.post(self._url("/api/attendance/update"), json=payload, timeout=self._timeout)
        response.raise_for_status()

    def close(self) -> None:
        self._session.close()
