from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Dict

# weekId -> sessionId -> code
WeekRecord = Dict[str, str]
AttendanceStore = Dict[str, WeekRecord]


@dataclass(frozen=True)
class CodeUpdate:
    """A single field mutation (delta) carried from client to server."""

    week_id: str
    session_id: str
    value: str

    def to_payload(self) -> dict:
        return {"weekId": self.week_id, "sessionId": self.session_id, "value": self.value}


def copy_store(store: AttendanceStore) -> AttendanceStore:
    return copy.deepcopy(store)
