from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import List, Union

from .attendance.json_repository import JsonFileAttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import (
    DEFAULT_API_BASE_URL,
    DEFAULT_DEBOUNCE_SECONDS,
    DEFAULT_FIRST_WEEK_START,
    DEFAULT_SYNC_TIMEOUT_SECONDS,
    DEFAULT_WEEK_COUNT,
)
from .core.enums import ConcurrencyPolicy
from .schedules.generator import generate_weeks
from .schedules.model import AcademicWeek
from .sync.client import AttendanceApiClient
from .sync.store import ClientAttendanceStore
from .sync.transport import DebouncedSyncTransport


@dataclass(frozen=True)
class Container:
    attendance_repo: JsonFileAttendanceRepository
    attendance_service: AttendanceService
    weeks: List[AcademicWeek]


def build_container(
    *,
    data_file: Union[str, Path],
    concurrency_policy: Union[str, ConcurrencyPolicy] = ConcurrencyPolicy.SERIALIZED,
    week_count: int = DEFAULT_WEEK_COUNT,
    first_week_start: date = DEFAULT_FIRST_WEEK_START,
) -> Container:
    attendance_repo = JsonFileAttendanceRepository(data_file)
    attendance_service = AttendanceService(attendance_repo, policy=ConcurrencyPolicy(concurrency_policy))
    weeks = generate_weeks(int(week_count), first_week_start)

    return Container(
        attendance_repo=attendance_repo,
        attendance_service=attendance_service,
        weeks=weeks,
    )


@dataclass(frozen=True)
class ClientContainer:
    api: AttendanceApiClient
    transport: DebouncedSyncTransport
    store: ClientAttendanceStore


def build_client_store(
    *,
    base_url: str = DEFAULT_API_BASE_URL,
    debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
    timeout: float = DEFAULT_SYNC_TIMEOUT_SECONDS,
) -> ClientContainer:
    """Wire the client side: API client -> debounced transport -> optimistic store.

    The returned store is still loading; call ``store.hydrate()`` before use.
    """

    api = AttendanceApiClient(base_url, timeout=timeout)
    transport = DebouncedSyncTransport(api.update_field, quiet_seconds=debounce_seconds)
    store = ClientAttendanceStore(api, transport)
    return ClientContainer(api=api, transport=transport, store=store)
