from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List


@dataclass(frozen=True)
class Session:
    """One scheduled class session; ``id`` is the key used in attendance data."""

    id: str
    course_code: str
    session_type: str


@dataclass(frozen=True)
class DayTemplate:
    day: str
    sessions: List[Session] = field(default_factory=list)


@dataclass(frozen=True)
class DailySchedule:
    day: str
    date: str
    sessions: List[Session] = field(default_factory=list)


@dataclass(frozen=True)
class AcademicWeek:
    id: str
    label: str
    start_date: date
    end_date: date
    schedule: List[DailySchedule] = field(default_factory=list)
