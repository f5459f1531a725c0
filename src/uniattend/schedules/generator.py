"""Academic calendar generation.

Read-only reference data for the presentation layer. Attendance storage
never validates week or session ids against it.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import List, Sequence

from .model import AcademicWeek, DailySchedule, DayTemplate, Session

DEFAULT_SCHEDULE_TEMPLATE: Sequence[DayTemplate] = (
    DayTemplate("Monday", [Session("mon_1", "FIT1047", "W02")]),
    DayTemplate(
        "Tuesday",
        [
            Session("tue_1", "FIT1058", "W02-P1"),
            Session("tue_2", "FIT1058", "W02-P2"),
            Session("tue_3", "FIT1051", "W01"),
        ],
    ),
    DayTemplate("Wednesday", [Session("wed_1", "FIT1045", "W02"), Session("wed_2", "FIT1058", "A01")]),
    DayTemplate("Thursday", [Session("thu_1", "FIT1047", "A01")]),
    DayTemplate("Friday", [Session("fri_1", "FIT1051", "A08"), Session("fri_2", "FIT1045", "A08")]),
)


def ordinal(n: int) -> str:
    if 11 <= n % 100 <= 13:
        return f"{n}th"
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def format_day_date(d: date) -> str:
    return f"{d.day} {d.strftime('%B')} {d.year}"


def week_label(monday: date, friday: date) -> str:
    return f"Mon {ordinal(monday.day)} {monday.strftime('%B')} - Fri {ordinal(friday.day)} {friday.strftime('%B')}"


def generate_weeks(
    count: int,
    start_date: date,
    template: Sequence[DayTemplate] = DEFAULT_SCHEDULE_TEMPLATE,
) -> List[AcademicWeek]:
    """Build ``count`` consecutive teaching weeks starting on ``start_date``.

    ``start_date`` is expected to be a Monday; each template day is laid out on
    consecutive days from it.
    """

    weeks: List[AcademicWeek] = []
    for i in range(int(count)):
        monday = start_date + timedelta(weeks=i)
        friday = monday + timedelta(days=4)
        schedule = [
            DailySchedule(day=t.day, date=format_day_date(monday + timedelta(days=offset)), sessions=list(t.sessions))
            for offset, t in enumerate(template)
        ]
        weeks.append(
            AcademicWeek(
                id=f"week_{i + 1}",
                label=week_label(monday, friday),
                start_date=monday,
                end_date=friday,
                schedule=schedule,
            )
        )
    return weeks


def week_to_dict(week: AcademicWeek) -> dict:
    return {
        "id": week.id,
        "label": week.label,
        "startDate": week.start_date.isoformat(),
        "endDate": week.end_date.isoformat(),
        "schedule": [
            {
                "day": d.day,
                "date": d.date,
                "sessions": [
                    {"id": s.id, "courseCode": s.course_code, "sessionType": s.session_type} for s in d.sessions
                ],
            }
            for d in week.schedule
        ],
    }
