from datetime import date

from uniattend.schedules.generator import generate_weeks, ordinal, week_to_dict


def test_default_calendar_starts_on_first_monday():
    weeks = generate_weeks(15, date(2025, 11, 3))

    assert len(weeks) == 15
    assert weeks[0].id == "week_1"
    assert weeks[0].start_date == date(2025, 11, 3)
    assert weeks[0].end_date == date(2025, 11, 7)
    assert weeks[0].label == "Mon 3rd November - Fri 7th November"
    assert weeks[-1].id == "week_15"


def test_week_ten_contains_sixth_of_january():
    week10 = generate_weeks(15, date(2025, 11, 3))[9]

    assert week10.start_date == date(2026, 1, 5)
    assert week10.schedule[1].day == "Tuesday"
    assert week10.schedule[1].date == "6 January 2026"


def test_session_ids_are_stable_across_weeks():
    weeks = generate_weeks(2, date(2025, 11, 3))

    ids = [[s.id for d in w.schedule for s in d.sessions] for w in weeks]
    assert ids[0] == ids[1]
    assert ids[0] == ["mon_1", "tue_1", "tue_2", "tue_3", "wed_1", "wed_2", "thu_1", "fri_1", "fri_2"]


def test_ordinal_suffixes():
    assert [ordinal(n) for n in (1, 2, 3, 4, 11, 12, 13, 21, 22, 23, 31)] == [
        "1st", "2nd", "3rd", "4th", "11th", "12th", "13th", "21st", "22nd", "23rd", "31st",
    ]


def test_week_to_dict_shape():
    week = generate_weeks(1, date(2025, 11, 3))[0]

    data = week_to_dict(week)

    assert data["startDate"] == "2025-11-03"
    assert data["schedule"][0]["sessions"][0] == {"id": "mon_1", "courseCode": "FIT1047", "sessionType": "W02"}


def test_weeks_endpoint(client):
    res = client.get("/api/weeks")

    assert res.status_code == 200
    weeks = res.get_json()
    assert len(weeks) == 15
    assert weeks[0]["label"] == "Mon 3rd November - Fri 7th November"
