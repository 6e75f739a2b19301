import datetime

import pendulum
import pytest

from commscal.model.calendar_view import CalendarView
from commscal.time import (
    end_of_day,
    end_of_month,
    end_of_week,
    enumerate_month_weeks,
    enumerate_week_days,
    format_time,
    get_time_slots,
    is_in_month,
    is_same_day,
    parse_local_datetime,
    shift_anchor,
    start_of_day,
    start_of_month,
    start_of_week,
    view_title,
)
from tests.conftest import local


def test_start_and_end_of_day():
    date = local(2024, 3, 13, 15, 42, 7)
    assert start_of_day(date) == local(2024, 3, 13)
    end = end_of_day(date)
    assert (end.hour, end.minute, end.second) == (23, 59, 59)
    assert is_same_day(end, date)
    # input is left untouched
    assert date == local(2024, 3, 13, 15, 42, 7)


@pytest.mark.parametrize(
    "date",
    [
        local(2024, 3, 10, 12),  # Sunday
        local(2024, 3, 13, 8),  # Wednesday
        local(2024, 3, 16, 23, 59),  # Saturday
    ],
)
def test_start_of_week_is_preceding_sunday(date):
    assert start_of_week(date) == local(2024, 3, 10)
    assert start_of_week(date).day_of_week == pendulum.SUNDAY


def test_end_of_week_is_saturday_end_of_day():
    end = end_of_week(local(2024, 3, 13))
    assert end.to_date_string() == "2024-03-16"
    assert end.day_of_week == pendulum.SATURDAY
    assert (end.hour, end.minute, end.second) == (23, 59, 59)


def test_week_bounds_hold_for_every_day_of_a_year():
    date = local(2024, 1, 1, 13, 30)
    for _ in range(366):
        week_start = start_of_week(date)
        week_end = end_of_week(date)
        assert week_start <= date <= week_end
        assert week_end.toordinal() - week_start.toordinal() == 6

        days = enumerate_week_days(week_start)
        assert len(days) == 7
        for previous, following in zip(days, days[1:]):
            assert following.toordinal() - previous.toordinal() == 1
        date = date.add(days=1)


def test_start_and_end_of_month():
    date = local(2024, 2, 17, 10)
    assert start_of_month(date) == local(2024, 2, 1)
    assert end_of_month(date).to_date_string() == "2024-02-29"


def test_enumerate_month_weeks_march_2024():
    weeks = enumerate_month_weeks(local(2024, 3, 1))
    assert [week.to_date_string() for week in weeks] == [
        "2024-02-25",
        "2024-03-03",
        "2024-03-10",
        "2024-03-17",
        "2024-03-24",
        "2024-03-31",
    ]


def test_enumerate_month_weeks_month_starting_on_sunday():
    # February 2026 runs from Sunday the 1st to Saturday the 28th
    weeks = enumerate_month_weeks(local(2026, 2, 1))
    assert len(weeks) == 4
    assert weeks[0] == local(2026, 2, 1)


def test_month_weeks_cover_month_without_gaps_or_overlap():
    month = local(2023, 1, 1)
    for _ in range(36):
        grid_days = [
            day.to_date_string()
            for week_start in enumerate_month_weeks(month)
            for day in enumerate_week_days(week_start)
        ]
        assert len(grid_days) == len(set(grid_days))
        assert len(grid_days) % 7 == 0

        month_days = {
            month.add(days=offset).to_date_string()
            for offset in range(month.days_in_month)
        }
        assert month_days <= set(grid_days)

        grid_dates = [datetime.date.fromisoformat(day) for day in grid_days]
        for previous, following in zip(grid_dates, grid_dates[1:]):
            assert following - previous == datetime.timedelta(days=1)
        month = month.add(months=1)


def test_is_same_day_ignores_time():
    assert is_same_day(local(2024, 3, 10, 0, 0), local(2024, 3, 10, 23, 59))
    assert not is_same_day(local(2024, 3, 10, 23, 59), local(2024, 3, 11, 0, 0))


def test_is_in_month():
    assert is_in_month(local(2024, 3, 31), local(2024, 3, 1))
    assert not is_in_month(local(2024, 2, 29), local(2024, 3, 1))
    assert not is_in_month(local(2023, 3, 15), local(2024, 3, 1))


def test_parse_local_datetime_without_offset_is_wall_clock():
    parsed = parse_local_datetime("2024-03-10T09:15")
    assert (parsed.year, parsed.month, parsed.day) == (2024, 3, 10)
    assert (parsed.hour, parsed.minute) == (9, 15)


def test_parse_local_datetime_with_offset_keeps_instant():
    parsed = parse_local_datetime("2024-03-10T09:00:00+00:00")
    assert parsed == pendulum.datetime(2024, 3, 10, 9, tz="UTC")


def test_parse_local_datetime_accepts_python_values():
    assert parse_local_datetime(datetime.datetime(2024, 3, 10, 9, 30)).minute == 30
    assert parse_local_datetime(datetime.date(2024, 3, 10)) == local(2024, 3, 10)


def test_parse_local_datetime_rejects_garbage():
    with pytest.raises(ValueError):
        parse_local_datetime("not a date")


def test_shift_anchor():
    anchor = local(2024, 1, 31)
    assert shift_anchor(anchor, CalendarView.DAY, -1) == local(2024, 1, 30)
    assert shift_anchor(anchor, CalendarView.WEEK, 1) == local(2024, 2, 7)
    assert shift_anchor(anchor, CalendarView.MONTH, 1) == local(2024, 2, 29)
    with pytest.raises(ValueError):
        shift_anchor(anchor, "year", 1)


def test_time_slots_and_titles():
    slots = get_time_slots()
    assert len(slots) == 24
    assert slots[0] == "12:00 AM"
    assert slots[13] == "01:00 PM"
    assert format_time(local(2024, 3, 10, 9)) == "09:00 AM"
    assert view_title(local(2024, 3, 10), CalendarView.MONTH) == "March 2024"
    assert view_title(local(2024, 3, 10), CalendarView.DAY) == "Sunday, March 10 2024"
