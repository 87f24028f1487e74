"""Unit tests for response date strings."""

from datetime import date

from exercise_tracker_api.app.utils.formatting import to_date_string


def test_day_is_zero_padded():
    assert to_date_string(date(2023, 7, 4)) == "Tue Jul 04 2023"


def test_weekday_and_month_names():
    assert to_date_string(date(2023, 1, 15)) == "Sun Jan 15 2023"
    assert to_date_string(date(2023, 12, 31)) == "Sun Dec 31 2023"


def test_leap_day():
    assert to_date_string(date(2024, 2, 29)) == "Thu Feb 29 2024"
