"""Unit tests for request field coercion."""

from datetime import date

import pytest

from exercise_tracker_api.app.utils.coercion import (
    SQLITE_MAX_INT,
    parse_date,
    parse_duration,
    parse_int_prefix,
    parse_limit,
)


class TestParseIntPrefix:
    """Test leading-integer parsing used for durations and limits."""

    @pytest.mark.parametrize("value,expected", [
        ("30", 30),
        (" 30min", 30),
        ("3.7", 3),
        ("-5", -5),
        ("+8", 8),
        (45, 45),
        (30.9, 30),
        (-2.5, -2),
    ])
    def test_numeric_input(self, value, expected):
        assert parse_int_prefix(value) == expected

    @pytest.mark.parametrize("value", ["abc", "", "   ", "min30", None, True, False, float("nan"), [], {}])
    def test_not_a_number(self, value):
        assert parse_int_prefix(value) is None

    def test_duration_uses_same_rules(self):
        assert parse_duration("30") == 30
        assert parse_duration("thirty") is None

    @pytest.mark.parametrize("value", ["99999999999999999999", 1e20, -(2**63) - 1, "9" * 5000])
    def test_duration_beyond_storable_range(self, value):
        assert parse_duration(value) is None

    def test_duration_at_storable_bound(self):
        assert parse_duration(str(SQLITE_MAX_INT)) == SQLITE_MAX_INT


class TestParseLimit:
    """Test that zero and garbage mean no cap rather than no rows."""

    @pytest.mark.parametrize("value", [None, "", "0", "abc", 0])
    def test_no_cap(self, value):
        assert parse_limit(value) is None

    def test_positive_limit(self):
        assert parse_limit("1") == 1
        assert parse_limit("25rows") == 25

    def test_negative_limit_uses_magnitude(self):
        assert parse_limit("-2") == 2

    @pytest.mark.parametrize("value", ["99999999999999999999", "-99999999999999999999", 1e20])
    def test_huge_limit_is_clamped(self, value):
        assert parse_limit(value) == SQLITE_MAX_INT


class TestParseDate:
    """Test the accepted date formats."""

    @pytest.mark.parametrize("value,expected", [
        ("2023-07-04", date(2023, 7, 4)),
        ("  2023-07-04 ", date(2023, 7, 4)),
        ("2023-07", date(2023, 7, 1)),
        ("2023", date(2023, 1, 1)),
        ("2023-07-04T10:00:00", date(2023, 7, 4)),
        ("2023-07-04T10:00:00Z", date(2023, 7, 4)),
        ("2023-07-04T23:30:00-02:00", date(2023, 7, 5)),
        ("2023/07/04", date(2023, 7, 4)),
        ("07/04/2023", date(2023, 7, 4)),
        ("Tue Jul 04 2023", date(2023, 7, 4)),
        ("July 4, 2023", date(2023, 7, 4)),
        ("Jul 4 2023", date(2023, 7, 4)),
        ("4 July 2023", date(2023, 7, 4)),
        (1688428800000, date(2023, 7, 4)),
        (date(2023, 7, 4), date(2023, 7, 4)),
    ])
    def test_parses(self, value, expected):
        assert parse_date(value) == expected

    @pytest.mark.parametrize("value", ["not a date", "", "   ", "2023-02-30", "2023-13-01", None, True])
    def test_unparseable(self, value):
        assert parse_date(value) is None
