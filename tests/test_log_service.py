"""Unit tests for log query composition."""

from datetime import date

import pytest

from exercise_tracker_api.app.core.errors import ErrorKind, ServiceError
from exercise_tracker_api.app.services.log_service import LogFilter, build_log_filter


class TestBuildLogFilter:
    """Test how optional query parameters combine."""

    def test_no_parameters(self):
        log_filter = build_log_filter("u1")
        assert log_filter == LogFilter(user_id="u1")
        assert log_filter.where() == ("user_id = ?", ["u1"])

    def test_from_only(self):
        log_filter = build_log_filter("u1", date_from="2023-01-01")
        assert log_filter.date_from == date(2023, 1, 1)
        assert log_filter.date_to is None
        assert log_filter.where() == ("user_id = ? AND date >= ?", ["u1", "2023-01-01"])

    def test_to_only(self):
        log_filter = build_log_filter("u1", date_to="2023-12-31")
        assert log_filter.where() == ("user_id = ? AND date <= ?", ["u1", "2023-12-31"])

    def test_both_bounds(self):
        log_filter = build_log_filter("u1", "2023-01-01", "2023-12-31")
        assert log_filter.where() == (
            "user_id = ? AND date >= ? AND date <= ?",
            ["u1", "2023-01-01", "2023-12-31"],
        )

    def test_empty_bounds_are_ignored(self):
        log_filter = build_log_filter("u1", date_from="", date_to="  ")
        assert log_filter.date_from is None
        assert log_filter.date_to is None

    @pytest.mark.parametrize("limit,expected", [
        (None, None),
        ("", None),
        ("0", None),
        ("abc", None),
        ("1", 1),
        ("10", 10),
        ("-3", 3),
        ("99999999999999999999", 2**63 - 1),
    ])
    def test_limit(self, limit, expected):
        assert build_log_filter("u1", limit=limit).limit == expected

    def test_limit_does_not_change_where_clause(self):
        assert build_log_filter("u1", limit="5").where() == ("user_id = ?", ["u1"])

    def test_unparseable_bound_is_rejected(self):
        with pytest.raises(ServiceError) as exc_info:
            build_log_filter("u1", date_from="yesterday-ish")
        assert exc_info.value.kind is ErrorKind.VALIDATION
        assert "from" in exc_info.value.message
