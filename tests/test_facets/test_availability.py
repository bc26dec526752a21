"""Tests for year/month availability."""

import json
from datetime import date, datetime, timezone

from src.facets import YearMonthAvailability, build_year_month_availability


def _unix(*args) -> int:
    return int(datetime(*args, tzinfo=timezone.utc).timestamp())


class TestBuildYearMonthAvailability:
    """Tests for build_year_month_availability()."""

    def test_years_and_months(self):
        """Test timestamps are grouped by year in ascending order."""
        availability = build_year_month_availability(
            [_unix(2024, 1, 15), _unix(2023, 5, 10)], "UTC"
        )
        assert availability.as_dict() == {2023: [5], 2024: [1]}
        assert availability.years == [2023, 2024]
        assert not availability.truncated

    def test_duplicates_collapse(self):
        """Test repeated months appear once, sorted."""
        availability = build_year_month_availability(
            [_unix(2024, 3, 1), _unix(2024, 1, 2), _unix(2024, 3, 20)], "UTC"
        )
        assert availability.months(2024) == (1, 3)

    def test_timezone_shifts_month(self):
        """Test months are read in the given zone."""
        value = _unix(2023, 12, 31, 23, 30)
        assert build_year_month_availability([value], "UTC").as_dict() == {2023: [12]}
        assert build_year_month_availability([value], "Europe/Brussels").as_dict() == {2024: [1]}

    def test_mixed_value_types(self):
        """Test dates, datetimes, strings and numeric strings are accepted."""
        availability = build_year_month_availability(
            [
                date(2022, 7, 4),
                datetime(2022, 8, 1, tzinfo=timezone.utc),
                "2022-09-15T10:00:00+00:00",
                str(_unix(2022, 10, 1)),
            ],
            "UTC",
        )
        assert availability.as_dict() == {2022: [7, 8, 9, 10]}

    def test_unreadable_values_skipped(self):
        """Test values that are not dates are ignored."""
        availability = build_year_month_availability(
            ["garbage", None, "", True, _unix(2024, 2, 29)], "UTC"
        )
        assert availability.as_dict() == {2024: [2]}

    def test_scan_limit(self):
        """Test values beyond the limit are not scanned."""
        values = [_unix(2020, 1, 1), _unix(2021, 1, 1), _unix(2022, 1, 1)]
        availability = build_year_month_availability(values, "UTC", limit=2)
        assert availability.years == [2020, 2021]
        assert availability.truncated

    def test_limit_not_reached(self):
        """Test exactly limit values is not a truncation."""
        values = [_unix(2020, 1, 1), _unix(2021, 1, 1)]
        assert not build_year_month_availability(values, "UTC", limit=2).truncated

    def test_empty(self):
        """Test no values gives an empty availability."""
        availability = build_year_month_availability([], "UTC")
        assert len(availability) == 0
        assert availability.to_payload() == {}


class TestYearMonthAvailability:
    """Tests for the availability mapping."""

    def test_payload(self):
        """Test the client payload is keyed by year then month."""
        availability = YearMonthAvailability({2024: [1], 2023: [5]})
        assert availability.to_payload() == {"2023": {"5": 5}, "2024": {"1": 1}}
        assert json.loads(availability.to_json()) == availability.to_payload()

    def test_from_payload(self):
        """Test rebuilding from a client payload."""
        availability = YearMonthAvailability.from_payload({"2023": {"1": 1, "3": 3}, "2024": [2]})
        assert availability == YearMonthAvailability({2023: [3, 1], 2024: [2]})

    def test_membership(self):
        """Test year lookups."""
        availability = YearMonthAvailability({2023: [5]})
        assert 2023 in availability
        assert "2023" in availability
        assert 2024 not in availability
        assert None not in availability
        assert availability.months(2024) == ()
        assert availability.months(None) == ()
