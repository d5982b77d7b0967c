"""
Tests for day-of-year conversion and season-aware date averaging.
"""

import random
from datetime import date, timedelta

import pytest

from frostdates.dates import (
    REFERENCE_YEAR,
    crosses_year_boundary,
    day_of_year,
    from_day_of_year,
    summarize_dates,
    to_reference_year,
    unwrap_days,
)
from frostdates.exceptions import InsufficientDataError


class TestDayOfYear:
    """Test conversion to and from the reference year."""

    def test_bounds(self):
        assert day_of_year(date(2020, 1, 1)) == 1
        assert day_of_year(date(2021, 12, 31)) == 365
        # leap years do not shift later dates
        assert day_of_year(date(2020, 12, 31)) == 365
        assert day_of_year(date(2020, 3, 1)) == day_of_year(date(2021, 3, 1)) == 60

    def test_leap_day_maps_to_feb_28(self):
        assert day_of_year(date(2024, 2, 29)) == day_of_year(date(2023, 2, 28)) == 59

    def test_from_day_of_year(self):
        assert from_day_of_year(1) == date(REFERENCE_YEAR, 1, 1)
        assert from_day_of_year(365) == date(REFERENCE_YEAR, 12, 31)
        assert from_day_of_year(105) == date(REFERENCE_YEAR, 4, 15)

    def test_from_day_of_year_wraps(self):
        assert from_day_of_year(366) == date(REFERENCE_YEAR, 1, 1)
        assert from_day_of_year(0) == date(REFERENCE_YEAR, 12, 31)

    def test_round_trip_every_day(self):
        day = date(REFERENCE_YEAR, 1, 1)
        while day.year == REFERENCE_YEAR:
            assert from_day_of_year(day_of_year(day)) == day
            day += timedelta(days=1)

    def test_to_reference_year(self):
        assert to_reference_year(date(1987, 10, 14)) == date(REFERENCE_YEAR, 10, 14)
        assert to_reference_year(date(2024, 2, 29)) == date(REFERENCE_YEAR, 2, 28)


class TestUnwrap:
    """Test detection of series straddling Jan 1."""

    def test_single_season_is_not_shifted(self):
        doys = [100, 110, 125]
        assert not crosses_year_boundary(doys)
        assert unwrap_days(doys) == doys

    def test_winter_series_is_shifted(self):
        doys = [363, 365, 2]
        assert crosses_year_boundary(doys)
        assert unwrap_days(doys) == [363, 365, 367]

    def test_empty(self):
        assert not crosses_year_boundary([])
        assert unwrap_days([]) == []


class TestSummarizeDates:
    """Test average, earliest and latest computation."""

    def test_spring_cluster(self):
        dates = [date(2020, 4, 10), date(2021, 4, 20), date(2022, 4, 15)]
        summary = summarize_dates(dates)

        assert summary.average_date == date(REFERENCE_YEAR, 4, 15)
        assert summary.earliest_date == date(REFERENCE_YEAR, 4, 10)
        assert summary.latest_date == date(REFERENCE_YEAR, 4, 20)
        assert summary.earliest_index == 0
        assert summary.latest_index == 1
        assert not summary.crosses_year_boundary

    def test_year_boundary_average(self):
        dates = [date(2019, 12, 29), date(2020, 12, 31), date(2022, 1, 2)]
        summary = summarize_dates(dates)

        assert summary.crosses_year_boundary
        assert summary.average_date in (
            date(REFERENCE_YEAR, 12, 31),
            date(REFERENCE_YEAR, 1, 1),
        )
        assert summary.average_date.month in (12, 1)
        # Jan 2 is the latest of the season, Dec 29 the earliest
        assert summary.earliest_date == date(REFERENCE_YEAR, 12, 29)
        assert summary.latest_date == date(REFERENCE_YEAR, 1, 2)

    def test_jan_2_is_early_in_a_spring_series(self):
        dates = [date(2020, 1, 2), date(2021, 3, 1), date(2022, 4, 1)]
        summary = summarize_dates(dates)

        assert not summary.crosses_year_boundary
        assert summary.earliest_date == date(REFERENCE_YEAR, 1, 2)
        assert summary.latest_date == date(REFERENCE_YEAR, 4, 1)

    def test_single_date(self):
        summary = summarize_dates([date(2018, 5, 3)])

        expected = date(REFERENCE_YEAR, 5, 3)
        assert summary.average_date == summary.earliest_date == summary.latest_date == expected
        assert summary.average_doy == day_of_year(expected)

    def test_leap_day_extreme_in_reference_year(self):
        summary = summarize_dates([date(2024, 2, 29), date(2023, 3, 20)])
        assert summary.earliest_date == date(REFERENCE_YEAR, 2, 28)
        assert summary.earliest_index == 0

    def test_average_rounds_half_up(self):
        summary = summarize_dates([date(2020, 4, 10), date(2021, 4, 11)])
        assert summary.average_doy == pytest.approx(100.5)
        assert summary.average_date == date(REFERENCE_YEAR, 4, 11)

    def test_empty_raises(self):
        with pytest.raises(InsufficientDataError):
            summarize_dates([])

    def test_average_between_extremes_for_single_season(self):
        rng = random.Random(20240415)
        for _ in range(200):
            anchor = rng.randint(1, 365 - 150)
            count = rng.randint(1, 40)
            doys = [anchor + rng.randint(0, 150) for _ in range(count)]
            dates = [
                from_day_of_year(doy).replace(year=1990 + i)
                for i, doy in enumerate(doys)
            ]

            summary = summarize_dates(dates)

            assert min(doys) <= day_of_year(summary.average_date) <= max(doys)
            assert min(doys) <= summary.average_doy <= max(doys)
            assert day_of_year(summary.earliest_date) == min(doys)
            assert day_of_year(summary.latest_date) == max(doys)
