"""
Season-aware averaging of calendar dates.

Dates of the same annual event (e.g. every last spring frost on record) are
compared by their position within a fixed non-leap reference year, so the year
component is ignored and Feb 29 never skews the result. Series that straddle
Jan 1 are unwrapped before averaging so that Dec 30 and Jan 2 average to the
turn of the year rather than to midsummer.
"""

import math
from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Sequence

from .exceptions import InsufficientDataError

REFERENCE_YEAR = 2001  # non-leap
DAYS_IN_YEAR = 365

# A doy spread at least this wide is treated as crossing the year boundary
WRAP_SPREAD_DAYS = 180

# Values below this doy are shifted into the following year when unwrapping
SEASON_MIDPOINT_DOY = 183


@dataclass(frozen=True)
class DateSummary:
    """Average and extremes of a set of dates, in the reference year."""

    average_date: date
    earliest_date: date
    latest_date: date
    average_doy: float
    earliest_index: int
    latest_index: int
    crosses_year_boundary: bool


def day_of_year(value: date) -> int:
    """Position of ``value`` within the non-leap reference year, in [1, 365]."""
    day = 28 if (value.month == 2 and value.day == 29) else value.day
    return date(REFERENCE_YEAR, value.month, day).timetuple().tm_yday


def from_day_of_year(doy: int) -> date:
    """Reference-year date for ``doy``; values outside [1, 365] wrap around."""
    normalized = (doy - 1) % DAYS_IN_YEAR
    return date(REFERENCE_YEAR, 1, 1) + timedelta(days=normalized)


def to_reference_year(value: date) -> date:
    """Same month and day in the reference year; Feb 29 becomes Feb 28."""
    return from_day_of_year(day_of_year(value))


def crosses_year_boundary(doys: Sequence[int]) -> bool:
    if not doys:
        return False
    return max(doys) - min(doys) >= WRAP_SPREAD_DAYS


def unwrap_days(doys: Sequence[int]) -> List[int]:
    """Shift early-year values past Dec 31 when the series straddles Jan 1."""
    if not crosses_year_boundary(doys):
        return list(doys)
    return [doy + DAYS_IN_YEAR if doy < SEASON_MIDPOINT_DOY else doy for doy in doys]


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def summarize_dates(dates: Sequence[date]) -> DateSummary:
    """
    Compute the seasonal average, earliest and latest of ``dates``.

    Args:
        dates: Dates of one recurring annual event; the year is ignored

    Returns:
        DateSummary with all dates expressed in the reference year. The
        indices point back into ``dates``.

    Raises:
        InsufficientDataError: If ``dates`` is empty
    """
    if not dates:
        raise InsufficientDataError("Cannot summarize an empty set of dates")

    doys = [day_of_year(value) for value in dates]
    wraps = crosses_year_boundary(doys)
    shifted = unwrap_days(doys)

    mean = sum(shifted) / len(shifted)
    average_doy = (mean - 1) % DAYS_IN_YEAR + 1

    # first occurrence wins on ties
    earliest_index = min(range(len(shifted)), key=lambda i: shifted[i])
    latest_index = max(range(len(shifted)), key=lambda i: shifted[i])

    return DateSummary(
        average_date=from_day_of_year(round_half_up(mean)),
        earliest_date=to_reference_year(dates[earliest_index]),
        latest_date=to_reference_year(dates[latest_index]),
        average_doy=average_doy,
        earliest_index=earliest_index,
        latest_index=latest_index,
        crosses_year_boundary=wraps,
    )
