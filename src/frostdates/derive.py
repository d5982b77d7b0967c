"""
Derive annual frost events from daily minimum temperatures.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional

from .config import FrostCriteria
from .models import FrostEvent, FrostObservation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DailyTemperature:
    """Daily minimum temperature in degrees Fahrenheit; None when missing."""

    day: date
    min_temp_f: Optional[float]


def _season_bounds(year: int, event_type: FrostEvent, criteria: FrostCriteria):
    """Inclusive first and last day searched for ``event_type`` in ``year``."""
    split = date(year, *criteria.season_split)
    if event_type == FrostEvent.LAST_SPRING_FROST:
        return date(year, 1, 1), split - timedelta(days=1)
    return split, date(year, 12, 31)


def find_frost_date(
    readings: Dict[date, Optional[float]],
    year: int,
    event_type: FrostEvent,
    criteria: FrostCriteria,
) -> Optional[date]:
    """
    Frost date of ``event_type`` in ``year``, or None.

    None is returned both when the half-year had no frost and when it has more
    than ``criteria.max_missing_days`` days without a reading.
    """
    start, end = _season_bounds(year, event_type, criteria)
    frost_days = []
    missing = 0
    day = start
    while day <= end:
        value = readings.get(day)
        if value is None:
            missing += 1
        elif value <= criteria.threshold_f:
            frost_days.append(day)
        day += timedelta(days=1)

    if missing > criteria.max_missing_days:
        logger.debug(
            f"Skipping {event_type.value} for {year}: {missing} days missing"
        )
        return None
    if not frost_days:
        return None
    if event_type == FrostEvent.LAST_SPRING_FROST:
        return frost_days[-1]
    return frost_days[0]


def extract_frost_observations(
    daily: Iterable[DailyTemperature],
    event_type: FrostEvent,
    criteria: Optional[FrostCriteria] = None,
) -> List[FrostObservation]:
    """
    Annual ``event_type`` observations from a daily minimum temperature series.

    Args:
        daily: Daily readings in any order; duplicates keep the last value
        event_type: Which frost event to derive
        criteria: Threshold and season split. Defaults to 32°F split on July 1

    Returns:
        One observation per year that has a qualifying frost, ordered by year
    """
    criteria = criteria or FrostCriteria()

    by_year: Dict[int, Dict[date, Optional[float]]] = defaultdict(dict)
    for reading in daily:
        by_year[reading.day.year][reading.day] = reading.min_temp_f

    observations = []
    for year in sorted(by_year):
        frost_day = find_frost_date(by_year[year], year, event_type, criteria)
        if frost_day is not None:
            observations.append(
                FrostObservation(year=year, event_type=event_type, date=frost_day)
            )
    return observations
