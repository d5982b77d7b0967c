"""
Shared fixtures for frostdates tests.
"""

from datetime import date, timedelta
from unittest.mock import Mock

import pytest

from frostdates.collaborators import InMemoryObservationStore, StaticStationResolver
from frostdates.derive import DailyTemperature
from frostdates.models import FrostEvent, FrostObservation, observations_from_dates

STATION_ID = "050848 2"
ZIPCODE = "80301"

# 2009..2023, last spring frost between Apr 10 and Apr 22
SPRING_DAYS = [15, 20, 12, 18, 22, 10, 16, 14, 19, 13, 21, 17, 11, 15, 10]
# first fall frost between Oct 2 and Oct 16
FALL_DAYS = [8, 4, 12, 10, 2, 6, 9, 16, 7, 5, 11, 3, 13, 8, 14]


def spring_observations():
    return observations_from_dates(
        FrostEvent.LAST_SPRING_FROST,
        [date(2009 + i, 4, day) for i, day in enumerate(SPRING_DAYS)],
    )


def fall_observations():
    return observations_from_dates(
        FrostEvent.FIRST_FALL_FROST,
        [date(2009 + i, 10, day) for i, day in enumerate(FALL_DAYS)],
    )


def make_response(payload, status_code=200):
    """Mock httpx response returning ``payload`` from json()."""
    response = Mock()
    response.status_code = status_code
    response.json.return_value = payload
    response.raise_for_status.return_value = None
    return response


def daily_series(year, frost_days, start=None, end=None, cold=25.0, warm=50.0):
    """Daily readings for ``year`` with ``cold`` on ``frost_days`` and ``warm`` otherwise."""
    day = start or date(year, 1, 1)
    end = end or date(year, 12, 31)
    frost_days = set(frost_days)
    readings = []
    while day <= end:
        readings.append(
            DailyTemperature(day=day, min_temp_f=cold if day in frost_days else warm)
        )
        day += timedelta(days=1)
    return readings


@pytest.fixture
def spring():
    return spring_observations()


@pytest.fixture
def fall():
    return fall_observations()


@pytest.fixture
def resolver():
    return StaticStationResolver({ZIPCODE: STATION_ID})


@pytest.fixture
def store(spring, fall):
    return InMemoryObservationStore({STATION_ID: spring + fall})


@pytest.fixture
def make_observation():
    def _make(year, month, day, event_type=FrostEvent.LAST_SPRING_FROST):
        return FrostObservation(
            year=year, event_type=event_type, date=date(year, month, day)
        )

    return _make
