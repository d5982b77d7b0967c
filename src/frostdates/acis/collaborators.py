"""
Station resolver and observation store backed by ACIS.
"""

import logging
from datetime import date
from typing import List, Optional, Tuple

from ..collaborators import ObservationStore, StationResolver
from ..config import FrostCriteria
from ..derive import DailyTemperature, extract_frost_observations
from ..exceptions import StationNotFoundError
from ..geocode import ZipGeocoder
from ..models import FrostEvent, StationSeries
from .client import ACISClient

logger = logging.getLogger(__name__)


class ACISStationResolver(StationResolver):
    """
    Resolve a zip code to the nearest active ACIS station.

    The zip code is geocoded first; stations whose minimum temperature record
    ended more than ``max_inactive_years`` ago, or that span fewer than
    ``min_record_years`` calendar years, are ignored.
    """

    def __init__(
        self,
        client: ACISClient,
        geocoder: ZipGeocoder,
        max_distance_km: float = 50.0,
        max_inactive_years: int = 2,
        min_record_years: int = 10,
    ):
        self.client = client
        self.geocoder = geocoder
        self.max_distance_km = max_distance_km
        self.max_inactive_years = max_inactive_years
        self.min_record_years = min_record_years

    async def resolve_station(self, zipcode: str) -> str:
        location = await self.geocoder.geocode(zipcode)
        today = date.today()
        active_since = date(today.year - self.max_inactive_years, 1, 1)

        nearby = await self.client.find_nearby_stations(
            location.latitude,
            location.longitude,
            max_distance_km=self.max_distance_km,
            limit=1,
            active_since=active_since,
            min_record_years=self.min_record_years,
        )
        if not nearby:
            raise StationNotFoundError(
                f"No active weather station within {self.max_distance_km} km "
                f"of zip code {zipcode}"
            )

        station, distance = nearby[0]
        logger.info(
            f"Zip code {zipcode} -> {station.name} ({station.station_id}), "
            f"{distance:.1f} km"
        )
        return station.station_id


class ACISObservationStore(ObservationStore):
    """
    Derive annual frost observations from ACIS daily minimum temperatures.

    Daily data for the most recently requested station is kept and reused for
    both event types; asking for another station replaces it.
    """

    def __init__(
        self,
        client: ACISClient,
        lookback_years: int = 30,
        criteria: Optional[FrostCriteria] = None,
        end_year: Optional[int] = None,
    ):
        self.client = client
        self.lookback_years = lookback_years
        self.criteria = criteria or FrostCriteria()
        self.end_year = end_year
        self._last_key: Optional[Tuple[str, str, str]] = None
        self._last_readings: List[DailyTemperature] = []

    def _date_range(self) -> Tuple[str, str]:
        end_year = self.end_year if self.end_year is not None else date.today().year
        start = date(end_year - self.lookback_years, 1, 1)
        end = min(date(end_year, 12, 31), date.today())
        return start.isoformat(), end.isoformat()

    async def _daily_readings(self, station_id: str) -> List[DailyTemperature]:
        start_date, end_date = self._date_range()
        key = (station_id, start_date, end_date)
        if key != self._last_key:
            self._last_readings = await self.client.get_daily_min_temperature(
                station_id, start_date, end_date
            )
            self._last_key = key
        return self._last_readings

    async def fetch_series(
        self, station_id: str, event_type: FrostEvent
    ) -> StationSeries:
        readings = await self._daily_readings(station_id)
        observations = extract_frost_observations(
            readings, event_type, criteria=self.criteria
        )
        logger.debug(
            f"{station_id}: derived {len(observations)} {event_type.value} "
            f"observations from {len(readings)} daily readings"
        )
        return StationSeries(station_id=station_id, observations=tuple(observations))
