"""
Interfaces the lookup engine depends on, plus in-memory implementations.

Implementations backed by network services live in ``frostdates.acis``.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, Mapping, Optional

from .exceptions import StationNotFoundError
from .models import FrostEvent, FrostObservation, StationSeries


class StationResolver(ABC):
    """Maps a zip code to a weather station identifier."""

    @abstractmethod
    async def resolve_station(self, zipcode: str) -> str:
        """
        Return the station id for ``zipcode``.

        Raises:
            StationNotFoundError: If no station serves the location
            UpstreamUnavailableError: If the lookup service failed
        """


class ObservationStore(ABC):
    """Supplies annual frost observations for a station."""

    @abstractmethod
    async def fetch_series(
        self, station_id: str, event_type: FrostEvent
    ) -> StationSeries:
        """
        Return every ``event_type`` observation on record for ``station_id``.

        Raises:
            StationNotFoundError: If the station is unknown to the store
            UpstreamUnavailableError: If the data service failed
        """


class StaticStationResolver(StationResolver):
    """Resolver backed by a fixed zip code to station mapping."""

    def __init__(self, stations: Mapping[str, str]):
        self._stations: Dict[str, str] = dict(stations)

    async def resolve_station(self, zipcode: str) -> str:
        try:
            return self._stations[zipcode]
        except KeyError:
            raise StationNotFoundError(
                f"No station is configured for zip code {zipcode}"
            ) from None


class InMemoryObservationStore(ObservationStore):
    """Store holding observations in memory, keyed by station id."""

    def __init__(
        self, observations: Optional[Mapping[str, Iterable[FrostObservation]]] = None
    ):
        self._observations: Dict[str, list] = {}
        for station_id, station_observations in (observations or {}).items():
            self.add(station_id, station_observations)

    def add(self, station_id: str, observations: Iterable[FrostObservation]) -> None:
        self._observations.setdefault(station_id, []).extend(observations)

    async def fetch_series(
        self, station_id: str, event_type: FrostEvent
    ) -> StationSeries:
        if station_id not in self._observations:
            raise StationNotFoundError(f"No observations stored for {station_id}")
        return StationSeries(
            station_id=station_id,
            observations=tuple(
                obs
                for obs in self._observations[station_id]
                if obs.event_type == event_type
            ),
        )
