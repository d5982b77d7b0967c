"""
Frost date lookup engine.

The engine validates the zip code, asks its station resolver and observation
store for data, and hands the series to the aggregator. Collaborators are
passed in explicitly; nothing is looked up from module state.
"""

import asyncio
import logging
import re
from typing import Any, Awaitable, Dict, Optional, Sequence, Tuple, TypeVar

from .aggregator import build_report
from .collaborators import ObservationStore, StationResolver
from .config import EngineConfig
from .exceptions import (
    FrostDateError,
    InvalidZipcodeError,
    UpstreamUnavailableError,
)
from .models import FrostDateReport, FrostEvent, StationSeries

logger = logging.getLogger(__name__)

T = TypeVar("T")

ZIPCODE_PATTERN = re.compile(r"[0-9]{5}")


def validate_zipcode(zipcode: Any) -> str:
    """Return ``zipcode`` unchanged if it is exactly five ASCII digits."""
    if not isinstance(zipcode, str) or not ZIPCODE_PATTERN.fullmatch(zipcode):
        raise InvalidZipcodeError(
            f"Invalid zip code {zipcode!r}: expected exactly 5 digits"
        )
    return zipcode


def validate_windows(window_years_list: Sequence[int]) -> Tuple[int, ...]:
    windows = tuple(window_years_list)
    if not windows:
        raise ValueError("At least one window size is required")
    for window_years in windows:
        if isinstance(window_years, bool) or not isinstance(window_years, int):
            raise ValueError(f"Window size must be an integer, got {window_years!r}")
        if window_years <= 0:
            raise ValueError(f"Window size must be positive, got {window_years}")
    # keep caller order, drop repeats
    return tuple(dict.fromkeys(windows))


class FrostDateEngine:
    """
    Look up frost date statistics for a zip code.

    Example:
        >>> engine = FrostDateEngine(resolver, store)
        >>> report = await engine.get_frost_statistics("80301")
        >>> report.get(FrostEvent.LAST_SPRING_FROST, 30).average_date
    """

    def __init__(
        self,
        resolver: StationResolver,
        store: ObservationStore,
        config: Optional[EngineConfig] = None,
    ):
        self.resolver = resolver
        self.store = store
        self.config = config or EngineConfig()

    async def _call(self, awaitable: Awaitable[T], description: str) -> T:
        """Await a collaborator call, converting failures to FrostDateError."""
        try:
            if self.config.request_timeout is not None:
                return await asyncio.wait_for(
                    awaitable, timeout=self.config.request_timeout
                )
            return await awaitable
        except FrostDateError:
            raise
        except asyncio.TimeoutError as e:
            raise UpstreamUnavailableError(
                f"{description} timed out after {self.config.request_timeout}s"
            ) from e
        except Exception as e:
            raise UpstreamUnavailableError(f"{description} failed: {e}") from e

    async def get_frost_statistics(
        self,
        zipcode: str,
        window_years_list: Optional[Sequence[int]] = None,
    ) -> FrostDateReport:
        """
        Compute frost statistics for ``zipcode``.

        Args:
            zipcode: 5-digit US zip code
            window_years_list: Trailing windows in years. Defaults to the
                configured windows (15 and 30)

        Returns:
            FrostDateReport; windows without data are tagged in
            ``window_errors`` rather than failing the lookup

        Raises:
            InvalidZipcodeError: Malformed zip code; no collaborator is called
            StationNotFoundError: No station or data for the location
            UpstreamUnavailableError: A collaborator failed or timed out
        """
        zipcode = validate_zipcode(zipcode)
        windows = validate_windows(
            window_years_list
            if window_years_list is not None
            else self.config.window_years
        )
        current_year = self.config.resolve_current_year()

        station_id = await self._call(
            self.resolver.resolve_station(zipcode), f"Station lookup for {zipcode}"
        )
        logger.info(f"Resolved zip code {zipcode} to station {station_id}")

        series: Dict[FrostEvent, StationSeries] = {}
        for event_type in self.config.event_types:
            series[event_type] = await self._call(
                self.store.fetch_series(station_id, event_type),
                f"Fetching {event_type.value} series for {station_id}",
            )
            logger.debug(
                f"{station_id}: {len(series[event_type])} {event_type.value} observations"
            )

        return build_report(
            zipcode,
            station_id,
            series,
            current_year,
            window_years_list=windows,
            min_sample_size=self.config.min_sample_size,
        )
