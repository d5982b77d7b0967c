"""
High-level convenience functions wiring the ACIS-backed collaborators.
"""

from typing import Optional, Sequence

from .acis.client import ACISClient
from .acis.collaborators import ACISObservationStore, ACISStationResolver
from .config import EngineConfig, FrostCriteria
from .engine import FrostDateEngine, validate_windows
from .geocode import ZipGeocoder
from .models import FrostDateReport
from .utils import add_sync_version


@add_sync_version
async def get_frost_statistics(
    zipcode: str,
    window_years_list: Optional[Sequence[int]] = None,
    config: Optional[EngineConfig] = None,
    criteria: Optional[FrostCriteria] = None,
    max_distance_km: float = 50.0,
    client: Optional[ACISClient] = None,
) -> FrostDateReport:
    """
    Get frost date statistics for a US zip code from ACIS station data.

    Args:
        zipcode: 5-digit US zip code
        window_years_list: Trailing windows in years; defaults to config.window_years
        config: Engine settings (minimum sample size, current year, timeout)
        criteria: Frost threshold and season split used to derive frost dates
        max_distance_km: Maximum distance from the zip code to the station
        client: ACIS client instance. If not provided, creates temporary client

    Returns:
        FrostDateReport with statistics per event type and window

    Examples:
        >>> report = await get_frost_statistics("80301")
        >>> report = get_frost_statistics.sync("80301", window_years_list=[10, 30])
    """
    config = config or EngineConfig()
    windows = validate_windows(
        window_years_list if window_years_list is not None else config.window_years
    )

    own_client = client is None
    if own_client:
        client = ACISClient()
    try:
        async with ZipGeocoder() as geocoder:
            engine = FrostDateEngine(
                ACISStationResolver(client, geocoder, max_distance_km=max_distance_km),
                ACISObservationStore(
                    client,
                    lookback_years=max(windows),
                    criteria=criteria,
                    end_year=config.current_year,
                ),
                config,
            )
            return await engine.get_frost_statistics(zipcode, windows)
    finally:
        if own_client:
            await client.close()
