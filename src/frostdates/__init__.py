"""
Historical frost date statistics for US zip codes.

Resolve a zip code to a nearby weather station and summarize its last spring
and first fall frost dates over trailing windows.
"""

try:
    from importlib import metadata

    __version__ = metadata.version(__name__)
except Exception:
    __version__ = "unknown"

from .acis import (
    ACISClient,
    ACISObservationStore,
    ACISStationResolver,
    StationInfo,
)
from .aggregator import (
    build_report,
    compute_growing_season,
    compute_window_stats,
    select_window,
)
from .base_client import BaseDataAccessClient
from .collaborators import (
    InMemoryObservationStore,
    ObservationStore,
    StaticStationResolver,
    StationResolver,
)
from .config import ClientConfig, EngineConfig, FrostCriteria
from .convenience import get_frost_statistics
from .dates import day_of_year, from_day_of_year, summarize_dates
from .derive import DailyTemperature, extract_frost_observations
from .engine import FrostDateEngine, validate_zipcode
from .exceptions import (
    FrostDateError,
    InsufficientDataError,
    InvalidZipcodeError,
    StationNotFoundError,
    UpstreamResponseError,
    UpstreamUnavailableError,
)
from .geocode import ZipGeocoder, ZipLocation
from .models import (
    FrostDateReport,
    FrostEvent,
    FrostObservation,
    FrostWindowStats,
    GrowingSeasonStats,
    StationSeries,
)
from .sync import AsyncSyncBridge

__all__ = [
    # Engine and entry points
    "FrostDateEngine",
    "get_frost_statistics",
    "validate_zipcode",
    # Collaborator interfaces and implementations
    "StationResolver",
    "ObservationStore",
    "StaticStationResolver",
    "InMemoryObservationStore",
    "ACISStationResolver",
    "ACISObservationStore",
    # Clients
    "BaseDataAccessClient",
    "ACISClient",
    "ZipGeocoder",
    "ZipLocation",
    "StationInfo",
    # Configuration
    "ClientConfig",
    "EngineConfig",
    "FrostCriteria",
    # Models
    "FrostEvent",
    "FrostObservation",
    "StationSeries",
    "FrostWindowStats",
    "GrowingSeasonStats",
    "FrostDateReport",
    "DailyTemperature",
    # Aggregation
    "select_window",
    "compute_window_stats",
    "compute_growing_season",
    "build_report",
    "day_of_year",
    "from_day_of_year",
    "summarize_dates",
    "extract_frost_observations",
    # Exceptions
    "FrostDateError",
    "InvalidZipcodeError",
    "StationNotFoundError",
    "UpstreamUnavailableError",
    "UpstreamResponseError",
    "InsufficientDataError",
    # Sync support
    "AsyncSyncBridge",
]
