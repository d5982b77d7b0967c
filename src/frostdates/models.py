"""
Data models for frost observations and the statistics computed from them.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, Iterable, List, Tuple

from .exceptions import InsufficientDataError


class FrostEvent(str, Enum):
    """The two annual frost events tracked per station."""

    LAST_SPRING_FROST = "last_spring_frost"
    FIRST_FALL_FROST = "first_fall_frost"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


WindowKey = Tuple[FrostEvent, int]


@dataclass(frozen=True)
class FrostObservation:
    """A single annual frost event at a station."""

    year: int
    event_type: FrostEvent
    date: date


@dataclass(frozen=True)
class StationSeries:
    """All observations of one station, ordered by year ascending."""

    station_id: str
    observations: Tuple[FrostObservation, ...] = ()

    def __post_init__(self) -> None:
        ordered = tuple(sorted(self.observations, key=lambda obs: obs.year))
        seen = set()
        for obs in ordered:
            key = (obs.year, obs.event_type)
            if key in seen:
                raise ValueError(
                    f"Duplicate {obs.event_type.value} observation for "
                    f"{self.station_id} in {obs.year}"
                )
            seen.add(key)
        object.__setattr__(self, "observations", ordered)

    def __len__(self) -> int:
        return len(self.observations)

    def for_event(self, event_type: FrostEvent) -> List[FrostObservation]:
        """Observations of a single event type."""
        return [obs for obs in self.observations if obs.event_type == event_type]

    @property
    def years(self) -> List[int]:
        return sorted({obs.year for obs in self.observations})


@dataclass(frozen=True)
class FrostWindowStats:
    """Statistics for one event type over one trailing window.

    ``average_date``, ``earliest_date`` and ``latest_date`` are expressed in the
    non-leap reference year; ``earliest_year`` and ``latest_year`` record the
    season each extreme came from.
    """

    event_type: FrostEvent
    window_years: int
    average_date: date
    earliest_date: date
    latest_date: date
    sample_count: int
    low_confidence: bool
    average_doy: float
    earliest_year: int
    latest_year: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "event_type": self.event_type.value,
            "window_years": self.window_years,
            "average_date": self.average_date.strftime("%m-%d"),
            "earliest_date": self.earliest_date.strftime("%m-%d"),
            "latest_date": self.latest_date.strftime("%m-%d"),
            "earliest_year": self.earliest_year,
            "latest_year": self.latest_year,
            "sample_count": self.sample_count,
            "low_confidence": self.low_confidence,
            "average_doy": round(self.average_doy, 2),
        }


@dataclass(frozen=True)
class GrowingSeasonStats:
    """Frost-free season length for years with both frost events in a window."""

    window_years: int
    average_days: float
    shortest_days: int
    longest_days: int
    sample_count: int


@dataclass
class FrostDateReport:
    """Frost statistics for a zip code, built fresh for every lookup."""

    zipcode: str
    station_id: str
    current_year: int
    per_window_stats: Dict[WindowKey, FrostWindowStats] = field(default_factory=dict)
    window_errors: Dict[WindowKey, InsufficientDataError] = field(
        default_factory=dict
    )
    growing_season: Dict[int, GrowingSeasonStats] = field(default_factory=dict)

    def get(self, event_type: FrostEvent, window_years: int) -> FrostWindowStats:
        """
        Return the statistics for one window.

        Raises:
            InsufficientDataError: If the window had no observations
            KeyError: If the window was never requested
        """
        key = (FrostEvent(event_type), window_years)
        if key in self.window_errors:
            raise self.window_errors[key]
        return self.per_window_stats[key]

    @property
    def windows(self) -> List[int]:
        keys: Iterable[WindowKey] = list(self.per_window_stats) + list(
            self.window_errors
        )
        return sorted({window for _, window in keys})

    def is_complete(self) -> bool:
        """True when every requested window produced statistics."""
        return not self.window_errors

    def to_records(self) -> List[Dict[str, Any]]:
        """One flat row per (event type, window), including failed windows."""
        records = []
        for event_type in FrostEvent:
            for window_years in self.windows:
                key = (event_type, window_years)
                if key in self.per_window_stats:
                    row = self.per_window_stats[key].to_dict()
                    row["error"] = None
                elif key in self.window_errors:
                    row = {
                        "event_type": event_type.value,
                        "window_years": window_years,
                        "sample_count": 0,
                        "error": str(self.window_errors[key]),
                    }
                else:
                    continue
                row["zipcode"] = self.zipcode
                row["station_id"] = self.station_id
                records.append(row)
        return records

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready representation of the report."""
        stats: Dict[str, Dict[str, Any]] = {}
        for (event_type, window_years), window_stats in self.per_window_stats.items():
            stats.setdefault(event_type.value, {})[str(window_years)] = (
                window_stats.to_dict()
            )
        errors: Dict[str, Dict[str, str]] = {}
        for (event_type, window_years), error in self.window_errors.items():
            errors.setdefault(event_type.value, {})[str(window_years)] = str(error)

        return {
            "zipcode": self.zipcode,
            "station_id": self.station_id,
            "current_year": self.current_year,
            "stats": stats,
            "errors": errors,
            "growing_season": {
                str(window_years): {
                    "average_days": season.average_days,
                    "shortest_days": season.shortest_days,
                    "longest_days": season.longest_days,
                    "sample_count": season.sample_count,
                }
                for window_years, season in self.growing_season.items()
            },
        }

    def to_pandas(self) -> Any:
        """Convert the per-window rows to a pandas DataFrame."""
        try:
            import pandas as pd
        except ImportError:
            raise ImportError(
                "pandas is required for DataFrame conversion. Install with: pip install pandas"
            ) from None

        return pd.DataFrame(self.to_records())

    def __repr__(self) -> str:
        return (
            f"FrostDateReport(zipcode={self.zipcode!r}, station_id={self.station_id!r}, "
            f"windows={self.windows}, errors={len(self.window_errors)})"
        )

    def __str__(self) -> str:
        lines = [f"Frost dates for {self.zipcode} (station {self.station_id})"]
        for event_type in FrostEvent:
            for window_years in self.windows:
                key = (event_type, window_years)
                prefix = f"  {event_type.label}, last {window_years} years:"
                if key in self.per_window_stats:
                    stats = self.per_window_stats[key]
                    line = (
                        f"{prefix} average {stats.average_date:%b %d}, "
                        f"earliest {stats.earliest_date:%b %d} ({stats.earliest_year}), "
                        f"latest {stats.latest_date:%b %d} ({stats.latest_year}), "
                        f"n={stats.sample_count}"
                    )
                    if stats.low_confidence:
                        line += " [low confidence]"
                    lines.append(line)
                elif key in self.window_errors:
                    lines.append(f"{prefix} no data")
        for window_years, season in sorted(self.growing_season.items()):
            lines.append(
                f"  Growing season, last {window_years} years: "
                f"{season.average_days:.0f} days on average "
                f"({season.shortest_days}-{season.longest_days})"
            )
        return "\n".join(lines)


def observations_from_dates(
    event_type: FrostEvent, dates: Iterable[date]
) -> List[FrostObservation]:
    """Build observations from plain dates, one per year."""
    return [
        FrostObservation(year=value.year, event_type=event_type, date=value)
        for value in dates
    ]
