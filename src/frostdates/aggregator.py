"""
Trailing-window frost statistics.

Everything here is pure computation over in-memory observations; no I/O.
"""

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from .dates import summarize_dates
from .exceptions import InsufficientDataError
from .models import (
    FrostDateReport,
    FrostEvent,
    FrostObservation,
    FrostWindowStats,
    GrowingSeasonStats,
    StationSeries,
)

logger = logging.getLogger(__name__)

DEFAULT_WINDOWS = (15, 30)
DEFAULT_MIN_SAMPLE_SIZE = 3


def select_window(
    observations: Iterable[FrostObservation],
    window_years: int,
    current_year: int,
) -> List[FrostObservation]:
    """Observations with ``current_year - window_years <= year <= current_year``."""
    first_year = current_year - window_years
    return [obs for obs in observations if first_year <= obs.year <= current_year]


def compute_window_stats(
    observations: Iterable[FrostObservation],
    event_type: FrostEvent,
    window_years: int,
    current_year: int,
    min_sample_size: int = DEFAULT_MIN_SAMPLE_SIZE,
) -> FrostWindowStats:
    """
    Average, earliest and latest date of one event over a trailing window.

    Args:
        observations: Observations of any event type; others are ignored
        event_type: Event to summarize
        window_years: Trailing window length in years
        current_year: Last year of the window (inclusive)
        min_sample_size: Windows with fewer samples are flagged low confidence

    Returns:
        FrostWindowStats for the window

    Raises:
        InsufficientDataError: If no observation falls inside the window
    """
    matching = [obs for obs in observations if obs.event_type == event_type]
    in_window = select_window(matching, window_years, current_year)

    if not in_window:
        raise InsufficientDataError(
            f"No {event_type.label.lower()} observations between "
            f"{current_year - window_years} and {current_year}",
            event_type=event_type,
            window_years=window_years,
        )

    summary = summarize_dates([obs.date for obs in in_window])
    if summary.crosses_year_boundary:
        logger.debug(
            f"{event_type.value} over {window_years} years straddles Jan 1; "
            "averaging with unwrapped day-of-year values"
        )

    return FrostWindowStats(
        event_type=event_type,
        window_years=window_years,
        average_date=summary.average_date,
        earliest_date=summary.earliest_date,
        latest_date=summary.latest_date,
        sample_count=len(in_window),
        low_confidence=len(in_window) < min_sample_size,
        average_doy=summary.average_doy,
        earliest_year=in_window[summary.earliest_index].year,
        latest_year=in_window[summary.latest_index].year,
    )


def compute_growing_season(
    spring: Iterable[FrostObservation],
    fall: Iterable[FrostObservation],
    window_years: int,
    current_year: int,
) -> Optional[GrowingSeasonStats]:
    """
    Frost-free season length over a trailing window.

    Only years with both a last spring frost and a later first fall frost are
    counted. Returns None when no such year exists.
    """
    spring_by_year = {
        obs.year: obs.date for obs in select_window(spring, window_years, current_year)
    }
    lengths = []
    for obs in select_window(fall, window_years, current_year):
        last_spring = spring_by_year.get(obs.year)
        if last_spring is None:
            continue
        days = (obs.date - last_spring).days
        if days > 0:
            lengths.append(days)

    if not lengths:
        return None

    return GrowingSeasonStats(
        window_years=window_years,
        average_days=round(sum(lengths) / len(lengths), 1),
        shortest_days=min(lengths),
        longest_days=max(lengths),
        sample_count=len(lengths),
    )


def build_report(
    zipcode: str,
    station_id: str,
    series: Mapping[FrostEvent, StationSeries],
    current_year: int,
    window_years_list: Sequence[int] = DEFAULT_WINDOWS,
    min_sample_size: int = DEFAULT_MIN_SAMPLE_SIZE,
) -> FrostDateReport:
    """
    Assemble a report for every (event type, window) combination.

    Windows without observations are tagged in ``window_errors`` instead of
    failing the whole report.
    """
    report = FrostDateReport(
        zipcode=zipcode, station_id=station_id, current_year=current_year
    )

    observations: Dict[FrostEvent, List[FrostObservation]] = {
        event_type: station_series.for_event(event_type)
        for event_type, station_series in series.items()
    }

    for event_type, event_observations in observations.items():
        for window_years in window_years_list:
            key = (event_type, window_years)
            try:
                report.per_window_stats[key] = compute_window_stats(
                    event_observations,
                    event_type,
                    window_years,
                    current_year,
                    min_sample_size=min_sample_size,
                )
            except InsufficientDataError as e:
                logger.warning(f"{station_id}: {e}")
                report.window_errors[key] = e

    spring = observations.get(FrostEvent.LAST_SPRING_FROST)
    fall = observations.get(FrostEvent.FIRST_FALL_FROST)
    if spring is not None and fall is not None:
        for window_years in window_years_list:
            season = compute_growing_season(spring, fall, window_years, current_year)
            if season is not None:
                report.growing_season[window_years] = season

    logger.info(
        f"Built frost report for {zipcode} from station {station_id}: "
        f"{len(report.per_window_stats)} windows, {len(report.window_errors)} without data"
    )
    return report
