"""
Configuration objects for clients, frost derivation and the lookup engine.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Tuple

from .aggregator import DEFAULT_MIN_SAMPLE_SIZE, DEFAULT_WINDOWS
from .models import FrostEvent


@dataclass
class ClientConfig:
    """HTTP settings shared by the upstream data clients."""

    timeout: float = 30.0
    user_agent: str = "frostdates-client/0.1.0"
    base_url: Optional[str] = None


@dataclass
class FrostCriteria:
    """How annual frost events are derived from daily minimum temperatures.

    ``season_split`` is the (month, day) separating spring from fall; the last
    spring frost is searched before it and the first fall frost on or after it.
    """

    threshold_f: float = 32.0
    season_split: Tuple[int, int] = (7, 1)
    max_missing_days: int = 10

    def __post_init__(self) -> None:
        month, day = self.season_split
        # raises ValueError for impossible dates
        date(2001, month, day)
        if self.max_missing_days < 0:
            raise ValueError("max_missing_days must be non-negative")


@dataclass
class EngineConfig:
    """Settings for a frost statistics lookup."""

    window_years: Tuple[int, ...] = DEFAULT_WINDOWS
    min_sample_size: int = DEFAULT_MIN_SAMPLE_SIZE
    current_year: Optional[int] = None
    request_timeout: Optional[float] = None
    event_types: Tuple[FrostEvent, ...] = field(
        default_factory=lambda: tuple(FrostEvent)
    )

    def resolve_current_year(self) -> int:
        return self.current_year if self.current_year is not None else date.today().year
