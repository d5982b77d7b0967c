"""
Data models for ACIS station metadata.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional


@dataclass
class StationInfo:
    """Information about an ACIS station."""

    station_id: str  # first ACIS sid, e.g. '050848 2'
    name: str
    latitude: float
    longitude: float
    elevation: Optional[float]
    state: Optional[str]
    sids: List[str] = field(default_factory=list)
    valid_start: Optional[date] = None
    valid_end: Optional[date] = None

    @property
    def record_years(self) -> int:
        if self.valid_start is None or self.valid_end is None:
            return 0
        return self.valid_end.year - self.valid_start.year + 1
