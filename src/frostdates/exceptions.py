"""
Exceptions for frost date lookups.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .models import FrostEvent


class FrostDateError(Exception):
    """Base exception for frostdates-related errors."""

    pass


class InvalidZipcodeError(FrostDateError):
    """Zip code is not exactly five ASCII digits."""

    pass


class StationNotFoundError(FrostDateError):
    """No weather station or data is available for the requested location."""

    pass


class UpstreamUnavailableError(FrostDateError):
    """Network or service failure while talking to an upstream data source.

    Callers may retry later; the lookup itself was well-formed.
    """

    pass


class UpstreamResponseError(UpstreamUnavailableError):
    """Upstream service answered with a payload that could not be parsed."""

    pass


class InsufficientDataError(FrostDateError):
    """A statistics window contains no observations."""

    def __init__(
        self,
        message: str,
        event_type: Optional["FrostEvent"] = None,
        window_years: Optional[int] = None,
    ):
        super().__init__(message)
        self.event_type = event_type
        self.window_years = window_years
