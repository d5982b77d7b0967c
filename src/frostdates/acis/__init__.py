"""
ACIS (Applied Climate Information System) data access.

ACIS is operated by NOAA's Regional Climate Centers and serves daily
observations from cooperative observer (COOP) and first-order NWS stations.
This module finds the station nearest to a zip code and derives annual frost
dates from its daily minimum temperatures.

API Documentation:
- ACIS web services: https://www.rcc-acis.org/docs_webservices.html
"""

from .client import ACISClient
from .collaborators import ACISObservationStore, ACISStationResolver
from .models import StationInfo

__all__ = [
    "ACISClient",
    "ACISObservationStore",
    "ACISStationResolver",
    "StationInfo",
]
