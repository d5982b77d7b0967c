"""
Zip code geocoding via the Zippopotam.us API.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .base_client import BaseDataAccessClient
from .exceptions import StationNotFoundError, UpstreamResponseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ZipLocation:
    """Centroid of a US zip code."""

    zipcode: str
    latitude: float
    longitude: float
    place_name: Optional[str] = None
    state: Optional[str] = None


class ZipGeocoder(BaseDataAccessClient):
    """Client for https://api.zippopotam.us."""

    BASE_URL = "https://api.zippopotam.us"

    async def geocode(self, zipcode: str) -> ZipLocation:
        """
        Look up the coordinates of a zip code.

        Raises:
            StationNotFoundError: If the zip code is unknown
            UpstreamUnavailableError: If the service could not be reached
        """
        try:
            data = await self._make_request(f"us/{zipcode}")
        except StationNotFoundError:
            raise StationNotFoundError(
                f"No data available for zip code {zipcode}"
            ) from None

        places = data.get("places") if isinstance(data, dict) else None
        if not places:
            raise StationNotFoundError(f"No data available for zip code {zipcode}")

        place = places[0]
        try:
            location = ZipLocation(
                zipcode=zipcode,
                latitude=float(place["latitude"]),
                longitude=float(place["longitude"]),
                place_name=place.get("place name"),
                state=place.get("state abbreviation"),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise UpstreamResponseError(
                f"Unexpected geocoding response for {zipcode}: {e}"
            ) from e

        logger.debug(
            f"Geocoded {zipcode} to ({location.latitude}, {location.longitude})"
        )
        return location
