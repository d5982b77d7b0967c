"""
ACIS (Applied Climate Information System) client.
"""

import logging
from datetime import date, datetime
from math import atan2, cos, radians, sin, sqrt
from typing import Any, Dict, List, Optional, Tuple

from ..base_client import BaseDataAccessClient
from ..derive import DailyTemperature
from ..exceptions import (
    FrostDateError,
    StationNotFoundError,
    UpstreamResponseError,
)
from .models import StationInfo

logger = logging.getLogger(__name__)

STATION_META_FIELDS = "name,state,sids,ll,elev,valid_daterange"

# ACIS error messages that mean "nothing here" rather than a service fault
NOT_FOUND_MESSAGES = ("no data available", "unknown sid", "no sid", "invalid sid")

KM_PER_DEGREE = 111.0


def _parse_date(value: Any) -> Optional[date]:
    try:
        return datetime.strptime(str(value), "%Y-%m-%d").date()
    except (TypeError, ValueError):
        return None


def _parse_temperature(value: Any) -> Optional[float]:
    """ACIS values are strings; 'M' marks a missing day."""
    if value is None:
        return None
    text = str(value).strip()
    if not text or text == "M":
        return None
    # trailing flag characters such as 'A' (accumulated) or 'S' (subsequent)
    text = text.rstrip("AS")
    try:
        return float(text)
    except ValueError:
        return None


class ACISClient(BaseDataAccessClient):
    """
    Client for the ACIS web services operated by NOAA's Regional Climate Centers.

    Provides station metadata search and daily data retrieval for
    cooperative observer and first-order stations.
    """

    BASE_URL = "https://data.rcc-acis.org"

    async def _acis_request(self, endpoint: str, params: Dict[str, Any]) -> Any:
        data = await self._make_request(endpoint, json_body=params)
        if isinstance(data, dict) and "error" in data:
            message = str(data["error"])
            if message.lower().startswith(NOT_FOUND_MESSAGES):
                raise StationNotFoundError(f"ACIS {endpoint}: {message}")
            raise UpstreamResponseError(f"ACIS {endpoint} error: {message}")
        return data

    async def get_stations(
        self,
        bbox: Tuple[float, float, float, float],
        elements: str = "mint",
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> List[StationInfo]:
        """
        Get stations inside a bounding box that record the given elements.

        Args:
            bbox: (west, south, east, north) in decimal degrees
            elements: ACIS element names, comma separated
            start_date: Optional YYYY-MM-DD; only stations with data after it
            end_date: Optional YYYY-MM-DD; only stations with data before it

        Returns:
            List of StationInfo objects
        """
        params: Dict[str, Any] = {
            "bbox": ",".join(f"{coord:.4f}" for coord in bbox),
            "elems": elements,
            "meta": STATION_META_FIELDS,
        }
        if start_date:
            params["sdate"] = start_date
        if end_date:
            params["edate"] = end_date

        try:
            data = await self._acis_request("StnMeta", params)

            stations = []
            for station_data in data.get("meta", []):
                try:
                    sids = list(station_data.get("sids") or [])
                    longitude, latitude = station_data["ll"]
                    ranges = station_data.get("valid_daterange") or []
                    first_range = ranges[0] if ranges and ranges[0] else [None, None]
                    station = StationInfo(
                        station_id=sids[0],
                        name=station_data.get("name", "Unknown"),
                        latitude=float(latitude),
                        longitude=float(longitude),
                        elevation=station_data.get("elev"),
                        state=station_data.get("state"),
                        sids=sids,
                        valid_start=_parse_date(first_range[0]),
                        valid_end=_parse_date(first_range[1]),
                    )
                    stations.append(station)
                except (KeyError, IndexError, ValueError, TypeError):
                    # Skip invalid station data but don't fail completely
                    logger.warning(
                        f"Skipping malformed ACIS station record: {station_data.get('name')}"
                    )
                    continue

            return stations

        except FrostDateError:
            raise
        except Exception as e:
            raise UpstreamResponseError(f"Failed to retrieve station list: {e}") from e

    async def find_nearby_stations(
        self,
        latitude: float,
        longitude: float,
        max_distance_km: float = 50.0,
        limit: int = 10,
        active_since: Optional[date] = None,
        min_record_years: int = 0,
    ) -> List[Tuple[StationInfo, float]]:
        """
        Find stations with minimum temperature records near a location.

        Args:
            latitude: Target latitude
            longitude: Target longitude
            max_distance_km: Maximum distance to search
            limit: Maximum number of stations to return
            active_since: Skip stations whose record ends before this date
            min_record_years: Skip stations with fewer calendar years of record

        Returns:
            List of (StationInfo, distance_km) tuples, sorted by distance
        """
        lat_delta = max_distance_km / KM_PER_DEGREE
        lon_delta = max_distance_km / (KM_PER_DEGREE * max(cos(radians(latitude)), 0.01))
        bbox = (
            longitude - lon_delta,
            latitude - lat_delta,
            longitude + lon_delta,
            latitude + lat_delta,
        )
        stations = await self.get_stations(bbox)

        nearby_stations = []
        for station in stations:
            if station.valid_end is None:
                continue
            if active_since is not None and station.valid_end < active_since:
                continue
            if station.record_years < min_record_years:
                continue
            distance = self._haversine_distance(
                latitude, longitude, station.latitude, station.longitude
            )
            if distance <= max_distance_km:
                nearby_stations.append((station, distance))

        # Sort by distance
        nearby_stations.sort(key=lambda x: x[1])

        return nearby_stations[:limit]

    async def get_daily_min_temperature(
        self,
        station_id: str,
        start_date: str,
        end_date: str,
    ) -> List[DailyTemperature]:
        """
        Get daily minimum temperatures (°F) for a station.

        Args:
            station_id: ACIS sid (e.g., '050848 2')
            start_date: Start date in YYYY-MM-DD format
            end_date: End date in YYYY-MM-DD format, or 'por' for period of record

        Returns:
            List of DailyTemperature readings; missing days have min_temp_f None
        """
        params = {
            "sid": station_id,
            "sdate": start_date,
            "edate": end_date,
            "elems": "mint",
        }

        try:
            data = await self._acis_request("StnData", params)

            readings: List[DailyTemperature] = []
            for row in data.get("data", []):
                try:
                    day = datetime.strptime(row[0], "%Y-%m-%d").date()
                except (IndexError, TypeError, ValueError):
                    # Skip invalid data points
                    continue
                value = row[1] if len(row) > 1 else None
                readings.append(
                    DailyTemperature(day=day, min_temp_f=_parse_temperature(value))
                )

            logger.debug(
                f"Retrieved {len(readings)} daily readings for {station_id} "
                f"({start_date} to {end_date})"
            )
            return readings

        except FrostDateError:
            raise
        except Exception as e:
            raise UpstreamResponseError(f"Failed to retrieve station data: {e}") from e

    @staticmethod
    def _haversine_distance(
        lat1: float, lon1: float, lat2: float, lon2: float
    ) -> float:
        """Calculate distance between two points using Haversine formula."""
        R = 6371  # Earth's radius in kilometers

        lat1_rad, lon1_rad = radians(lat1), radians(lon1)
        lat2_rad, lon2_rad = radians(lat2), radians(lon2)

        dlat = lat2_rad - lat1_rad
        dlon = lon2_rad - lon1_rad

        a = sin(dlat / 2) ** 2 + cos(lat1_rad) * cos(lat2_rad) * sin(dlon / 2) ** 2
        c = 2 * atan2(sqrt(a), sqrt(1 - a))

        return R * c
