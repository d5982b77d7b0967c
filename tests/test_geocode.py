"""
Tests for zip code geocoding.
"""

from unittest.mock import AsyncMock, Mock

import pytest

from frostdates.exceptions import StationNotFoundError, UpstreamResponseError
from frostdates.geocode import ZipGeocoder

from conftest import make_response

ZIPPOPOTAM_RESPONSE = {
    "post code": "80301",
    "country": "United States",
    "country abbreviation": "US",
    "places": [
        {
            "place name": "Boulder",
            "longitude": "-105.2145",
            "state": "Colorado",
            "state abbreviation": "CO",
            "latitude": "40.0497",
        }
    ],
}


class TestZipGeocoder:
    """Test ZipGeocoder functionality."""

    @pytest.fixture
    def geocoder(self):
        geocoder = ZipGeocoder()
        geocoder._client = AsyncMock()
        return geocoder

    @pytest.mark.asyncio
    async def test_geocode_success(self, geocoder):
        geocoder._client.get.return_value = make_response(ZIPPOPOTAM_RESPONSE)

        location = await geocoder.geocode("80301")

        assert location.zipcode == "80301"
        assert location.latitude == 40.0497
        assert location.longitude == -105.2145
        assert location.place_name == "Boulder"
        assert location.state == "CO"
        assert geocoder._client.get.call_args[0][0] == "https://api.zippopotam.us/us/80301"

    @pytest.mark.asyncio
    async def test_unknown_zip_404(self, geocoder):
        from httpx import HTTPStatusError

        mock_response = Mock()
        mock_response.status_code = 404
        geocoder._client.get.side_effect = HTTPStatusError(
            "Not found", request=Mock(), response=mock_response
        )

        with pytest.raises(StationNotFoundError, match="00000"):
            await geocoder.geocode("00000")

    @pytest.mark.asyncio
    async def test_empty_places(self, geocoder):
        geocoder._client.get.return_value = make_response({"places": []})

        with pytest.raises(StationNotFoundError):
            await geocoder.geocode("99999")

    @pytest.mark.asyncio
    async def test_malformed_place(self, geocoder):
        geocoder._client.get.return_value = make_response(
            {"places": [{"place name": "Nowhere", "latitude": "north"}]}
        )

        with pytest.raises(UpstreamResponseError):
            await geocoder.geocode("12345")
