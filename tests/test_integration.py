"""
Live tests against ACIS and Zippopotam.us.

Skipped unless FROSTDATES_LIVE_TESTS is set.
"""

import os

import pytest

from frostdates import FrostEvent, UpstreamUnavailableError, get_frost_statistics

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        not os.environ.get("FROSTDATES_LIVE_TESTS"),
        reason="set FROSTDATES_LIVE_TESTS=1 to call live web services",
    ),
]


@pytest.mark.asyncio
async def test_boulder_frost_dates():
    """Boulder, CO has a long cooperative observer record."""
    try:
        report = await get_frost_statistics("80301")
    except UpstreamUnavailableError as e:
        pytest.skip(f"Upstream service unavailable: {e}")

    spring = report.get(FrostEvent.LAST_SPRING_FROST, 30)
    fall = report.get(FrostEvent.FIRST_FALL_FROST, 30)
    assert spring.sample_count > 0
    assert 3 <= spring.average_date.month <= 6
    assert 8 <= fall.average_date.month <= 11
