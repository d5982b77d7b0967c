"""
Tests for running coroutines synchronously.
"""

from typing import Optional
from unittest.mock import patch

import pytest

from frostdates.acis.client import ACISClient
from frostdates.sync import AsyncSyncBridge
from frostdates.utils import add_sync_version


class FakeClient:
    instances = []

    def __init__(self):
        self.closed = False
        FakeClient.instances.append(self)

    async def close(self):
        self.closed = True


@add_sync_version
async def double(x):
    return x * 2


@add_sync_version
async def describe_client(value: int, client: Optional[FakeClient] = None):
    return value, client


class TestAddSyncVersion:
    """Test the .sync attribute."""

    def test_sync_call(self):
        assert double.sync(21) == 42

    @pytest.mark.asyncio
    async def test_async_call_still_works(self):
        assert await double(4) == 8

    def test_temporary_client_is_created_and_closed(self):
        FakeClient.instances.clear()

        value, client = describe_client.sync(3)

        assert value == 3
        assert isinstance(client, FakeClient)
        assert client.closed

    def test_supplied_client_is_not_closed(self):
        own = FakeClient()

        _, client = describe_client.sync(3, client=own)

        assert client is own
        assert not own.closed

    def test_unannotated_client_is_left_unset(self):
        @add_sync_version
        async def untyped(value, client=None):
            return value, client

        assert untyped.sync(5) == (5, None)

    @pytest.mark.asyncio
    async def test_sync_inside_running_loop_raises(self):
        with pytest.raises(RuntimeError, match="existing asyncio event loop"):
            double.sync(1)

    def test_get_frost_statistics_sync_validates_zip(self):
        from frostdates import get_frost_statistics
        from frostdates.exceptions import InvalidZipcodeError

        with patch.object(ACISClient, "close") as mock_close:
            with pytest.raises(InvalidZipcodeError):
                get_frost_statistics.sync("ABCDE")

        mock_close.assert_awaited_once()


class TestExtractClientClass:
    """Test client class extraction from annotations."""

    def test_optional(self):
        assert AsyncSyncBridge.extract_client_class(Optional[ACISClient]) is ACISClient

    def test_direct(self):
        assert AsyncSyncBridge.extract_client_class(ACISClient) is ACISClient

    def test_none(self):
        assert AsyncSyncBridge.extract_client_class(None) is None
        assert AsyncSyncBridge.extract_client_class("ACISClient") is None
