"""
Shared HTTP plumbing for the upstream data clients.
"""

import json
import logging
from typing import Any, Dict, Optional

import httpx

from .config import ClientConfig
from .exceptions import (
    StationNotFoundError,
    UpstreamResponseError,
    UpstreamUnavailableError,
)

logger = logging.getLogger(__name__)


class BaseDataAccessClient:
    """
    Async HTTP client with error translation.

    Subclasses set ``BASE_URL`` and call ``_make_request``. Transport failures
    surface as UpstreamUnavailableError, 404 as StationNotFoundError.
    """

    BASE_URL = ""

    def __init__(self, config: Optional[ClientConfig] = None):
        self.config = config or ClientConfig()
        self.timeout = self.config.timeout
        self.base_url = (self.config.base_url or self.BASE_URL).rstrip("/")
        self._client = httpx.AsyncClient(
            timeout=self.timeout,
            headers={
                "User-Agent": self.config.user_agent,
                "Accept": "application/json",
            },
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    async def _make_request(
        self,
        endpoint: str,
        params: Optional[Dict[str, str]] = None,
        json_body: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """GET (or POST when ``json_body`` is given) and decode the JSON reply."""
        url = f"{self.base_url}/{endpoint}"
        logger.debug(f"Requesting {url} params={params} body={json_body}")

        try:
            if json_body is not None:
                response = await self._client.post(url, json=json_body)
            else:
                response = await self._client.get(url, params=params)
            response.raise_for_status()
            return response.json()

        except httpx.TimeoutException as e:
            raise UpstreamUnavailableError(
                f"Request timeout after {self.timeout}s"
            ) from e
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            if status == 404:
                raise StationNotFoundError(f"Resource not found: {url}") from e
            elif status == 429:
                raise UpstreamUnavailableError("Rate limit exceeded") from e
            elif status >= 500:
                raise UpstreamUnavailableError(
                    "Weather data service temporarily unavailable"
                ) from e
            else:
                raise UpstreamUnavailableError(f"HTTP error {status}: {e}") from e
        except httpx.RequestError as e:
            raise UpstreamUnavailableError(f"Network error: {e}") from e
        except json.JSONDecodeError as e:
            raise UpstreamResponseError(f"Invalid JSON response: {e}") from e
