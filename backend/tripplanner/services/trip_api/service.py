"""Async client for the trip planner HTTP API.

Talks to ``GET /health`` and ``GET /api/v1/attractions`` of a running
backend. Every failure (transport, HTTP status, payload shape) is raised as
``TripAPIError``.
"""

import logging
from typing import Any, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from tripplanner.models import Attraction, HealthStatus

logger = logging.getLogger(__name__)

_ATTRACTION_LIST = TypeAdapter(list[Attraction])


class TripAPIError(Exception):
    """Request to the trip planner API failed."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class TripAPIClient:
    """Client for a trip planner backend.

    Use as an async context manager, or call ``close()`` when done.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    async def __aenter__(self) -> "TripAPIClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    async def _get_json(self, path: str, params: Optional[dict[str, str]] = None) -> Any:
        try:
            response = await self._client.get(path, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise TripAPIError(
                f"{path} returned HTTP {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise TripAPIError(f"{path} request failed: {e}") from e
        except ValueError as e:
            raise TripAPIError(f"{path} returned invalid JSON") from e

    async def check_health(self) -> HealthStatus:
        payload = await self._get_json("/health")
        try:
            return HealthStatus.model_validate(payload)
        except ValidationError as e:
            raise TripAPIError(f"Unexpected health payload: {e}") from e

    async def fetch_attractions(
        self,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        criteria: Optional[str] = None,
        cities: Optional[str] = None,
        provider: Optional[str] = None,
        use_ai: bool = False,
    ) -> list[Attraction]:
        """Fetch attractions. ``None`` parameters are left out of the query."""
        optional = {
            "start_date": start_date,
            "end_date": end_date,
            "criteria": criteria,
            "cities": cities,
            "provider": provider,
        }
        params = {key: value for key, value in optional.items() if value is not None}
        params["use_ai"] = "true" if use_ai else "false"

        payload = await self._get_json("/api/v1/attractions", params=params)
        try:
            attractions = _ATTRACTION_LIST.validate_python(payload)
        except ValidationError as e:
            raise TripAPIError(f"Unexpected attractions payload: {e}") from e
        logger.info(f"[CLIENT] Fetched {len(attractions)} attractions for {cities}")
        return attractions
