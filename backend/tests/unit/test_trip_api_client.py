"""Unit tests for the trip planner API client."""

import httpx
import pytest

from tripplanner.services.trip_api import TripAPIClient, TripAPIError

ATTRACTION = {
    "name": "Eiffel Tower",
    "description": "An iconic tower in Paris offering panoramic views of the city skyline.",
    "lat": 48.8584,
    "lng": 2.2945,
    "category": "Entertainment",
    "rating": 9.4,
    "visit_duration": "1 hour",
    "best_time": "Evening",
}


def make_client(handler) -> TripAPIClient:
    return TripAPIClient("http://backend.test/", transport=httpx.MockTransport(handler))


class TestCheckHealth:
    @pytest.mark.asyncio
    async def test_decodes_payload(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/health"
            return httpx.Response(
                200,
                json={
                    "status": "healthy",
                    "timestamp": "2026-10-19T10:00:00+00:00",
                    "service": "trip-planner-backend",
                    "version": "0.1.0",
                },
            )

        async with make_client(handler) as client:
            health = await client.check_health()
        assert health.status == "healthy"
        assert health.version == "0.1.0"

    @pytest.mark.asyncio
    async def test_schema_mismatch(self) -> None:
        async with make_client(lambda request: httpx.Response(200, json={"status": "ok"})) as client:
            with pytest.raises(TripAPIError, match="Unexpected health payload"):
                await client.check_health()


class TestFetchAttractions:
    @pytest.mark.asyncio
    async def test_query_parameters(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[ATTRACTION])

        async with make_client(handler) as client:
            attractions = await client.fetch_attractions(criteria="cultural", cities="Paris")

        params = dict(seen[0].url.params)
        assert seen[0].url.path == "/api/v1/attractions"
        assert params == {"criteria": "cultural", "cities": "Paris", "use_ai": "false"}
        assert len(attractions) == 1
        assert attractions[0].visit_duration == "1 hour"
        assert attractions[0].best_time == "Evening"

    @pytest.mark.asyncio
    async def test_all_parameters(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[])

        async with make_client(handler) as client:
            await client.fetch_attractions(
                start_date="2026-05-01",
                end_date="2026-05-04",
                criteria="nature",
                cities="Tokyo",
                provider="photon",
                use_ai=True,
            )

        assert dict(seen[0].url.params) == {
            "start_date": "2026-05-01",
            "end_date": "2026-05-04",
            "criteria": "nature",
            "cities": "Tokyo",
            "provider": "photon",
            "use_ai": "true",
        }

    @pytest.mark.asyncio
    async def test_decoded_attractions_get_fresh_ids(self) -> None:
        async with make_client(lambda request: httpx.Response(200, json=[ATTRACTION, ATTRACTION])) as client:
            first, second = await client.fetch_attractions(cities="Paris")
        assert first.id != second.id
        assert first.name == second.name

    @pytest.mark.asyncio
    async def test_http_error(self) -> None:
        async with make_client(lambda request: httpx.Response(500, json={})) as client:
            with pytest.raises(TripAPIError) as exc_info:
                await client.fetch_attractions(cities="Paris")
        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        async with make_client(handler) as client:
            with pytest.raises(TripAPIError, match="request failed"):
                await client.fetch_attractions(cities="Paris")

    @pytest.mark.asyncio
    async def test_bad_payload(self) -> None:
        bad = dict(ATTRACTION, lat="north")
        async with make_client(lambda request: httpx.Response(200, json=[bad])) as client:
            with pytest.raises(TripAPIError, match="Unexpected attractions payload"):
                await client.fetch_attractions(cities="Paris")
