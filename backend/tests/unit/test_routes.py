"""Unit tests for the HTTP API."""

import random

import pytest
from conftest import LONDON, PARIS, FakeGeocoder, FakeTagger
from fastapi.testclient import TestClient

from tripplanner import SERVICE_NAME, __version__
from tripplanner.api import get_services
from tripplanner.api.routes import parse_cities
from tripplanner.config import Settings
from tripplanner.main import app
from tripplanner.services import ServiceContainer

WIRE_FIELDS = {
    "name",
    "description",
    "lat",
    "lng",
    "category",
    "rating",
    "visit_duration",
    "best_time",
}


@pytest.fixture
def geocoders() -> dict[str, FakeGeocoder]:
    return {
        "nominatim": FakeGeocoder({"London": [LONDON], "Paris": [PARIS]}),
        "photon": FakeGeocoder({"Paris": [PARIS]}),
    }


@pytest.fixture
def client(geocoders: dict[str, FakeGeocoder]):
    services = ServiceContainer(
        Settings(),
        tagger=FakeTagger(places=["London", "Paris"]),
        geocoder_factory=lambda provider, settings: geocoders[provider],
        rng=random.Random(11),
    )
    app.dependency_overrides[get_services] = lambda: services
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestParseCities:
    def test_split_and_trim(self) -> None:
        assert parse_cities(" London, Paris ,,") == ["London", "Paris"]

    def test_empty(self) -> None:
        assert parse_cities(None) == []
        assert parse_cities(" , ") == []

    def test_repeated_city_kept_once(self) -> None:
        assert parse_cities("Paris, London, paris,PARIS") == ["Paris", "London"]


class TestAttractionsEndpoint:
    """Tests for GET /api/v1/attractions."""

    def test_single_city(self, client: TestClient) -> None:
        response = client.get("/api/v1/attractions", params={"cities": "London", "criteria": "cultural"})

        assert response.status_code == 200
        body = response.json()
        assert isinstance(body, list)
        assert 0 < len(body) <= 15
        assert set(body[0]) == WIRE_FIELDS
        names = [item["name"] for item in body]
        assert "London Museum" in names
        assert "British Museum" in names
        assert len(set(names)) == len(names)

    def test_multiple_cities_concatenated_in_order(self, client: TestClient) -> None:
        response = client.get("/api/v1/attractions", params={"cities": "Paris,London"})

        assert response.status_code == 200
        names = [item["name"] for item in response.json()]
        assert names.index("Eiffel Tower") < names.index("Big Ben")

    def test_repeated_city_generated_once(self, client: TestClient) -> None:
        once = client.get("/api/v1/attractions", params={"cities": "Paris"}).json()
        twice = client.get("/api/v1/attractions", params={"cities": "Paris,paris"}).json()

        names = [item["name"] for item in twice]
        assert len(names) == len(once)
        assert len(set(names)) == len(names)

    def test_provider_selects_geocoder(self, client: TestClient, geocoders: dict[str, FakeGeocoder]) -> None:
        response = client.get("/api/v1/attractions", params={"cities": "Paris", "provider": "photon"})

        assert response.status_code == 200
        assert geocoders["photon"].calls
        assert not geocoders["nominatim"].calls

    def test_unresolvable_city_is_empty_list(self, client: TestClient) -> None:
        response = client.get("/api/v1/attractions", params={"cities": "Atlantis"})
        assert response.status_code == 200
        assert response.json() == []

    def test_dates_and_use_ai_accepted(self, client: TestClient) -> None:
        response = client.get(
            "/api/v1/attractions",
            params={
                "cities": "Paris",
                "start_date": "2026-05-01",
                "end_date": "2026-05-04",
                "use_ai": "true",
            },
        )
        assert response.status_code == 200

    def test_missing_cities(self, client: TestClient) -> None:
        response = client.get("/api/v1/attractions")
        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "INVALID_INPUT"

    def test_unknown_provider(self, client: TestClient) -> None:
        response = client.get("/api/v1/attractions", params={"cities": "Paris", "provider": "google"})
        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["code"] == "INVALID_INPUT"
        assert "google" in detail["message"]


class TestHealthEndpoint:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["service"] == SERVICE_NAME
        assert body["version"] == __version__
        assert body["timestamp"]
