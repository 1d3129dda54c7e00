# backend/tests/test_api.py

import pytest
from fastapi.testclient import TestClient

from budget_travel.api.routes_inventory import get_cache
from budget_travel.db.response_cache import ResponseCache
from budget_travel.utils.currency import parse_currency
from main import app


@pytest.fixture
def client():
    cache = ResponseCache(default_ttl=60)
    app.dependency_overrides[get_cache] = lambda: cache
    yield TestClient(app)
    app.dependency_overrides.clear()


def trip(**overrides):
    body = {
        "destination": "Lisbon, Portugal",
        "startDate": "2025-06-01",
        "endDate": "2025-06-03",
        "budget": 900,
        "travelers": 2,
        "interests": ["food", "history"],
        "accommodationType": "hotel",
        "transportationType": "public",
        "mealPreference": "local",
    }
    body.update(overrides)
    return body


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_generate_itinerary(client):
    response = client.post("/itinerary", json=trip())
    assert response.status_code == 200

    data = response.json()
    assert len(data["itinerary"]["days"]) == 3
    assert data["itinerary"]["duration"] == "3 days"
    assert data["metadata"]["actualCost"] == data["itinerary"]["totalCost"]
    assert data["metadata"]["destination"] == "Lisbon, Portugal"
    assert data["mapData"]["mainLocation"]["name"] == "Lisbon, Portugal"
    assert len(data["weather"]) == 3
    assert "seed" not in data["mapData"]["mainLocation"]


def test_tight_budget_offers_alternatives(client):
    data = client.post("/itinerary", json=trip(budget=50)).json()

    assert parse_currency(data["itinerary"]["totalCost"]) < parse_currency(data["draftTotal"])
    assert all(day["alternativeActivities"] for day in data["itinerary"]["days"])
    assert data["metadata"]["withinBudget"] is False


@pytest.mark.parametrize("overrides", [
    {"startDate": "2025-06-05", "endDate": "2025-06-01"},
    {"budget": 0},
    {"destination": "   "},
    {"travelers": 0},
])
def test_invalid_itinerary_request(client, overrides):
    response = client.post("/itinerary", json=trip(**overrides))
    assert response.status_code == 400


def test_missing_field_is_rejected(client):
    body = trip()
    del body["startDate"]
    assert client.post("/itinerary", json=body).status_code == 422


def test_orchestration_failure_is_500(client, monkeypatch):
    from budget_travel.api import routes_itinerary

    async def boom(request):
        raise RuntimeError("agent crashed")

    monkeypatch.setattr(routes_itinerary.planner, "generate", boom)
    response = client.post("/itinerary", json=trip())
    assert response.status_code == 500


def test_optimize_existing_itinerary(client):
    itinerary = client.post("/itinerary", json=trip(budget=100_000)).json()["itinerary"]

    response = client.post("/itinerary/optimize", json={"itinerary": itinerary, "budget": 50})
    assert response.status_code == 200

    optimized = response.json()
    assert parse_currency(optimized["totalCost"]) < parse_currency(itinerary["totalCost"])
    assert itinerary["days"][0]["alternativeActivities"] is None
    assert optimized["days"][0]["alternativeActivities"]

    response = client.post("/itinerary/optimize", json={"itinerary": itinerary, "budget": 0})
    assert response.status_code == 400


def test_flights_sorted_by_price(client):
    response = client.get("/flights", params={
        "destination": "Paris, France",
        "departDate": "2025-06-01",
        "returnDate": "2025-06-05",
        "passengers": 2,
    })
    assert response.status_code == 200

    prices = [f["price"] for f in response.json()]
    assert prices and prices == sorted(prices)
    assert {f["direction"] for f in response.json()} == {"outbound", "return"}


def test_flights_are_cached(client):
    params = {"destination": "Paris", "departDate": "2025-06-01", "returnDate": "2025-06-05"}
    first = client.get("/flights", params=params).json()
    second = client.get("/flights", params=params).json()
    assert first == second


def test_accommodations(client):
    params = {"destination": "Rome", "checkIn": "2025-06-01", "checkOut": "2025-06-04", "type": "hostel"}
    hotels = client.get("/accommodations", params=params).json()
    assert 8 <= len(hotels) <= 15
    assert all(h["accommodationType"] == "hostel" for h in hotels)

    params["guests"] = 0
    assert client.get("/accommodations", params=params).json() == []


def test_activities(client):
    response = client.get("/activities", params={"destination": "Rome", "interests": "food, history", "days": 2})
    assert response.status_code == 200
    assert len(response.json()) == 18


def test_weather_is_capped(client):
    response = client.get("/weather", params={
        "location": "Oslo",
        "startDate": "2025-01-01",
        "endDate": "2025-01-30",
    })
    assert response.status_code == 200

    data = response.json()
    assert len(data["forecast"]) == 14
    assert data["date_range"] == {"start": "2025-01-01", "end": "2025-01-14", "days": 14}


def test_weather_requires_location(client):
    assert client.get("/weather", params={"location": " "}).status_code == 400


def test_maps(client):
    data = client.get("/maps", params={"destination": "Tokyo"}).json()
    assert data["mainLocation"]["name"] == "Tokyo"
    assert "main" in data["travelTimes"]


def test_map_cache_stays_bounded_across_destinations():
    class Clock:
        now = 0.0

        def __call__(self):
            return self.now

    clock = Clock()
    cache = ResponseCache(default_ttl=1, sweep_interval=5, clock=clock)
    app.dependency_overrides[get_cache] = lambda: cache
    try:
        client = TestClient(app)
        for i in range(28):
            assert client.get("/maps", params={"destination": f"Town {i}"}).status_code == 200
            clock.now += 10
        assert len(cache) <= 1
    finally:
        app.dependency_overrides.clear()


def test_flights_from_requested_origin(client):
    params = {"destination": "Paris", "departDate": "2025-06-01", "returnDate": "2025-06-05"}
    default = client.get("/flights", params=params).json()
    from_chicago = client.get("/flights", params={**params, "origin": "Chicago"}).json()

    assert all(f["departureCity"] == "New York" for f in default if f["direction"] == "outbound")
    assert all(f["departureCity"] == "Chicago" for f in from_chicago if f["direction"] == "outbound")
    assert all(f["arrivalCity"] == "Chicago" for f in from_chicago if f["direction"] == "return")
