# backend/tests/test_flight_service.py

import pytest

from budget_travel.services.flight_service import (
    FlightService,
    airport_code,
    base_flight_duration,
)


@pytest.fixture
def service():
    return FlightService(origin_city="New York", origin_airport="JFK")


def _hours(duration: str) -> int:
    return int(duration.split("h")[0])


def test_generates_both_legs_sorted_by_price(service):
    flights = service.search_flights("Paris, France", "2025-06-01", "2025-06-08", 1)

    outbound = [f for f in flights if f.direction == "outbound"]
    inbound = [f for f in flights if f.direction == "return"]

    assert 3 <= len(outbound) <= 7
    assert 3 <= len(inbound) <= 7
    assert [f.price for f in flights] == sorted(f.price for f in flights)

    assert all(f.departure_airport == "JFK" and f.arrival_airport == "PAR" for f in outbound)
    assert all(f.departure_city == "Paris" and f.arrival_city == "New York" for f in inbound)


def test_is_deterministic(service):
    first = service.search_flights("Paris, France", "2025-06-01", "2025-06-08", 2)
    second = service.search_flights("Paris, France", "2025-06-01", "2025-06-08", 2)
    assert [f.model_dump() for f in first] == [f.model_dump() for f in second]


@pytest.mark.parametrize("passengers", [1, 3])
def test_prices_follow_duration_model(service, passengers):
    flights = service.search_flights("Tokyo", "2025-03-10", "2025-03-20", passengers)
    assert flights

    for f in flights:
        hours = _hours(f.duration)
        low = (150 + hours * 70 - 30) * 0.85 * passengers
        high = (150 + hours * 70 + 29) * 1.14 * passengers
        assert low - 1 <= f.price <= high + 1
        assert f.currency == "USD"


def test_first_flight_of_each_leg_is_nonstop_business(service):
    flights = service.search_flights("Rome", "2025-09-01", "2025-09-05", 1)
    firsts = [f for f in flights if f.id.endswith("-0")]

    assert len(firsts) == 2
    for f in firsts:
        assert f.stops == 0
        assert f.cabin_class == "Business"
        assert f.layovers is None


def test_layovers_match_stops(service):
    flights = service.search_flights("Sydney", "2025-11-01", "2025-11-15", 1)
    for f in flights:
        if f.stops:
            assert len(f.layovers) == f.stops
        assert 0 <= f.stops <= 2
        assert f.arrival_time > f.departure_time
        assert 6 <= f.departure_time.hour <= 21


def test_duration_stays_near_city_pair_base(service):
    base = base_flight_duration("New York", "Berlin")
    for f in service.search_flights("Berlin", "2025-05-01", "2025-05-04", 1):
        if f.direction == "outbound":
            assert max(1, base - 2) <= _hours(f.duration) <= base + 2


@pytest.mark.parametrize("passengers", [0, -1])
def test_no_passengers_gives_empty_list(service, passengers):
    assert service.search_flights("Paris", "2025-06-01", "2025-06-08", passengers) == []


def test_malformed_date_gives_empty_list(service):
    assert service.search_flights("Paris", "not-a-date", "2025-06-08", 1) == []


def test_airport_code():
    assert airport_code("Paris") == "PAR"
    assert airport_code("rome") == "ROM"
    assert len(airport_code("Xi")) == 4
    assert airport_code("Xi") == airport_code("Xi")


def test_origin_can_be_given_per_search(service):
    flights = service.search_flights("Paris", "2025-06-01", "2025-06-08", 1, origin_city="Chicago, USA")

    outbound = [f for f in flights if f.direction == "outbound"]
    inbound = [f for f in flights if f.direction == "return"]

    assert outbound and inbound
    assert all(f.departure_city == "Chicago" and f.departure_airport == "CHI" for f in outbound)
    assert all(f.arrival_city == "Chicago" and f.arrival_airport == "CHI" for f in inbound)


def test_explicit_origin_airport_wins(service):
    flights = service.search_flights(
        "Paris", "2025-06-01", "2025-06-08", 1, origin_city="Chicago", origin_airport="ORD"
    )
    assert all(f.departure_airport == "ORD" for f in flights if f.direction == "outbound")


def test_origin_changes_the_route(service):
    default = service.search_flights("Paris", "2025-06-01", "2025-06-08", 1)
    from_chicago = service.search_flights("Paris", "2025-06-01", "2025-06-08", 1, origin_city="Chicago")
    assert [f.model_dump() for f in default] != [f.model_dump() for f in from_chicago]
