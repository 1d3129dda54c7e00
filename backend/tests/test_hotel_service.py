# backend/tests/test_hotel_service.py

import pytest

from budget_travel.services.hotel_service import (
    HotelService,
    base_nightly_price,
    rooms_needed,
)


@pytest.fixture
def service():
    return HotelService()


def test_generates_sorted_options(service):
    hotels = service.search_hotels("Lisbon, Portugal", "2025-06-01", "2025-06-04", 2, "hotel")

    assert 8 <= len(hotels) <= 15
    assert [h.price for h in hotels] == sorted(h.price for h in hotels)
    assert all(h.city == "Lisbon" and h.country == "Portugal" for h in hotels)


def test_total_price_is_nightly_times_nights_times_rooms(service):
    hotels = service.search_hotels("Lisbon", "2025-06-01", "2025-06-04", 5, "apartment")

    for h in hotels:
        assert h.number_of_rooms == 3
        assert h.price == h.price_per_night * 3 * 3
        assert h.country == "Unknown"


def test_nightly_price_follows_rating_model(service):
    for h in service.search_hotels("Kyoto", "2025-04-01", "2025-04-03", 2, "resort"):
        base = base_nightly_price("resort", h.rating)
        assert round(base * 0.85) - 1 <= h.price_per_night <= round(base * 1.14) + 1
        assert 3.0 <= h.rating <= 4.9


def test_amenities_grow_with_rating(service):
    for h in service.search_hotels("Oslo", "2025-01-10", "2025-01-12", 1, "hotel"):
        assert h.amenities[:5] == [
            "Free WiFi", "Air conditioning", "TV", "Private bathroom", "Breakfast included",
        ]
        assert len(h.amenities) == 5 + int(h.rating - 2)


def test_is_deterministic(service):
    first = service.search_hotels("Lisbon", "2025-06-01", "2025-06-04", 2, "hostel")
    second = service.search_hotels("Lisbon", "2025-06-01", "2025-06-04", 2, "hostel")
    assert [h.model_dump() for h in first] == [h.model_dump() for h in second]


def test_type_changes_vocabulary(service):
    hostels = service.search_hotels("Berlin", "2025-06-01", "2025-06-03", 2, "hostel")
    villas = service.search_hotels("Berlin", "2025-06-01", "2025-06-03", 2, "villa")

    hostel_rooms = {"Shared Dormitory", "Private Room", "Family Room", "Deluxe Dormitory", "Ensuite Room"}
    assert all(h.room_type in hostel_rooms for h in hostels)
    assert all("Villa" in h.room_type for h in villas)


def test_base_nightly_price():
    assert base_nightly_price("hotel", 3.0) == 100
    assert base_nightly_price("hostel", 3.0) == 40
    assert base_nightly_price("villa", 3.0) == 250
    assert base_nightly_price("guesthouse", 3.0) == 70
    assert base_nightly_price("resort", 4.0) == 234
    assert base_nightly_price("castle", 3.0) == 100


def test_rooms_needed():
    assert rooms_needed(1) == 1
    assert rooms_needed(2) == 1
    assert rooms_needed(3) == 2


@pytest.mark.parametrize("check_in, check_out, guests", [
    ("2025-06-01", "2025-06-04", 0),
    ("2025-06-04", "2025-06-01", 2),
    ("2025-06-01", "2025-06-01", 2),
    ("garbage", "2025-06-01", 2),
])
def test_empty_stay_gives_empty_list(service, check_in, check_out, guests):
    assert service.search_hotels("Lisbon", check_in, check_out, guests) == []
