# backend/tests/test_map_service.py

import pytest

from budget_travel.models.inventory_models import Coordinates
from budget_travel.services.map_service import MapService, haversine_km


def test_map_data_shape():
    data = MapService().get_map_data("Prague, Czech Republic")

    assert data is not None
    assert data.main_location.name == "Prague, Czech Republic"
    assert -91 <= data.main_location.coordinates.lat <= 91
    assert 8 <= len(data.nearby_attractions) <= 12
    assert all(3.5 <= p.rating < 5.0 for p in data.nearby_attractions)


def test_travel_times_are_symmetric_and_complete():
    data = MapService().get_map_data("Prague")
    ids = [p.place_id for p in data.nearby_attractions]

    assert set(data.travel_times["main"]) == set(ids)
    for a in ids:
        assert data.travel_times[a]["main"] == data.travel_times["main"][a]
        for b in ids:
            if a != b:
                assert data.travel_times[a][b] == data.travel_times[b][a]
                assert data.travel_times[a][b] >= 0


def test_map_data_is_deterministic():
    first = MapService().get_map_data("Prague")
    second = MapService().get_map_data("Prague")
    assert first.model_dump() == second.model_dump()


def test_haversine():
    paris = Coordinates(lat=48.8566, lng=2.3522)
    london = Coordinates(lat=51.5074, lng=-0.1278)

    assert haversine_km(paris, paris) == 0
    assert haversine_km(paris, london) == pytest.approx(344, abs=5)
