# backend/budget_travel/services/map_service.py

import math
from typing import Dict, List, Optional

from budget_travel.core.logger import logger
from budget_travel.models.inventory_models import Coordinates, LocationData, MapData
from budget_travel.utils.hashing import hash_string


EARTH_RADIUS_KM = 6371

PLACE_TYPES = [
    {"type": "museum", "name": "Museum", "tags": ["culture", "history", "indoor"]},
    {"type": "restaurant", "name": "Restaurant", "tags": ["food", "dining"]},
    {"type": "park", "name": "Park", "tags": ["nature", "outdoor", "relaxation"]},
    {"type": "mall", "name": "Shopping Mall", "tags": ["shopping", "indoor"]},
    {"type": "beach", "name": "Beach", "tags": ["nature", "outdoor", "water"]},
    {"type": "church", "name": "Historic Church", "tags": ["culture", "history", "architecture"]},
    {"type": "castle", "name": "Castle", "tags": ["history", "architecture", "landmark"]},
    {"type": "viewpoint", "name": "Scenic Viewpoint", "tags": ["nature", "photography", "outdoor"]},
    {"type": "theater", "name": "Theater", "tags": ["entertainment", "culture", "indoor"]},
    {"type": "market", "name": "Local Market", "tags": ["shopping", "food", "culture"]},
]


def haversine_km(a: Coordinates, b: Coordinates) -> float:
    d_lat = math.radians(b.lat - a.lat)
    d_lng = math.radians(b.lng - a.lng)
    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(a.lat)) * math.cos(math.radians(b.lat)) * math.sin(d_lng / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def travel_minutes(a: Coordinates, b: Coordinates) -> int:
    # ~30 km/h city traffic
    return math.ceil(haversine_km(a, b) * 2)


class MapService:

    def get_map_data(self, destination: str) -> Optional[MapData]:
        """
        Geocode the destination, list nearby attractions and a symmetric
        travel-time matrix between all of them. None on failure.
        """
        try:
            main = self.geocode(destination)
            nearby = self.nearby_places(main.coordinates, destination)
            return MapData(
                main_location=main,
                nearby_attractions=nearby,
                travel_times=self.travel_times(main, nearby),
            )
        except Exception as e:
            logger.error(f"Error building map data for {destination!r}: {e}")
            return None

    def geocode(self, destination: str) -> LocationData:
        dest_hash = hash_string(destination)
        lat = dest_hash % 180 - 90 + math.sin(dest_hash) * 0.1
        lng = (dest_hash * 2) % 360 - 180 + math.cos(dest_hash) * 0.1

        return LocationData(
            place_id=f"place-{dest_hash}",
            name=destination,
            address=f"Main Square, {destination}",
            coordinates=Coordinates(lat=lat, lng=lng),
            types=["locality", "political"],
            rating=4.5,
            formatted_address=destination,
            seed=dest_hash,
        )

    def nearby_places(self, center: Coordinates, destination: str) -> List[LocationData]:
        # 8..12 places
        num_places = 8 + hash_string(destination) % 5

        places: List[LocationData] = []
        for i in range(num_places):
            place_seed = hash_string(f"{destination}-{i}")
            place_type = PLACE_TYPES[place_seed % len(PLACE_TYPES)]
            name = f"{destination} {place_type['name']} {i + 1}"

            places.append(LocationData(
                place_id=f"place-{destination}-{i}",
                name=name,
                address=f"{100 + i} Main St, {destination}",
                coordinates=Coordinates(
                    lat=center.lat + math.sin(i * 1000) * 0.05,
                    lng=center.lng + math.cos(i * 1000) * 0.05,
                ),
                types=[place_type["type"], *place_type["tags"]],
                rating=3.5 + (hash_string(name) % 30) / 20,
                seed=place_seed,
            ))
        return places

    def travel_times(self, main: LocationData, places: List[LocationData]) -> Dict[str, Dict[str, int]]:
        times: Dict[str, Dict[str, int]] = {"main": {}}

        for i, place in enumerate(places):
            minutes = travel_minutes(main.coordinates, place.coordinates)
            times["main"][place.place_id] = minutes
            times[place.place_id] = {"main": minutes}

            for other in places[:i]:
                between = travel_minutes(place.coordinates, other.coordinates)
                times[place.place_id][other.place_id] = between
                times[other.place_id][place.place_id] = between

        return times
