# backend/budget_travel/models/inventory_models.py

from datetime import date, datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _InventoryModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # seed that produced the item; generation-time only, never serialized
    seed: int = Field(default=0, exclude=True)


# ----------------------------------------------------------
# FLIGHTS
# ----------------------------------------------------------
class Layover(BaseModel):
    airport: str
    duration: str


class Flight(_InventoryModel):
    id: str
    airline: str
    flight_number: str
    departure_airport: str
    departure_city: str
    arrival_airport: str
    arrival_city: str
    departure_time: datetime
    arrival_time: datetime
    duration: str
    stops: int = 0
    price: int
    currency: str = "USD"
    cabin_class: str = "Economy"
    direction: str = "outbound"      # outbound | return
    layovers: Optional[List[Layover]] = None


# ----------------------------------------------------------
# HOTELS
# ----------------------------------------------------------
class HotelOption(_InventoryModel):
    id: str
    name: str
    description: str
    address: str
    city: str
    country: str
    price: int                       # whole stay, all rooms
    price_per_night: int             # one room
    currency: str = "USD"
    rating: float
    review_count: int
    amenities: List[str] = Field(default_factory=list)
    room_type: str
    accommodation_type: str = "hotel"
    distance_from_center: str = ""
    cancellation_policy: str = ""
    check_in: str = ""
    check_out: str = ""
    number_of_guests: int = 1
    number_of_rooms: int = 1


# ----------------------------------------------------------
# ACTIVITIES
# ----------------------------------------------------------
class ActivityOption(_InventoryModel):
    id: str
    name: str
    description: str
    category: str
    subcategories: List[str] = Field(default_factory=list)
    location: str
    address: str
    city: str
    price: int                       # per person
    currency: str = "USD"
    duration: str
    duration_hours: float
    rating: float
    review_count: int
    booking_required: bool = True
    distance_from_center: str = ""
    suitable_for: List[str] = Field(default_factory=list)
    highlights: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)


# ----------------------------------------------------------
# WEATHER
# ----------------------------------------------------------
class Temperature(BaseModel):
    min: int
    max: int
    current: int


class WeatherDay(BaseModel):
    date: date
    temperature: Temperature
    description: str
    wind_speed: int
    humidity: int
    condition: str                   # sunny | partly-cloudy | cloudy | rainy | snowy | stormy
    precipitation_chance: int


# ----------------------------------------------------------
# MAPS
# ----------------------------------------------------------
class Coordinates(BaseModel):
    lat: float
    lng: float


class LocationData(_InventoryModel):
    place_id: str
    name: str
    address: str
    coordinates: Coordinates
    types: List[str] = Field(default_factory=list)
    rating: Optional[float] = None
    formatted_address: Optional[str] = None


class MapData(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    main_location: LocationData
    nearby_attractions: List[LocationData] = Field(default_factory=list)
    # minutes, keyed by place id; "main" is the destination itself
    travel_times: Dict[str, Dict[str, int]] = Field(default_factory=dict)
