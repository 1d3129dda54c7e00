# backend/budget_travel/models/planning_models.py

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from budget_travel.models.inventory_models import MapData, WeatherDay
from budget_travel.models.itinerary_models import Itinerary
from budget_travel.models.trip_models import (
    AccommodationType,
    MealPreference,
    TransportationType,
    TripRequest,
)


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ItineraryRequest(_CamelModel):
    destination: str
    start_date: date
    end_date: date
    budget: float
    travelers: int = 1
    interests: List[str] = Field(default_factory=list)
    accommodation_type: AccommodationType = AccommodationType.HOTEL
    transportation_type: TransportationType = TransportationType.PUBLIC
    meal_preference: MealPreference = MealPreference.MIXED

    def to_trip_request(self) -> TripRequest:
        return TripRequest(
            destination=self.destination.strip(),
            start_date=self.start_date,
            end_date=self.end_date,
            budget=self.budget,
            traveler_count=self.travelers,
            interests=self.interests,
            accommodation_type=self.accommodation_type,
            transportation_type=self.transportation_type,
            meal_preference=self.meal_preference,
        )


class ItineraryMetadata(_CamelModel):
    generated_at: str
    total_budget: float
    actual_cost: str
    destination: str
    duration: str
    within_budget: bool


class ItineraryResponse(_CamelModel):
    itinerary: Itinerary
    draft_total: str
    map_data: Optional[MapData] = None
    weather: List[WeatherDay] = Field(default_factory=list)
    metadata: ItineraryMetadata


class OptimizeRequest(_CamelModel):
    itinerary: Itinerary
    budget: float
