# backend/budget_travel/models/trip_models.py

from datetime import date
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AccommodationType(str, Enum):
    HOTEL = "hotel"
    HOSTEL = "hostel"
    APARTMENT = "apartment"
    RESORT = "resort"
    VILLA = "villa"
    GUESTHOUSE = "guesthouse"


class TransportationType(str, Enum):
    PUBLIC = "public"
    RENTAL = "rental"
    TAXI = "taxi"


class MealPreference(str, Enum):
    BUDGET = "budget"
    LOCAL = "local"
    MIXED = "mixed"
    FINE_DINING = "fine-dining"


# ----------------------------------------------------------
# ONE GENERATION REQUEST (read-only once built)
# ----------------------------------------------------------
class TripRequest(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    destination: str
    start_date: date
    end_date: date
    budget: float
    traveler_count: int = 1
    interests: List[str] = Field(default_factory=list)
    accommodation_type: AccommodationType = AccommodationType.HOTEL
    transportation_type: TransportationType = TransportationType.PUBLIC
    meal_preference: MealPreference = MealPreference.MIXED

    @property
    def city(self) -> str:
        return self.destination.split(",")[0].strip()

    @property
    def trip_days(self) -> int:
        """Inclusive day count; 0 or less means there is nothing to plan."""
        return (self.end_date - self.start_date).days + 1
