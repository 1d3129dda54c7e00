# backend/budget_travel/models/itinerary_models.py

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from budget_travel.utils.currency import parse_currency


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ----------------------------------------------------------
# PER-DAY VALUE OBJECTS
#   cost fields are display strings ("$120.00"); only the
#   optimizer rewrites them.
# ----------------------------------------------------------
class Activity(_CamelModel):
    name: str
    description: str = ""
    cost: str = "$0.00"
    type: str = ""
    location: str = ""
    duration: str = ""

    def clone(self) -> "Activity":
        return Activity(
            name=self.name,
            description=self.description,
            cost=self.cost,
            type=self.type,
            location=self.location,
            duration=self.duration,
        )


class Accommodation(_CamelModel):
    name: str
    location: str = ""
    cost: str = "$0.00"

    def clone(self) -> "Accommodation":
        return Accommodation(name=self.name, location=self.location, cost=self.cost)


class Transportation(_CamelModel):
    type: str
    details: str = ""
    cost: str = "$0.00"

    def clone(self) -> "Transportation":
        return Transportation(type=self.type, details=self.details, cost=self.cost)


class Day(_CamelModel):
    date: date
    activities: List[Activity] = Field(default_factory=list)
    accommodation: Accommodation
    transportation: Transportation
    alternative_activities: Optional[List[Activity]] = None

    def cost(self) -> float:
        total = parse_currency(self.accommodation.cost)
        total += parse_currency(self.transportation.cost)
        for activity in self.activities:
            total += parse_currency(activity.cost)
        return total

    def clone(self) -> "Day":
        alternatives = None
        if self.alternative_activities is not None:
            alternatives = [a.clone() for a in self.alternative_activities]

        return Day(
            date=self.date,
            activities=[a.clone() for a in self.activities],
            accommodation=self.accommodation.clone(),
            transportation=self.transportation.clone(),
            alternative_activities=alternatives,
        )


# ----------------------------------------------------------
# ITINERARY (owns every Day)
# ----------------------------------------------------------
class Itinerary(_CamelModel):
    destination: str
    total_cost: str = "$0.00"
    duration: str = ""
    days: List[Day] = Field(default_factory=list)
    travel_tips: List[str] = Field(default_factory=list)

    def clone(self) -> "Itinerary":
        return Itinerary(
            destination=self.destination,
            total_cost=self.total_cost,
            duration=self.duration,
            days=[d.clone() for d in self.days],
            travel_tips=list(self.travel_tips),
        )
