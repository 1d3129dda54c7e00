# backend/budget_travel/planning/itinerary_assembler.py

import math
from datetime import date
from typing import List, Optional, Sequence

from budget_travel.core.logger import logger
from budget_travel.models.inventory_models import ActivityOption, Flight, HotelOption, WeatherDay
from budget_travel.models.itinerary_models import (
    Accommodation,
    Activity,
    Day,
    Itinerary,
    Transportation,
)
from budget_travel.models.trip_models import MealPreference, TransportationType, TripRequest
from budget_travel.services.weather_service import WET_CONDITIONS
from budget_travel.utils.currency import format_currency
from budget_travel.utils.hashing import hash_string
from budget_travel.utils.scoring import rank_by_interest
from budget_travel.utils.time_utils import date_range, format_duration


MIN_ACTIVITIES_PER_DAY = 2
MAX_ACTIVITIES_PER_DAY = 4

MEAL_TIPS = {
    MealPreference.BUDGET: "Street food stalls and markets keep daily food costs low in {city}.",
    MealPreference.LOCAL: "Ask locals for their favorite neighborhood spots to eat like a resident of {city}.",
    MealPreference.MIXED: "Mix a sit-down dinner with casual lunches to balance your food budget in {city}.",
    MealPreference.FINE_DINING: "Book popular restaurants in {city} several days ahead, especially on weekends.",
}


# -----------------------------------------------------------
# Transportation: one option per day, priced by preference
# -----------------------------------------------------------
def daily_transportation(request: TripRequest, day: date) -> Transportation:
    seed = hash_string(f"{request.destination}-{day.isoformat()}-{request.transportation_type.value}")
    travelers = max(1, request.traveler_count)

    if request.transportation_type == TransportationType.RENTAL:
        cars = math.ceil(travelers / 5)
        cost = (40 + seed % 30) * cars
        return Transportation(
            type="Rental Car",
            details=f"{cars} compact rental car(s) with fuel for getting around {request.city}",
            cost=format_currency(cost),
        )

    if request.transportation_type == TransportationType.TAXI:
        vehicles = math.ceil(travelers / 4)
        cost = (25 + seed % 25) * vehicles
        return Transportation(
            type="Taxi/Rideshare",
            details=f"Taxi or rideshare trips between stops ({vehicles} vehicle(s))",
            cost=format_currency(cost),
        )

    cost = (5 + seed % 10) * travelers
    return Transportation(
        type="Public Transit",
        details=f"Metro and bus day pass for {travelers} traveler(s)",
        cost=format_currency(cost),
    )


def daily_accommodation(request: TripRequest, hotels: Sequence[HotelOption], index: int) -> Accommodation:
    if not hotels:
        return Accommodation(
            name="Accommodation to be arranged",
            location=request.destination,
            cost=format_currency(0),
        )

    hotel = hotels[index % len(hotels)]
    return Accommodation(
        name=hotel.name,
        location=hotel.address,
        cost=format_currency(hotel.price_per_night * hotel.number_of_rooms),
    )


def to_activity(option: ActivityOption, travelers: int) -> Activity:
    return Activity(
        name=option.name,
        description=option.description,
        cost=format_currency(option.price * max(1, travelers)),
        type=option.category,
        location=option.location,
        duration=option.duration,
    )


def free_time_activity(city: str) -> Activity:
    return Activity(
        name=f"Free time in {city}",
        description=f"Wander {city} at your own pace.",
        cost=format_currency(0),
        type="Leisure",
        location=city,
        duration="3 hours",
    )


def activities_per_day(destination: str, day: date) -> int:
    """2..4, fixed per destination and date."""
    span = MAX_ACTIVITIES_PER_DAY - MIN_ACTIVITIES_PER_DAY + 1
    return MIN_ACTIVITIES_PER_DAY + hash_string(f"{destination}-{day.isoformat()}") % span


def default_travel_tips(destination: str) -> List[str]:
    return [
        f"Research local customs and etiquette before visiting {destination}.",
        f"Consider purchasing travel insurance for your trip to {destination}.",
        f"Check if there are any local festivals or events during your visit to {destination}.",
        f"Always keep a digital copy of your important documents while traveling to {destination}.",
        f"Learn a few basic phrases in the local language of {destination}.",
    ]


def build_travel_tips(
    request: TripRequest,
    flights: Sequence[Flight],
    weather: Optional[Sequence[WeatherDay]] = None,
) -> List[str]:
    tips = default_travel_tips(request.destination)

    outbound = [f for f in flights if f.direction == "outbound"]
    if outbound:
        cheapest = min(outbound, key=lambda f: f.price)
        tips.append(
            f"Cheapest outbound flight: {cheapest.airline} {cheapest.flight_number} "
            f"departing {cheapest.departure_time:%Y-%m-%d %H:%M} for {format_currency(cheapest.price)}."
        )

    tips.append(MEAL_TIPS[request.meal_preference].format(city=request.city))

    wet_days = [w for w in (weather or []) if w.condition in WET_CONDITIONS]
    if wet_days:
        tips.append(
            f"Pack rain gear: {len(wet_days)} day(s) of rain, snow or storms are expected."
        )

    return tips


# -----------------------------------------------------------
# Draft itinerary: one accommodation, one transport, 2-4
# activities per calendar day
# -----------------------------------------------------------
def assemble_itinerary(
    request: TripRequest,
    flights: Sequence[Flight],
    hotels: Sequence[HotelOption],
    activities: Sequence[ActivityOption],
    weather: Optional[Sequence[WeatherDay]] = None,
) -> Itinerary:
    """
    Build the pre-optimization itinerary.

    Hotels rotate by day index, activities are drawn from the pool ranked by
    interest overlap without repeats until the pool runs out. Empty
    inventory gives zero-cost placeholders, never a missing field.
    """
    dates = date_range(request.start_date, request.end_date)
    pool = rank_by_interest(activities, request.interests)

    if not hotels:
        logger.warning(f"No accommodation inventory for {request.destination!r}, using placeholders")
    if not pool:
        logger.warning(f"No activity inventory for {request.destination!r}, using free time")

    days: List[Day] = []
    cursor = 0

    for index, day in enumerate(dates):
        if pool:
            count = min(activities_per_day(request.destination, day), len(pool))
            picked = [pool[(cursor + k) % len(pool)] for k in range(count)]
            cursor += count
            day_activities = [to_activity(a, request.traveler_count) for a in picked]
        else:
            day_activities = [free_time_activity(request.city)]

        days.append(Day(
            date=day,
            activities=day_activities,
            accommodation=daily_accommodation(request, hotels, index),
            transportation=daily_transportation(request, day),
        ))

    total = sum(d.cost() for d in days)

    return Itinerary(
        destination=request.destination,
        total_cost=format_currency(total),
        duration=format_duration(len(days)),
        days=days,
        travel_tips=build_travel_tips(request, flights, weather),
    )
