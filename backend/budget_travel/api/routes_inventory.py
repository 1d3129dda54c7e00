# backend/budget_travel/api/routes_inventory.py

from datetime import date, timedelta
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from budget_travel.db.response_cache import ResponseCache, generate_cache_key
from budget_travel.models.inventory_models import ActivityOption, Flight, HotelOption, MapData
from budget_travel.services.activity_service import ActivityService
from budget_travel.services.flight_service import FlightService
from budget_travel.services.hotel_service import HotelService
from budget_travel.services.map_service import MapService
from budget_travel.services.weather_service import WeatherService

router = APIRouter(tags=["inventory"])

flight_service = FlightService()
hotel_service = HotelService()
activity_service = ActivityService()
weather_service = WeatherService()
map_service = MapService()

_cache = ResponseCache()


def get_cache() -> ResponseCache:
    return _cache


@router.get("/flights", response_model=List[Flight])
def search_flights(
    destination: str,
    depart_date: date = Query(..., alias="departDate"),
    return_date: date = Query(..., alias="returnDate"),
    passengers: int = 1,
    origin: Optional[str] = Query(None, description="Departure city, defaults to the configured origin"),
    cache: ResponseCache = Depends(get_cache),
):
    key = generate_cache_key("flights", {
        "origin": origin,
        "destination": destination,
        "departDate": depart_date,
        "returnDate": return_date,
        "passengers": passengers,
    })
    cached = cache.get(key)
    if cached is not None:
        return cached

    flights = flight_service.search_flights(
        destination, depart_date, return_date, passengers, origin_city=origin
    )
    cache.set(key, flights)
    return flights


@router.get("/accommodations", response_model=List[HotelOption])
def search_accommodations(
    destination: str,
    check_in: date = Query(..., alias="checkIn"),
    check_out: date = Query(..., alias="checkOut"),
    guests: int = 2,
    accommodation_type: str = Query("hotel", alias="type"),
    cache: ResponseCache = Depends(get_cache),
):
    key = generate_cache_key("accommodations", {
        "destination": destination,
        "checkIn": check_in,
        "checkOut": check_out,
        "guests": guests,
        "type": accommodation_type,
    })
    cached = cache.get(key)
    if cached is not None:
        return cached

    hotels = hotel_service.search_hotels(destination, check_in, check_out, guests, accommodation_type)
    cache.set(key, hotels)
    return hotels


@router.get("/activities", response_model=List[ActivityOption])
def search_activities(
    destination: str,
    interests: Optional[str] = Query(None, description="Comma separated, e.g. food,history"),
    days: int = 3,
    cache: ResponseCache = Depends(get_cache),
):
    interest_list = [i.strip() for i in (interests or "").split(",") if i.strip()]

    key = generate_cache_key("activities", {
        "destination": destination,
        "interests": interest_list,
        "days": days,
    })
    cached = cache.get(key)
    if cached is not None:
        return cached

    activities = activity_service.find_activities(destination, interest_list, days)
    cache.set(key, activities)
    return activities


@router.get("/weather")
def weather_forecast(
    location: str,
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    cache: ResponseCache = Depends(get_cache),
):
    """Defaults to a 7 day forecast from today; never longer than max_forecast_days."""
    if not location.strip():
        raise HTTPException(400, "Location parameter is required")

    start = start_date or date.today()
    end = end_date or start + timedelta(days=6)

    key = generate_cache_key("weather", {"location": location, "startDate": start, "endDate": end})
    cached = cache.get(key)
    if cached is not None:
        return cached

    forecast = weather_service.get_forecast(location, start, end)
    response = {
        "location": location,
        "forecast": forecast,
        "date_range": {
            "start": forecast[0].date.isoformat() if forecast else start.isoformat(),
            "end": forecast[-1].date.isoformat() if forecast else end.isoformat(),
            "days": len(forecast),
        },
    }
    cache.set(key, response)
    return response


@router.get("/maps", response_model=MapData)
def map_data(destination: str, cache: ResponseCache = Depends(get_cache)):
    key = generate_cache_key("maps", {"destination": destination})
    cached = cache.get(key)
    if cached is not None:
        return cached

    data = map_service.get_map_data(destination)
    if data is None:
        raise HTTPException(503, "Map data is unavailable for this destination")

    cache.set(key, data)
    return data
