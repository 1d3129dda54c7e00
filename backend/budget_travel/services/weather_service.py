# backend/budget_travel/services/weather_service.py

import math
from datetime import date
from typing import Dict, List, Optional

from budget_travel.core.config_loader import settings
from budget_travel.core.logger import logger
from budget_travel.models.inventory_models import Temperature, WeatherDay
from budget_travel.utils.hashing import hash_string, round_half_up
from budget_travel.utils.time_utils import DateLike, date_range


# lower bounds, checked top-down
STORMY_THRESHOLD = 90
RAINY_THRESHOLD = 70
CLOUDY_THRESHOLD = 40
PARTLY_CLOUDY_THRESHOLD = 20
SNOW_MAX_TEMP = 2

DESCRIPTIONS: Dict[str, List[str]] = {
    "sunny": ["Clear skies", "Sunny", "Bright and sunny", "Warm and clear"],
    "partly-cloudy": ["Partly cloudy", "Some clouds", "Mostly sunny"],
    "cloudy": ["Overcast", "Cloudy skies", "Overcast conditions"],
    "rainy": ["Light rain", "Showers", "Rainy", "Precipitation expected"],
    "snowy": ["Light snow", "Snowfall", "Snow showers", "Snowy conditions"],
    "stormy": ["Thunderstorms", "Stormy conditions", "Thunder and lightning"],
}

WET_CONDITIONS = {"rainy", "snowy", "stormy"}


def classify_condition(precipitation_chance: int, max_temp: int) -> str:
    if precipitation_chance >= STORMY_THRESHOLD:
        return "stormy"
    if precipitation_chance >= RAINY_THRESHOLD:
        # rain turns to snow below freezing-ish
        return "snowy" if max_temp < SNOW_MAX_TEMP else "rainy"
    if precipitation_chance >= CLOUDY_THRESHOLD:
        return "cloudy"
    if precipitation_chance >= PARTLY_CLOUDY_THRESHOLD:
        return "partly-cloudy"
    return "sunny"


def seasonal_offset(month: int) -> float:
    """Northern hemisphere: +8C in July, -8C in January, 0 in April/October."""
    return 8 * math.sin(2 * math.pi * (month - 4) / 12)


def _wind_speed(condition: str, seed: int) -> int:
    if condition == "stormy":
        return 30 + seed % 31
    if condition in ("rainy", "snowy"):
        return 10 + seed % 21
    return 5 + seed % 16


def _humidity(condition: str, seed: int) -> int:
    if condition in WET_CONDITIONS:
        return 70 + seed % 26
    if condition == "cloudy":
        return 50 + seed % 31
    return 30 + seed % 31


def daily_weather(location: str, day: date) -> WeatherDay:
    key = location.lower()
    location_hash = hash_string(key)
    day_seed = hash_string(f"{key}-{day.isoformat()}")

    base_temp = 10 + location_hash % 25          # 10..34 C
    rainfall = (location_hash % 10) / 10         # 0.0..0.9

    day_variation = (day_seed % 61) / 10         # 0.0..6.0
    max_temp = round_half_up(base_temp + seasonal_offset(day.month) + day_variation)
    min_temp = max_temp - (5 + day_seed % 5)
    current_temp = round_half_up(min_temp + (max_temp - min_temp) * (0.3 + (day_seed % 41) / 100))

    rain_jitter = (day_seed // 7 % 50) / 100     # 0.0..0.49
    precipitation_chance = min(100, round_half_up((rainfall + rain_jitter) * 100))

    condition = classify_condition(precipitation_chance, max_temp)
    options = DESCRIPTIONS[condition]

    return WeatherDay(
        date=day,
        temperature=Temperature(min=min_temp, max=max_temp, current=current_temp),
        description=options[(day_seed // 3) % len(options)],
        wind_speed=_wind_speed(condition, day_seed),
        humidity=_humidity(condition, day_seed // 11),
        condition=condition,
        precipitation_chance=precipitation_chance,
    )


class WeatherService:
    def __init__(self, max_days: Optional[int] = None):
        self.max_days = max_days or settings.max_forecast_days

    def get_forecast(self, location: str, start_date: DateLike, end_date: DateLike) -> List[WeatherDay]:
        """
        Daily forecast for every date in [start_date, end_date], capped at
        max_days. Same location and dates always give the same forecast.
        [] on bad input.
        """
        try:
            if not location or not location.strip():
                logger.warning("Skipping weather forecast: empty location")
                return []

            days = date_range(start_date, end_date)[:self.max_days]
            return [daily_weather(location, d) for d in days]

        except Exception as e:
            logger.error(f"Error generating weather forecast for {location!r}: {e}")
            return []
