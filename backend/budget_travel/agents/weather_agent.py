# backend/budget_travel/agents/weather_agent.py

import asyncio
from typing import Any, Dict, Optional

from budget_travel.models.trip_models import TripRequest
from budget_travel.services.weather_service import WeatherService


class WeatherAgent:
    def __init__(self, weather_service: Optional[WeatherService] = None):
        self.weather_service = weather_service or WeatherService()

    async def handle(self, request: TripRequest) -> Dict[str, Any]:
        forecast = await asyncio.to_thread(
            self.weather_service.get_forecast,
            request.destination,
            request.start_date,
            request.end_date,
        )

        return {
            "status": "ok",
            "payload": forecast
        }
