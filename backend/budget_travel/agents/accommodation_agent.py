# backend/budget_travel/agents/accommodation_agent.py

import asyncio
from datetime import timedelta
from typing import Any, Dict, Optional

from budget_travel.models.trip_models import TripRequest
from budget_travel.services.hotel_service import HotelService


class AccommodationAgent:
    def __init__(self, hotel_service: Optional[HotelService] = None):
        self.hotel_service = hotel_service or HotelService()

    async def handle(self, request: TripRequest) -> Dict[str, Any]:
        # a same-day trip still books one night
        check_out = max(request.end_date, request.start_date + timedelta(days=1))

        hotels = await asyncio.to_thread(
            self.hotel_service.search_hotels,
            request.destination,
            request.start_date,
            check_out,
            request.traveler_count,
            request.accommodation_type.value,
        )

        return {
            "status": "ok",
            "payload": hotels
        }
