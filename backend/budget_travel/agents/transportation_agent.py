# backend/budget_travel/agents/transportation_agent.py

import asyncio
from typing import Any, Dict, Optional

from budget_travel.models.trip_models import TripRequest
from budget_travel.services.flight_service import FlightService


class TransportationAgent:
    def __init__(self, flight_service: Optional[FlightService] = None):
        self.flight_service = flight_service or FlightService()

    async def handle(self, request: TripRequest) -> Dict[str, Any]:
        flights = await asyncio.to_thread(
            self.flight_service.search_flights,
            request.destination,
            request.start_date,
            request.end_date,
            request.traveler_count,
        )

        return {
            "status": "ok",
            "payload": flights
        }
