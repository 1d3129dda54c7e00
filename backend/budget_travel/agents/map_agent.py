# backend/budget_travel/agents/map_agent.py

import asyncio
from typing import Any, Dict, Optional

from budget_travel.models.trip_models import TripRequest
from budget_travel.services.map_service import MapService


class MapAgent:
    def __init__(self, map_service: Optional[MapService] = None):
        self.maps = map_service or MapService()

    async def handle(self, request: TripRequest) -> Dict[str, Any]:
        map_data = await asyncio.to_thread(self.maps.get_map_data, request.destination)

        return {
            "status": "ok" if map_data else "unavailable",
            "payload": map_data
        }
