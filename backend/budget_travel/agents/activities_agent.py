# backend/budget_travel/agents/activities_agent.py

import asyncio
from typing import Any, Dict, Optional

from budget_travel.models.trip_models import TripRequest
from budget_travel.services.activity_service import ActivityService


class ActivitiesAgent:
    """
    Generate the activity pool for the whole trip. Ranking by the user's
    interests happens later, in the assembler.
    """

    def __init__(self, activity_service: Optional[ActivityService] = None):
        self.activity_service = activity_service or ActivityService()

    async def handle(self, request: TripRequest) -> Dict[str, Any]:
        activities = await asyncio.to_thread(
            self.activity_service.find_activities,
            request.destination,
            list(request.interests),
            max(1, request.trip_days),
        )

        return {
            "status": "ok",
            "payload": activities
        }
