# backend/budget_travel/agents/planner_orchestrator.py

import asyncio
from datetime import datetime, timezone
from typing import Any, Dict

from budget_travel.agents.accommodation_agent import AccommodationAgent
from budget_travel.agents.activities_agent import ActivitiesAgent
from budget_travel.agents.map_agent import MapAgent
from budget_travel.agents.transportation_agent import TransportationAgent
from budget_travel.agents.weather_agent import WeatherAgent
from budget_travel.core.logger import logger
from budget_travel.models.trip_models import TripRequest
from budget_travel.planning.budget_optimizer import optimize_budget
from budget_travel.planning.itinerary_assembler import assemble_itinerary
from budget_travel.utils.currency import parse_currency
from budget_travel.utils.time_utils import format_duration


class PlannerOrchestrator:

    def __init__(
        self,
        transport_agent: TransportationAgent = None,
        accom_agent: AccommodationAgent = None,
        activities_agent: ActivitiesAgent = None,
        map_agent: MapAgent = None,
        weather_agent: WeatherAgent = None,
    ):
        # AGENTS
        self.transport_agent = transport_agent or TransportationAgent()
        self.accom_agent = accom_agent or AccommodationAgent()
        self.activities_agent = activities_agent or ActivitiesAgent()
        self.map_agent = map_agent or MapAgent()
        self.weather_agent = weather_agent or WeatherAgent()

    # -----------------------------------------------------------
    # Core itinerary pipeline
    # -----------------------------------------------------------
    async def generate(self, request: TripRequest) -> Dict[str, Any]:
        """
        Fan out to every inventory agent, assemble the draft itinerary,
        then fit it to the budget.

        Returns:
            {
                "itinerary": Itinerary (optimized or unchanged),
                "draft_total": str,
                "map_data": MapData | None,
                "weather": List[WeatherDay],
                "metadata": {...}
            }
        """
        logger.info(
            f"Planning {request.trip_days} day(s) in {request.destination!r} "
            f"for {request.traveler_count} traveler(s), budget={request.budget}"
        )

        # ---------------------------------------------------------
        # 1. Run agents in parallel, they share nothing
        # ---------------------------------------------------------
        trans_resp, accom_resp, act_resp, map_resp, weather_resp = await asyncio.gather(
            self.transport_agent.handle(request),
            self.accom_agent.handle(request),
            self.activities_agent.handle(request),
            self.map_agent.handle(request),
            self.weather_agent.handle(request),
        )

        flights = trans_resp["payload"]
        hotels = accom_resp["payload"]
        activities = act_resp["payload"]
        weather = weather_resp["payload"]

        logger.info(
            f"Inventory: {len(flights)} flights, {len(hotels)} hotels, "
            f"{len(activities)} activities, {len(weather)} forecast days"
        )

        # ---------------------------------------------------------
        # 2. Draft, then optimize (only after the draft is complete)
        # ---------------------------------------------------------
        draft = assemble_itinerary(request, flights, hotels, activities, weather)
        itinerary = optimize_budget(draft, request.budget)

        actual_cost = parse_currency(itinerary.total_cost)

        return {
            "itinerary": itinerary,
            "draft_total": draft.total_cost,
            "map_data": map_resp["payload"],
            "weather": weather,
            "metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "total_budget": request.budget,
                "actual_cost": itinerary.total_cost,
                "destination": request.destination,
                "duration": format_duration(len(itinerary.days)),
                "within_budget": actual_cost <= request.budget,
            },
        }
