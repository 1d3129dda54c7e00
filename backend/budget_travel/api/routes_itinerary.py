# backend/budget_travel/api/routes_itinerary.py

from fastapi import APIRouter, HTTPException

from budget_travel.agents.planner_orchestrator import PlannerOrchestrator
from budget_travel.core.logger import logger
from budget_travel.models.itinerary_models import Itinerary
from budget_travel.models.planning_models import (
    ItineraryRequest,
    ItineraryResponse,
    OptimizeRequest,
)
from budget_travel.planning.budget_optimizer import optimize_budget

router = APIRouter(prefix="/itinerary", tags=["itinerary"])
planner = PlannerOrchestrator()


def validate_itinerary_request(data: ItineraryRequest) -> None:
    if not data.destination or not data.destination.strip():
        raise HTTPException(400, "Missing required field: destination")
    if data.budget <= 0:
        raise HTTPException(400, "Budget must be greater than zero")
    if data.travelers < 1:
        raise HTTPException(400, "At least one traveler is required")
    if data.end_date < data.start_date:
        raise HTTPException(400, "Invalid date range. End date must not be before start date.")


@router.post("", response_model=ItineraryResponse)
async def generate_itinerary(data: ItineraryRequest):
    """Generate a day-by-day itinerary and fit it to the budget."""
    validate_itinerary_request(data)

    try:
        result = await planner.generate(data.to_trip_request())
    except Exception as e:
        logger.error(f"Error generating itinerary: {e}")
        raise HTTPException(500, "Failed to generate itinerary")

    return ItineraryResponse(**result)


@router.post("/optimize", response_model=Itinerary)
def optimize_itinerary(data: OptimizeRequest):
    """Re-run budget optimization on an itinerary the client already has."""
    if data.budget <= 0:
        raise HTTPException(400, "Budget must be greater than zero")
    return optimize_budget(data.itinerary, data.budget)
