# backend/budget_travel/planning/budget_optimizer.py

from typing import Dict, List

from budget_travel.core.logger import logger
from budget_travel.models.itinerary_models import Activity, Day, Itinerary
from budget_travel.utils.currency import format_currency, parse_currency


ACCOMMODATION = "accommodation"
ACTIVITIES = "activities"
TRANSPORTATION = "transportation"

# Max share of the dominant category that one pass may cut
REDUCTION_CAPS: Dict[str, float] = {
    ACCOMMODATION: 0.5,
    ACTIVITIES: 0.4,
    TRANSPORTATION: 0.45,
}

# The priciest activity of each day takes 20% more of the cut
TOP_ACTIVITY_BOOST = 1.2

ALTERNATIVE_PRICE_FACTOR = 0.6


def analyze_budget_allocation(days: List[Day]) -> Dict[str, float]:
    """Total spend per category across all days."""
    breakdown = {ACCOMMODATION: 0.0, ACTIVITIES: 0.0, TRANSPORTATION: 0.0}

    for day in days:
        breakdown[ACCOMMODATION] += parse_currency(day.accommodation.cost)
        breakdown[TRANSPORTATION] += parse_currency(day.transportation.cost)
        for activity in day.activities:
            breakdown[ACTIVITIES] += parse_currency(activity.cost)

    return breakdown


def select_dominant_category(breakdown: Dict[str, float]) -> str:
    """
    Accommodation wins only when strictly above both others; otherwise
    activities win when strictly above transportation; otherwise
    transportation. Ties therefore never go to accommodation.
    """
    accommodation = breakdown[ACCOMMODATION]
    activities = breakdown[ACTIVITIES]
    transportation = breakdown[TRANSPORTATION]

    if accommodation > activities and accommodation > transportation:
        return ACCOMMODATION
    if activities > transportation:
        return ACTIVITIES
    return TRANSPORTATION


def reduction_percentage(savings_needed: float, category_total: float, category: str) -> float:
    cap = REDUCTION_CAPS[category]
    if category_total <= 0:
        return cap
    return min(savings_needed / category_total, cap)


def _reduce(cost: str, percentage: float) -> str:
    return format_currency(parse_currency(cost) * (1 - percentage))


def optimize_accommodation(days: List[Day], percentage: float) -> None:
    for day in days:
        day.accommodation.cost = _reduce(day.accommodation.cost, percentage)


def optimize_transportation(days: List[Day], percentage: float) -> None:
    for day in days:
        day.transportation.cost = _reduce(day.transportation.cost, percentage)


def optimize_activities(days: List[Day], percentage: float) -> None:
    for day in days:
        by_cost = sorted(
            day.activities,
            key=lambda a: parse_currency(a.cost),
            reverse=True,
        )
        for rank, activity in enumerate(by_cost):
            adjusted = percentage * TOP_ACTIVITY_BOOST if rank == 0 else percentage
            activity.cost = _reduce(activity.cost, adjusted)


def calculate_total_cost(days: List[Day]) -> float:
    return sum(day.cost() for day in days)


def budget_alternatives(activities: List[Activity]) -> List[Activity]:
    """Cheaper stand-ins (60% of the price) offered next to the originals."""
    alternatives = []
    for activity in activities:
        alternative = activity.clone()
        alternative.name = f"Budget {activity.name}"
        alternative.description = f"A more affordable version of {activity.name}."
        alternative.cost = format_currency(parse_currency(activity.cost) * ALTERNATIVE_PRICE_FACTOR)
        alternatives.append(alternative)
    return alternatives


def optimize_budget(itinerary: Itinerary, target_budget: float) -> Itinerary:
    """
    Bring an over-budget itinerary closer to target_budget.

    Single pass: the dominant spending category is cut by
    min(savings_needed / category_total, cap), the total is re-summed from
    the days, and every day gets budget alternatives for its activities.
    The result can still be over budget when the cap kicks in.

    The input is never modified. Within budget, or on any internal error,
    the input itinerary itself is returned.
    """
    try:
        current_cost = parse_currency(itinerary.total_cost)

        if current_cost <= target_budget:
            return itinerary

        if not itinerary.days:
            logger.info("Nothing to optimize: itinerary has no days")
            return itinerary

        savings_needed = current_cost - target_budget
        optimized = itinerary.clone()

        breakdown = analyze_budget_allocation(optimized.days)
        category = select_dominant_category(breakdown)
        percentage = reduction_percentage(savings_needed, breakdown[category], category)

        logger.info(
            f"Optimizing {itinerary.destination!r}: cost={current_cost:.2f} "
            f"budget={target_budget:.2f} category={category} reduction={percentage:.4f}"
        )

        if category == ACCOMMODATION:
            optimize_accommodation(optimized.days, percentage)
        elif category == ACTIVITIES:
            optimize_activities(optimized.days, percentage)
        else:
            optimize_transportation(optimized.days, percentage)

        optimized.total_cost = format_currency(calculate_total_cost(optimized.days))

        for day in optimized.days:
            day.alternative_activities = budget_alternatives(day.activities)

        if parse_currency(optimized.total_cost) > target_budget:
            logger.warning(
                f"Still over budget after optimization: {optimized.total_cost} > {format_currency(target_budget)}"
            )

        return optimized

    except Exception as e:
        logger.error(f"Error optimizing budget: {e}")
        return itinerary
