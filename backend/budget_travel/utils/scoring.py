# backend/budget_travel/utils/scoring.py

from typing import Iterable, List, Sequence, Set

from budget_travel.models.inventory_models import ActivityOption


def _normalize_interests(interests: Iterable[str]) -> Set[str]:
    return {i.strip().lower() for i in interests if i and i.strip()}


def _terms_match(interest: str, term: str) -> bool:
    """Loose match in both directions ("museum" ~ "museums", "food" ~ "food & drink")."""
    return interest in term or term in interest


def interest_overlap(activity: ActivityOption, interests: Iterable[str]) -> int:
    """
    Number of user interests that hit the activity's category, subcategories
    or tags. 0 when the user gave no interests.
    """
    wanted = _normalize_interests(interests)
    if not wanted:
        return 0

    terms = [activity.category.lower()]
    terms.extend(s.lower() for s in activity.subcategories)
    terms.extend(t.lower() for t in activity.tags)

    return sum(
        1 for interest in wanted
        if any(_terms_match(interest, term) for term in terms)
    )


def rank_by_interest(
    activities: Sequence[ActivityOption],
    interests: Iterable[str],
) -> List[ActivityOption]:
    """
    Stable sort by descending interest overlap. Ties keep the generator's
    order (rating desc, price asc).
    """
    wanted = list(_normalize_interests(interests))
    if not wanted:
        return list(activities)

    scored = [(interest_overlap(a, wanted), idx, a) for idx, a in enumerate(activities)]
    scored.sort(key=lambda x: (-x[0], x[1]))
    return [a for _, _, a in scored]
