# backend/tests/test_scoring.py

from budget_travel.services.activity_service import CATEGORIES, generate_activity
from budget_travel.utils.scoring import interest_overlap, rank_by_interest


def _category(name):
    return next(c for c in CATEGORIES if c["name"] == name)


def test_interest_overlap_matches_category_and_tags():
    food = generate_activity("Rome", _category("Food & Drink"), 11)

    assert interest_overlap(food, ["food"]) == 1
    assert interest_overlap(food, ["FOOD", "drink"]) == 2
    assert interest_overlap(food, []) == 0


def test_rank_by_interest_is_stable():
    shopping = generate_activity("Rome", _category("Shopping"), 1)
    food = generate_activity("Rome", _category("Food & Drink"), 2)
    sights = generate_activity("Rome", _category("Sightseeing"), 3)
    pool = [shopping, food, sights]

    assert rank_by_interest(pool, ["food"])[0] is food
    assert rank_by_interest(pool, []) == pool
    assert rank_by_interest(pool, ["underwater basket weaving"]) == pool
