# backend/budget_travel/utils/time_utils.py

from datetime import date, datetime, timedelta
from typing import List, Union


DateLike = Union[str, date, datetime]


def parse_iso_date(value: DateLike) -> date:
    """
    Accepts:
    - date / datetime objects
    - "2025-03-12"
    - "2025-03-12T09:30:00" (time part is dropped)

    Raises ValueError on anything else.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    if "T" in text:
        text = text.split("T", 1)[0]
    return datetime.strptime(text, "%Y-%m-%d").date()


def date_range(start: DateLike, end: DateLike) -> List[date]:
    """Every calendar day from start to end, inclusive. Empty when end < start."""
    s = parse_iso_date(start)
    e = parse_iso_date(end)

    days = []
    current = s
    while current <= e:
        days.append(current)
        current += timedelta(days=1)
    return days


def count_nights(check_in: DateLike, check_out: DateLike) -> int:
    return (parse_iso_date(check_out) - parse_iso_date(check_in)).days


def format_duration(days: int) -> str:
    return "1 day" if days == 1 else f"{days} days"
