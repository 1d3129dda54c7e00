# backend/budget_travel/utils/currency.py

import math
import re
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Optional, Union

CURRENCY_SYMBOLS = "$€£¥"

_STRIP_RE = re.compile(r"[$€£¥,\s]")
_NUMBER_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def parse_currency(value: Optional[Union[str, int, float]]) -> float:
    """
    Convert a display string like "$1,234.56" into a float.

    Strips currency symbols, thousands separators and whitespace, then reads
    the leading number. Anything unparseable (None, "", "N/A") is 0.0.
    """
    if value is None:
        return 0.0
    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) else 0.0

    cleaned = _STRIP_RE.sub("", str(value))
    match = _NUMBER_RE.match(cleaned)
    if not match:
        return 0.0

    try:
        amount = float(match.group(0))
    except ValueError:
        return 0.0

    return amount if math.isfinite(amount) else 0.0


def round_money(amount: float) -> float:
    """Round to cents, half-up."""
    if not math.isfinite(amount):
        return 0.0
    with localcontext() as ctx:
        # every digit of the largest finite float, plus cents
        ctx.prec = 350
        quantized = Decimal(repr(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return float(quantized)


def format_currency(amount: float) -> str:
    """Render as USD: "$1,234.56", negatives as "-$12.00"."""
    rounded = round_money(float(amount)) + 0.0  # folds -0.0 into 0.0
    if rounded < 0:
        return f"-${-rounded:,.2f}"
    return f"${rounded:,.2f}"
