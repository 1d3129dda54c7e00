# backend/budget_travel/utils/hashing.py

import math


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def hash_string(text: str) -> int:
    """
    Polynomial rolling hash (h = h*31 + code unit) wrapped to signed 32 bits,
    returned as an absolute value.

    Iterates over UTF-16 code units so non-BMP characters hash the same way
    on every platform. Every synthetic generator seeds itself from this.
    """
    if not text:
        return 0

    data = text.encode("utf-16-le", errors="surrogatepass")
    h = 0
    for i in range(0, len(data), 2):
        code_unit = data[i] | (data[i + 1] << 8)
        h = _to_int32(h * 31 + code_unit)
    return abs(h)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up, unlike the builtin round()."""
    return int(math.floor(value + 0.5))
