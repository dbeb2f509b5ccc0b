# src/services/pricing.py

"""Display-side price helpers."""

import math

from src.config.settings import Settings
from src.errors import InvalidInputError


def discount_percent(price: float, mrp: float) -> int:
    """Percentage off MRP, rounded half up to a whole number.

    Raises:
        InvalidInputError: if *mrp* is not positive.
    """
    if mrp <= 0:
        msg = f"Cannot compute discount against MRP {mrp!r}"
        raise InvalidInputError(msg)
    return math.floor((mrp - price) / mrp * 100 + 0.5)


def star_count(rating: float) -> int:
    """Number of filled stars shown for *rating*."""
    return max(0, min(Settings.MAX_STARS, math.floor(rating)))
