"""Period-over-period growth rate and growth category for a single trend."""
from __future__ import annotations

import logging
import math

from .models import GrowthCategory, GrowthResult, Trend

logger = logging.getLogger(__name__)

DEFAULT_PERIOD = 3

RAPID_THRESHOLD = 15.0
GROWTH_THRESHOLD = 5.0


def classify_growth(rate: float) -> GrowthCategory:
    """Map a percentage *rate* onto a growth category (strict thresholds)."""
    if rate > RAPID_THRESHOLD:
        return "rapid-growth"
    if rate > GROWTH_THRESHOLD:
        return "growing"
    if rate < -RAPID_THRESHOLD:
        return "rapid-decline"
    if rate < -GROWTH_THRESHOLD:
        return "declining"
    # NaN falls through every comparison
    return "stable"


def _percentage_change(change: float, previous: float) -> float:
    if previous == 0:
        if change == 0:
            return math.nan
        return math.copysign(math.inf, change)
    return change * 100.0 / previous


def compute_growth(trend: Trend, period_length: int = DEFAULT_PERIOD) -> GrowthResult:
    """Compare the latest score with the one *period_length* samples earlier.

    The look-back is clamped to the earliest sample when the history is
    shorter than the requested period; a period of 0 compares the latest
    sample with itself. A zero baseline yields ``inf``/``nan``
    rates instead of raising.
    """
    if period_length < 0:
        raise ValueError(f"period_length must be non-negative, got {period_length}")

    popularity = trend.popularity
    if len(popularity) < 2:
        return GrowthResult(rate=0.0, category="stable")

    current = popularity[-1].score
    compare_index = max(0, len(popularity) - 1 - period_length)
    previous = popularity[compare_index].score

    absolute_change = current - previous
    rate = _percentage_change(absolute_change, previous)
    if not math.isfinite(rate):
        logger.warning("Trend %s has a zero baseline score; growth rate is %s", trend.id, rate)

    category = classify_growth(rate)
    logger.debug("Trend %s: %s -> %s (%.1f%%, %s)", trend.id, previous, current, rate, category)

    return GrowthResult(
        rate=round(rate, 1),
        category=category,
        absolute_change=absolute_change,
        current=current,
        previous=previous,
    )
