"""Bucket trends into hot / popular / growing / declining classes."""
from __future__ import annotations

import logging
from typing import Iterable, Optional

from .models import Trend, TrendBuckets

logger = logging.getLogger(__name__)

HOT_SCORE = 85
POPULAR_SCORE = 65


def _bucket_for(trend: Trend) -> str:
    current = trend.popularity[-1].score
    previous = trend.popularity[-2].score if len(trend.popularity) > 1 else current

    # Absolute level wins over momentum
    if current >= HOT_SCORE:
        return "hot"
    if current >= POPULAR_SCORE:
        return "popular"
    if current > previous:
        return "growing"
    return "declining"


def categorize(trends: Optional[Iterable[Trend]]) -> TrendBuckets:
    """Partition *trends* using only their two most recent samples.

    Every trend lands in exactly one bucket and input order is kept inside
    each bucket.
    """
    buckets: dict[str, list[Trend]] = {"hot": [], "popular": [], "growing": [], "declining": []}
    if not trends:
        return TrendBuckets(**buckets)

    for trend in trends:
        buckets[_bucket_for(trend)].append(trend)

    logger.debug("Categorized trends: %s", {name: len(items) for name, items in buckets.items()})
    return TrendBuckets(**buckets)
