"""Analytics report combining every engine component over a trend collection."""
from __future__ import annotations

import json
import logging
import math
import time
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Sequence

from .categorizer import categorize
from .growth import DEFAULT_PERIOD, compute_growth
from .models import GrowthResult, Trend
from .related import DEFAULT_LIMIT, find_related
from .selection import current_score
from .trajectory import DEFAULT_MONTHS_AHEAD, predict

logger = logging.getLogger(__name__)


def _json_number(value: float | None) -> float | str | None:
    # JSON has no inf/nan; keep them readable instead of emitting invalid JSON
    if value is None or math.isfinite(value):
        return value
    return str(value)


def _growth_entry(growth: GrowthResult) -> Dict[str, Any]:
    return {
        "rate": _json_number(growth.rate),
        "category": growth.category,
        "absoluteChange": _json_number(growth.absolute_change),
        "current": growth.current,
        "previous": growth.previous,
    }


def build_report(
    trends: Sequence[Trend],
    period_length: int = DEFAULT_PERIOD,
    months_ahead: int = DEFAULT_MONTHS_AHEAD,
    related_limit: int = DEFAULT_LIMIT,
) -> Dict[str, Any]:
    """Return a JSON-serialisable report for *trends*."""
    start_time = time.time()
    logger.info("Building report for %d trends", len(trends))

    buckets = categorize(trends)
    entries: List[Dict[str, Any]] = []
    for trend in trends:
        entries.append(
            {
                "id": trend.id,
                "name": trend.name,
                "currentScore": current_score(trend),
                "growth": _growth_entry(compute_growth(trend, period_length)),
                "forecast": [
                    sample.model_dump(by_alias=True) for sample in predict(trend, months_ahead)
                ],
                "related": [related.id for related in find_related(trend, trends, related_limit)],
            },
        )

    return {
        "timestamp": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        "overview": {
            "total_trends": len(trends),
            "bucket_sizes": buckets.sizes(),
        },
        "buckets": {
            "hot": [t.id for t in buckets.hot],
            "popular": [t.id for t in buckets.popular],
            "growing": [t.id for t in buckets.growing],
            "declining": [t.id for t in buckets.declining],
        },
        "trends": entries,
        "processing_time": round(time.time() - start_time, 3),
    }


def save_report(report: Dict[str, Any], path: Path) -> Path:
    """Write *report* as indented JSON and return the path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(report, f, indent=2)
    logger.info("Report saved to %s", path)
    return path
