"""Linear-regression forecast of a trend's popularity.

The sample position ``i`` (0-based, storage order) is the independent
variable and the score the dependent one; the least-squares line is then
extrapolated month by month past the last observed label.
"""
from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .models import PredictedSample, Trend, format_month_label, parse_month_label

logger = logging.getLogger(__name__)

DEFAULT_MONTHS_AHEAD = 3
MIN_SAMPLES = 3

SCORE_MIN = 0
SCORE_MAX = 100


def fit_trend_line(scores: Sequence[float]) -> Tuple[float, float]:
    """Return ``(slope, intercept)`` of the OLS line through ``(i, scores[i])``.

    Uses the closed-form sums. With fewer than two points the denominator is
    zero and both coefficients come back as ``nan``.
    """
    y = np.asarray(scores, dtype="float64")
    n = len(y)
    x = np.arange(n, dtype="float64")

    sum_x = x.sum()
    sum_y = y.sum()
    sum_xy = (x * y).sum()
    sum_xx = (x * x).sum()

    denominator = n * sum_xx - sum_x * sum_x
    if denominator == 0:
        return math.nan, math.nan

    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n
    return float(slope), float(intercept)


def _clamp_score(value: float) -> int:
    # Round half up, then keep inside the score range
    rounded = math.floor(value + 0.5)
    return max(SCORE_MIN, min(SCORE_MAX, rounded))


def _next_months(last_label: str, count: int) -> List[str]:
    month_index, year = parse_month_label(last_label)
    labels = []
    for _ in range(count):
        month_index = (month_index + 1) % 12
        if month_index == 0:
            year += 1
        labels.append(format_month_label(month_index, year))
    return labels


def predict(trend: Optional[Trend], months_ahead: int = DEFAULT_MONTHS_AHEAD) -> List[PredictedSample]:
    """Forecast *months_ahead* future samples for *trend*.

    Returns an empty list when fewer than three observations exist. The
    trend itself is never modified.
    """
    if months_ahead < 0:
        raise ValueError(f"months_ahead must be non-negative, got {months_ahead}")
    if trend is None or len(trend.popularity) < MIN_SAMPLES:
        return []

    data = trend.popularity
    n = len(data)
    slope, intercept = fit_trend_line([sample.score for sample in data])
    logger.debug("Trend %s fit: slope=%.4f intercept=%.4f", trend.id, slope, intercept)

    predictions = []
    for step, label in enumerate(_next_months(data[-1].month, months_ahead), start=1):
        position = n + step - 1
        predictions.append(
            PredictedSample(month=label, score=_clamp_score(intercept + slope * position)),
        )
    return predictions
