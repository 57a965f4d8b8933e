"""TrendLens analytics engine.

Pure functions that turn validated :class:`Trend` records into growth
categories, popularity buckets, related-trend rankings and linear forecasts.
"""

from .categorizer import categorize
from .growth import compute_growth
from .models import GrowthResult, PopularitySample, PredictedSample, Trend, TrendBuckets
from .related import find_related
from .trajectory import predict

__all__ = [
    "GrowthResult",
    "PopularitySample",
    "PredictedSample",
    "Trend",
    "TrendBuckets",
    "categorize",
    "compute_growth",
    "find_related",
    "predict",
]

__version__ = "0.1.0"
