"""Pydantic data models shared by every engine component."""
from __future__ import annotations

import re
from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

MONTHS: Tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# Four or more year digits so forecasts past 9999 still parse
_MONTH_LABEL_RE = re.compile(r"([A-Z][a-z]{2}) ([0-9]{4,})")

GrowthCategory = Literal["rapid-growth", "growing", "stable", "declining", "rapid-decline"]


def parse_month_label(label: str) -> Tuple[int, int]:
    """Return ``(month_index, year)`` for a label such as ``"Mar 2024"``.

    ``month_index`` is 0-based into :data:`MONTHS`. Raises :class:`ValueError`
    for anything that is not ``"<Mon> <YYYY>"``.
    """
    match = _MONTH_LABEL_RE.fullmatch(label)
    if match is None or match.group(1) not in MONTHS:
        raise ValueError(f"Invalid month label {label!r}, expected e.g. 'Mar 2024'")
    return MONTHS.index(match.group(1)), int(match.group(2))


def format_month_label(month_index: int, year: int) -> str:
    return f"{MONTHS[month_index]} {year:04d}"


class PopularitySample(BaseModel):
    """One (month, score) observation in a trend's history."""

    month: str = Field(..., description="Calendar label, e.g. 'Mar 2024'")
    score: float = Field(..., description="Composite popularity index 0-100")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("month")
    @classmethod
    def _check_month(cls, value: str) -> str:
        parse_month_label(value)
        return value


class PredictedSample(PopularitySample):
    """Forecast point produced by the trajectory predictor."""

    is_prediction: Literal[True] = Field(True, alias="isPrediction")


class Trend(BaseModel):
    """A named trend with its chronological popularity history."""

    id: str = Field(..., min_length=1, description="Unique, immutable identifier")
    name: str
    description: str = ""
    color: str = Field("", description="Swatch identifier used by the UI")
    key_items: List[str] = Field(default_factory=list, alias="keyItems")
    popularity: List[PopularitySample] = Field(..., min_length=1)
    ai_analysis: Optional[str] = Field(None, alias="aiAnalysis")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class GrowthResult(BaseModel):
    """Period-over-period growth of a single trend."""

    rate: float = 0.0
    category: GrowthCategory = "stable"
    absolute_change: Optional[float] = Field(None, alias="absoluteChange")
    current: Optional[float] = None
    previous: Optional[float] = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class TrendBuckets(BaseModel):
    """Partition of a trend collection into popularity/momentum classes."""

    hot: List[Trend] = Field(default_factory=list)
    popular: List[Trend] = Field(default_factory=list)
    growing: List[Trend] = Field(default_factory=list)
    declining: List[Trend] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def sizes(self) -> dict[str, int]:
        return {
            "hot": len(self.hot),
            "popular": len(self.popular),
            "growing": len(self.growing),
            "declining": len(self.declining),
        }
