"""Utilities for loading trend records from JSON or CSV files into :class:`Trend` objects."""
from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import Any, List

import pandas as pd

from .models import Trend

logger = logging.getLogger(__name__)

CSV_COLUMNS = ("id", "name", "description", "color", "key_items", "month", "score")
KEY_ITEM_SEPARATOR = "|"


def _check_records(trends: List[Trend], source: Path) -> List[Trend]:
    seen: set[str] = set()
    for trend in trends:
        if trend.id in seen:
            raise ValueError(f"Duplicate trend id {trend.id!r} in {source}")
        seen.add(trend.id)
        for sample in trend.popularity:
            if not math.isfinite(sample.score) or not 0 <= sample.score <= 100:
                raise ValueError(
                    f"Trend {trend.id!r} has score {sample.score} for {sample.month}; expected 0-100",
                )
    return trends


def _load_json(path: Path) -> List[Trend]:
    payload: Any = json.loads(path.read_text(encoding="utf-8"))
    records = payload.get("trends", []) if isinstance(payload, dict) else payload
    if not isinstance(records, list):
        raise ValueError(f"Expected a list of trends in {path}")
    return [Trend.model_validate(record) for record in records]


def _cell(value: Any, default: str = "") -> str:
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return default
    return str(value)


def _load_csv(path: Path) -> List[Trend]:
    df = pd.read_csv(path, dtype={"id": str, "month": str})
    missing = [col for col in CSV_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(f"{path} is missing columns: {', '.join(missing)}")

    trends: List[Trend] = []
    # sort=False keeps first-seen id order; rows keep file order inside a group
    for trend_id, group in df.groupby("id", sort=False):
        first = group.iloc[0]
        key_items_raw = _cell(first["key_items"])
        ai_analysis = _cell(first.get("ai_analysis"), default="") or None
        trends.append(
            Trend(
                id=str(trend_id),
                name=_cell(first["name"]),
                description=_cell(first["description"]),
                color=_cell(first["color"]),
                key_items=[item.strip() for item in key_items_raw.split(KEY_ITEM_SEPARATOR) if item.strip()],
                popularity=[
                    {"month": _cell(row["month"]), "score": float(row["score"])}
                    for _, row in group.iterrows()
                ],
                ai_analysis=ai_analysis,
            ),
        )
    return trends


def load_trends(path: Path) -> List[Trend]:
    """Read and validate the trends stored at *path*.

    Parameters
    ----------
    path:
        ``.json`` file shaped like ``{"trends": [...]}`` (or a bare list), or a
        long-format ``.csv`` with one row per popularity sample.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(path)

    suffix = path.suffix.lower()
    if suffix == ".json":
        trends = _load_json(path)
    elif suffix == ".csv":
        trends = _load_csv(path)
    else:
        raise ValueError(f"Unsupported trends file type: {path.suffix or '<none>'}")

    logger.info("Loaded %d trends from %s", len(trends), path)
    return _check_records(trends, path)
