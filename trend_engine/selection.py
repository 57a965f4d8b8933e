"""Search, tab filtering, top-N selection and direction helpers over a trend collection."""
from __future__ import annotations

from typing import Iterable, List, Literal, Optional, Sequence, Tuple

from .models import Trend

TABS = ("all", "popular", "growing", "declining")
POPULAR_TAB_SCORE = 80
MAX_SELECTED = 5

Direction = Literal["up", "down", "stable"]


def current_score(trend: Trend) -> float:
    return trend.popularity[-1].score


def previous_score(trend: Trend) -> Optional[float]:
    """Second-to-last score, or ``None`` for a single-sample trend."""
    if len(trend.popularity) < 2:
        return None
    return trend.popularity[-2].score


def top_trends(trends: Iterable[Trend], n: int = 3) -> List[Trend]:
    """Return the *n* trends with the highest current score."""
    return sorted(trends, key=current_score, reverse=True)[:n]


def _matches_query(trend: Trend, query: str) -> bool:
    needle = query.lower()
    return needle in trend.name.lower() or needle in trend.description.lower()


def _matches_tab(trend: Trend, tab: str) -> bool:
    if tab == "all":
        return True
    if tab == "popular":
        return current_score(trend) >= POPULAR_TAB_SCORE

    previous = previous_score(trend)
    if previous is None:
        return False
    if tab == "growing":
        return current_score(trend) > previous
    return current_score(trend) < previous


def filter_trends(trends: Iterable[Trend], query: str = "", tab: str = "all") -> List[Trend]:
    """Keep trends whose name or description contains *query* and that match *tab*.

    Parameters
    ----------
    query:
        Case-insensitive search text; an empty query matches everything.
    tab:
        One of ``all``, ``popular``, ``growing`` or ``declining``.
    """
    if tab not in TABS:
        raise ValueError(f"Unknown tab {tab!r}; expected one of {', '.join(TABS)}")
    return [trend for trend in trends if _matches_query(trend, query) and _matches_tab(trend, tab)]


def trend_direction(trend: Trend) -> Tuple[Direction, float]:
    """Return the month-over-month direction and absolute score difference.

    A single-sample trend is ``("stable", 0.0)``.
    """
    previous = previous_score(trend)
    if previous is None:
        return "stable", 0.0
    current = current_score(trend)
    if current > previous:
        direction: Direction = "up"
    elif current < previous:
        direction = "down"
    else:
        direction = "stable"
    return direction, abs(current - previous)


def toggle_selection(selected: Sequence[str], trend_id: str, max_selected: int = MAX_SELECTED) -> List[str]:
    """Add *trend_id* to *selected*, or remove it if already present.

    When the selection is full the oldest id is dropped. Returns a new list.
    """
    if max_selected < 1:
        raise ValueError(f"max_selected must be a positive integer, got {max_selected}")
    if trend_id in selected:
        return [existing for existing in selected if existing != trend_id]
    kept = list(selected)
    if len(kept) >= max_selected:
        kept = kept[len(kept) - max_selected + 1:]
    return [*kept, trend_id]
