from typing import Callable, Sequence

import pytest

from trend_engine.models import MONTHS, Trend, format_month_label


def _months_ending(last: str, count: int) -> list[str]:
    """Return *count* consecutive month labels ending at *last*."""
    name, year_str = last.split(" ")
    index, year = MONTHS.index(name), int(year_str)
    labels = []
    for _ in range(count):
        labels.append(format_month_label(index, year))
        index -= 1
        if index < 0:
            index, year = 11, year - 1
    return labels[::-1]


@pytest.fixture
def make_trend() -> Callable[..., Trend]:
    """Factory building a :class:`Trend` from a list of scores."""

    def _make(
        trend_id: str,
        scores: Sequence[float],
        description: str = "",
        key_items: Sequence[str] = (),
        last_month: str = "Jun 2024",
        name: str | None = None,
    ) -> Trend:
        months = _months_ending(last_month, len(scores))
        return Trend(
            id=trend_id,
            name=name or trend_id.replace("-", " ").title(),
            description=description,
            color="purple",
            key_items=list(key_items),
            popularity=[{"month": m, "score": s} for m, s in zip(months, scores)],
        )

    return _make
