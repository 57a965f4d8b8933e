"""Rank trends by textual similarity to a target trend.

Scoring (all comparisons lower-cased):

* ``+3`` when either description is a substring of the other.
* ``+1`` for each word of the target description longer than three
  characters that occurs anywhere in the candidate description.
* ``+2`` for each target key item that contains, or is contained by, at
  least one candidate key item.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .models import Trend

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 3

DESCRIPTION_BONUS = 3
WORD_BONUS = 1
KEY_ITEM_BONUS = 2
MIN_WORD_LENGTH = 4


def _normalized_items(items: Sequence[str]) -> List[str]:
    return [item.lower() for item in items if item.strip()]


def similarity_score(target: Trend, candidate: Trend) -> int:
    """Return the integer relatedness score of *candidate* to *target*.

    Blank descriptions and blank key items never earn a bonus.
    """
    target_desc = target.description.lower()
    candidate_desc = candidate.description.lower()

    score = 0
    if target_desc.strip() and candidate_desc.strip():
        if target_desc in candidate_desc or candidate_desc in target_desc:
            score += DESCRIPTION_BONUS

    for word in target_desc.split():
        if len(word) >= MIN_WORD_LENGTH and word in candidate_desc:
            score += WORD_BONUS

    candidate_items = _normalized_items(candidate.key_items)
    for item in _normalized_items(target.key_items):
        if any(item in other or other in item for other in candidate_items):
            score += KEY_ITEM_BONUS

    return score


def find_related(
    target: Optional[Trend],
    all_trends: Optional[Sequence[Trend]],
    limit: int = DEFAULT_LIMIT,
) -> List[Trend]:
    """Return up to *limit* trends most similar to *target*, best first.

    Ties keep their order from *all_trends*. Zero-score trends are still
    returned when there are not enough positive matches.
    """
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    if target is None or not all_trends or len(all_trends) <= 1:
        return []

    scored = [
        (similarity_score(target, trend), trend)
        for trend in all_trends
        if trend.id != target.id
    ]
    # sorted() is stable, so equal scores keep input order
    ranked = sorted(scored, key=lambda pair: pair[0], reverse=True)

    logger.debug("Related to %s: %s", target.id, [(t.id, s) for s, t in ranked[:limit]])
    return [trend for _, trend in ranked[:limit]]
