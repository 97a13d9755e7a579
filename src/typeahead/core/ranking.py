"""
Fuzzy ranking engine.

``rank`` is a pure function from a query and a candidate pool to the ordered,
thresholded, capped list of candidates shown in the box.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol, runtime_checkable

from typeahead.domain.types import Item
from typeahead.logger import get_logger
from typeahead.utils import normalize_text

from .fuzzy import NO_MATCH, WORD_SEPARATORS, field_score

logger = get_logger("ranking")

# Drops unrelated strings while letting one or two typos through.
DEFAULT_THRESHOLD = 0.6


@runtime_checkable
class RankFn(Protocol):
    """Signature of a ranking function usable by the state machine."""

    def __call__(
        self,
        query: str,
        candidates: Sequence[Item],
        limit: int,
        threshold: float = DEFAULT_THRESHOLD,
    ) -> Sequence[Item]: ...


def score_item(query: str, item: Item) -> float:
    """
    Aggregate score of an item for a raw query: the best of its field scores.

    The id is matched without word boundaries; the primary text, the
    secondary text and every search token are matched with a space as a
    word boundary.
    """
    return _score_normalized(normalize_text(query), item)


def _score_normalized(query: str, item: Item) -> float:
    best = field_score(query, item.id)
    for text in _word_fields(item):
        if best == 0.0:
            break
        best = min(best, field_score(query, text, WORD_SEPARATORS))
    return best


def _word_fields(item: Item) -> Iterable[str]:
    yield item.primary_text
    if item.secondary_text:
        yield item.secondary_text
    yield from item.search_tokens


def rank_with_scores(
    query: str,
    candidates: Sequence[Item],
    limit: int,
    threshold: float = DEFAULT_THRESHOLD,
) -> list[tuple[Item, float]]:
    """
    Rank candidates and keep their scores.

    Args:
        query: Raw query text
        candidates: Candidate pool, in its original order
        limit: Maximum number of results
        threshold: Candidates scoring above this are dropped

    Returns:
        ``(item, score)`` pairs, best first; ties keep pool order
    """
    normalized = normalize_text(query)
    if not normalized or limit <= 0 or not candidates:
        return []

    scored: list[tuple[Item, float]] = []
    for item in candidates:
        score = _score_normalized(normalized, item)
        if score < NO_MATCH and score <= threshold:
            scored.append((item, score))

    # list.sort is stable, so equal scores keep pool order.
    scored.sort(key=lambda pair: pair[1])
    logger.debug(f"rank query={normalized!r} pool={len(candidates)} matches={len(scored)} limit={limit}")
    return scored[:limit]


def rank(
    query: str,
    candidates: Sequence[Item],
    limit: int,
    threshold: float = DEFAULT_THRESHOLD,
) -> list[Item]:
    """Ordered, thresholded, capped candidates for ``query``."""
    return [item for item, _ in rank_with_scores(query, candidates, limit, threshold)]
