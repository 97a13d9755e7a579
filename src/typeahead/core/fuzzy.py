"""
Field-level fuzzy scoring.

Scores are costs in ``[0, 1]``; lower is better.

- ``0.0``: the field equals the query after normalization.
- ``[0, 0.3)``: every query character appears in the field, in order.
  Contiguous runs starting at the beginning of the field (or of a word, when
  word separators are given) score best; the cost grows strictly with the
  total size of the gaps between matched characters.
- ``[0.3, 1.0]``: no in-order match. The cost grows with the edit distance
  between the query and the best matching substring of the field, so a
  query with a typo still lands near the bottom of this band. Distances
  come from rapidfuzz.
- ``1.0``: nothing in common.
"""

from __future__ import annotations

from rapidfuzz import fuzz
from rapidfuzz.distance import Levenshtein

from typeahead.utils import normalize_text

EXACT_MATCH = 0.0
NO_MATCH = 1.0

# Upper bound of the in-order band; typo matches start here.
SUBSEQUENCE_CEILING = 0.3

_MATCH_BASE = 0.02
_GAP_WEIGHT = 0.16
_COVERAGE_WEIGHT = 0.04
_WORD_START_PENALTY = 0.03
_INNER_START_PENALTY = 0.06

WORD_SEPARATORS = " "


def field_score(query: str, text: str | None, separators: str = "") -> float:
    """
    Score a single field against an already normalized query.

    Args:
        query: Normalized query (see ``normalize_text``)
        text: Raw field value; None or empty never matches
        separators: Characters after which a match counts as a word start

    Returns:
        Cost in ``[0, 1]``
    """
    target = normalize_text(text)
    if not query or not target:
        return NO_MATCH
    if target == query:
        return EXACT_MATCH

    in_order = _subsequence_cost(query, target, separators)
    if in_order is not None:
        return in_order

    errors = approximate_substring_distance(query, target)
    cost = SUBSEQUENCE_CEILING + (NO_MATCH - SUBSEQUENCE_CEILING) * errors / len(query)
    return min(NO_MATCH, cost)


def _subsequence_cost(query: str, target: str, separators: str) -> float | None:
    best: float | None = None
    start = target.find(query[0])
    while start >= 0:
        end = _greedy_end(query, target, start)
        if end is None:
            # No later start can complete the match either.
            break
        cost = _span_cost(query, target, start, end, separators)
        if best is None or cost < best:
            best = cost
        start = target.find(query[0], start + 1)
    return best


def _greedy_end(query: str, target: str, start: int) -> int | None:
    position = start
    for char in query[1:]:
        position = target.find(char, position + 1)
        if position < 0:
            return None
    return position


def _span_cost(query: str, target: str, start: int, end: int, separators: str) -> float:
    length = len(query)
    gaps = (end - start + 1) - length
    gap_ratio = gaps / (gaps + length)
    coverage_miss = 1.0 - length / len(target)

    if start == 0:
        lead = 0.0
    elif target[start - 1] in separators:
        lead = _WORD_START_PENALTY
    else:
        lead = _INNER_START_PENALTY

    return _MATCH_BASE + _GAP_WEIGHT * gap_ratio + _COVERAGE_WEIGHT * coverage_miss + lead


def approximate_substring_distance(query: str, target: str) -> int:
    """
    Smallest edit distance between ``query`` and any substring of ``target``.

    The match may start and end anywhere in the target for free. The empty
    substring is allowed, so the result never exceeds ``len(query)``.

    The window found by ``fuzz.partial_ratio_alignment`` gives a first bound;
    windows of neighboring lengths are then checked with Levenshtein distance.
    A window whose length differs from the query by ``d`` costs at least
    ``d``, so the search stops once that difference reaches the best distance.
    """
    size = len(query)
    best = size
    if not query or not target:
        return best

    if size <= len(target):
        alignment = fuzz.partial_ratio_alignment(query, target)
        if alignment is not None:
            window = target[alignment.dest_start : alignment.dest_end]
            best = min(best, Levenshtein.distance(query, window))

    delta = 0
    while delta < best:
        for length in {size - delta, size + delta}:
            if length <= 0 or length > len(target):
                continue
            for start in range(len(target) - length + 1):
                window = target[start : start + length]
                best = min(best, Levenshtein.distance(query, window, score_cutoff=best))
                if best == 0:
                    return 0
        delta += 1
    return best
