import pytest

from typeahead.core.fuzzy import (
    EXACT_MATCH,
    NO_MATCH,
    SUBSEQUENCE_CEILING,
    WORD_SEPARATORS,
    approximate_substring_distance,
    field_score,
)


def test_identical_text_scores_best() -> None:
    assert field_score("apple", "  Apple ") == EXACT_MATCH


def test_empty_inputs_never_match() -> None:
    assert field_score("", "apple") == NO_MATCH
    assert field_score("apple", None) == NO_MATCH
    assert field_score("apple", "   ") == NO_MATCH


def test_prefix_beats_inner_match() -> None:
    assert field_score("ap", "apple") < field_score("pl", "apple")


def test_in_order_matches_stay_below_typo_band() -> None:
    assert field_score("ae", "a" + "x" * 40 + "e") < SUBSEQUENCE_CEILING
    assert field_score("le", "apple") < SUBSEQUENCE_CEILING


def test_gap_size_degrades_score_monotonically() -> None:
    scores = [field_score("ab", "a" + "x" * gap + "b") for gap in range(6)]
    assert scores == sorted(scores)
    assert len(set(scores)) == len(scores)


def test_word_separator_rewards_word_start() -> None:
    with_words = field_score("ap", "green apple", WORD_SEPARATORS)
    without_words = field_score("ap", "green apple")
    assert with_words < without_words


def test_typo_lands_in_typo_band() -> None:
    assert field_score("bananna", "banana") == pytest.approx(0.3 + 0.7 / 7)
    assert field_score("appel", "apple") == pytest.approx(0.3 + 0.7 / 5)


def test_unrelated_text_scores_worst() -> None:
    assert field_score("zzzzzqqqqq", "apple") == NO_MATCH


class TestApproximateSubstringDistance:
    """Tests for the semi-global edit distance."""

    def test_exact_substring_is_free(self):
        assert approximate_substring_distance("pp", "apple") == 0

    def test_single_deletion(self):
        assert approximate_substring_distance("appel", "apple") == 1

    def test_never_exceeds_query_length(self):
        assert approximate_substring_distance("zzz", "apple") == 3
        assert approximate_substring_distance("abc", "") == 3

    def test_query_longer_than_target(self):
        assert approximate_substring_distance("bananna", "banana") == 1

    def test_best_window_inside_longer_text(self):
        assert approximate_substring_distance("appel", "pineapple") == 1
        assert approximate_substring_distance("cherri", "black cherry pie") == 1
