# tests/test_matching_fuzzy.py
from __future__ import annotations

import logging

import pytest

from fuzzyguard.matching import (
    DEFAULT_MATCHING_PERCENTAGE,
    InvalidInputError,
    char_match_score,
    char_sequence_match_score,
    length_match_score,
    match_scores,
    matches,
    matches_against,
)
from fuzzyguard.types import MatchScores

SCORERS = [char_sequence_match_score, char_match_score, length_match_score]


# ─────────────────────────────────────────────────────────────────────────────
# Identity
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("text", ["a", "hello", "rose gold", "ÄÖü-42"])
def test_identical_values_score_100_everywhere(text):
    assert match_scores(text, text) == MatchScores(100.0, 100.0, 100.0)
    assert matches(text, text, 100)
    assert matches(text, text)


# ─────────────────────────────────────────────────────────────────────────────
# length_match_score
# ─────────────────────────────────────────────────────────────────────────────

def test_length_score_example():
    assert length_match_score("abc", "ab") == pytest.approx(66.6667, abs=1e-3)


def test_length_score_is_symmetric():
    assert length_match_score("abcdef", "ab") == length_match_score("ab", "abcdef")


def test_length_score_equal_lengths_ignores_content():
    assert length_match_score("abc", "xyz") == 100.0


# ─────────────────────────────────────────────────────────────────────────────
# char_match_score
# ─────────────────────────────────────────────────────────────────────────────

def test_char_score_example():
    assert char_match_score("abc", "xbc") == pytest.approx(66.6667, abs=1e-3)


def test_char_score_is_containment_not_position():
    # every char of the reversed value exists somewhere in the original
    assert char_match_score("abc", "cba") == 100.0


def test_char_score_is_symmetric_for_example_pairs():
    assert char_match_score("abc", "xbc") == char_match_score("xbc", "abc")
    assert char_match_score("hello", "world") == char_match_score("world", "hello")


def test_char_score_only_reads_shortest_prefix():
    # "q" sits past the shorter length and is never checked
    assert char_match_score("ab", "abq") == 100.0


# ─────────────────────────────────────────────────────────────────────────────
# char_sequence_match_score
# ─────────────────────────────────────────────────────────────────────────────

def test_sequence_score_broken_run_costs_one_char():
    # "ac" is not a substring of "abc" → one deduction at index 2
    assert char_sequence_match_score("abc", "acb") == pytest.approx(66.6667, abs=1e-3)


def test_sequence_score_is_not_symmetric():
    assert char_sequence_match_score("xabc", "abc") == 100.0
    assert char_sequence_match_score("abc", "xabc") == pytest.approx(75.0)


def test_sequence_score_last_char_is_never_checked():
    # The run is checked before appending, so the final 'x' is never tested.
    # Kept as-is for compatibility with existing scores.
    assert char_sequence_match_score("ab", "ax") == 100.0
    assert char_match_score("ab", "ax") == pytest.approx(50.0)


def test_sequence_score_resets_run_after_break():
    # index 1: "x" missing → -20, run reset; index 2 restarts from "".
    assert char_sequence_match_score("hello", "hxllo") == pytest.approx(80.0)


# ─────────────────────────────────────────────────────────────────────────────
# matches / matches_against
# ─────────────────────────────────────────────────────────────────────────────

def test_matches_examples():
    assert matches("hello", "hello", 80) is True
    assert matches("hello", "world", 80) is False


def test_matches_default_threshold_is_80():
    assert DEFAULT_MATCHING_PERCENTAGE == 80.0
    # 4/5 chars kept everywhere → exactly 80 on char and sequence scores
    assert matches("hello", "hxllo") is True
    assert matches("hello", "hxllo", 80.01) is False


def test_matches_is_conjunctive_not_averaged():
    scores = match_scores("abcdefghij", "abcdefgh")
    assert scores.sequence == 100.0 and scores.chars == 100.0
    assert scores.length == pytest.approx(80.0)
    assert matches("abcdefghij", "abcdefgh", 80.5) is False
    assert matches("abcdefghij", "abcdefgh", 79.5) is True


def test_match_scores_passes_rule():
    assert MatchScores(90.0, 90.0, 90.0).passes(90) is True
    assert MatchScores(90.0, 89.9, 100.0).passes(90) is False


def test_matches_negative_threshold_accepts_anything():
    assert matches("abc", "xyz", -1) is True


def test_matches_against_filters_candidates():
    predicate = matches_against("colour")
    candidates = ["colour", "color", "clr", "flavour"]
    assert [c for c in candidates if predicate(c)] == ["colour", "color"]


def test_matches_against_custom_threshold():
    assert list(filter(matches_against("color", 100), ["color", "colour"])) == ["color"]


def test_matches_debug_logs_breakdown(caplog):
    with caplog.at_level(logging.DEBUG, logger="fuzzyguard.matching.fuzzy_core"):
        matches("hello", "world", debug=True)
    assert "[MATCH]" in caplog.text
    assert "'hello' vs 'world'" in caplog.text


# ─────────────────────────────────────────────────────────────────────────────
# Validation
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("scorer", SCORERS)
@pytest.mark.parametrize("pair", [("", "abc"), ("abc", ""), (None, "abc"), ("abc", None)])
def test_scores_reject_null_and_empty(scorer, pair):
    with pytest.raises(InvalidInputError):
        scorer(*pair)


def test_matches_rejects_threshold_above_100():
    with pytest.raises(InvalidInputError, match="cannot exceed 100"):
        matches("hello", "hello", 100.5)


def test_matches_rejects_empty_and_null():
    with pytest.raises(InvalidInputError, match="empty"):
        matches("", "hello")
    with pytest.raises(InvalidInputError, match="null"):
        matches(None, "hello")


def test_null_is_reported_before_threshold_and_threshold_before_empty():
    with pytest.raises(InvalidInputError, match="null"):
        matches(None, "", 200)
    with pytest.raises(InvalidInputError, match="cannot exceed 100"):
        matches("", "", 200)


def test_matches_rejects_non_text():
    with pytest.raises(InvalidInputError):
        matches(123, "123")


def test_invalid_input_error_carries_message_and_is_value_error():
    with pytest.raises(ValueError) as exc_info:
        matches("", "x")
    assert exc_info.value.message == "Cannot match empty values"


def test_matches_against_validates_eagerly():
    with pytest.raises(InvalidInputError):
        matches_against("")
    with pytest.raises(InvalidInputError):
        matches_against(None)
    with pytest.raises(InvalidInputError):
        matches_against("abc", 101)


def test_matches_against_validates_candidates_on_call():
    predicate = matches_against("abc")
    with pytest.raises(InvalidInputError):
        predicate("")


@pytest.mark.parametrize("threshold", ["80", None, True, float("nan")])
def test_matches_rejects_non_numeric_and_nan_thresholds(threshold):
    with pytest.raises(InvalidInputError):
        matches("hello", "hello", threshold)
    with pytest.raises(InvalidInputError):
        matches_against("hello", threshold)
