# src/fuzzyguard/matching/fuzzy_core.py
from __future__ import annotations

"""
fuzzy_core.py

Does: Pairwise fuzzy matcher built from three percentages: char-sequence match,
      char match and length match, combined with AND semantics against a threshold.
Returns: Raw scores, a MatchScores breakdown, a boolean verdict and a curried predicate.
Used by: Callers filtering or comparing free text (see matches_against for pipelines).
"""

import logging
from typing import Callable

from fuzzyguard.types import MatchScores

from .validation import (
    DEFAULT_MATCHING_PERCENTAGE,
    MAX_PERCENTAGE,
    validate_input,
)

__all__ = [
    "char_sequence_match_score",
    "char_match_score",
    "length_match_score",
    "match_scores",
    "matches",
    "matches_against",
]

__docformat__ = "google"

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────
def _divider(value: str, other: str) -> float:
    """Percentage worth of one character of the longer value."""
    return MAX_PERCENTAGE / max(len(value), len(other))


# ─────────────────────────────────────────────────────────────────────────────
# 1) SCORES
# ─────────────────────────────────────────────────────────────────────────────

def char_sequence_match_score(value: str, other: str) -> float:
    """
    Does: Grow a run of chars taken from `other` and check it is still a substring
          of `value`; every broken run costs one char's worth of percentage and
          restarts the run.
    Returns: Float percentage (100 = unbroken).

    The run is checked before the char at the current index is appended, so the
    last char read from `other` is never itself checked: ("ab", "ax") scores 100.
    """
    validate_input(value, other)
    divider = _divider(value, other)
    score = MAX_PERCENTAGE
    candidate = ""
    for index in range(min(len(value), len(other))):
        if candidate not in value:
            score -= divider
            candidate = ""
        else:
            candidate += other[index]
    return score


def char_match_score(value: str, other: str) -> float:
    """
    Does: Penalize each char of `other` (up to the shorter length) found nowhere in `value`.
    Returns: Float percentage.
    """
    validate_input(value, other)
    divider = _divider(value, other)
    score = MAX_PERCENTAGE
    for index in range(min(len(value), len(other))):
        if other[index] not in value:
            score -= divider
    return score


def length_match_score(value: str, other: str) -> float:
    """
    Does: Penalize the length gap proportionally to the longer value.
    Returns: Float percentage; 100 for equal lengths.
    """
    validate_input(value, other)
    return MAX_PERCENTAGE - abs(len(value) - len(other)) * _divider(value, other)


def match_scores(value: str, other: str) -> MatchScores:
    """Does: Compute all three percentages for the pair."""
    return MatchScores(
        sequence=char_sequence_match_score(value, other),
        chars=char_match_score(value, other),
        length=length_match_score(value, other),
    )


# ─────────────────────────────────────────────────────────────────────────────
# 2) VERDICT
# ─────────────────────────────────────────────────────────────────────────────

def matches(
    value: str,
    other: str,
    threshold: float = DEFAULT_MATCHING_PERCENTAGE,
    *,
    debug: bool = False,
) -> bool:
    """
    Does: Validate, score, and require every score to reach `threshold`.
    Returns: True iff sequence, char and length scores are all >= threshold.

    Raises:
        InvalidInputError: on None/empty values or a threshold above 100.
    """
    validate_input(value, other, threshold)
    scores = match_scores(value, other)
    verdict = scores.passes(threshold)
    if debug:
        log.debug(
            "[MATCH] %r vs %r → seq=%.2f chars=%.2f len=%.2f (threshold=%.2f) → %s",
            value, other, scores.sequence, scores.chars, scores.length, threshold, verdict,
        )
    return verdict


def matches_against(
    other: str,
    threshold: float = DEFAULT_MATCHING_PERCENTAGE,
) -> Callable[[str], bool]:
    """
    Does: Curry `matches` on `other` for use with filter()/comprehensions.
    Returns: Predicate value -> matches(value, other, threshold).

    `other` and `threshold` are validated right away; each candidate is
    validated when the predicate runs.
    """
    validate_input(other, other, threshold)

    def _predicate(value: str) -> bool:
        return matches(value, other, threshold)

    return _predicate
