"""
fuzzyguard
==========

Does: Root package for the fuzzy string matcher and the exception-guard adapters.
Returns: Re-exports the most used entry points from `matching` and `guards`.
Used by: `from fuzzyguard import matches, or_default`.
"""

from .guards import (
    as_string_or_default,
    as_string_or_null,
    guarded,
    or_default,
    or_handle,
    or_null,
)
from .matching import (
    DEFAULT_MATCHING_PERCENTAGE,
    MAX_PERCENTAGE,
    InvalidInputError,
    char_match_score,
    char_sequence_match_score,
    length_match_score,
    match_scores,
    matches,
    matches_against,
)
from .types import MatchScores

__all__: list[str] = [
    "matches",
    "matches_against",
    "match_scores",
    "char_sequence_match_score",
    "char_match_score",
    "length_match_score",
    "MatchScores",
    "InvalidInputError",
    "MAX_PERCENTAGE",
    "DEFAULT_MATCHING_PERCENTAGE",
    "or_null",
    "or_default",
    "or_handle",
    "as_string_or_null",
    "as_string_or_default",
    "guarded",
]
__docformat__ = "google"
