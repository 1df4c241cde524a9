# src/fuzzyguard/matching/__init__.py
"""
matching.

Does: Facade exposing the pairwise fuzzy matcher, its input validation,
and named threshold profiles.

Returns: Public API for the three percentage scores, the conjunctive verdict,
the curried predicate, and profile lookups.
Used by: Anything comparing two pieces of text with a tolerance.
"""

from __future__ import annotations

# ── Core ─────────────────────────────────────────────────────────────────────
from .fuzzy_core import (
    char_match_score,
    char_sequence_match_score,
    length_match_score,
    match_scores,
    matches,
    matches_against,
)

# ── Profiles ─────────────────────────────────────────────────────────────────
from .profiles import (
    UnknownProfileError,
    load_threshold_profiles,
    matches_profile,
    threshold_for,
)

# ── Validation ───────────────────────────────────────────────────────────────
from .validation import (
    DEFAULT_MATCHING_PERCENTAGE,
    MAX_PERCENTAGE,
    InvalidInputError,
)

__all__ = [
    # Core
    "char_sequence_match_score",
    "char_match_score",
    "length_match_score",
    "match_scores",
    "matches",
    "matches_against",
    # Profiles
    "load_threshold_profiles",
    "threshold_for",
    "matches_profile",
    "UnknownProfileError",
    # Validation
    "MAX_PERCENTAGE",
    "DEFAULT_MATCHING_PERCENTAGE",
    "InvalidInputError",
]

__docformat__ = "google"
