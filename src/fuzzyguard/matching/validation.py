# src/fuzzyguard/matching/validation.py
"""
validation.py

Does: Input guards shared by every matcher entry point.
Returns: Nothing on success; raises InvalidInputError otherwise.
"""

from __future__ import annotations

import math
import numbers
from typing import Any

__all__ = [
    "MAX_PERCENTAGE",
    "DEFAULT_MATCHING_PERCENTAGE",
    "InvalidInputError",
    "validate_input",
    "validate_threshold",
]

__docformat__ = "google"

MAX_PERCENTAGE = 100.0
DEFAULT_MATCHING_PERCENTAGE = 80.0

_NO_THRESHOLD: Any = object()


class InvalidInputError(ValueError):
    """Raise when a matcher receives a missing/empty value or a threshold above 100."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def validate_threshold(threshold: float) -> None:
    """Does: Accept any real number up to 100; reject non-numbers, bools and NaN."""
    if isinstance(threshold, bool) or not isinstance(threshold, numbers.Real):
        raise InvalidInputError(
            f"Matching percentage must be a number, got {type(threshold).__name__}"
        )
    if math.isnan(threshold):
        raise InvalidInputError("Matching percentage cannot be NaN")
    if threshold > MAX_PERCENTAGE:
        raise InvalidInputError("Matching percentage cannot exceed 100")


def validate_input(value: Any, other: Any, threshold: Any = _NO_THRESHOLD) -> None:
    """
    Does: Reject null pairs first, then a bad threshold (when one is given), then empty values.
    Non-str values are rejected alongside nulls.
    """
    if value is None or other is None:
        raise InvalidInputError("Cannot match null values")
    if not isinstance(value, str) or not isinstance(other, str):
        raise InvalidInputError(
            f"Cannot match non-text values ({type(value).__name__}, {type(other).__name__})"
        )
    if threshold is not _NO_THRESHOLD:
        validate_threshold(threshold)
    if not value or not other:
        raise InvalidInputError("Cannot match empty values")
