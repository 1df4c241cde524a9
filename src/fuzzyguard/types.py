# src/fuzzyguard/types.py
from __future__ import annotations

from typing import Any, NamedTuple, Protocol

"""
types.py.

Does: Define the score record returned by the matcher and the structural
Protocols used for type hints across guards.
"""


class MatchScores(NamedTuple):
    """Percentages for one (value, other) pair, unclamped."""

    sequence: float
    chars: float
    length: float

    def passes(self, threshold: float) -> bool:
        """Does: True iff every score clears `threshold` (AND, not averaged)."""
        return (
            self.sequence >= threshold
            and self.chars >= threshold
            and self.length >= threshold
        )


class ErrorHandler(Protocol):
    def __call__(self, error: Exception) -> Any: ...


__all__ = ["MatchScores", "ErrorHandler"]

__docformat__ = "google"
