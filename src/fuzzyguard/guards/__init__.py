# src/fuzzyguard/guards/__init__.py
"""
guards.

Does: Facade for the exception-guard adapters (value / fallback / handler).
Used by: Callers that prefer a fallback value over try/except at every call site.
"""

from __future__ import annotations

from .mapping_guards import (
    as_string_or_default,
    as_string_or_null,
    guarded,
    or_default,
    or_handle,
    or_null,
)

__all__ = [
    "or_null",
    "or_default",
    "or_handle",
    "as_string_or_null",
    "as_string_or_default",
    "guarded",
]

__docformat__ = "google"
