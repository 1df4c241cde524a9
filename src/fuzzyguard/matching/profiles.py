# src/fuzzyguard/matching/profiles.py
"""
profiles.py

Does: Named threshold profiles ("strict", "loose", ...) read from <data>/thresholds.json.
Returns: Validated {profile: threshold} mapping, single-threshold lookup, and a
         profile-driven matches() wrapper.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from fuzzyguard.utils import load_config

from .fuzzy_core import matches
from .validation import InvalidInputError, validate_threshold

__all__ = [
    "DEFAULT_PROFILES_FILE",
    "UnknownProfileError",
    "load_threshold_profiles",
    "threshold_for",
    "matches_profile",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

DEFAULT_PROFILES_FILE = "thresholds"


class UnknownProfileError(KeyError):
    """Raise when a profile name is absent from the thresholds file."""


def _validate_profiles(data: dict[str, Any]) -> dict[str, float]:
    out: dict[str, float] = {}
    for name, raw in data.items():
        try:
            validate_threshold(raw)
        except InvalidInputError as e:
            raise ValueError(f"profile {name!r}: {e.message} (got {raw!r})") from e
        out[str(name)] = float(raw)
    return out


def load_threshold_profiles(
    file: str | os.PathLike[str] = DEFAULT_PROFILES_FILE,
    *,
    base_dir: Path | None = None,
) -> dict[str, float]:
    """
    Does: Load and validate the profiles file.
    Returns: Mapping profile name -> threshold.

    Raises:
        ConfigParseError: when a threshold is not a number or exceeds 100.
        ConfigTypeError: when the file is not a JSON object.
    """
    return load_config(file, "validated_dict", base_dir=base_dir, validator=_validate_profiles)


def threshold_for(
    profile: str,
    *,
    file: str | os.PathLike[str] = DEFAULT_PROFILES_FILE,
    base_dir: Path | None = None,
) -> float:
    profiles = load_threshold_profiles(file, base_dir=base_dir)
    try:
        return profiles[profile]
    except KeyError as e:
        known = ", ".join(sorted(profiles)) or "<none>"
        raise UnknownProfileError(f"Unknown threshold profile {profile!r} (known: {known})") from e


def matches_profile(
    value: str,
    other: str,
    profile: str,
    *,
    file: str | os.PathLike[str] = DEFAULT_PROFILES_FILE,
    base_dir: Path | None = None,
) -> bool:
    """Does: `matches` with the threshold taken from a named profile."""
    threshold = threshold_for(profile, file=file, base_dir=base_dir)
    log.debug("profile %r → threshold %.2f", profile, threshold)
    return matches(value, other, threshold)
