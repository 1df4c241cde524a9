# src/fuzzyguard/utils/load_config.py

"""Load JSON settings from a <data/> directory with caching and optional validation.

Modes:
- "raw"             -> return parsed JSON as-is
- "validated_dict"  -> return dict[str, Any] after an optional validator

Used by threshold profiles and tests needing hot reload.
"""

from __future__ import annotations

import copy
import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from types import TracebackType
from typing import Any, Literal, overload

# --- optional json5 support (only needed for allow_comments=True) ------------
try:
    import json5 as _json5
except ImportError:  # pragma: no cover - only hit when json5 missing
    _json5 = None  # type: ignore[assignment]

# ── Public surface ────────────────────────────────────────────────────────────
Mode = Literal["raw", "validated_dict"]
DATA_DIR_ENV_VAR = "FUZZYGUARD_DATA_DIR"
PACKAGE_DATA_DIR = Path(__file__).resolve().parents[1] / "data"
__all__ = [
    "Mode",
    "DATA_DIR_ENV_VAR",
    "PACKAGE_DATA_DIR",
    "load_config",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

__docformat__ = "google"


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is found while walking upwards."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested config file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing/validation fails for a config file."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON doesn't match the expected structure."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# cache key: path, mtime, mode, encoding, allow_comments
_CONFIG_CACHE: dict[tuple[Path, float, str, str, bool], Any] = {}


def clear_config_cache() -> None:
    """Empty the in-memory config cache (useful for pytest/hot-reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
        log.debug("Config cache cleared.")


def _candidate_data_dirs(start: Path | None = None) -> list[Path]:
    """Compute candidate 'data' directories: the package's own, or walking up from start."""
    if start is None:
        return [PACKAGE_DATA_DIR]
    start = start.resolve()
    return [(p / "data").resolve() for p in [start, *start.parents]]


def _default_data_dir(start: Path | None = None) -> Path:
    """Return the first existing candidate directory or raise."""
    for cand in _candidate_data_dirs(start):
        if cand.is_dir():
            return cand
    raise DataDirNotFound(
        "No 'data' directory found.\n"
        "Tried:\n  " + "\n  ".join(str(p) for p in _candidate_data_dirs(start))
    )


def _env_data_dir() -> Path | None:
    """Resolve data dir from FUZZYGUARD_DATA_DIR if set."""
    v = os.environ.get(DATA_DIR_ENV_VAR)
    if v:
        return Path(os.path.expanduser(v)).resolve()
    return None


@overload
def load_config(
    file: str | os.PathLike[str],
    mode: Literal["raw"] = "raw",
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: None = ...,
    allow_comments: bool = False,
) -> Any: ...
@overload
def load_config(
    file: str | os.PathLike[str],
    mode: Literal["validated_dict"] = "validated_dict",
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: Callable[[dict[str, Any]], dict[str, Any]] | None = ...,
    allow_comments: bool = False,
) -> dict[str, Any]: ...


def load_config(
    file: str | os.PathLike[str],
    mode: Mode = "raw",
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: Callable[[dict[str, Any]], dict[str, Any]] | None = None,
    allow_comments: bool = False,
) -> Any:
    """Load <data>/<file>.json, parse, check by mode, and cache results."""
    if mode not in ("raw", "validated_dict"):
        raise ValueError(f"Unknown mode '{mode}'")

    # explicit > env override > package data
    if base_dir is None:
        base_dir = _env_data_dir() or _default_data_dir()

    data_dir = Path(base_dir).resolve()

    file_str = os.fspath(file)
    file_name = file_str if file_str.endswith(".json") else f"{file_str}.json"
    path = (data_dir / file_name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={data_dir})"
        ) from e

    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")

    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    cache_key = (path, mtime, mode, encoding, allow_comments)

    # The cache holds pre-validation data; validators run on every call.
    with _CACHE_LOCK:
        cached = _CONFIG_CACHE.get(cache_key)
    if cached is not None:
        log.debug("Config cache HIT: %s (mode=%s)", path.name, mode)
        data = cached
    else:
        data = _read(path, encoding=encoding, allow_comments=allow_comments)
        with _CACHE_LOCK:
            _CONFIG_CACHE[cache_key] = data
        log.debug("Config cache MISS → STORED: %s (mode=%s)", path.name, mode)

    if mode == "raw":
        # callers get their own copy; the cached object stays pristine
        return copy.deepcopy(data)

    if not isinstance(data, dict):
        raise ConfigTypeError(
            f"{path.name}: expected dict for mode 'validated_dict', got {type(data).__name__}"
        )
    if validator is None:
        return copy.deepcopy(data)
    try:
        return validator(copy.deepcopy(data))
    except Exception as e:
        raise ConfigParseError(f"{path.name}: validator failed: {e}") from e


def _read(path: Path, *, encoding: str, allow_comments: bool) -> Any:
    try:
        with path.open("r", encoding=encoding, errors="strict", newline="") as f:
            if allow_comments:
                if _json5 is None:
                    raise ConfigParseError(
                        "json5 requested (allow_comments=True) but not installed"
                    )
                return _json5.load(f)
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except ValueError as e:
        if isinstance(e, ConfigParseError):
            raise
        # json5 syntax errors and undecodable bytes
        raise ConfigParseError(f"Cannot parse {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e


# ── Context manager to temporarily override the data directory ───────────────
class temp_data_dir:
    """Temporarily set the data directory via env for the block."""

    def __init__(self, path: os.PathLike[str] | str):
        self._new = str(path)
        self._old: str | None = None

    def __enter__(self) -> temp_data_dir:
        self._old = os.environ.get(DATA_DIR_ENV_VAR)
        os.environ[DATA_DIR_ENV_VAR] = self._new
        clear_config_cache()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._old is None:
            os.environ.pop(DATA_DIR_ENV_VAR, None)
        else:
            os.environ[DATA_DIR_ENV_VAR] = self._old
        clear_config_cache()
