"""
log.py.

Does: Opt-in debug lines for fuzzyguard, one switch per topic ("guards", ...).
      FUZZYGUARD_DEBUG_TOPICS holds a comma list or 'all'; unset means silent.
Returns: Timestamped `fuzzyguard[topic][LEVEL] msg` lines on stderr.
"""

import logging
import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["ENV_VAR", "debug", "reload_topics", "topic_enabled"]

ENV_VAR = "FUZZYGUARD_DEBUG_TOPICS"
_ALL = "all"


def _parse_topics(raw: str) -> frozenset[str]:
    return frozenset(t.strip().lower() for t in raw.split(",") if t.strip())


_topics = _parse_topics(os.getenv(ENV_VAR, ""))


def reload_topics() -> frozenset[str]:
    """Does: Re-read FUZZYGUARD_DEBUG_TOPICS. Returns: the active topics."""
    global _topics
    _topics = _parse_topics(os.getenv(ENV_VAR, ""))
    return _topics


def topic_enabled(topic: str) -> bool:
    return _ALL in _topics or topic.lower().strip() in _topics


def _level_name(level: str) -> str:
    name = level.upper()
    # getLevelName maps known names to ints and anything else to "Level <x>"
    if not isinstance(logging.getLevelName(name), int):
        raise ValueError(f"Unknown log level {level!r}")
    return name


def debug(
    msg: str,
    topic: str = "fuzzyguard",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Write one line for `topic` when that topic is switched on.

    Raises:
        ValueError: for a level name the logging module does not know.
    """
    level_name = _level_name(level)
    if not topic_enabled(topic):
        return
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(
        f"[{ts}] fuzzyguard[{topic.lower().strip()}][{level_name}] {msg}",
        file=stream or sys.stderr,
    )
