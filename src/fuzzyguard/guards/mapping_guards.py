# src/fuzzyguard/guards/mapping_guards.py
"""
mapping_guards.py

Does: Turn operations that may raise into safe calls that return a value, a
      fallback, or None, or that hand the error to a callback.
Returns: Guarded results (or_null/or_default/as_string_*), guarded wrappers
         (or_handle), and a decorator form (guarded).

Both call shapes work: zero-argument operations (`or_null(load)`) and
transforms given their input (`or_null(int, "12")`). Only Exception
subclasses are caught; KeyboardInterrupt/SystemExit still propagate.
"""

from __future__ import annotations

import functools
from typing import Any, Callable, Optional, Tuple, Type, TypeVar

from fuzzyguard.types import ErrorHandler
from fuzzyguard.utils.log import debug

__all__ = [
    "or_null",
    "or_default",
    "or_handle",
    "as_string_or_null",
    "as_string_or_default",
    "guarded",
]

__docformat__ = "google"

T = TypeVar("T")
D = TypeVar("D")

_TOPIC = "guards"


def _name(operation: Callable[..., Any]) -> str:
    return getattr(operation, "__qualname__", None) or repr(operation)


def _report(operation: Callable[..., Any], error: Exception, outcome: str) -> None:
    debug(
        f"{_name(operation)} raised {type(error).__name__}: {error} → {outcome}",
        topic=_TOPIC,
    )


def or_default(operation: Callable[..., T], fallback: D, *args: Any, **kwargs: Any) -> T | D:
    """
    Does: Run operation(*args, **kwargs).
    Returns: Its result, or `fallback` if it raised.
    """
    try:
        return operation(*args, **kwargs)
    except Exception as e:
        _report(operation, e, f"fallback {fallback!r}")
        return fallback


def or_null(operation: Callable[..., T], *args: Any, **kwargs: Any) -> Optional[T]:
    """Does: Like or_default with a None fallback."""
    return or_default(operation, None, *args, **kwargs)


def as_string_or_default(
    operation: Callable[..., Any], fallback: D, *args: Any, **kwargs: Any
) -> str | D:
    """Does: str() of the operation's result, or `fallback` if it raised."""
    try:
        return str(operation(*args, **kwargs))
    except Exception as e:
        _report(operation, e, f"fallback {fallback!r}")
        return fallback


def as_string_or_null(operation: Callable[..., Any], *args: Any, **kwargs: Any) -> Optional[str]:
    return as_string_or_default(operation, None, *args, **kwargs)


def or_handle(operation: Callable[..., T], handler: ErrorHandler) -> Callable[..., Optional[T]]:
    """
    Does: Wrap `operation` so that an error is passed to `handler` instead of raised.
    Returns: Callable taking the operation's arguments; yields the result, or
             None after the handler ran.

    Errors raised by the handler itself propagate.
    """

    @functools.wraps(operation)
    def wrapper(*args: Any, **kwargs: Any) -> Optional[T]:
        try:
            return operation(*args, **kwargs)
        except Exception as e:
            _report(operation, e, "handler")
            handler(e)
            return None

    return wrapper


def guarded(
    fallback: Any = None,
    *,
    handler: Optional[ErrorHandler] = None,
    exceptions: Tuple[Type[Exception], ...] = (Exception,),
):
    """
    Decorator returning `fallback` when the decorated function raises one of
    `exceptions`, after passing the error to `handler` if given.

    Example:
        @guarded(fallback=0)
        def parse_port(raw):
            return int(raw)
    """

    def decorator(func: Callable[..., T]) -> Callable[..., Any]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except exceptions as e:
                _report(func, e, f"fallback {fallback!r}")
                if handler is not None:
                    handler(e)
                return fallback

        return wrapper

    return decorator
