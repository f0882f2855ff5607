"""Fail-soft plumbing shared by every helper group.

Helpers validate their own inputs and return a documented fallback for
unsupported shapes. The ``helper`` decorator is the backstop: anything a
helper still raises is logged at DEBUG and replaced by the same fallback,
so a single bad value never aborts a template render.
"""

import functools
import logging
import random
import time
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

# Reseeded on every draw; the global generator is left alone
_rng = random.Random()


def helper(fallback: Any = "") -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Wrap a helper so that no exception escapes it.

    Args:
        fallback: Value returned when the helper raises

    Returns:
        Decorator producing the fail-soft helper. The fallback is kept on
        the wrapper as ``__fallback__`` for catalog introspection.
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                logger.debug(f"{func.__name__} fell back to {fallback!r}: {e}")
                return fallback

        wrapper.__fallback__ = fallback  # type: ignore[attr-defined]
        return wrapper

    return decorator


def is_int(value: Any) -> bool:
    """True for integer kinds. ``bool`` is not an integer kind."""
    return isinstance(value, int) and not isinstance(value, bool)


def is_number(value: Any) -> bool:
    """True for integer and float kinds."""
    return is_int(value) or isinstance(value, float)


def is_text_list(value: Any) -> bool:
    """True for a list or tuple holding only strings."""
    return isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value)


def is_zero_time(value: datetime) -> bool:
    """True for the zero timestamp (``datetime.min``, any tzinfo)."""
    return value.replace(tzinfo=None) == datetime.min


def as_aware(value: datetime) -> datetime:
    """Read naive timestamps as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def reseeded_random() -> random.Random:
    """Generator reseeded from the wall clock.

    Reseeding on every call means two calls within the same clock tick draw
    the same value. Not suitable for anything security related.
    """
    _rng.seed(time.time_ns())
    return _rng


def object_hex(value: Any) -> Optional[str]:
    """Hex form of an ObjectID-like value, or None.

    ObjectID-like values are ``uuid.UUID`` instances and objects exposing a
    12-byte ``binary`` attribute (``bson.ObjectId``).
    """
    if isinstance(value, uuid.UUID):
        return value.hex
    binary = getattr(value, "binary", None)
    if isinstance(binary, bytes) and len(binary) == 12:
        return binary.hex()
    return None
