"""Timestamp helpers.

Every helper here accepts ``datetime`` values only and returns "" for any
other kind or for the zero timestamp (``datetime.min``). Naive timestamps
are read as UTC.
"""

import logging
import os
from datetime import datetime, timezone
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import humanize

from .base import as_aware, helper, is_zero_time

logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE = os.environ.get("GTF_DEFAULT_TIMEZONE", "Asia/Shanghai")


def _is_timestamp(value: Any) -> bool:
    return isinstance(value, datetime) and not is_zero_time(value)


def _format_offset(t: datetime) -> str:
    """UTC offset as sign and whole hours, e.g. ``+08`` or ``-07``."""
    seconds = int(t.utcoffset().total_seconds())
    sign = "-" if seconds < 0 else "+"
    return f"{sign}{abs(seconds) // 3600:02d}"


@helper(fallback="")
def time_in(t: datetime, loc_name: str) -> str:
    """Format ``t`` as ``2006-01-02 15:04 -07`` in the named IANA zone.

    Args:
        t: Timestamp to format
        loc_name: IANA zone name; "" selects the default zone

    Returns:
        Formatted timestamp. An unknown zone keeps ``t``'s own offset.
    """
    if not _is_timestamp(t):
        return ""

    t = as_aware(t)
    if not loc_name:
        loc_name = DEFAULT_TIMEZONE

    try:
        t = t.astimezone(ZoneInfo(loc_name))
    except (ZoneInfoNotFoundError, ValueError) as e:
        logger.debug(f"Unknown timezone {loc_name!r}, keeping original offset: {e}")

    return f"{t:%Y-%m-%d %H:%M} {_format_offset(t)}"


@helper(fallback="")
def duration(start: datetime, stop: datetime) -> Any:
    """Seconds elapsed between ``start`` and ``stop`` as a float."""
    if not _is_timestamp(start) or not _is_timestamp(stop):
        return ""
    return (as_aware(stop) - as_aware(start)).total_seconds()


@helper(fallback="")
def render_time(value: datetime) -> str:
    """Milliseconds since ``value``, e.g. ``"12.34ms"``.

    Meant for "page rendered in" footers where ``value`` is the request start.
    """
    if not _is_timestamp(value):
        return ""
    elapsed = datetime.now(timezone.utc) - as_aware(value)
    return f"{elapsed.total_seconds() * 1000:.2f}ms"


@helper(fallback="")
def timeago(value: datetime) -> str:
    """Relative English time such as ``"3 minutes ago"`` or ``"2 days from now"``."""
    if not _is_timestamp(value):
        return ""
    return humanize.naturaltime(datetime.now(timezone.utc) - as_aware(value))


HELPERS: dict[str, Any] = {
    "timeIn": time_in,
    "duration": duration,
    "renderTime": render_time,
    "timeago": timeago,
}
