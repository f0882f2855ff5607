"""Number helpers: separators, ordinals, file sizes and small arithmetic."""

import math
from typing import Any

import humanize

from .base import helper, is_int, is_number, reseeded_random

APNUMBER_NAMES = ("one", "two", "three", "four", "five", "six", "seven", "eight", "nine")
ORDINAL_SUFFIXES = ("th", "st", "nd", "rd", "th", "th", "th", "th", "th", "th")

# 1024-based size units, largest first
FILESIZE_UNITS = (
    (1 << 50, "PB"),
    (1 << 40, "TB"),
    (1 << 30, "GB"),
    (1 << 20, "MB"),
    (1 << 10, "KB"),
)


@helper(fallback="")
def intcomma(value: int) -> str:
    """Insert thousands separators: ``-1234567`` -> ``"-1,234,567"``."""
    if not is_int(value):
        return ""
    return f"{value:,}"


@helper(fallback="")
def ordinal(value: int) -> str:
    """English ordinal: 1st, 2nd, 3rd, 4th, 11th, 12th, 13th, 21st...

    Negative numbers give "".
    """
    if not is_int(value) or value < 0:
        return ""
    if value % 100 in (11, 12, 13):
        return f"{value}th"
    return f"{value}{ORDINAL_SUFFIXES[value % 10]}"


@helper(fallback="")
def filesizeformat(value: Any) -> str:
    """Human readable size in 1024-based units with one decimal.

    Every ``.0`` is dropped, so 1024 renders as ``"1 KB"`` and 1536 as
    ``"1.5 KB"``.
    """
    if not is_number(value):
        return ""

    size = float(value)
    for factor, suffix in FILESIZE_UNITS:
        if size >= factor:
            text = f"{size / factor:.1f} {suffix}"
            break
    else:
        text = f"{size:.1f} bytes"

    return text.replace(".0", "")


@helper(fallback="NA")
def humanize_size(size: Any) -> str:
    """SI (1000-based) size such as ``"1.5 MB"``; ``"NA"`` for non-numbers."""
    if not is_number(size):
        return "NA"
    return humanize.naturalsize(int(size))


@helper(fallback=None)
def apnumber(value: Any) -> Any:
    """Spell out 1 to 9 ("one" ... "nine"); return anything else unchanged.

    0 and negative numbers are returned as-is rather than failing.
    """
    if is_int(value) and 1 <= value <= 9:
        return APNUMBER_NAMES[value - 1]
    return value


@helper(fallback=False)
def divisibleby(arg: Any, value: Any) -> bool:
    if not is_number(arg) or not is_number(value):
        return False
    if arg == 0:
        return False
    return math.fmod(float(value), float(arg)) == 0


@helper(fallback=0)
def minus(value: int, i: int) -> int:
    if not is_int(value) or not is_int(i):
        return 0
    return value - i


@helper(fallback=0)
def get_int(value: Any) -> int:
    """Integer value, or 0 for ``None`` and anything that is not an integer."""
    if not is_int(value):
        return 0
    return value


@helper(fallback=False)
def istrue(value: Any) -> bool:
    """True only for the boolean ``True``; ``None`` and anything else are False."""
    return value is True


@helper(fallback=0)
def randomintrange(min: int, max: int, value: Any = None) -> int:
    """Uniform integer in ``[min, max)``.

    ``value`` is accepted so the helper can sit at the end of a pipe and is
    otherwise ignored.
    """
    if not is_int(min) or not is_int(max) or max <= min:
        return 0
    return reseeded_random().randrange(min, max)


HELPERS: dict[str, Any] = {
    "intcomma": intcomma,
    "ordinal": ordinal,
    "filesizeformat": filesizeformat,
    "humanizeSize": humanize_size,
    "apnumber": apnumber,
    "divisibleby": divisibleby,
    "minus": minus,
    "getInt": get_int,
    "istrue": istrue,
    "randomintrange": randomintrange,
}
