"""String helpers: casing, padding, truncation and pluralization.

All lengths are counted in code points, so multi-byte characters are never
split by truncation or padding.
"""

import re
from typing import Any

from .base import helper, is_int

STRIPTAGS_RE = re.compile(r"<[^>]*?>")
WORD_START_RE = re.compile(r"\b\w")


@helper(fallback="")
def lower(s: str) -> str:
    """Lower-case a string."""
    if not isinstance(s, str):
        return ""
    return s.lower()


@helper(fallback="")
def upper(s: str) -> str:
    """Upper-case a string."""
    if not isinstance(s, str):
        return ""
    return s.upper()


@helper(fallback="")
def trim(s: str) -> str:
    """Strip leading and trailing whitespace."""
    if not isinstance(s, str):
        return ""
    return s.strip()


@helper(fallback="")
def title(s: str) -> str:
    """Upper-case the first letter of every word, leaving the rest alone.

    Unlike ``str.title`` this does not lower-case the remaining letters, so
    ``"hello iPhone"`` becomes ``"Hello IPhone"``.
    """
    if not isinstance(s, str):
        return ""
    return WORD_START_RE.sub(lambda m: m.group(0).upper(), s)


@helper(fallback="")
def capfirst(s: str) -> str:
    """Upper-case the first character."""
    if not isinstance(s, str) or not s:
        return ""
    return s[0].upper() + s[1:]


@helper(fallback="")
def truncatechars(n: int, s: str) -> str:
    """Truncate to ``n`` characters, ending with "..." when there is room.

    Returns ``s`` unchanged when ``n`` is negative or not shorter than ``s``.
    For ``n <= 3`` the cut is made without an ellipsis.
    """
    if not is_int(n) or not isinstance(s, str):
        return ""
    if n < 0 or n >= len(s):
        return s
    if n > 3 and len(s) > 3:
        return s[: n - 3] + "..."
    return s[:n]


@helper(fallback=0)
def wordcount(s: str) -> int:
    """Count whitespace-separated words."""
    if not isinstance(s, str):
        return 0
    return len(s.split())


@helper(fallback="")
def repeat(count: int, s: str) -> str:
    if not is_int(count) or not isinstance(s, str) or count < 0:
        return ""
    return s * count


@helper(fallback="")
def replace(s1: str, s2: str) -> str:
    """Remove every occurrence of ``s1`` from ``s2``."""
    if not isinstance(s1, str) or not isinstance(s2, str):
        return ""
    return s2.replace(s1, "")


@helper(fallback="")
def findreplace(s1: str, s2: str, s3: str) -> str:
    """Replace every occurrence of ``s1`` with ``s2`` in ``s3``."""
    if not all(isinstance(s, str) for s in (s1, s2, s3)):
        return ""
    return s3.replace(s1, s2)


@helper(fallback="")
def gettitle(value: str) -> str:
    """Last dot-separated component, e.g. ``"pkg.module.Name"`` -> ``"Name"``."""
    if not isinstance(value, str):
        return ""
    return value.split(".")[-1]


@helper(fallback=False)
def isblank(value: str) -> bool:
    if not isinstance(value, str):
        return False
    return value.strip() == ""


@helper(fallback="")
def rjust(arg: int, value: str) -> str:
    """Right-align ``value`` in a field ``arg`` characters wide."""
    if not is_int(arg) or not isinstance(value, str):
        return ""
    n = arg - len(value)
    if n > 0:
        value = " " * n + value
    return value


@helper(fallback="")
def ljust(arg: int, value: str) -> str:
    """Left-align ``value`` in a field ``arg`` characters wide."""
    if not is_int(arg) or not isinstance(value, str):
        return ""
    n = arg - len(value)
    if n > 0:
        value = value + " " * n
    return value


@helper(fallback="")
def center(arg: int, value: str) -> str:
    """Center ``value`` in a field ``arg`` characters wide.

    An odd amount of padding puts the extra space on the right.
    """
    if not is_int(arg) or not isinstance(value, str):
        return ""
    n = arg - len(value)
    if n > 0:
        left = n // 2
        value = " " * left + value + " " * (n - left)
    return value


@helper(fallback="")
def yesno(yes: str, no: str, value: bool) -> str:
    if not isinstance(value, bool):
        return ""
    return yes if value else no


@helper(fallback="")
def pluralize(arg: str, value: int) -> str:
    """Pick the singular or plural suffix for a count.

    ``arg`` is either a plural suffix (``"s"``, singular is empty) or a
    ``"singular,plural"`` pair. More than one comma is invalid and gives "".
    """
    if not is_int(value) or not isinstance(arg, str):
        return ""

    if "," not in arg:
        arg = "," + arg

    bits = arg.split(",")
    if len(bits) > 2:
        return ""

    if value == 1:
        return bits[0]
    return bits[1]


@helper(fallback="")
def striptags(s: str) -> str:
    """Drop anything that looks like an HTML tag."""
    if not isinstance(s, str):
        return ""
    return STRIPTAGS_RE.sub("", s).strip()


HELPERS: dict[str, Any] = {
    "lower": lower,
    "upper": upper,
    "trim": trim,
    "title": title,
    "capfirst": capfirst,
    "truncatechars": truncatechars,
    "wordcount": wordcount,
    "repeat": repeat,
    "replace": replace,
    "findreplace": findreplace,
    "gettitle": gettitle,
    "isblank": isblank,
    "rjust": rjust,
    "ljust": ljust,
    "center": center,
    "yesno": yesno,
    "pluralize": pluralize,
    "striptags": striptags,
}
