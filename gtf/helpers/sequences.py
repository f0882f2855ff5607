"""Collection helpers: defaults, lengths, indexing, slicing and membership.

Strings count as sequences of code points. Lists and tuples are the sequence
kinds; dicts and sets only take part where a length is all that is needed.
"""

from typing import Any

from .base import helper, is_int, is_text_list, reseeded_random

SIZED_KINDS = (str, list, tuple, dict, set, frozenset)


@helper(fallback=None)
def default(arg: Any, value: Any) -> Any:
    """Return ``arg`` when ``value`` is empty or ``False``, else ``value``.

    Empty means an empty string, list, tuple, dict or set. Zero numbers and
    ``None`` are returned unchanged.
    """
    if isinstance(value, bool):
        return value if value else arg
    if isinstance(value, SIZED_KINDS) and len(value) == 0:
        return arg
    return value


@helper(fallback=0)
def length(value: Any) -> int:
    if isinstance(value, SIZED_KINDS):
        return len(value)
    return 0


@helper(fallback=False)
def lengthis(arg: int, value: Any) -> bool:
    if not is_int(arg) or not isinstance(value, SIZED_KINDS):
        return False
    return len(value) == arg


@helper(fallback="")
def first(value: Any) -> Any:
    """First character of a string or first item of a list/tuple."""
    if not isinstance(value, (str, list, tuple)) or not value:
        return ""
    return value[0]


@helper(fallback="")
def last(value: Any) -> Any:
    """Last character of a string or last item of a list/tuple."""
    if not isinstance(value, (str, list, tuple)) or not value:
        return ""
    return value[-1]


@helper(fallback="")
def join(arg: str, value: list[str]) -> str:
    if not isinstance(arg, str) or not is_text_list(value):
        return ""
    return arg.join(value)


@helper(fallback="")
def slice_value(start: int, end: int, value: Any) -> Any:
    """Slice a string, list or tuple between ``start`` and ``end``.

    A negative ``start`` is clamped to 0. For strings an ``end`` past the
    last character is clamped to the length; lists and tuples are not
    clamped and an out-of-range ``end`` gives "". So does ``end < start``.
    """
    if not is_int(start) or not is_int(end):
        return ""
    if start < 0:
        start = 0

    if isinstance(value, str):
        end = min(end, len(value))
    elif isinstance(value, (list, tuple)):
        if end > len(value):
            return ""
    else:
        return ""

    if end < start:
        return ""
    return value[start:end]


@helper(fallback="")
def random_item(value: Any) -> Any:
    """Random character of a string or random item of a list/tuple."""
    if not isinstance(value, (str, list, tuple)) or not value:
        return ""
    return value[reseeded_random().randrange(len(value))]


@helper(fallback=False)
def existin(values: Any, value: str) -> bool:
    """Whether ``value`` is one of the strings in ``values``."""
    if values is None or not is_text_list(values):
        return False
    return value in values


@helper(fallback="")
def is_checked(values: Any, option: str) -> str:
    """``"checked"`` when ``option`` is among ``values``, for checkbox markup."""
    if not is_text_list(values) or not isinstance(option, str):
        return ""
    return "checked" if option in values else ""


@helper(fallback=[])
def func_map(*values: Any) -> list[Any]:
    """Pack the arguments into a list, e.g. to build a list inline."""
    return list(values)


HELPERS: dict[str, Any] = {
    "default": default,
    "length": length,
    "lengthis": lengthis,
    "first": first,
    "last": last,
    "join": join,
    "slice": slice_value,
    "random": random_item,
    "existin": existin,
    "isChecked": is_checked,
    "funcMap": func_map,
}
