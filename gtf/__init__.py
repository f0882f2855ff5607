"""gtf - Template helper functions for Jinja2.

A catalog of fail-soft template helpers and the operations that register
them into a template engine's function table:
- String casing, padding and truncation
- Number formatting, ordinals, file sizes, pluralization
- Timestamp formatting
- Pre-escaped output (asHTML, asJS, ...) and markdown rendering
- Request URI query manipulation
"""

from gtf.catalog import (
    FILTERS,
    FUNCS,
    HelperCategory,
    force_inject,
    get_helper_registry,
    inject,
    inject_with_prefix,
    new,
)

__version__ = "0.1.0"

__all__ = [
    "FILTERS",
    "FUNCS",
    "HelperCategory",
    "force_inject",
    "get_helper_registry",
    "inject",
    "inject_with_prefix",
    "new",
]
