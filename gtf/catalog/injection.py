"""Registration of the catalog into caller-owned function tables.

The table is any mutable mapping: a plain dict, ``env.globals`` or
``env.filters`` of a Jinja2 environment. The catalog is only read; the
caller's table is the only thing mutated, so concurrent registrations into
the *same* table need the caller's own locking.

Usage:
    env = jinja2.Environment()
    inject(env.globals)                    # call form: {{ ordinal(3) }}
    inject(env.filters, catalog=FILTERS)   # pipe form: {{ 3 | ordinal }}
"""

from typing import Any, Callable, Mapping, MutableMapping

from jinja2 import Environment

from gtf.catalog.registry import FILTERS, FUNCS

Catalog = Mapping[str, Callable[..., Any]]


def inject(funcs: MutableMapping[str, Any], catalog: Catalog = FUNCS) -> None:
    """Add catalog helpers whose names are not already in ``funcs``.

    Existing entries are never replaced.
    """
    for name, func in catalog.items():
        if name not in funcs:
            funcs[name] = func


def force_inject(funcs: MutableMapping[str, Any], catalog: Catalog = FUNCS) -> None:
    """Add every catalog helper, replacing entries with the same name."""
    for name, func in catalog.items():
        funcs[name] = func


def inject_with_prefix(
    funcs: MutableMapping[str, Any],
    prefix: str,
    catalog: Catalog = FUNCS,
) -> None:
    """Add every catalog helper under ``prefix + name``.

    Useful when the table already has functions with catalog names, e.g.
    ``inject_with_prefix(env.globals, "gtf_")`` gives ``gtf_title``.
    """
    for name, func in catalog.items():
        funcs[prefix + name] = func


def new(**options: Any) -> Environment:
    """Create a Jinja2 environment pre-loaded with the whole catalog.

    Helpers are installed both as globals (call form) and as filters (pipe
    form), replacing Jinja2's built-ins of the same name such as ``title``
    and ``default``.

    Args:
        **options: Passed to ``jinja2.Environment``; ``autoescape`` defaults
            to True for HTML templates

    Returns:
        A fresh Environment
    """
    options.setdefault("autoescape", True)
    env = Environment(**options)
    force_inject(env.globals)
    force_inject(env.filters, catalog=FILTERS)
    return env
