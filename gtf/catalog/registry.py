"""Helper catalog - the immutable name -> implementation mapping.

The catalog is assembled once, at import time, from the ``HELPERS`` table of
every module in gtf.helpers and is never mutated afterwards:
- FUNCS    - call form, value is the last argument
- FILTERS  - pipe form for Jinja2 filters, value is the first argument
- HelperRegistry serves HelperDefinition records over the same catalog
"""

import functools
import inspect
import logging
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional

from gtf.helpers import identity, numbers, query, safe, sequences, strings, times
from gtf.catalog.schemas import HelperCategory, HelperDefinition, HelperSummary

logger = logging.getLogger(__name__)

HELPER_MODULES = (
    (strings, HelperCategory.STRING),
    (numbers, HelperCategory.NUMBER),
    (sequences, HelperCategory.COLLECTION),
    (times, HelperCategory.TIME),
    (query, HelperCategory.QUERY),
    (safe, HelperCategory.SAFE),
    (identity, HelperCategory.IDENTITY),
)


def as_filter(func: Callable[..., Any]) -> Callable[..., Any]:
    """Adapt a call-form helper to Jinja2's filter convention.

    ``{{ title | truncatechars(10) }}`` calls the filter as
    ``f(title, 10)``; the helper expects ``truncatechars(10, title)``.
    Keyword arguments are forwarded; a call that still fails returns the
    helper's fallback instead of aborting the render.
    """
    fallback = getattr(func, "__fallback__", "")

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            # Move the piped value from the front to the back
            return func(*args[1:], *args[:1], **kwargs)
        except Exception as e:
            logger.debug(f"{func.__name__} filter fell back to {fallback!r}: {e}")
            return fallback

    return wrapper


def _collect() -> tuple[dict[str, Callable[..., Any]], dict[str, HelperDefinition]]:
    funcs: dict[str, Callable[..., Any]] = {}
    definitions: dict[str, HelperDefinition] = {}

    for module, category in HELPER_MODULES:
        for name, func in module.HELPERS.items():
            if name in funcs:
                raise RuntimeError(f"Duplicate helper name: {name}")
            funcs[name] = func
            doc = inspect.getdoc(func) or ""
            definitions[name] = HelperDefinition(
                name=name,
                function_name=func.__name__,
                category=category,
                description=doc.splitlines()[0] if doc else "",
                parameters=list(inspect.signature(func).parameters),
                fallback=repr(getattr(func, "__fallback__", "")),
            )

    return funcs, definitions


_funcs, _definitions = _collect()

FUNCS: Mapping[str, Callable[..., Any]] = MappingProxyType(_funcs)
FILTERS: Mapping[str, Callable[..., Any]] = MappingProxyType(
    {name: as_filter(func) for name, func in _funcs.items()}
)


class HelperRegistry:
    """Read-only view of the catalog's helper definitions."""

    def __init__(
        self,
        funcs: Mapping[str, Callable[..., Any]] = FUNCS,
        definitions: Optional[Mapping[str, HelperDefinition]] = None,
    ):
        self._funcs = funcs
        self._definitions = MappingProxyType(dict(definitions or _definitions))
        logger.info(f"Loaded {len(self._definitions)} template helpers")

    def get(self, name: str) -> Optional[HelperDefinition]:
        """Get a helper definition by template name."""
        return self._definitions.get(name)

    def get_function(self, name: str) -> Optional[Callable[..., Any]]:
        """Get the call-form implementation by template name."""
        return self._funcs.get(name)

    def list_all(self) -> list[HelperDefinition]:
        """List all helper definitions, sorted by name."""
        return [self._definitions[name] for name in self.list_names()]

    def list_names(self) -> list[str]:
        return sorted(self._definitions)

    def list_summaries(self) -> list[HelperSummary]:
        """List lightweight helper summaries."""
        return [
            HelperSummary(name=d.name, category=d.category, description=d.description)
            for d in self.list_all()
        ]

    def list_by_category(self, category: HelperCategory) -> list[HelperDefinition]:
        """List helpers in a specific category."""
        return [d for d in self.list_all() if d.category == category]

    def search(self, query: str) -> list[HelperDefinition]:
        """Search helpers by name or description."""
        query_lower = query.lower()
        return [
            d for d in self.list_all()
            if query_lower in d.name.lower()
            or query_lower in d.description.lower()
        ]

    def count(self) -> int:
        """Get total number of helpers."""
        return len(self._definitions)


# Built with the catalog so that it is complete before first use
_registry = HelperRegistry()


def get_helper_registry() -> HelperRegistry:
    """Get the global helper registry instance."""
    return _registry
