"""Helper catalog and registration.

- schemas.py    - Pydantic models for helper introspection
- registry.py   - FUNCS / FILTERS mappings and HelperRegistry
- injection.py  - inject, force_inject, inject_with_prefix, new
"""

from .schemas import HelperCategory, HelperDefinition, HelperSummary
from .registry import FILTERS, FUNCS, HelperRegistry, as_filter, get_helper_registry
from .injection import force_inject, inject, inject_with_prefix, new

__all__ = [
    "HelperCategory",
    "HelperDefinition",
    "HelperSummary",
    "FILTERS",
    "FUNCS",
    "HelperRegistry",
    "as_filter",
    "get_helper_registry",
    "force_inject",
    "inject",
    "inject_with_prefix",
    "new",
]
