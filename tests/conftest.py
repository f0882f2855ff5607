"""Shared fixtures for helper tests.

Provided fixtures
-----------------
- **env**: Fresh Jinja2 environment from ``gtf.new()`` (autoescaping on).
- **make_request**: Factory for ``fastapi.Request`` objects with a given
  path, query string and optional raw (still percent-encoded) path,
  without a running server.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest
from fastapi import Request
from jinja2 import Environment

from gtf import new


@pytest.fixture
def env() -> Environment:
    """Return a fresh environment with the whole catalog loaded."""
    return new()


@pytest.fixture
def make_request() -> Callable[..., Request]:
    """Return a factory building bare ASGI requests."""

    def _make(path: str = "/", query: str = "", raw_path: bytes | None = None) -> Request:
        scope = {
            "type": "http",
            "method": "GET",
            "path": path,
            "query_string": query.encode(),
            "headers": [],
        }
        if raw_path is not None:
            scope["raw_path"] = raw_path
        return Request(scope)

    return _make
