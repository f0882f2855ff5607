"""Request URI helpers: read and rewrite the query string or path.

The request is a ``fastapi.Request`` or a raw request URI such as
``"/search?q=go&page=2"``. Rewritten queries are sorted by key and
form-encoded, so ``setQuery`` output is stable regardless of the incoming
parameter order. A URI that is neither absolute nor an absolute path is
malformed and every helper returns "" for it.
"""

from typing import Any, Optional
from urllib.parse import SplitResult, parse_qsl, quote, quote_plus, urlencode, urlsplit, urlunsplit

from fastapi import Request

from .base import helper

# Characters left unescaped in a path besides letters, digits and "_.-~"
PATH_SAFE = "/$&+,:;=@"


def _request_uri(r: Any) -> Optional[str]:
    """Path plus query of the request, or None for unsupported values."""
    if isinstance(r, str):
        return r
    if isinstance(r, Request):
        # url.path is percent-decoded; the raw path keeps the client's encoding
        raw_path = r.scope.get("raw_path")
        if raw_path:
            uri = raw_path.decode("latin-1")
        else:
            uri = quote(r.url.path, safe=PATH_SAFE)
        if r.url.query:
            uri += "?" + r.url.query
        return uri
    return None


def _parse_request_uri(r: Any) -> Optional[SplitResult]:
    uri = _request_uri(r)
    if not uri:
        return None
    link = urlsplit(uri)
    if not link.scheme and not uri.startswith("/"):
        return None
    return link


def _query_values(link: SplitResult) -> dict[str, list[str]]:
    values: dict[str, list[str]] = {}
    for key, value in parse_qsl(link.query, keep_blank_values=True):
        values.setdefault(key, []).append(value)
    return values


def _with_query(link: SplitResult, values: dict[str, list[str]]) -> str:
    query = urlencode(sorted(values.items()), doseq=True)
    return urlunsplit(link._replace(query=query))


@helper(fallback="")
def get_query(r: Any, k: str) -> str:
    """First value of query parameter ``k``, or "" when it is absent."""
    link = _parse_request_uri(r)
    if link is None:
        return ""
    return _query_values(link).get(k, [""])[0]


@helper(fallback="")
def set_query(r: Any, k: str, v: str) -> str:
    """Request URI with every value of ``k`` replaced by ``v``.

    Handy for pagination links: ``setQuery(request, "page", "3")``.
    """
    link = _parse_request_uri(r)
    if link is None or not isinstance(k, str) or not isinstance(v, str):
        return ""
    values = _query_values(link)
    values[k] = [v]
    return _with_query(link, values)


@helper(fallback="")
def del_query(r: Any, k: str) -> str:
    """Request URI without query parameter ``k``."""
    link = _parse_request_uri(r)
    if link is None:
        return ""
    values = _query_values(link)
    values.pop(k, None)
    return _with_query(link, values)


@helper(fallback="")
def parse_url(path: str, r: Any) -> str:
    """Request URI with its path replaced by ``path``, query kept as-is."""
    link = _parse_request_uri(r)
    if link is None or not isinstance(path, str):
        return ""
    return urlunsplit(link._replace(path=quote(path, safe=PATH_SAFE)))


@helper(fallback="")
def urlencode_value(s: str) -> str:
    """Form-encode a string for use as a query value ("a b&c" -> "a+b%26c")."""
    if not isinstance(s, str):
        return ""
    return quote_plus(s, safe="")


HELPERS: dict[str, Any] = {
    "getQuery": get_query,
    "setQuery": set_query,
    "delQuery": del_query,
    "parseUrl": parse_url,
    "urlencode": urlencode_value,
    "asQuery": urlencode_value,
}
