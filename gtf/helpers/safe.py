"""Pre-escaped output helpers.

``asHTML``, ``asCSS``, ``asJS``, ``asHTMLAttr`` and ``asURL`` only mark a
string as safe for their output context; they do not sanitize anything.
Callers are responsible for the content actually being safe.
"""

from typing import Any

import markdown
from jinja2.utils import htmlsafe_json_dumps
from markupsafe import Markup

from .base import helper


class HTML(Markup):
    """Trusted HTML body content."""


class CSS(Markup):
    """Trusted CSS."""


class JS(Markup):
    """Trusted JavaScript expression."""


class HTMLAttr(Markup):
    """Trusted HTML attribute, e.g. ``dir="ltr"``."""


class URL(Markup):
    """Trusted URL."""


# python-markdown extensions for each flavour
MARKDOWN_EXTENSIONS = ["extra", "sane_lists"]
MARKDOWN2_EXTENSIONS = ["tables", "fenced_code", "toc"]


@helper(fallback=HTML(""))
def as_html(value: str) -> HTML:
    if not isinstance(value, str):
        return HTML("")
    return HTML(value)


@helper(fallback=CSS(""))
def as_css(value: str) -> CSS:
    if not isinstance(value, str):
        return CSS("")
    return CSS(value)


@helper(fallback=JS(""))
def as_js(value: str) -> JS:
    if not isinstance(value, str):
        return JS("")
    return JS(value)


@helper(fallback=HTMLAttr(""))
def as_html_attr(value: str) -> HTMLAttr:
    if not isinstance(value, str):
        return HTMLAttr("")
    return HTMLAttr(value)


@helper(fallback=URL(""))
def as_url(value: str) -> URL:
    if not isinstance(value, str):
        return URL("")
    return URL(value)


@helper(fallback=JS(""))
def tojson(value: Any) -> JS:
    """Serialize ``value`` to JSON for embedding in a script block.

    ``<``, ``>``, ``&`` and ``'`` are written as unicode escapes so the
    output cannot close a ``<script>`` tag. Values JSON cannot represent,
    NaN and infinities included, give an empty ``JS``.
    """
    return JS(htmlsafe_json_dumps(value, allow_nan=False))


@helper(fallback=HTML(""))
def markdown_html(value: str) -> HTML:
    """Render Markdown to HTML with the ``extra`` extensions."""
    if not isinstance(value, str):
        return HTML("")
    return HTML(markdown.markdown(value, extensions=MARKDOWN_EXTENSIONS))


@helper(fallback=HTML(""))
def markdown_toc_html(value: str) -> HTML:
    """Render Markdown to HTML with tables, fenced code and heading ids."""
    if not isinstance(value, str):
        return HTML("")
    return HTML(markdown.markdown(value, extensions=MARKDOWN2_EXTENSIONS))


HELPERS: dict[str, Any] = {
    "asHTML": as_html,
    "asCSS": as_css,
    "asJS": as_js,
    "asHTMLAttr": as_html_attr,
    "asURL": as_url,
    "tojson": tojson,
    "markdown": markdown_html,
    "markdown2": markdown_toc_html,
}
