"""Stache compiler - renders parsed templates against data."""

from stache.compiler.compiler import compile
from stache.compiler.formatters import (
    FORMATTERS,
    Formatter,
    get_formatter,
    html_escape,
    identity,
    make_urlizer,
    render_markdown,
    urlize,
)
from stache.compiler.renderer import Renderer, render
from stache.compiler.values import ValueKind, classify

__all__ = [
    "compile",
    "render",
    "Renderer",
    "Formatter",
    "FORMATTERS",
    "get_formatter",
    "identity",
    "html_escape",
    "urlize",
    "make_urlizer",
    "render_markdown",
    "ValueKind",
    "classify",
]
