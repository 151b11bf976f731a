"""Scalar formatters applied to rendered field values.

Rendering does no escaping on its own. A formatter is any
`Callable[[str], str]`; it sees each stringified field value and never
the template's static text.
"""

from __future__ import annotations

import html
import re
import unicodedata
from typing import Callable, Dict
from urllib.parse import quote

import markdown

Formatter = Callable[[str], str]

_ESCAPED_PERCENT = re.compile(r"%[0-9A-Fa-f]{2}")
_URL_SAFE = "/#%+~\\"
_PATH_PUNCTUATION = set("./\\_-#+~")


def identity(value: str) -> str:
    return value


def html_escape(value: str) -> str:
    """Escape `& < > " '` for HTML text and attribute values."""
    return html.escape(value, quote=True)


def render_markdown(value: str) -> str:
    """Convert Markdown text to an HTML fragment."""
    return markdown.markdown(value)


def make_urlizer(lower: bool = True, remove_accents: bool = False) -> Formatter:
    """Build a formatter that turns text into a URL path fragment.

    Args:
        lower: Lowercase the result.
        remove_accents: Strip nonspacing marks after NFD decomposition.

    Example:
        >>> make_urlizer()("Vim (text editor)")
        'vim-text-editor'
    """

    def urlize(value: str) -> str:
        path = _sanitize(value.strip().replace(" ", "-"))
        if remove_accents:
            decomposed = unicodedata.normalize("NFD", path)
            path = unicodedata.normalize(
                "NFC",
                "".join(c for c in decomposed if unicodedata.category(c) != "Mn"),
            )
        if lower:
            path = path.lower()
        return quote(path, safe=_URL_SAFE)

    return urlize


urlize = make_urlizer()

FORMATTERS: Dict[str, Formatter] = {
    "identity": identity,
    "html": html_escape,
    "urlize": urlize,
    "markdown": render_markdown,
}


def get_formatter(name: str) -> Formatter:
    """Look up a built-in formatter by name."""
    try:
        return FORMATTERS[name]
    except KeyError:
        known = ", ".join(sorted(FORMATTERS))
        raise ValueError(f"Unknown formatter '{name}' (expected one of: {known})")


def _sanitize(text: str) -> str:
    """Keep letters, digits, marks, path punctuation and `%XX` escapes."""
    kept = []
    i = 0
    while i < len(text):
        char = text[i]
        if char == "%" and _ESCAPED_PERCENT.match(text, i):
            kept.append(text[i : i + 3])
            i += 3
            continue
        category = unicodedata.category(char)
        if category[0] in ("L", "M") or category == "Nd" or char in _PATH_PUNCTUATION:
            kept.append(char)
        i += 1
    return "".join(kept)
