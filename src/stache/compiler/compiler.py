"""Compiler - one-call tokenize, parse and render."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from stache.ast.parser import compile_template
from stache.compiler.formatters import Formatter
from stache.compiler.renderer import render


def compile(
    data: Mapping[str, Any],
    source: str,
    formatter: Optional[Formatter] = None,
    strict: bool = False,
) -> str:
    """Render template `source` against `data` in one call.

    Nothing is cached: each call tokenizes and parses again. To render one
    template many times, call `compile_template` once and `render` (or
    `CompiledTemplate.render`) for each data context.

    Example:
        >>> compile({"text": "data text"}, "<h1>{{ .text }}</h1>")
        '<h1>data text</h1>'
    """
    template = compile_template(source)
    return render(template, data, formatter=formatter, strict=strict)
