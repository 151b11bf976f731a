"""Stache - a small `{{ field.path }}` template compiler.

    >>> from stache import compile
    >>> compile({"user": {"name": "Ada"}}, "Hi {{ user.name }}")
    'Hi Ada'
"""

from stache.ast import (
    CompiledTemplate,
    FieldNode,
    Literal,
    Placeholder,
    TextNode,
    compile_template,
    iter_tokens,
    parse,
    tokenize,
)
from stache.compiler import (
    Renderer,
    compile,
    get_formatter,
    html_escape,
    identity,
    make_urlizer,
    render,
    render_markdown,
    urlize,
)
from stache.exceptions import (
    EmptyPlaceholder,
    InvalidFieldPath,
    MissingField,
    NestedPlaceholder,
    NonScalarField,
    RenderError,
    StacheError,
    TemplateSyntaxError,
    UnsupportedValue,
    UnterminatedPlaceholder,
)
from stache._version import __version__

__all__ = [
    "compile",
    "compile_template",
    "tokenize",
    "iter_tokens",
    "parse",
    "render",
    "Renderer",
    "CompiledTemplate",
    "FieldNode",
    "TextNode",
    "Literal",
    "Placeholder",
    "get_formatter",
    "identity",
    "html_escape",
    "urlize",
    "make_urlizer",
    "render_markdown",
    "StacheError",
    "TemplateSyntaxError",
    "UnterminatedPlaceholder",
    "EmptyPlaceholder",
    "NestedPlaceholder",
    "InvalidFieldPath",
    "RenderError",
    "NonScalarField",
    "MissingField",
    "UnsupportedValue",
]
