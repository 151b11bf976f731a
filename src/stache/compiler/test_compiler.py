"""End-to-end tests for the one-call compile()."""

import threading

import pytest

from stache import compile, compile_template, render, tokenize
from stache.compiler.formatters import urlize
from stache.exceptions import (
    InvalidFieldPath,
    NonScalarField,
    StacheError,
    UnterminatedPlaceholder,
)


def test_leading_dot_field():
    assert compile({"text": "data text"}, "<h1>{{ .text }}</h1>") == "<h1>data text</h1>"


def test_missing_key_renders_empty():
    assert compile({}, "Hello {{ name }}!") == "Hello !"


def test_unterminated_placeholder_at_start():
    with pytest.raises(UnterminatedPlaceholder) as exc:
        tokenize("{{ unterminated")
    assert exc.value.offset == 0


def test_nested_field():
    assert compile({"user": {"name": "Ada"}}, "{{ user.name }}") == "Ada"


def test_sequence_field_is_rejected():
    with pytest.raises(NonScalarField) as exc:
        compile({"items": [1, 2]}, "{{ items }}")
    assert exc.value.path == "items"


def test_compile_matches_explicit_pipeline():
    source = "{{ a }} and {{ .b.c }}"
    data = {"a": 1, "b": {"c": False}}
    assert compile(data, source) == render(compile_template(source), data) == "1 and false"


def test_compile_surfaces_parse_errors():
    with pytest.raises(InvalidFieldPath):
        compile({}, "{{ a..b }}")


def test_compile_with_formatter_and_strict():
    assert compile({"t": "Vim (text editor)"}, "/{{ t }}", formatter=urlize) == "/vim-text-editor"
    with pytest.raises(StacheError):
        compile({}, "{{ t }}", strict=True)


def test_shared_template_across_threads():
    template = compile_template("<{{ user.name }}:{{ n }}>")
    results = {}

    def work(i):
        results[i] = template.render({"user": {"name": f"u{i}"}, "n": i})

    threads = [threading.Thread(target=work, args=(i,)) for i in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results == {i: f"<u{i}:{i}>" for i in range(16)}
