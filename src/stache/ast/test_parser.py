import pytest

from stache.ast.lexer import tokenize
from stache.ast.parser import compile_template, parse, parse_path
from stache.ast.spec import CompiledTemplate, FieldNode, TextNode
from stache.ast.tokens import Literal, Placeholder
from stache.exceptions import InvalidFieldPath

source = "<h1>{{ .text }}</h1><p>{{ user.name }} / {{ user_2.Name_x }}</p>"


def test_parse_keeps_source_order():
    template = parse(tokenize(source), source=source)
    assert template.nodes == (
        TextNode("<h1>"),
        FieldNode(("text",), ".text"),
        TextNode("</h1><p>"),
        FieldNode(("user", "name"), "user.name"),
        TextNode(" / "),
        FieldNode(("user_2", "Name_x"), "user_2.Name_x"),
        TextNode("</p>"),
    )
    assert template.source == source


def test_parse_is_deterministic():
    assert compile_template(source) == compile_template(source)
    assert hash(compile_template(source)) == hash(compile_template(source))


def test_parse_accepts_any_token_iterable():
    tokens = iter([Literal("a"), Placeholder("b"), Literal("c")])
    template = parse(tokens)
    assert template == CompiledTemplate(
        nodes=(TextNode("a"), FieldNode(("b",), "b"), TextNode("c")), source=""
    )


def test_leading_dot_is_root_marker():
    assert parse_path(".text") == parse_path("text") == ("text",)
    assert parse_path(".a.b") == ("a", "b")


def test_lone_dot_is_root():
    assert parse_path(".") == ()


@pytest.mark.parametrize(
    "path",
    ["..a", "a..b", "a.", "1abc", "a.2", "a-b", "a b", "user.name!", "{ x", "é"],
)
def test_invalid_paths(path):
    with pytest.raises(InvalidFieldPath) as exc:
        parse_path(path)
    assert exc.value.path == path


def test_invalid_path_from_template():
    with pytest.raises(InvalidFieldPath) as exc:
        compile_template("Hello {{ first name }}")
    assert exc.value.path == "first name"


def test_parse_rejects_unknown_tokens():
    with pytest.raises(TypeError):
        parse(["not a token"])


def test_fields_lists_distinct_expressions():
    template = compile_template("{{ a }}{{ b.c }}{{ a }}{{ .d }}")
    assert template.fields == ("a", "b.c", ".d")


def test_compiled_template_is_immutable():
    template = compile_template("x")
    with pytest.raises(AttributeError):
        template.source = "y"
