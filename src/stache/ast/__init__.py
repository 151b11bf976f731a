"""Template syntax: tokens, lexer, parser and node types."""

from stache.ast.lexer import iter_tokens, tokenize
from stache.ast.parser import compile_template, parse, parse_path
from stache.ast.spec import CompiledTemplate, FieldNode, Node, TextNode
from stache.ast.tokens import Literal, Placeholder, Token

__all__ = [
    "tokenize",
    "iter_tokens",
    "parse",
    "parse_path",
    "compile_template",
    "CompiledTemplate",
    "FieldNode",
    "TextNode",
    "Node",
    "Literal",
    "Placeholder",
    "Token",
]
