from __future__ import annotations

import logging
import re
from typing import Iterable, List

from stache.ast.lexer import tokenize
from stache.ast.spec import CompiledTemplate, FieldNode, Node, TextNode
from stache.ast.tokens import Literal, Placeholder, Token
from stache.exceptions import InvalidFieldPath

log = logging.getLogger(__name__)

SEGMENT = re.compile(r"[A-Za-z_][A-Za-z0-9_]*\Z")
ROOT = "."


def parse_path(path: str) -> tuple[str, ...]:
    """Split a placeholder path into validated segments.

    A single leading `.` marks the root of the data context and is dropped,
    so `.user.name` and `user.name` are the same field. `.` alone is the
    root itself and yields an empty tuple.
    """
    if path == ROOT:
        return ()

    body = path[len(ROOT) :] if path.startswith(ROOT) else path
    segments = body.split(".")
    for segment in segments:
        if not SEGMENT.match(segment):
            raise InvalidFieldPath(path)
    return tuple(segments)


def parse(tokens: Iterable[Token], source: str = "") -> CompiledTemplate:
    """Turn a token sequence into a `CompiledTemplate`.

    Nodes keep token order, which is the rendering order.
    """
    nodes: List[Node] = []
    for token in tokens:
        if isinstance(token, Literal):
            nodes.append(TextNode(token.text))
        elif isinstance(token, Placeholder):
            nodes.append(FieldNode(parse_path(token.path), token.path))
        else:
            raise TypeError(f"Unexpected token: {token!r}")

    log.debug("Parsed %d nodes", len(nodes))
    return CompiledTemplate(nodes=tuple(nodes), source=source)


def compile_template(source: str) -> CompiledTemplate:
    """Tokenize and parse `source` into a reusable template."""
    return parse(tokenize(source), source=source)
