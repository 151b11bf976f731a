"""Lexer - scans template source into Literal and Placeholder tokens."""

from __future__ import annotations

import enum
import logging
from typing import Iterator, List

from stache.ast.tokens import Literal, Placeholder, Token
from stache.exceptions import (
    EmptyPlaceholder,
    NestedPlaceholder,
    UnterminatedPlaceholder,
)

log = logging.getLogger(__name__)

OPEN = "{{"
CLOSE = "}}"


class LexerState(enum.Enum):
    IN_LITERAL = "in_literal"
    IN_PLACEHOLDER = "in_placeholder"


def iter_tokens(source: str) -> Iterator[Token]:
    """Lazily yield tokens from `source`, left to right.

    Literal runs are yielded as soon as the next `{{` is seen, so a caller
    consuming the iterator sees every token before the first error. Token
    and error offsets count UTF-8 bytes from the start of `source`.

    Raises:
        UnterminatedPlaceholder: input ends inside a placeholder.
        EmptyPlaceholder: a placeholder has nothing but whitespace.
        NestedPlaceholder: `{{` appears inside an open placeholder.
    """
    state = LexerState.IN_LITERAL
    pos = 0
    start = 0  # index of the open `{{` while IN_PLACEHOLDER
    length = len(source)
    byte_offset = _ByteOffsets(source)

    while pos < length:
        if state is LexerState.IN_LITERAL:
            found = source.find(OPEN, pos)
            if found == -1:
                yield Literal(source[pos:], byte_offset(pos))
                pos = length
                break
            if found > pos:
                yield Literal(source[pos:found], byte_offset(pos))
            start = found
            pos = found + len(OPEN)
            state = LexerState.IN_PLACEHOLDER
        else:
            close = source.find(CLOSE, pos)
            nested = source.find(OPEN, pos)
            if nested != -1 and (close == -1 or nested < close):
                raise NestedPlaceholder(byte_offset(nested), source, nested)
            if close == -1:
                break

            path = source[pos:close].strip()
            if not path:
                raise EmptyPlaceholder(byte_offset(start), source, start)
            yield Placeholder(path, byte_offset(start))
            pos = close + len(CLOSE)
            state = LexerState.IN_LITERAL

    if state is LexerState.IN_PLACEHOLDER:
        raise UnterminatedPlaceholder(byte_offset(start), source, start)


def tokenize(source: str) -> List[Token]:
    """Tokenize the whole of `source` into a list."""
    tokens = list(iter_tokens(source))
    log.debug("Tokenized %d chars into %d tokens", len(source), len(tokens))
    return tokens


class _ByteOffsets:
    """Maps str indexes to UTF-8 byte offsets for increasing indexes."""

    def __init__(self, source: str):
        self.source = source
        self.index = 0
        self.offset = 0

    def __call__(self, index: int) -> int:
        if index < self.index:
            self.index = self.offset = 0
        chunk = self.source[self.index : index]
        self.offset += len(chunk.encode("utf-8", "surrogatepass"))
        self.index = index
        return self.offset
