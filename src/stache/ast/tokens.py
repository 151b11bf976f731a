"""Token types produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Literal:
    """A run of plain template text, at UTF-8 byte `offset`."""

    text: str
    offset: int = 0


@dataclass(frozen=True)
class Placeholder:
    """A `{{ path }}` placeholder; `path` is the trimmed inner text."""

    path: str
    offset: int = 0  # UTF-8 byte offset of the opening `{{`


Token = Union[Literal, Placeholder]
