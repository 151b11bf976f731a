from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Mapping, Optional, Tuple, Union

if TYPE_CHECKING:
    from stache.compiler.formatters import Formatter


@dataclass(frozen=True)
class TextNode:
    """Static text, emitted verbatim."""

    text: str


@dataclass(frozen=True)
class FieldNode:
    """A reference into the data context.

    `path` holds the validated segments; an empty path addresses the root
    context. `expr` is the placeholder text as written and is what errors
    report.
    """

    path: Tuple[str, ...]
    expr: str


Node = Union[TextNode, FieldNode]


@dataclass(frozen=True)
class CompiledTemplate:
    """Parsed template, ready to render any number of times."""

    nodes: Tuple[Node, ...]
    source: str = ""

    @property
    def fields(self) -> Tuple[str, ...]:
        """Distinct field expressions in first-seen order."""
        seen: dict[str, None] = {}
        for node in self.nodes:
            if isinstance(node, FieldNode):
                seen.setdefault(node.expr, None)
        return tuple(seen)

    def render(
        self,
        data: Mapping[str, Any],
        formatter: Optional[Union["Formatter", Callable[[str], str]]] = None,
        strict: bool = False,
    ) -> str:
        from stache.compiler.renderer import render

        return render(self, data, formatter=formatter, strict=strict)
