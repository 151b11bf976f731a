"""Renderer - evaluates a CompiledTemplate against a data context."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Tuple

from stache.ast.spec import CompiledTemplate, FieldNode, Node, TextNode
from stache.compiler.formatters import Formatter, identity
from stache.compiler.values import ValueKind, classify, format_scalar
from stache.exceptions import (
    MissingField,
    NonScalarField,
    UnsupportedValue,
)

log = logging.getLogger(__name__)

_MISSING = object()


class Renderer:
    """Renders compiled templates to text.

    Missing fields are lenient by default: a key absent at any segment, or
    a segment applied to something that is not a mapping, renders as the
    empty string. This keeps optional fields from aborting a render. Pass
    `strict=True` to get `MissingField` instead.

    A Renderer holds no per-render state and can be shared between
    threads.
    """

    def __init__(self, formatter: Optional[Formatter] = None, strict: bool = False):
        self.formatter = formatter or identity
        self.strict = strict

    def render(self, template: CompiledTemplate, data: Mapping[str, Any]) -> str:
        """Render `template` against `data`.

        Args:
            template: A template from `compile_template` or `parse`.
            data: Mapping of field names to values; never modified.

        Returns:
            The rendered text.

        Raises:
            NonScalarField: A field resolved to a mapping or sequence.
            UnsupportedValue: A field resolved to an unknown object type.
            MissingField: Strict mode only, a field could not be resolved.
        """
        parts = [self._render_node(node, data) for node in template.nodes]
        return "".join(parts)

    def _render_node(self, node: Node, data: Mapping[str, Any]) -> str:
        if isinstance(node, TextNode):
            return node.text
        if isinstance(node, FieldNode):
            return self._render_field(node, data)
        raise TypeError(f"Unexpected node: {node!r}")

    def _render_field(self, node: FieldNode, data: Mapping[str, Any]) -> str:
        value = _lookup(data, node.path)
        if value is _MISSING:
            if self.strict:
                raise MissingField(node.expr)
            log.debug("Field '%s' is missing, rendering empty", node.expr)
            return ""

        kind = classify(value)
        if kind is ValueKind.NULL:
            return ""
        if kind in (ValueKind.MAPPING, ValueKind.SEQUENCE):
            raise NonScalarField(node.expr)
        if kind is ValueKind.OTHER:
            raise UnsupportedValue(node.expr)
        return self.formatter(format_scalar(kind, value))


def render(
    template: CompiledTemplate,
    data: Mapping[str, Any],
    formatter: Optional[Formatter] = None,
    strict: bool = False,
) -> str:
    """Render `template` against `data` with a one-off Renderer."""
    return Renderer(formatter=formatter, strict=strict).render(template, data)


def _lookup(data: Mapping[str, Any], path: Tuple[str, ...]) -> Any:
    """Walk `path` through nested mappings; `_MISSING` if it falls off."""
    value: Any = data
    for segment in path:
        if classify(value) is not ValueKind.MAPPING or segment not in value:
            return _MISSING
        value = value[segment]
    return value
