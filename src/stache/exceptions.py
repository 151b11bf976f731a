"""Stache Exceptions

Errors raised while tokenizing, parsing and rendering templates.
"""

from __future__ import annotations


class StacheError(Exception):
    """Base exception for all stache errors."""

    pass


class TemplateSyntaxError(StacheError):
    """Base for errors found while scanning template source."""

    reason = "Template syntax error"

    def __init__(
        self, offset: int, source: str | None = None, position: int | None = None
    ):
        # offset counts UTF-8 bytes; position is the str index used for line:column
        self.offset = offset
        self.position = offset if position is None else position
        self.line, self.column = _line_column(source, self.position)
        if source is None:
            where = f"offset {offset}"
        else:
            where = f"{self.line}:{self.column}"
        super().__init__(f"{self.reason} at {where}")


class UnterminatedPlaceholder(TemplateSyntaxError):
    """Raised when input ends inside a `{{ ... }}` placeholder."""

    reason = "Unterminated placeholder"


class EmptyPlaceholder(TemplateSyntaxError):
    """Raised for `{{}}` or a placeholder holding only whitespace."""

    reason = "Empty placeholder"


class NestedPlaceholder(TemplateSyntaxError):
    """Raised when `{{` appears before the enclosing placeholder is closed."""

    reason = "Nested placeholder"


class InvalidFieldPath(StacheError):
    """Raised when a placeholder path has a segment that is not an identifier."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Invalid field path: {path!r}")


class RenderError(StacheError):
    """Base for errors raised while rendering a field."""

    reason = "Cannot render field"

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"{self.reason}: {path}")


class NonScalarField(RenderError):
    """Raised when a field resolves to a mapping or a sequence."""

    reason = "Field does not resolve to a scalar"


class MissingField(RenderError):
    """Raised in strict mode when a field cannot be resolved."""

    reason = "Missing field"


class UnsupportedValue(RenderError):
    """Raised when a field resolves to a value outside the data model."""

    reason = "Unsupported value type for field"


def _line_column(source: str | None, offset: int) -> tuple[int, int]:
    """1-based line and column of `offset` in `source`."""
    if source is None:
        return 0, 0
    line = source.count("\n", 0, offset) + 1
    column = offset - (source.rfind("\n", 0, offset) + 1) + 1
    return line, column
