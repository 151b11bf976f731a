"""Shared error handling for stachecli."""

import sys
from typing import NoReturn

import typer
from pydantic import ValidationError

from stache.exceptions import StacheError, TemplateSyntaxError


class StacheCliError(Exception):
    """Base exception for CLI-level failures (files, arguments)."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        self.message = message
        self.exit_code = exit_code
        super().__init__(message)


def exit_with_error(message: str, exit_code: int = 1) -> NoReturn:
    """Exit the program with an error message."""
    typer.secho(f"Error: {message}", err=True, fg=typer.colors.RED)
    sys.exit(exit_code)


def handle_error(error: Exception, source_name: str | None = None) -> NoReturn:
    """Report a template, config or CLI error and exit."""
    if isinstance(error, StacheCliError):
        exit_with_error(error.message, error.exit_code)
    elif isinstance(error, TemplateSyntaxError) and source_name:
        exit_with_error(f"{source_name}:{error.line}:{error.column}: {error}")
    elif isinstance(error, ValidationError):
        exit_with_error(f"Invalid configuration: {error}")
    elif isinstance(error, (StacheError, FileNotFoundError, ValueError)):
        exit_with_error(str(error))
    else:
        # Unexpected error
        typer.secho(f"Unexpected error: {error}", err=True, fg=typer.colors.RED)
        sys.exit(1)
