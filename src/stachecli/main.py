"""Stache CLI Main Entry Point

Renders `{{ field.path }}` templates against YAML or JSON data.

Usage:
    stache render page.html -d data.yaml        # Render to stdout
    stache render page.html -s user.name=Ada    # Set fields inline
    stache render - -d data.json < page.html    # Template from stdin
    stache render page.html -e html -o out.html # Escape fields, write a file
    stache check page.html                      # Validate, list fields
    stache tokens page.html                     # Show the token stream
    stache --version                            # Show version
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.table import Table

from stache import compile_template, tokenize
from stache.ast.tokens import Literal

from ._version import __version__
from .config import load_config
from .data import build_context
from .errors import handle_error
from .utils import console, read_template, setup_logging

log = logging.getLogger(__name__)

typer_app = typer.Typer(no_args_is_help=True, add_completion=False)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"stache {__version__}")
        raise typer.Exit()


@typer_app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Render {{ field.path }} templates against YAML or JSON data."""


@typer_app.command()
def render(
    template: str = typer.Argument(..., help="Template file, or '-' for stdin."),
    data_files: Optional[List[Path]] = typer.Option(
        None, "-d", "--data", help="YAML or JSON data file (repeatable)."
    ),
    assignments: Optional[List[str]] = typer.Option(
        None, "-s", "--set", help="Set a field, e.g. user.name=Ada (repeatable)."
    ),
    formatter: Optional[str] = typer.Option(
        None,
        "-e",
        "--formatter",
        help="Field formatter: identity, html, urlize or markdown.",
    ),
    strict: Optional[bool] = typer.Option(
        None, "--strict/--lenient", help="Fail on missing fields instead of rendering ''."
    ),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output", help="Write output to a file instead of stdout."
    ),
    config_file: Optional[Path] = typer.Option(
        None, "-c", "--config", help="Path to stache.yaml."
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging."),
) -> None:
    """Render a template against data."""
    setup_logging(verbose)
    source_name = None
    try:
        config = load_config(config_file)
        source_name, source = read_template(template)
        compiled = compile_template(source)
        data = build_context(data_files or [], assignments or [], config.defaults)
        text = compiled.render(
            data,
            formatter=config.build_formatter(formatter),
            strict=config.strict if strict is None else strict,
        )
    except Exception as exc:
        handle_error(exc, source_name)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text, encoding="utf-8")
        log.info("Wrote %d chars to %s", len(text), output)
    else:
        typer.echo(text, nl=False)


@typer_app.command()
def check(
    template: str = typer.Argument(..., help="Template file, or '-' for stdin."),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging."),
) -> None:
    """Validate template syntax and list the fields it references."""
    setup_logging(verbose)
    source_name = None
    try:
        source_name, source = read_template(template)
        compiled = compile_template(source)
    except Exception as exc:
        handle_error(exc, source_name)

    fields = compiled.fields
    typer.secho(f"{source_name}: OK ({len(fields)} fields)", fg=typer.colors.GREEN)
    for expr in fields:
        typer.echo(f"  {expr}")


@typer_app.command()
def tokens(
    template: str = typer.Argument(..., help="Template file, or '-' for stdin."),
) -> None:
    """Print the token stream of a template."""
    source_name = None
    try:
        source_name, source = read_template(template)
        token_list = tokenize(source)
    except Exception as exc:
        handle_error(exc, source_name)

    table = Table(title=source_name)
    table.add_column("offset", justify="right")
    table.add_column("kind")
    table.add_column("value")
    for token in token_list:
        if isinstance(token, Literal):
            table.add_row(str(token.offset), "literal", repr(token.text))
        else:
            table.add_row(str(token.offset), "placeholder", token.path)
    console.print(table)


def app() -> None:
    """Entry point for the `stache` console script."""
    typer_app()


if __name__ == "__main__":
    app()
