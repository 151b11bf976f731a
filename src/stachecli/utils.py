"""Shared utilities for CLI commands"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from .errors import StacheCliError

console = Console()
err_console = Console(stderr=True)

STDIN = "-"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the stache CLI.

    Log levels:
    - Normal: Only warnings/errors shown
    - Verbose (-v): INFO level
    - Debug (STACHE_DEBUG=1): DEBUG level, including library tokenizer/renderer records
    """
    debug = bool(os.environ.get("STACHE_DEBUG"))
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=err_console,
        show_time=verbose,
        show_path=debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    for name in ("stache", "stachecli"):
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.handlers = [handler]
        logger.propagate = False


def read_template(template: str) -> tuple[str, str]:
    """Read template text from a path, or from stdin for '-'.

    Returns:
        (source_name, text) where source_name is used in diagnostics.
    """
    if template == STDIN:
        return "<stdin>", sys.stdin.read()

    path = Path(template)
    if not path.exists():
        raise StacheCliError(f"Template not found: {path}")
    if not path.is_file():
        raise StacheCliError(f"Template is not a file: {path}")
    return str(path), path.read_text(encoding="utf-8")
