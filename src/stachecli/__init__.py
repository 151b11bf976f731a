"""Command-line host for the stache template compiler."""

from ._version import __version__

__all__ = ["__version__"]
