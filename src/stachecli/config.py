"""Configuration management for stachecli.

Schema of stache.yaml:
- formatter: name of the scalar formatter (identity, html, urlize, markdown)
- strict: raise on missing fields instead of rendering ""
- urlize: options for the urlize formatter
- defaults: data merged underneath every render's data
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from stache.compiler.formatters import FORMATTERS, Formatter, get_formatter, make_urlizer

CONFIG_FILENAME = "stache.yaml"


class UrlizeConfig(BaseModel):
    """Options for the urlize formatter."""

    lower: bool = Field(default=True, description="Lowercase the result")
    remove_accents: bool = Field(
        default=False, description="Strip accents after NFD decomposition"
    )


class StacheConfig(BaseModel):
    """Main stache.yaml configuration."""

    formatter: str = Field(default="identity", description="Scalar formatter name")
    strict: bool = Field(default=False, description="Raise on missing fields")
    urlize: UrlizeConfig = Field(default_factory=UrlizeConfig)
    defaults: dict[str, Any] = Field(
        default_factory=dict, description="Data merged under every render"
    )

    @field_validator("formatter")
    @classmethod
    def check_formatter(cls, value: str) -> str:
        if value not in FORMATTERS:
            known = ", ".join(sorted(FORMATTERS))
            raise ValueError(f"unknown formatter '{value}' (expected one of: {known})")
        return value

    def build_formatter(self, name: str | None = None) -> Formatter:
        """Resolve a formatter by name, falling back to the configured one."""
        name = name or self.formatter
        if name == "urlize":
            return make_urlizer(
                lower=self.urlize.lower, remove_accents=self.urlize.remove_accents
            )
        return get_formatter(name)


def find_config_file(start: Path | None = None) -> Path | None:
    """Find stache.yaml in the given directory or its parents."""
    cwd = start or Path.cwd()
    for parent in [cwd] + list(cwd.parents):
        candidate = parent / CONFIG_FILENAME
        if candidate.exists():
            return candidate
    return None


def load_config(path: Path | None = None) -> StacheConfig:
    """Load config from `path`, or from the nearest stache.yaml.

    Returns the default config when no file is found.
    """
    if path is None:
        path = find_config_file()
        if path is None:
            return StacheConfig()
    elif not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return StacheConfig.model_validate(data)
