"""Loading and merging data contexts for rendering."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable

import msgspec
import yaml

from .errors import StacheCliError

log = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")
JSON_SUFFIXES = (".json",)


def load_data_file(path: Path) -> dict[str, Any]:
    """Load a YAML or JSON data file; the top level must be a mapping."""
    if not path.exists():
        raise StacheCliError(f"Data file not found: {path}")

    raw = path.read_bytes()
    suffix = path.suffix.lower()
    try:
        if suffix in JSON_SUFFIXES:
            data = msgspec.json.decode(raw)
        elif suffix in YAML_SUFFIXES:
            data = yaml.safe_load(raw)
        else:
            raise StacheCliError(
                f"Unsupported data file type '{suffix}' (use .yaml, .yml or .json)"
            )
    except (msgspec.DecodeError, yaml.YAMLError) as exc:
        raise StacheCliError(f"Failed to parse {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise StacheCliError(f"Data in {path} must be a mapping at the top level")

    log.debug("Loaded %d top-level keys from %s", len(data), path)
    return data


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge `override` into a copy of `base`; nested mappings merge too."""
    result = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def parse_assignment(assignment: str) -> dict[str, Any]:
    """Parse `a.b=value` into `{"a": {"b": value}}`.

    The value is read as a YAML scalar, so `n=3` gives an int and
    `flag=true` a bool.
    """
    key, sep, raw = assignment.partition("=")
    key = key.strip()
    if not sep or not key:
        raise StacheCliError(f"Invalid --set value '{assignment}' (expected KEY=VALUE)")

    parts = key.split(".")
    if any(not p for p in parts):
        raise StacheCliError(f"Invalid --set key '{key}'")

    try:
        value: Any = yaml.safe_load(raw) if raw.strip() else ""
    except yaml.YAMLError:
        value = raw

    for part in reversed(parts):
        value = {part: value}
    return value


def build_context(
    files: Iterable[Path],
    assignments: Iterable[str] = (),
    defaults: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Merge defaults, then data files left to right, then assignments."""
    context: dict[str, Any] = dict(defaults or {})
    for path in files:
        context = deep_merge(context, load_data_file(path))
    for assignment in assignments:
        context = deep_merge(context, parse_assignment(assignment))
    return context
