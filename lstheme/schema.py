"""Loading of YAML theme documents and validation of their sections."""

from __future__ import annotations

import os
from collections.abc import Collection, Mapping
from typing import Any

import yaml


class ThemeError(ValueError):
    """Raised when a theme document cannot be read or does not fit the schema."""


def load_yaml(text: str) -> dict[Any, Any]:
    """Parse a YAML theme document into a mapping.

    An empty document gives an empty mapping, so every field keeps its default.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ThemeError(f"invalid YAML: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ThemeError(
            f"a theme must be a mapping, not {type(data).__name__}"
        )
    return data


def load_path(path: str | os.PathLike[str]) -> dict[Any, Any]:
    """Read and parse the YAML theme document stored at ``path``."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        raise ThemeError(f"cannot read theme file {os.fspath(path)!r}: {exc}") from exc
    return load_yaml(text)


def check_fields(
    section: str, mapping: Any, allowed: Collection[Any]
) -> Mapping[Any, Any]:
    """Check that ``mapping`` is a mapping whose keys all appear in ``allowed``.

    Returns the mapping unchanged; raises :class:`ThemeError` otherwise.
    """
    if not isinstance(mapping, Mapping):
        raise ThemeError(
            f"{section}: expected a mapping, not {type(mapping).__name__}"
        )
    unknown = [key for key in mapping if key not in allowed]
    if unknown:
        names = ", ".join(repr(key) for key in unknown)
        expected = ", ".join(f"`{key}`" for key in allowed)
        raise ThemeError(f"{section}: unknown field {names}, expected one of {expected}")
    return mapping