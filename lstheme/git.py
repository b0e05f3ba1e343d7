"""Symbols shown for each git status of a file."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from .schema import ThemeError, check_fields, load_path, load_yaml


@dataclass
class GitThemeSymbols:
    """The one-character markers for each git status."""

    default: str = "-"
    unmodified: str = "."
    new_in_index: str = "N"
    new_in_workdir: str = "?"
    deleted: str = "D"
    modified: str = "M"
    renamed: str = "R"
    ignored: str = "I"
    typechange: str = "T"
    conflicted: str = "C"

    @classmethod
    def from_mapping(cls, mapping: Mapping[Any, Any]) -> GitThemeSymbols:
        """Build the symbols from a parsed YAML mapping; missing keys keep defaults."""
        keys = {f.name.replace("_", "-"): f.name for f in fields(cls)}
        data = check_fields("git theme", mapping, keys)
        values: dict[str, str] = {}
        for key, raw in data.items():
            if raw is None:
                raw = ""
            if not isinstance(raw, str):
                raise ThemeError(
                    f"git theme.{key}: invalid type {type(raw).__name__}, expected a string"
                )
            values[keys[key]] = raw
        return cls(**values)

    @classmethod
    def from_yaml(cls, text: str) -> GitThemeSymbols:
        """Build the symbols from YAML text."""
        return cls.from_mapping(load_yaml(text))

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> GitThemeSymbols:
        """Build the symbols from the YAML file at ``path``."""
        return cls.from_mapping(load_path(path))