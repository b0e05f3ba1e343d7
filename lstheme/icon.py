"""Icon theme: the icons shown next to file names."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any

from .icon_extensions import default_icons_by_extension
from .icon_names import default_icons_by_name
from .schema import ThemeError, check_fields, load_path, load_yaml


def _as_text(section: str, key: Any, raw: Any) -> str:
    if raw is None:
        return ""
    if not isinstance(raw, str):
        raise ThemeError(
            f"{section}.{key}: invalid type {type(raw).__name__}, expected a string"
        )
    return raw


def _as_key(section: str, key: Any) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, (int, float)) and not isinstance(key, bool):
        return str(key)
    raise ThemeError(f"{section}: invalid key {key!r}, expected a string")


def _merged_icons(section: str, raw: Any, defaults: dict[str, str]) -> dict[str, str]:
    """Overlay the user's icons from ``raw`` on top of ``defaults``."""
    if raw is None:
        return defaults
    if not isinstance(raw, Mapping):
        raise ThemeError(f"{section}: expected a mapping, not {type(raw).__name__}")
    for key, value in raw.items():
        name = _as_key(section, key)
        defaults[name] = _as_text(section, name, value)
    return defaults


@dataclass
class ByType:
    """Icons chosen by the kind of file system entry."""

    dir: str = "\uf115"
    file: str = "\uf016"
    pipe: str = "\U000f0232"
    socket: str = "\U000f01a8"
    executable: str = "\uf489"
    device_char: str = "\ue601"
    device_block: str = "\U000f072b"
    special: str = "\uf2dc"
    symlink_dir: str = "\uf482"
    symlink_file: str = "\uf481"

    @classmethod
    def unicode(cls) -> ByType:
        """Icons drawn from plain Unicode emoji, for fonts without icon glyphs."""
        return cls(
            dir="\U0001f4c2",
            file="\U0001f4c4",
            pipe="\U0001f4e9",
            socket="\U0001f4ec",
            executable="\U0001f3d7 ",
            symlink_dir="\U0001f5c2",
            symlink_file="\U0001f516",
            device_char="\U0001f5a8",
            device_block="\U0001f4bd",
            special="\U0001f4df",
        )

    @classmethod
    def from_mapping(cls, mapping: Mapping[Any, Any]) -> ByType:
        """Build the icons from a parsed YAML mapping; missing keys keep defaults."""
        keys = {f.name.replace("_", "-"): f.name for f in fields(cls)}
        data = check_fields("filetype", mapping, keys)
        values = {keys[key]: _as_text("filetype", key, raw) for key, raw in data.items()}
        return cls(**values)


@dataclass
class IconTheme:
    """Icons looked up by file name, by extension, and by file type."""

    name: dict[str, str] = field(default_factory=default_icons_by_name)
    extension: dict[str, str] = field(default_factory=default_icons_by_extension)
    filetype: ByType = field(default_factory=ByType)

    @classmethod
    def unicode(cls) -> IconTheme:
        """A theme with emoji file-type icons and no name or extension icons."""
        return cls(name={}, extension={}, filetype=ByType.unicode())

    @classmethod
    def from_mapping(cls, mapping: Mapping[Any, Any]) -> IconTheme:
        """Build the theme from a parsed YAML mapping.

        Icons given by name or extension are added to the defaults, replacing
        those with the same key.
        """
        data = check_fields("icon theme", mapping, ("name", "extension", "filetype"))
        theme = cls()
        if "name" in data:
            theme.name = _merged_icons("name", data["name"], default_icons_by_name())
        if "extension" in data:
            theme.extension = _merged_icons(
                "extension", data["extension"], default_icons_by_extension()
            )
        if "filetype" in data:
            raw = data["filetype"]
            theme.filetype = ByType() if raw is None else ByType.from_mapping(raw)
        return theme

    @classmethod
    def from_yaml(cls, text: str) -> IconTheme:
        """Build the theme from YAML text."""
        return cls.from_mapping(load_yaml(text))

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> IconTheme:
        """Build the theme from the YAML file at ``path``."""
        return cls.from_mapping(load_path(path))