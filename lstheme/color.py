"""Color theme: the colors used for each part of a listing."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, ClassVar, TypeVar, Union

from .schema import ThemeError, check_fields, load_path, load_yaml

_EXPECTING = (
    "`black`, `blue`, `dark_blue`, `cyan`, `dark_cyan`, `green`, `dark_green`, "
    "`grey`, `dark_grey`, `magenta`, `dark_magenta`, `red`, `dark_red`, `white`, "
    "`yellow`, `dark_yellow`, `u8`, or `3 u8 array`"
)
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class NamedColor(Enum):
    """One of the sixteen named terminal colors."""

    BLACK = "black"
    DARK_GREY = "dark_grey"
    RED = "red"
    DARK_RED = "dark_red"
    GREEN = "green"
    DARK_GREEN = "dark_green"
    YELLOW = "yellow"
    DARK_YELLOW = "dark_yellow"
    BLUE = "blue"
    DARK_BLUE = "dark_blue"
    MAGENTA = "magenta"
    DARK_MAGENTA = "dark_magenta"
    CYAN = "cyan"
    DARK_CYAN = "dark_cyan"
    WHITE = "white"
    GREY = "grey"


def _check_byte(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
        raise ValueError(f"{name} must be an integer in 0..=255, got {value!r}")


@dataclass(frozen=True)
class AnsiValue:
    """A color from the 256-color terminal palette."""

    value: int

    def __post_init__(self) -> None:
        _check_byte("value", self.value)


@dataclass(frozen=True)
class Rgb:
    """A true color given by its red, green and blue components."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            _check_byte(name, getattr(self, name))


Color = Union[NamedColor, AnsiValue, Rgb]


def _parse_byte(text: str) -> int | None:
    text = text.strip()
    if not text.isdigit():
        return None
    number = int(text)
    return number if number <= 255 else None


def _parse_color_name(text: str) -> Color:
    lowered = text.lower()
    try:
        return NamedColor(lowered)
    except ValueError:
        pass
    if lowered.startswith("ansi_(") and lowered.endswith(")"):
        number = _parse_byte(lowered[len("ansi_("):-1])
        if number is not None:
            return AnsiValue(number)
    elif lowered.startswith("rgb_(") and lowered.endswith(")"):
        parts = [_parse_byte(part) for part in lowered[len("rgb_("):-1].split(",")]
        if len(parts) == 3 and None not in parts:
            return Rgb(*parts)
    elif text.startswith("#") and len(text) == 7 and set(text[1:]) <= _HEX_DIGITS:
        return Rgb(int(text[1:3], 16), int(text[3:5], 16), int(text[5:7], 16))
    raise ThemeError(f"unknown color {text!r}, expected {_EXPECTING}")


def parse_color(value: Any) -> Color:
    """Turn a YAML scalar or list into a color.

    Accepts a color name, ``ansi_(n)``, ``rgb_(r,g,b)``, ``#rrggbb``, an
    integer palette index up to 255, or a list of three bytes.
    """
    if isinstance(value, (NamedColor, AnsiValue, Rgb)):
        return value
    if isinstance(value, str):
        return _parse_color_name(value)
    if isinstance(value, bool):
        raise ThemeError(f"invalid type: boolean {value!r}, expected {_EXPECTING}")
    if isinstance(value, int):
        if not 0 <= value <= 255:
            raise ThemeError(f"invalid value: integer {value}, expected {_EXPECTING}")
        return AnsiValue(value)
    if isinstance(value, (list, tuple)):
        if len(value) != 3:
            raise ThemeError(
                f"invalid length {len(value)}, expected a list of size 3(RGB)"
            )
        for component in value:
            if isinstance(component, bool) or not isinstance(component, int) \
                    or not 0 <= component <= 255:
                raise ThemeError(
                    f"invalid RGB component {component!r}, expected u8"
                )
        return Rgb(*value)
    raise ThemeError(f"invalid type: {type(value).__name__}, expected {_EXPECTING}")


_T = TypeVar("_T")


def _build(cls: type[_T], mapping: Mapping[Any, Any]) -> _T:
    """Build a theme section from a parsed YAML mapping.

    Field names map to kebab-case keys; unknown keys are rejected and missing
    keys keep their defaults.
    """
    section: str = getattr(cls, "_section", "theme")
    nested_types: dict[str, Any] = getattr(cls, "_nested", {})
    keys = {
        f.name.replace("_", "-"): f.name
        for f in fields(cls)  # type: ignore[arg-type]
        if f.metadata.get("yaml", True)
    }
    data = check_fields(section, mapping, keys)
    values: dict[str, Any] = {}
    for key, raw in data.items():
        name = keys[key]
        nested = nested_types.get(name)
        if nested is not None:
            values[name] = nested.from_mapping(raw)
            continue
        try:
            values[name] = parse_color(raw)
        except ThemeError as exc:
            raise ThemeError(f"{section}.{key}: {exc}") from exc
    return cls(**values)


@dataclass
class Permission:
    _section: ClassVar[str] = "permission"

    read: Color = NamedColor.DARK_GREEN
    write: Color = NamedColor.DARK_YELLOW
    exec: Color = NamedColor.DARK_RED
    exec_sticky: Color = AnsiValue(5)
    no_access: Color = AnsiValue(245)
    octal: Color = AnsiValue(6)
    acl: Color = NamedColor.DARK_CYAN
    context: Color = NamedColor.CYAN

    @classmethod
    def from_mapping(cls, mapping: Mapping[Any, Any]) -> Permission:
        """Build from a parsed YAML mapping."""
        return _build(cls, mapping)


@dataclass
class Attributes:
    _section: ClassVar[str] = "attributes"

    archive: Color = NamedColor.DARK_GREEN
    read: Color = NamedColor.DARK_YELLOW
    hidden: Color = AnsiValue(13)
    system: Color = AnsiValue(13)

    @classmethod
    def from_mapping(cls, mapping: Mapping[Any, Any]) -> Attributes:
        """Build from a parsed YAML mapping."""
        return _build(cls, mapping)


@dataclass
class File:
    _section: ClassVar[str] = "file"

    exec_uid: Color = AnsiValue(40)
    uid_no_exec: Color = AnsiValue(184)
    exec_no_uid: Color = AnsiValue(40)
    no_exec_no_uid: Color = AnsiValue(184)

    @classmethod
    def from_mapping(cls, mapping: Mapping[Any, Any]) -> File:
        """Build from a parsed YAML mapping."""
        return _build(cls, mapping)


@dataclass
class Dir:
    _section: ClassVar[str] = "dir"

    uid: Color = AnsiValue(33)
    no_uid: Color = AnsiValue(33)

    @classmethod
    def from_mapping(cls, mapping: Mapping[Any, Any]) -> Dir:
        """Build from a parsed YAML mapping."""
        return _build(cls, mapping)


@dataclass
class Symlink:
    _section: ClassVar[str] = "symlink"

    default: Color = AnsiValue(44)
    broken: Color = AnsiValue(124)
    missing_target: Color = AnsiValue(124)

    @classmethod
    def from_mapping(cls, mapping: Mapping[Any, Any]) -> Symlink:
        """Build from a parsed YAML mapping."""
        return _build(cls, mapping)


@dataclass
class FileType:
    _section: ClassVar[str] = "file-type"
    _nested: ClassVar[dict[str, Any]] = {
        "file": File,
        "dir": Dir,
        "symlink": Symlink,
    }

    file: File = field(default_factory=File)
    dir: Dir = field(default_factory=Dir)
    pipe: Color = AnsiValue(44)
    symlink: Symlink = field(default_factory=Symlink)
    block_device: Color = AnsiValue(44)
    char_device: Color = AnsiValue(172)
    socket: Color = AnsiValue(44)
    special: Color = AnsiValue(44)

    @classmethod
    def from_mapping(cls, mapping: Mapping[Any, Any]) -> FileType:
        """Build from a parsed YAML mapping."""
        return _build(cls, mapping)


@dataclass
class Date:
    _section: ClassVar[str] = "date"

    hour_old: Color = AnsiValue(208)
    day_old: Color = AnsiValue(220)
    week_old: Color = AnsiValue(154)
    month_old: Color = AnsiValue(156)
    older: Color = AnsiValue(151)

    @classmethod
    def from_mapping(cls, mapping: Mapping[Any, Any]) -> Date:
        """Build from a parsed YAML mapping."""
        return _build(cls, mapping)


@dataclass
class Size:
    _section: ClassVar[str] = "size"

    none: Color = AnsiValue(245)
    small: Color = AnsiValue(229)
    medium: Color = AnsiValue(216)
    large: Color = AnsiValue(172)

    @classmethod
    def from_mapping(cls, mapping: Mapping[Any, Any]) -> Size:
        """Build from a parsed YAML mapping."""
        return _build(cls, mapping)


@dataclass
class INode:
    _section: ClassVar[str] = "inode"

    valid: Color = AnsiValue(13)
    invalid: Color = AnsiValue(245)

    @classmethod
    def from_mapping(cls, mapping: Mapping[Any, Any]) -> INode:
        """Build from a parsed YAML mapping."""
        return _build(cls, mapping)


@dataclass
class Links:
    _section: ClassVar[str] = "links"

    valid: Color = AnsiValue(13)
    invalid: Color = AnsiValue(245)

    @classmethod
    def from_mapping(cls, mapping: Mapping[Any, Any]) -> Links:
        """Build from a parsed YAML mapping."""
        return _build(cls, mapping)


@dataclass
class GitStatus:
    _section: ClassVar[str] = "git-status"

    default: Color = AnsiValue(245)
    unmodified: Color = AnsiValue(245)
    ignored: Color = AnsiValue(245)
    new_in_index: Color = NamedColor.DARK_GREEN
    new_in_workdir: Color = NamedColor.DARK_GREEN
    typechange: Color = NamedColor.DARK_YELLOW
    deleted: Color = NamedColor.DARK_RED
    renamed: Color = NamedColor.DARK_GREEN
    modified: Color = NamedColor.DARK_YELLOW
    conflicted: Color = NamedColor.DARK_RED

    @classmethod
    def from_mapping(cls, mapping: Mapping[Any, Any]) -> GitStatus:
        """Build from a parsed YAML mapping."""
        return _build(cls, mapping)


@dataclass
class ColorTheme:
    """The full color theme; the defaults are the dark theme."""

    _section: ClassVar[str] = "color theme"
    _nested: ClassVar[dict[str, Any]] = {
        "permission": Permission,
        "attributes": Attributes,
        "date": Date,
        "size": Size,
        "inode": INode,
        "links": Links,
        "git_status": GitStatus,
    }

    user: Color = AnsiValue(230)
    group: Color = AnsiValue(187)
    permission: Permission = field(default_factory=Permission)
    attributes: Attributes = field(default_factory=Attributes)
    date: Date = field(default_factory=Date)
    size: Size = field(default_factory=Size)
    inode: INode = field(default_factory=INode)
    tree_edge: Color = AnsiValue(245)
    links: Links = field(default_factory=Links)
    git_status: GitStatus = field(default_factory=GitStatus)
    # Not configurable from a theme file.
    file_type: FileType = field(default_factory=FileType, metadata={"yaml": False})

    @classmethod
    def default_dark(cls) -> ColorTheme:
        """The theme suited to terminals with a dark background."""
        return cls()

    @classmethod
    def from_mapping(cls, mapping: Mapping[Any, Any]) -> ColorTheme:
        """Build a theme from a parsed YAML mapping."""
        return _build(cls, mapping)

    @classmethod
    def from_yaml(cls, text: str) -> ColorTheme:
        """Build a theme from YAML text, filling gaps with the defaults."""
        return cls.from_mapping(load_yaml(text))

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> ColorTheme:
        """Build a theme from the YAML file at ``path``."""
        return cls.from_mapping(load_path(path))