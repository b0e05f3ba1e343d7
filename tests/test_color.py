import pytest

from lstheme.color import (
    AnsiValue,
    Attributes,
    ColorTheme,
    Date,
    Dir,
    File,
    FileType,
    GitStatus,
    INode,
    Links,
    NamedColor,
    Permission,
    Rgb,
    Size,
    Symlink,
    parse_color,
)
from lstheme.schema import ThemeError

DEFAULT_YAML = """---
user: 230
group: 187
permission:
  read: dark_green
  write: dark_yellow
  exec: dark_red
  exec-sticky: 5
  no-access: 245
date:
  hour-old: 208
  day-old: 220
  older: 151
size:
  none: 245
  small: 229
  medium: 216
  large: 172
inode:
  valid: 13
  invalid: 245
links:
  valid: 13
  invalid: 245
tree-edge: 245
"""


def test_default_theme():
    assert ColorTheme.default_dark() == ColorTheme.from_yaml(DEFAULT_YAML)


def test_default_theme_file(tmp_path):
    theme = tmp_path / "theme.yaml"
    theme.write_text(DEFAULT_YAML + "\n", encoding="utf-8")
    assert ColorTheme.default_dark() == ColorTheme.from_path(theme)
    assert ColorTheme.default_dark() == ColorTheme.from_path(str(theme))


def test_empty_theme_return_default():
    assert ColorTheme.from_yaml("user: 230") == ColorTheme.default_dark()


def test_fully_empty_document_returns_default():
    assert ColorTheme.from_yaml("") == ColorTheme.default_dark()


def test_first_level_theme_return_default_but_changed():
    loaded = ColorTheme.from_yaml("user: 130")
    expected = ColorTheme.default_dark()
    expected.user = AnsiValue(130)
    assert loaded == expected


def test_hexadecimal_colors():
    loaded = ColorTheme.from_yaml('user: "#ff007f"')
    assert loaded.user == Rgb(r=255, g=0, b=127)


def test_second_level_theme_return_default_but_changed():
    loaded = ColorTheme.from_yaml("---\npermission:\n  read: 130")
    expected = ColorTheme.default_dark()
    expected.permission.read = AnsiValue(130)
    assert loaded == expected


def test_default_dark_values():
    theme = ColorTheme.default_dark()
    assert theme.user == AnsiValue(230)
    assert theme.group == AnsiValue(187)
    assert theme.tree_edge == AnsiValue(245)
    assert theme.permission.exec_sticky == AnsiValue(5)
    assert theme.permission.context is NamedColor.CYAN
    assert theme.file_type.char_device == AnsiValue(172)
    assert theme.file_type.dir.uid == AnsiValue(33)
    assert theme.file_type.symlink.broken == AnsiValue(124)
    assert theme.git_status.conflicted is NamedColor.DARK_RED


def test_default_instances_are_independent():
    first = ColorTheme.default_dark()
    second = ColorTheme.default_dark()
    first.permission.read = AnsiValue(1)
    assert second.permission.read is NamedColor.DARK_GREEN


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("dark_green", NamedColor.DARK_GREEN),
        ("Dark_Blue", NamedColor.DARK_BLUE),
        ("grey", NamedColor.GREY),
        (0, AnsiValue(0)),
        (255, AnsiValue(255)),
        ([255, 0, 127], Rgb(255, 0, 127)),
        ("ansi_(12)", AnsiValue(12)),
        ("rgb_(1,2,3)", Rgb(1, 2, 3)),
        ("#ff007f", Rgb(255, 0, 127)),
    ],
)
def test_parse_color_accepts(raw, expected):
    assert parse_color(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [256, -1, True, 1.5, None, [1, 2], [1, 2, 3, 4], [1, 2, 256], [1, "a", 3],
     "purple", "#ff00", "#gg0000", "ansi_(300)", "rgb_(1,2)"],
)
def test_parse_color_rejects(raw):
    with pytest.raises(ThemeError):
        parse_color(raw)


def test_color_from_yaml_list():
    loaded = ColorTheme.from_yaml("group: [10, 20, 30]")
    assert loaded.group == Rgb(10, 20, 30)


def test_unknown_top_level_field_rejected():
    with pytest.raises(ThemeError):
        ColorTheme.from_yaml("colour: 5")


def test_file_type_is_not_configurable():
    with pytest.raises(ThemeError):
        ColorTheme.from_yaml("file-type:\n  pipe: 5")


def test_unknown_nested_field_rejected():
    with pytest.raises(ThemeError):
        ColorTheme.from_yaml("permission:\n  bogus: 5")


def test_invalid_nested_color_rejected():
    with pytest.raises(ThemeError, match="hour-old"):
        ColorTheme.from_yaml("date:\n  hour-old: 300")


def test_section_must_be_mapping():
    with pytest.raises(ThemeError):
        ColorTheme.from_yaml("size: 5")


def test_git_status_section():
    loaded = ColorTheme.from_yaml("git-status:\n  new-in-index: blue")
    assert loaded.git_status.new_in_index is NamedColor.BLUE
    assert loaded.git_status.deleted is NamedColor.DARK_RED


@pytest.mark.parametrize(
    "section",
    [Permission, Attributes, File, Dir, Symlink, FileType, Date, Size, INode, Links, GitStatus],
)
def test_sections_from_empty_mapping_are_default(section):
    assert section.from_mapping({}) == section()


def test_file_type_from_mapping_nested():
    loaded = FileType.from_mapping({"symlink": {"missing-target": "red"}, "pipe": 1})
    assert loaded.symlink.missing_target is NamedColor.RED
    assert loaded.symlink.default == AnsiValue(44)
    assert loaded.pipe == AnsiValue(1)


def test_ansi_value_range_checked():
    with pytest.raises(ValueError):
        AnsiValue(256)
    with pytest.raises(ValueError):
        Rgb(0, 0, -1)


def test_from_path_missing_file(tmp_path):
    with pytest.raises(ThemeError):
        ColorTheme.from_path(tmp_path / "absent.yaml")