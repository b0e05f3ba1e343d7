import pytest

from lstheme.icon import ByType, IconTheme
from lstheme.schema import ThemeError

PARTIAL_DEFAULT_YAML = (
    "---\n"
    "name:\n"
    "  .trash: \uf1f8\n"
    "  .cargo: \ue68b\n"
    "  .emacs.d: \ue632\n"
    "  a.out: \uf489\n"
    "extension:\n"
    "  go: \ue627\n"
    "  hs: \ue777\n"
    "  rs: \ue68b\n"
    "filetype:\n"
    "  dir: \uf115\n"
    "  file: \uf016\n"
    "  pipe: \U000f0232\n"
    "  socket: \U000f01a8\n"
    "  executable: \uf489\n"
    "  symlink-dir: \uf482\n"
    "  symlink-file: \uf481\n"
    "  device-char: \ue601\n"
    "  device-block: \U000f072b\n"
    "  special: \uf2dc\n"
)


def test_default_theme():
    default = IconTheme()
    loaded = IconTheme.from_yaml(PARTIAL_DEFAULT_YAML)
    assert loaded.filetype.dir == default.filetype.dir
    assert loaded == default


def test_tmp_partial_default_theme_file(tmp_path):
    path = tmp_path / "icon.yaml"
    path.write_text(PARTIAL_DEFAULT_YAML + "\n", encoding="utf-8")
    decoded = IconTheme.from_path(path)
    assert decoded.filetype.dir == IconTheme().filetype.dir
    assert decoded.filetype == ByType()


def test_empty_theme_return_default():
    assert IconTheme.from_yaml("  ") == IconTheme()


def test_partial_theme_return_default():
    theme = IconTheme.from_yaml("filetype:\n  dir: \uf115")
    assert theme.filetype.dir == IconTheme().filetype.dir
    assert theme == IconTheme()


def test_serde_dir_from_yaml():
    theme = IconTheme.from_yaml("filetype:\n  dir: \uf115")
    assert theme.filetype.dir == "\uf115"


def test_custom_icon_by_name():
    theme = IconTheme.from_yaml("name:\n  cargo.toml: \U0001f4e6")
    assert theme.name["cargo.toml"] == "\U0001f4e6"


def test_default_icon_by_name_with_custom_entry():
    theme = IconTheme.from_yaml("name:\n  cargo.toml: \U0001f4e6")
    assert theme.name["cargo.lock"] == "\ue68b"


def test_custom_icon_by_extension():
    theme = IconTheme.from_yaml("extension:\n  rs: \U0001f980")
    assert theme.extension["rs"] == "\U0001f980"


def test_default_icon_by_extension_with_custom_entry():
    theme = IconTheme.from_yaml("extension:\n  rs: \U0001f980")
    assert theme.extension["go"] == "\ue627"


def test_new_extension_is_added_to_defaults():
    theme = IconTheme.from_yaml("extension:\n  xyz: X")
    assert theme.extension["xyz"] == "X"
    assert theme.extension["7z"] == "\uf410"


def test_filetype_partial_override_keeps_other_defaults():
    theme = IconTheme.from_yaml("filetype:\n  symlink-dir: L")
    assert theme.filetype.symlink_dir == "L"
    assert theme.filetype.file == "\uf016"


def test_unicode_theme():
    theme = IconTheme.unicode()
    assert theme.name == {}
    assert theme.extension == {}
    assert theme.filetype.dir == "\U0001f4c2"
    assert theme.filetype.executable == "\U0001f3d7 "


def test_by_type_unicode_from_mapping_roundtrip():
    theme = ByType.from_mapping({"dir": "\U0001f4c2"})
    assert theme.dir == ByType.unicode().dir
    assert theme.file == ByType().file


def test_unknown_top_level_field_rejected():
    with pytest.raises(ThemeError):
        IconTheme.from_yaml("colors:\n  dir: x")


def test_unknown_filetype_field_rejected():
    with pytest.raises(ThemeError):
        IconTheme.from_yaml("filetype:\n  folder: x")


def test_non_string_filetype_value_rejected():
    with pytest.raises(ThemeError):
        IconTheme.from_yaml("filetype:\n  dir: [1, 2]")


def test_name_must_be_mapping():
    with pytest.raises(ThemeError):
        IconTheme.from_yaml("name: [a, b]")


def test_missing_file_raises(tmp_path):
    with pytest.raises(ThemeError):
        IconTheme.from_path(tmp_path / "missing.yaml")