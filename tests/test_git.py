import pytest

from lstheme.git import GitThemeSymbols
from lstheme.schema import ThemeError


def test_defaults():
    symbols = GitThemeSymbols()
    assert symbols.default == "-"
    assert symbols.unmodified == "."
    assert symbols.new_in_index == "N"
    assert symbols.new_in_workdir == "?"
    assert symbols.deleted == "D"
    assert symbols.modified == "M"
    assert symbols.renamed == "R"
    assert symbols.ignored == "I"
    assert symbols.typechange == "T"
    assert symbols.conflicted == "C"


def test_empty_yaml_gives_defaults():
    assert GitThemeSymbols.from_yaml("") == GitThemeSymbols()


def test_partial_override_keeps_other_defaults():
    symbols = GitThemeSymbols.from_yaml("modified: '~'\nnew-in-workdir: U\n")
    expected = GitThemeSymbols()
    expected.modified = "~"
    expected.new_in_workdir = "U"
    assert symbols == expected


def test_from_path_round_trip(tmp_path):
    text = "deleted: x\ntypechange: y\n"
    path = tmp_path / "git.yaml"
    path.write_text(text, encoding="utf-8")
    assert GitThemeSymbols.from_path(path) == GitThemeSymbols.from_yaml(text)


def test_empty_value_is_empty_string():
    assert GitThemeSymbols.from_yaml("ignored:").ignored == ""


def test_unknown_field_rejected():
    with pytest.raises(ThemeError):
        GitThemeSymbols.from_yaml("untracked: U")


def test_snake_case_key_rejected():
    with pytest.raises(ThemeError):
        GitThemeSymbols.from_yaml("new_in_index: N")


def test_non_string_value_rejected():
    with pytest.raises(ThemeError):
        GitThemeSymbols.from_yaml("modified: 5")
    with pytest.raises(ThemeError):
        GitThemeSymbols.from_mapping({"deleted": ["D"]})


def test_from_mapping_requires_mapping():
    with pytest.raises(ThemeError):
        GitThemeSymbols.from_mapping(["default"])