# lstheme

Theme definitions for a colourful directory lister. It covers three themes:

- **colour theme** (`lstheme.color`): colours for users, groups, permissions,
  attributes, dates, sizes, inodes, links, tree edges, git status and file types.
- **icon theme** (`lstheme.icon`): icons by file name, by extension and by file type.
- **git symbols** (`lstheme.git`): the one-character markers for each git status.

Each theme has built-in defaults. A YAML document only has to name the values you want
to change. Anything it leaves out keeps its default, and an empty document gives the
defaults. Keys are written in kebab-case, for example `exec-sticky`, `tree-edge`,
`git-status`, `symlink-dir` and `new-in-index`. Unknown keys are rejected.

## Installation

```
pip install lstheme
```

## Colour themes

```python
from lstheme.color import ColorTheme, AnsiValue, Rgb

theme = ColorTheme.from_yaml("""
user: 130
group: "#ff007f"
permission:
  read: dark_green
  write: [255, 200, 0]
""")

assert theme.user == AnsiValue(130)
assert theme.group == Rgb(255, 0, 127)
assert theme.date == ColorTheme.default_dark().date
```

`ColorTheme` is a dataclass. Its defaults are the dark theme, which
`ColorTheme.default_dark()` also returns. The sections are their own dataclasses:

- `Permission`, `Attributes`, `Date`, `Size`, `INode`, `Links` and `GitStatus`, each
  set from the key of the same name (`git-status` for `GitStatus`);
- `user`, `group` and `tree-edge`, which are single colours.

There is also a `file_type` field, a `FileType` holding `File`, `Dir` and `Symlink`
sections. It keeps its defaults and cannot be set from a theme document.

Every section has a `from_mapping(mapping)` class method that builds it from an
already-parsed mapping. `ColorTheme` also has `from_yaml(text)` and `from_path(path)`.

A colour is one of these types:

- `NamedColor`, an enum of the sixteen names `black`, `blue`, `dark_blue`, `cyan`,
  `dark_cyan`, `green`, `dark_green`, `grey`, `dark_grey`, `magenta`,
  `dark_magenta`, `red`, `dark_red`, `white`, `yellow`, `dark_yellow`;
- `AnsiValue(n)`, a 256-colour palette index from 0 to 255;
- `Rgb(r, g, b)`, a true colour.

`parse_color(value)` turns one YAML value into a colour. It accepts:

- a colour name, in any letter case;
- an integer from 0 to 255;
- `ansi_(n)`;
- `rgb_(r,g,b)`;
- a hex string such as `"#ff007f"`;
- a list of three bytes, `[r, g, b]`.

## Icon themes

```python
from lstheme.icon import IconTheme

icons = IconTheme.from_yaml("""
name:
  cargo.toml: "📦"
extension:
  rs: "🦀"
filetype:
  dir: "D"
""")

assert icons.name["cargo.toml"] == "📦"
assert icons.name["cargo.lock"] == "\ue68b"   # default kept
assert icons.extension["rs"] == "🦀"
assert icons.filetype.dir == "D"
```

The entries you give under `name` and `extension` are added to the built-in tables and
replace only the keys you name. Numeric keys are taken as strings, and an empty value
becomes an empty string.

The built-in tables come from `lstheme.icon_names.default_icons_by_name()` and
`lstheme.icon_extensions.default_icons_by_extension()`. Each call returns a fresh
dictionary. The keys are lower case, so look names and extensions up in lower case.

`ByType` holds the icons by file type:

- `dir`, `file`, `pipe`, `socket` and `executable`;
- `device-char` and `device-block`;
- `special`;
- `symlink-dir` and `symlink-file`.

`IconTheme.unicode()` gives a theme that uses plain Unicode emoji for file types
(`ByType.unicode()`) in place of Nerd Font glyphs, and has empty name and extension
tables.

## Git status symbols

```python
from lstheme.git import GitThemeSymbols

symbols = GitThemeSymbols.from_yaml("modified: '~'")
assert symbols.modified == "~"
assert symbols.new_in_index == "N"
```

The default symbols are:

| Status           | Symbol |
|------------------|--------|
| `default`        | `-`    |
| `unmodified`     | `.`    |
| `new-in-index`   | `N`    |
| `new-in-workdir` | `?`    |
| `deleted`        | `D`    |
| `modified`       | `M`    |
| `renamed`        | `R`    |
| `ignored`        | `I`    |
| `typechange`     | `T`    |
| `conflicted`     | `C`    |

## Lower-level helpers

`lstheme.schema` holds the shared pieces:

- `load_yaml(text)` and `load_path(path)` parse a document into a dictionary;
- `check_fields(section, mapping, allowed)` rejects non-mappings and unknown keys.

## Errors

Every loader raises `lstheme.schema.ThemeError`, a subclass of `ValueError`, in these
cases:

- the YAML is malformed;
- a file cannot be read;
- the document or a section is not a mapping;
- a key is unknown;
- a colour is not one of the accepted forms or is out of range;
- an icon or symbol is not a string.

## What this package does not do

This package only defines and loads themes. It does not:

- list directories;
- provide a command;
- detect the terminal's background;
- turn colours into terminal escape sequences.