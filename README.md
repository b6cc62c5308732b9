# shellpath

Helpers for showing the current directory in a shell prompt. They turn long paths into
short ones that are easy to read.

## Installation

```
pip install shellpath
```

## Usage

All the functions live in `shellpath.directory`. Each one takes strings or path-like
objects and returns a string.

### Contracting a path

`contract_path(full_path, top_level_path, top_level_replacement)` removes the leading
`top_level_path` from `full_path` and puts `top_level_replacement` in its place. When the
two paths are equal, you get just the replacement. When `full_path` is not under
`top_level_path`, you get the whole path back with forward slashes.

```python
from shellpath.directory import contract_path

contract_path("/Users/astronaut/schematics/rocket", "/Users/astronaut", "~")
# '~/schematics/rocket'

contract_path(
    "/Users/astronaut/dev/rocket-controls/src",
    "/Users/astronaut/dev/rocket-controls",
    "rocket-controls",
)
# 'rocket-controls/src'
```

### Fish-style abbreviation

`to_fish_style(pwd_dir_length, dir_string, truncated_dir_string)` handles the part of a path
that comes before its truncated tail. It removes `truncated_dir_string` from the end of
`dir_string`, then shortens each directory that is left to its first `pwd_dir_length`
characters. It counts characters as grapheme clusters, so combining marks stay with the
letter they belong to. A name that starts with a dot keeps one extra character.

```python
from shellpath.directory import to_fish_style

to_fish_style(1, "~/starship/engines/booster/rocket", "engines/booster/rocket")
# '~/s/'

to_fish_style(1, "~/.starship/engines/booster/rocket", "engines/booster/rocket")
# '~/.s/'

to_fish_style(2, "/absolute/Path/not/in_a/repo/but_nested", "repo/but_nested")
# '/ab/Pa/no/in/'
```

### Windows drive paths

On Windows, `replace_c_dir(path)` changes `C:/` into `/c`. On other platforms it returns the
path unchanged. `contract_path` calls it on its results.

## What it does not do

This package only works on path strings. It does not find the current directory, the home
directory or a repository root. It does not read configuration, add colours or styles, and
has no command-line program. The caller passes in the paths and the truncated tail, and
puts the results into its own prompt.