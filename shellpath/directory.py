"""Contraction and fish-style abbreviation of directory paths for a prompt."""

from __future__ import annotations

import os
import sys
from pathlib import PurePath, PurePosixPath, PureWindowsPath

import regex

_IS_WINDOWS = sys.platform == "win32"

_GRAPHEME = regex.compile(r"\X")


def _pure_path(path: str | os.PathLike) -> PurePath:
    cls = PureWindowsPath if _IS_WINDOWS else PurePosixPath
    return cls(os.fspath(path))


def _to_slash(path: PurePath) -> str:
    """Render a path with forward slashes, keeping a drive prefix apart from its root."""
    if path.drive and path.root:
        rest = "/".join(["", *path.parts[1:]])
        return f"{path.drive}/{rest}"
    return path.as_posix()


def replace_c_dir(path: str) -> str:
    """On Windows, rewrite a ``C:/`` prefix as ``/c``; elsewhere return the path unchanged."""
    if _IS_WINDOWS:
        return path.replace("C:/", "/c")
    return path


def contract_path(
    full_path: str | os.PathLike,
    top_level_path: str | os.PathLike,
    top_level_replacement: str,
) -> str:
    """Replace ``top_level_path`` at the start of ``full_path`` with ``top_level_replacement``."""
    full = _pure_path(full_path)
    top = _pure_path(top_level_path)

    try:
        relative = full.relative_to(top)
    except ValueError:
        return replace_c_dir(_to_slash(full))

    if full == top:
        return replace_c_dir(top_level_replacement)

    return f"{top_level_replacement}/{replace_c_dir(_to_slash(relative))}"


def _trim_end_matches(text: str, suffix: str) -> str:
    if not suffix:
        return text
    while text.endswith(suffix):
        text = text[: -len(suffix)]
    return text


def _abbreviate(word: str, length: int) -> str:
    if not word:
        return ""
    graphemes = _GRAPHEME.findall(word)
    if len(graphemes) <= length:
        return word
    keep = length + 1 if word.startswith(".") else length
    return "".join(graphemes[:keep])


def to_fish_style(pwd_dir_length: int, dir_string: str, truncated_dir_string: str) -> str:
    """Abbreviate each directory before the truncated part to ``pwd_dir_length`` graphemes.

    Hidden directories keep their leading dot in addition to the abbreviated name.
    """
    replaced = _trim_end_matches(dir_string, truncated_dir_string)
    return "/".join(_abbreviate(word, pwd_dir_length) for word in replaced.split("/"))