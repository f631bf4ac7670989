"""Helpers for file-system and URL paths."""

from __future__ import annotations

import os


def is_dir(path: str) -> bool:
    """Tell whether ``path`` is an existing directory."""
    return os.path.isdir(path)


def is_file(path: str) -> bool:
    """Tell whether ``path`` is an existing regular file."""
    return os.path.isfile(path)


def concat_path(lhs: str, rhs: str) -> str:
    """Join two paths with exactly one ``/`` between them."""
    left_slash = lhs.endswith("/")
    right_slash = rhs.startswith("/")
    if left_slash and right_slash:
        return lhs[:-1] + rhs
    if not left_slash and not right_slash:
        return f"{lhs}/{rhs}"
    return lhs + rhs


def base(filepath: str) -> str:
    """Return the last component of a path, ignoring trailing slashes."""
    stripped = filepath.rstrip("/")
    if not stripped:
        return "/"
    return stripped.rpartition("/")[2]


def suffix(filepath: str) -> str:
    """Return the extension of the file a path names, without the dot."""
    name = filepath.rpartition("/")[2]
    head, dot, ext = name.rpartition(".")
    return ext if dot else ""