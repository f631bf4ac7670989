"""File helpers: sizes, directory trees and scratch files."""

from __future__ import annotations

import os
import random

from wfrest import pathutil

_CHUNK = 4096
_PRINTABLE = range(32, 127)


def size(path: str) -> int:
    """Return the size of ``path`` in bytes; raise FileNotFoundError if it cannot be read."""
    try:
        return os.stat(path).st_size
    except OSError as exc:
        raise FileNotFoundError(f"no such file: {path}") from exc


def file_exists(path: str) -> bool:
    """Tell whether ``path`` is an existing regular file."""
    return pathutil.is_file(path)


def create_directories(path: str) -> None:
    """Create ``path`` and its missing parents, like ``mkdir -p``."""
    *parents, last = path.split("/")
    current = ""
    for part in parents:
        current += part + "/"
        try:
            os.mkdir(current, 0o755)
        except OSError:
            pass
    if not last:
        return
    try:
        os.mkdir(current + last, 0o755)
    except FileExistsError:
        pass


def remove_directory(path: str) -> None:
    """Delete a directory with everything inside it."""
    with os.scandir(path) as entries:
        for entry in entries:
            try:
                if entry.is_dir(follow_symlinks=False):
                    remove_directory(entry.path)
                else:
                    os.unlink(entry.path)
            except OSError:
                pass
    os.rmdir(path)


def create_file_with_size(path: str, size_bytes: int) -> None:
    """Write a file of ``size_bytes`` random printable ASCII characters."""
    rng = random.Random()
    with open(path, "wb") as handle:
        remaining = size_bytes
        while remaining > 0:
            chunk = min(remaining, _CHUNK)
            handle.write(bytes(rng.choices(_PRINTABLE, k=chunk)))
            remaining -= chunk