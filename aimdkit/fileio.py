"""Small file-system helpers: file name stems, directory creation, file reading."""

from __future__ import annotations

import os
from pathlib import Path


def filename_stem(path: str) -> str:
    """Return the file name of ``path`` without its last extension.

    Both ``/`` and ``\\`` separate directories.  A name without a dot, or
    whose only dot is its first character, has an empty stem.
    """
    name = path
    for index, char in enumerate(path):
        if char in "/\\":
            name = path[index + 1:]
    dot_index = name.rfind(".")
    return name[:dot_index] if dot_index > 0 else ""


def ensure_dir_exists(path: str | os.PathLike[str]) -> bool:
    """Make sure ``path`` is a directory, creating it (one level) if needed.

    Returns True when the directory exists afterwards, False otherwise.
    """
    target = Path(path)
    if target.is_dir():
        return True
    try:
        target.mkdir()
    except OSError:
        return False
    return target.is_dir()


def read_file_to_buffer(path: str | os.PathLike[str]) -> bytes:
    """Return the whole contents of the file at ``path``."""
    return Path(path).read_bytes()