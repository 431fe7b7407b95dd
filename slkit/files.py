"""Components that look at files and directories."""

from __future__ import annotations

import os

from .fmt import read_line, warn


def cat(path: str) -> str | None:
    """Return the first line of a file, or None if it is missing or empty."""
    line = read_line(path)
    return line or None


def num_files(path: str) -> str | None:
    """Return the number of entries in a directory."""
    try:
        entries = os.listdir(path)
    except OSError as err:
        warn(f"opendir '{path}': {err.strerror or err}")
        return None
    return str(len(entries))