"""Shared helpers: warnings, human-readable sizes and small file readers."""

from __future__ import annotations

import re
import sys

_PREFIXES = {
    1000: ("", "k", "M", "G", "T", "P", "E", "Z", "Y"),
    1024: ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"),
}

# The longest line read from a file, matching the size of the output buffer.
LINE_LIMIT = 1022

_UINT = re.compile(r"\s*(\d+)")


def warn(message: str) -> None:
    """Write a warning line to standard error."""
    print(message, file=sys.stderr)


def fmt_human(num: int | float, base: int) -> str:
    """Format ``num`` with a decimal (1000) or binary (1024) unit prefix."""
    try:
        prefixes = _PREFIXES[base]
    except KeyError:
        raise ValueError(f"fmt_human: invalid base {base!r}") from None
    scaled = float(num)
    index = 0
    while index < len(prefixes) - 1 and scaled >= base:
        scaled /= base
        index += 1
    return f"{scaled:.1f} {prefixes[index]}"


def _read_text(path: str) -> str | None:
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return handle.read()
    except OSError as err:
        warn(f"fopen '{path}': {err.strerror or err}")
        return None


def read_int(path: str) -> int | None:
    """Read the leading unsigned integer from a file, or None."""
    text = _read_text(path)
    if text is None:
        return None
    found = _UINT.match(text)
    return int(found.group(1)) if found else None


def read_line(path: str) -> str | None:
    """Read the first line of a file without its newline, or None."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            line = handle.readline(LINE_LIMIT)
    except OSError as err:
        warn(f"fopen '{path}': {err.strerror or err}")
        return None
    if not line:
        return None
    if line.endswith("\n"):
        line = line[:-1]
    return line