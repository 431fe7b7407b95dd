"""Memory and swap components reading /proc/meminfo."""

from __future__ import annotations

from .fmt import fmt_human, warn

MEMINFO = "/proc/meminfo"


def read_meminfo(path: str = MEMINFO) -> dict[str, int] | None:
    """Return the fields of a meminfo file, in kB, keyed by name."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            lines = handle.readlines()
    except OSError as err:
        warn(f"fopen '{path}': {err.strerror or err}")
        return None
    fields: dict[str, int] = {}
    for line in lines:
        name, sep, rest = line.partition(":")
        if not sep:
            continue
        parts = rest.split()
        if parts and parts[0].isdigit():
            fields[name.strip()] = int(parts[0])
    return fields


def _fields(path: str, *names: str) -> tuple[int, ...] | None:
    info = read_meminfo(path)
    if info is None:
        return None
    try:
        return tuple(info[name] for name in names)
    except KeyError:
        return None


def ram_free(arg: str | None = None, path: str = MEMINFO) -> str | None:
    """Return the available memory."""
    found = _fields(path, "MemAvailable")
    if found is None:
        return None
    return fmt_human(found[0] * 1024, 1024)


def ram_perc(arg: str | None = None, path: str = MEMINFO) -> str | None:
    """Return the memory in use, without buffers and cache, in percent."""
    found = _fields(path, "MemTotal", "MemFree", "Buffers", "Cached")
    if found is None:
        return None
    total, free, buffers, cached = found
    if total == 0:
        return None
    return str(100 * ((total - free) - (buffers + cached)) // total)


def ram_total(arg: str | None = None, path: str = MEMINFO) -> str | None:
    """Return the total memory."""
    found = _fields(path, "MemTotal")
    if found is None:
        return None
    return fmt_human(found[0] * 1024, 1024)


def ram_used(arg: str | None = None, path: str = MEMINFO) -> str | None:
    """Return the memory in use, without buffers and cache."""
    found = _fields(path, "MemTotal", "MemFree", "Buffers", "Cached")
    if found is None:
        return None
    total, free, buffers, cached = found
    return fmt_human((total - free - buffers - cached) * 1024, 1024)


def swap_free(arg: str | None = None, path: str = MEMINFO) -> str | None:
    """Return the free swap space."""
    found = _fields(path, "SwapFree")
    if found is None:
        return None
    return fmt_human(found[0] * 1024, 1024)


def swap_perc(arg: str | None = None, path: str = MEMINFO) -> str | None:
    """Return the swap in use, without swap cache, in percent."""
    found = _fields(path, "SwapTotal", "SwapFree", "SwapCached")
    if found is None:
        return None
    total, free, cached = found
    if total == 0:
        return None
    return str(100 * (total - free - cached) // total)


def swap_total(arg: str | None = None, path: str = MEMINFO) -> str | None:
    """Return the total swap space."""
    found = _fields(path, "SwapTotal")
    if found is None:
        return None
    return fmt_human(found[0] * 1024, 1024)


def swap_used(arg: str | None = None, path: str = MEMINFO) -> str | None:
    """Return the swap in use, without swap cache."""
    found = _fields(path, "SwapTotal", "SwapFree", "SwapCached")
    if found is None:
        return None
    total, free, cached = found
    return fmt_human((total - free - cached) * 1024, 1024)