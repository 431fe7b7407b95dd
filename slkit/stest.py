"""Filter a list of paths by file properties."""

from __future__ import annotations

import os
import stat
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

PROG = "stest"
FLAGS = "abcdefghlpqrsuvwx"
USAGE = f"usage: {PROG} [-{FLAGS}] [-n file] [-o file] [file...]"
PATH_MAX = 4096


class UsageError(Exception):
    """Raised for command lines the program does not accept."""


@dataclass(frozen=True)
class Options:
    """Tests to apply and the paths to apply them to."""

    flags: frozenset = frozenset()
    newer: Optional[os.stat_result] = None
    older: Optional[os.stat_result] = None
    paths: tuple = ()


def parse_args(argv: Iterable[str]) -> Options:
    """Parse flags, which may be combined, and the -n and -o reference files."""
    args = list(argv)
    flags: set[str] = set()
    refs: dict[str, Optional[os.stat_result]] = {"n": None, "o": None}
    index = 0
    while index < len(args):
        arg = args[index]
        if not arg.startswith("-") or arg == "-":
            break
        if arg == "--":
            index += 1
            break
        for pos, flag in enumerate(arg[1:], start=1):
            if flag in refs:
                rest = arg[pos + 1:]
                if rest:
                    value = rest
                elif index + 1 < len(args):
                    index += 1
                    value = args[index]
                else:
                    raise UsageError(f"-{flag} needs a file")
                try:
                    refs[flag] = os.stat(value)
                except OSError as err:
                    print(f"{value}: {err.strerror or err}", file=sys.stderr)
                    refs[flag] = None
                break
            if flag not in FLAGS:
                raise UsageError(f"unknown flag -{flag}")
            flags.add(flag)
        index += 1
    return Options(frozenset(flags), refs["n"], refs["o"], tuple(args[index:]))


def _seconds(st: os.stat_result) -> int:
    return st.st_mtime_ns // 1_000_000_000


def _passes(path: str, name: str, st: os.stat_result, options: Options) -> bool:
    flags = options.flags
    mode = st.st_mode
    checks = (
        ("a", lambda: True),
        ("b", lambda: stat.S_ISBLK(mode)),
        ("c", lambda: stat.S_ISCHR(mode)),
        ("d", lambda: stat.S_ISDIR(mode)),
        ("e", lambda: os.access(path, os.F_OK)),
        ("f", lambda: stat.S_ISREG(mode)),
        ("g", lambda: bool(mode & stat.S_ISGID)),
        ("h", lambda: os.path.islink(path)),
        ("p", lambda: stat.S_ISFIFO(mode)),
        ("r", lambda: os.access(path, os.R_OK)),
        ("s", lambda: st.st_size > 0),
        ("u", lambda: bool(mode & stat.S_ISUID)),
        ("w", lambda: os.access(path, os.W_OK)),
        ("x", lambda: os.access(path, os.X_OK)),
    )
    if "a" not in flags and name.startswith("."):
        return False
    if not all(check() for flag, check in checks if flag in flags):
        return False
    if options.newer is not None and not _seconds(st) > _seconds(options.newer):
        return False
    if options.older is not None and not _seconds(st) < _seconds(options.older):
        return False
    return True


def test_path(path: str, name: str, options: Options) -> bool:
    """Tell whether ``path`` passes every requested test (inverted by -v)."""
    try:
        st = os.stat(path)
    except OSError:
        passed = False
    else:
        passed = _passes(path, name, st, options)
    return passed != ("v" in options.flags)


def _candidates(options: Options) -> Iterator[tuple[str, str]]:
    if not options.paths:
        for line in sys.stdin:
            if line.endswith("\n"):
                line = line[:-1]
            yield line, line
        return
    for arg in options.paths:
        if "l" in options.flags:
            try:
                entries = os.listdir(arg)
            except OSError:
                yield arg, arg
                continue
            for name in (".", "..", *entries):
                path = f"{arg}/{name}"
                if len(os.fsencode(path)) < PATH_MAX:
                    yield path, name
        else:
            yield arg, arg


def main(argv: Optional[Iterable[str]] = None) -> int:
    """Print the names that pass; exit 0 if any did, 1 if none, 2 on misuse."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        options = parse_args(args)
    except UsageError:
        print(USAGE, file=sys.stderr)
        return 2
    matched = False
    for path, name in _candidates(options):
        if test_path(path, name, options):
            if "q" in options.flags:
                return 0
            matched = True
            print(name)
    return 0 if matched else 1