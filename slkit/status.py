"""The status loop: render components into one line and publish it."""

from __future__ import annotations

import os
import shutil
import signal
import subprocess
import sys
import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional

from .fmt import warn
from .system import datetime

PROG = "slstatus"
VERSION = "1.1"

# Interval between updates, in milliseconds.
INTERVAL = 1000
# Text shown when a component cannot produce a value.
UNKNOWN = "n/a"
# Size of the output line, the terminating position included.
MAXLEN = 2048


class UsageError(Exception):
    """Raised for command lines the program does not accept."""


class StatusError(Exception):
    """Raised when the status line cannot be published."""


@dataclass(frozen=True)
class Component:
    """One piece of the status line: a function, its format and argument."""

    func: Callable[[Optional[str]], Optional[str]]
    fmt: str = "%s"
    arg: Optional[str] = None


DEFAULT_COMPONENTS: tuple[Component, ...] = (Component(datetime, "%s", "%F %T"),)


@dataclass
class Args:
    """Options taken from the command line."""

    to_stdout: bool = False
    once: bool = False
    show_version: bool = False


def _format(fmt: str, value: str) -> str:
    try:
        return fmt % (value,)
    except TypeError:
        # A format without a conversion prints as it stands.
        return fmt % ()


def render_status(
    components: Iterable[Component], unknown: str = UNKNOWN, maxlen: int = MAXLEN
) -> str:
    """Join the formatted results of the components into one line.

    A component that yields None shows ``unknown``. The line holds at most
    ``maxlen - 1`` characters; output past that is cut and rendering stops.
    """
    parts: list[str] = []
    length = 0
    for component in components:
        result = component.func(component.arg)
        if result is None:
            result = unknown
        try:
            piece = _format(component.fmt, result)
        except (TypeError, ValueError) as err:
            warn(f"vsnprintf: {err}")
            break
        room = maxlen - length - 1
        if len(piece) > room:
            parts.append(piece[: max(room, 0)])
            warn("vsnprintf: Output truncated")
            break
        parts.append(piece)
        length += len(piece)
    return "".join(parts)


def parse_args(argv: Iterable[str]) -> Args:
    """Parse the flags -v, -s and -1, which may be combined as in -s1."""
    args = list(argv)
    parsed = Args()
    index = 0
    while index < len(args):
        arg = args[index]
        if not arg.startswith("-") or arg == "-":
            break
        if arg == "--":
            index += 1
            break
        for flag in arg[1:]:
            if flag == "v":
                parsed.show_version = True
                return parsed
            if flag == "1":
                parsed.once = True
                parsed.to_stdout = True
            elif flag == "s":
                parsed.to_stdout = True
            else:
                raise UsageError(f"unknown flag -{flag}")
        index += 1
    if index < len(args):
        raise UsageError(f"unexpected argument {args[index]!r}")
    return parsed


class _Loop:
    """Tracks termination requests and wake-ups from signals."""

    def __init__(self, once: bool) -> None:
        self.done = once
        self._wake = threading.Event()
        self._refresh = getattr(signal, "SIGUSR1", None)

    def _handle(self, signum: int, frame: object) -> None:
        if signum != self._refresh:
            self.done = True
        self._wake.set()

    @contextmanager
    def signals(self) -> Iterator[None]:
        if threading.current_thread() is not threading.main_thread():
            yield
            return
        wanted = [signal.SIGINT, signal.SIGTERM]
        if self._refresh is not None:
            wanted.append(self._refresh)
        previous = {signum: signal.signal(signum, self._handle) for signum in wanted}
        try:
            yield
        finally:
            for signum, handler in previous.items():
                signal.signal(signum, handler)

    def sleep(self, seconds: float) -> None:
        self._wake.wait(seconds)
        self._wake.clear()


def _print_status(status: str) -> None:
    try:
        print(status, flush=True)
    except OSError as err:
        raise StatusError(f"puts: {err.strerror or err}") from err


def _set_root_name(status: str) -> None:
    try:
        subprocess.run(["xsetroot", "-name", status], check=True)
    except (OSError, subprocess.CalledProcessError) as err:
        raise StatusError(f"XStoreName: {err}") from err


def run(
    components: Iterable[Component] = DEFAULT_COMPONENTS,
    interval: int = INTERVAL,
    once: bool = False,
    out: Optional[Callable[[str], None]] = None,
) -> None:
    """Render and publish the status every ``interval`` milliseconds.

    SIGINT and SIGTERM end the loop after the current update; SIGUSR1
    forces an immediate update.
    """
    components = tuple(components)
    publish = out if out is not None else _print_status
    loop = _Loop(once)
    with loop.signals():
        while True:
            start = time.monotonic()
            publish(render_status(components))
            if loop.done:
                break
            wait = interval / 1000 - (time.monotonic() - start)
            if wait >= 0:
                loop.sleep(wait)
            if loop.done:
                break


def main(argv: Optional[Iterable[str]] = None) -> int:
    """Run the status monitor from the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        options = parse_args(args)
    except UsageError:
        warn(f"usage: {PROG} [-v] [-s] [-1]")
        return 1
    if options.show_version:
        warn(f"{PROG}-{VERSION}")
        return 1

    if options.to_stdout:
        publish = _print_status
    else:
        if not os.environ.get("DISPLAY") or shutil.which("xsetroot") is None:
            warn("XOpenDisplay: Failed to open display")
            return 1
        publish = _set_root_name

    try:
        run(DEFAULT_COMPONENTS, INTERVAL, options.once, publish)
        if not options.to_stdout:
            _set_root_name("")
    except StatusError as err:
        warn(str(err))
        return 1
    return 0