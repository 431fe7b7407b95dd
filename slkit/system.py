"""Components that report on the host, the clock and the current user."""

from __future__ import annotations

import os
import socket
import subprocess
import sys
import time

from .fmt import LINE_LIMIT, read_int, warn

ENTROPY_AVAIL = "/proc/sys/kernel/random/entropy_avail"

_UPTIME_CLOCK = getattr(
    time, "CLOCK_BOOTTIME", getattr(time, "CLOCK_UPTIME", time.CLOCK_MONOTONIC)
)


def datetime(fmt: str) -> str | None:
    """Return the local time formatted with strftime."""
    try:
        result = time.strftime(fmt, time.localtime())
    except ValueError as err:
        warn(f"strftime: {err}")
        return None
    if not result:
        warn("strftime: Result string exceeds buffer size")
        return None
    return result


def entropy(arg: str | None = None, path: str | None = None) -> str | None:
    """Return the available kernel entropy; infinite where not tracked."""
    if path is None:
        if not sys.platform.startswith("linux"):
            return "\u221e"
        path = ENTROPY_AVAIL
    value = read_int(path)
    return None if value is None else str(value)


def hostname(arg: str | None = None) -> str | None:
    """Return the host name."""
    try:
        return socket.gethostname()
    except OSError as err:
        warn(f"gethostname: {err}")
        return None


def kernel_release(arg: str | None = None) -> str | None:
    """Return the kernel release, as ``uname -r`` prints it."""
    try:
        return os.uname().release
    except (AttributeError, OSError) as err:
        warn(f"uname: {err}")
        return None


def load_avg(arg: str | None = None) -> str | None:
    """Return the 1, 5 and 15 minute load averages."""
    try:
        one, five, fifteen = os.getloadavg()
    except OSError:
        warn("getloadavg: Failed to obtain load average")
        return None
    return f"{one:.2f} {five:.2f} {fifteen:.2f}"


def uptime(arg: str | None = None) -> str | None:
    """Return the system uptime as hours and minutes."""
    try:
        seconds = int(time.clock_gettime(_UPTIME_CLOCK))
    except OSError:
        warn(f"clock_gettime {_UPTIME_CLOCK}")
        return None
    hours, rest = divmod(seconds, 3600)
    return f"{hours}h {rest // 60}m"


def gid(arg: str | None = None) -> str:
    """Return the real group id of the process."""
    return str(os.getgid())


def uid(arg: str | None = None) -> str:
    """Return the effective user id of the process."""
    return str(os.geteuid())


def username(arg: str | None = None) -> str | None:
    """Return the name of the effective user."""
    import pwd

    euid = os.geteuid()
    try:
        return pwd.getpwuid(euid).pw_name
    except KeyError:
        warn(f"getpwuid '{euid}': no such user")
        return None


def run_command(cmd: str) -> str | None:
    """Run a shell command and return the first line it prints."""
    try:
        with subprocess.Popen(
            cmd, shell=True, stdout=subprocess.PIPE
        ) as proc:
            assert proc.stdout is not None
            raw = proc.stdout.readline(LINE_LIMIT)
    except OSError as err:
        warn(f"popen '{cmd}': {err}")
        return None
    line = raw.decode("utf-8", errors="replace")
    if line.endswith("\n"):
        line = line[:-1]
    return line or None