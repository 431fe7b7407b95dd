"""CPU frequency and usage components."""

from __future__ import annotations

from .fmt import fmt_human, read_int, warn

CPU_FREQ = "/sys/devices/system/cpu/cpu0/cpufreq/scaling_cur_freq"
PROC_STAT = "/proc/stat"

# user nice system idle iowait irq softirq
_FIELDS = 7
_BUSY = (0, 1, 2, 5, 6)


def parse_stat(text: str) -> tuple[float, ...] | None:
    """Return the first seven counters of the first line of /proc/stat."""
    lines = text.splitlines()
    if not lines:
        return None
    parts = lines[0].split()[1:]
    values = []
    for part in parts[:_FIELDS]:
        try:
            values.append(float(part))
        except ValueError:
            break
    if len(values) != _FIELDS:
        return None
    return tuple(values)


def cpu_freq(arg: str | None = None, path: str = CPU_FREQ) -> str | None:
    """Return the current frequency of the first CPU."""
    khz = read_int(path)
    if khz is None:
        return None
    return fmt_human(khz * 1000, 1000)


class CpuMeter:
    """Measures CPU usage between successive calls."""

    def __init__(self, path: str = PROC_STAT) -> None:
        self.path = path
        self._last: tuple[float, ...] | None = None

    def __call__(self, arg: str | None = None) -> str | None:
        """Return the busy share since the previous call, in percent."""
        try:
            with open(self.path, encoding="utf-8", errors="replace") as handle:
                text = handle.read()
        except OSError as err:
            warn(f"fopen '{self.path}': {err.strerror or err}")
            return None
        current = parse_stat(text)
        if current is None:
            return None
        previous, self._last = self._last, current
        if previous is None or previous[0] == 0:
            return None
        total = sum(current) - sum(previous)
        if total == 0:
            return None
        busy = sum(current[i] for i in _BUSY) - sum(previous[i] for i in _BUSY)
        return str(int(100 * busy / total))


_meter = CpuMeter()


def cpu_perc(arg: str | None = None) -> str | None:
    """Return the CPU usage since the previous call, in percent."""
    return _meter(arg)