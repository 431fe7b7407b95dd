"""Battery components reading the Linux power supply class."""

from __future__ import annotations

import os
import re

from .fmt import read_int, warn

POWER_SUPPLY = "/sys/class/power_supply"

_STATE_SYMBOLS = {
    "Charging": "+",
    "Discharging": "-",
    "Full": "o",
    "Not charging": "o",
}
_STATE = re.compile(r"[a-zA-Z ]{1,12}")


def _read_state(path: str) -> str | None:
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError as err:
        warn(f"fopen '{path}': {err.strerror or err}")
        return None
    found = _STATE.match(text)
    return found.group(0) if found else None


def _pick(directory: str, *names: str) -> str | None:
    for name in names:
        path = os.path.join(directory, name)
        if os.access(path, os.R_OK):
            return path
    return None


def battery_perc(bat: str, root: str = POWER_SUPPLY) -> str | None:
    """Return the battery capacity in percent."""
    value = read_int(os.path.join(root, bat, "capacity"))
    return None if value is None else str(value)


def battery_state(bat: str, root: str = POWER_SUPPLY) -> str | None:
    """Return '+' when charging, '-' when discharging, 'o' when full."""
    state = _read_state(os.path.join(root, bat, "status"))
    if state is None:
        return None
    return _STATE_SYMBOLS.get(state, "?")


def battery_remaining(bat: str, root: str = POWER_SUPPLY) -> str | None:
    """Return the time left while discharging, or '' otherwise."""
    directory = os.path.join(root, bat)
    state = _read_state(os.path.join(directory, "status"))
    if state is None:
        return None

    charge_path = _pick(directory, "charge_now", "energy_now")
    if charge_path is None:
        return None
    charge_now = read_int(charge_path)
    if charge_now is None:
        return None

    if state != "Discharging":
        return ""

    current_path = _pick(directory, "current_now", "power_now")
    if current_path is None:
        return None
    current_now = read_int(current_path)
    if not current_now:
        return None

    timeleft = charge_now / current_now
    hours = int(timeleft)
    minutes = int((timeleft - hours) * 60)
    return f"{hours}h {minutes}m"