"""Temperature and mixer volume components."""

from __future__ import annotations

import os
import struct

from .fmt import read_int, warn

# ioctl requests of the OSS mixer: _IOR('M', nr, int).
SOUND_MIXER_READ_DEVMASK = 0x80044DFE
_MIXER_READ_BASE = 0x80044D00
SOUND_DEVICE_NAMES = (
    "vol", "bass", "treble", "synth", "pcm", "speaker", "line", "mic", "cd",
    "mix", "pcm2", "rec", "igain", "ogain", "line1", "line2", "line3",
    "dig1", "dig2", "dig3", "phin", "phout", "video", "radio", "monitor",
)


def temp(file: str) -> str | None:
    """Return a sensor reading in millidegrees as whole degrees Celsius."""
    value = read_int(file)
    return None if value is None else str(value // 1000)


def _ioctl_int(fd: int, request: int) -> int:
    import fcntl

    result = fcntl.ioctl(fd, request, struct.pack("i", 0))
    return struct.unpack("i", result)[0]


def vol_perc(card: str) -> str | None:
    """Return the master volume of an OSS mixer device in percent."""
    try:
        fd = os.open(card, os.O_RDONLY | os.O_NONBLOCK)
    except OSError as err:
        warn(f"open '{card}': {err.strerror or err}")
        return None
    try:
        try:
            devmask = _ioctl_int(fd, SOUND_MIXER_READ_DEVMASK)
        except OSError as err:
            warn(f"ioctl 'SOUND_MIXER_READ_DEVMASK': {err.strerror or err}")
            return None
        value = None
        for index, name in enumerate(SOUND_DEVICE_NAMES):
            if devmask & (1 << index) and name == "vol":
                try:
                    value = _ioctl_int(fd, _MIXER_READ_BASE | index)
                except OSError as err:
                    warn(f"ioctl 'MIXER_READ({index})': {err.strerror or err}")
                    return None
    finally:
        os.close(fd)
    if value is None:
        return None
    return str(value & 0xFF)