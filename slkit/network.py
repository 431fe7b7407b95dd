"""Network interface components: addresses, link state and traffic rates."""

from __future__ import annotations

import os
import socket

import psutil

from .fmt import fmt_human, read_int, warn

NET_CLASS = "/sys/class/net"

_COUNTER_MODULUS = 1 << 64


def _interface_addresses() -> dict | None:
    try:
        return psutil.net_if_addrs()
    except OSError as err:
        warn(f"getifaddrs: {err}")
        return None


def _address(interface: str, family: int) -> str | None:
    addrs = _interface_addresses()
    if addrs is None:
        return None
    for entry in addrs.get(interface, ()):
        if entry.family == family:
            return entry.address
    return None


def ipv4(interface: str) -> str | None:
    """Return the first IPv4 address of an interface."""
    return _address(interface, socket.AF_INET)


def ipv6(interface: str) -> str | None:
    """Return the first IPv6 address of an interface."""
    return _address(interface, socket.AF_INET6)


def up(interface: str) -> str | None:
    """Return 'up' or 'down' for an interface that has an address."""
    addrs = _interface_addresses()
    if addrs is None or not addrs.get(interface):
        return None
    try:
        stats = psutil.net_if_stats().get(interface)
    except OSError as err:
        warn(f"getifaddrs: {err}")
        return None
    if stats is None:
        return None
    return "up" if stats.isup else "down"


class NetSpeed:
    """Reports the transfer rate of an interface between successive calls."""

    def __init__(
        self, direction: str = "rx", interval: int = 1000, root: str = NET_CLASS
    ) -> None:
        if direction not in ("rx", "tx"):
            raise ValueError(f"direction must be 'rx' or 'tx', not {direction!r}")
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.direction = direction
        self.interval = interval
        self.root = root
        self._bytes = 0

    def __call__(self, interface: str) -> str | None:
        """Return the bytes per second since the previous call."""
        old = self._bytes
        path = os.path.join(
            self.root, interface, "statistics", f"{self.direction}_bytes"
        )
        value = read_int(path)
        if value is None:
            return None
        self._bytes = value
        if old == 0:
            return None
        # The counters are unsigned; a reset wraps like the kernel's values do.
        delta = (value - old) % _COUNTER_MODULUS
        return fmt_human(delta * 1000 // self.interval, 1024)


_rx = NetSpeed("rx")
_tx = NetSpeed("tx")


def netspeed_rx(interface: str) -> str | None:
    """Return the receive rate of an interface."""
    return _rx(interface)


def netspeed_tx(interface: str) -> str | None:
    """Return the transmit rate of an interface."""
    return _tx(interface)