"""WiFi components querying nl80211 over generic netlink."""

from __future__ import annotations

import socket
import struct
import sys

from .fmt import warn

NETLINK_GENERIC = 16
NLMSG_HDRLEN = 16
GENL_HDRLEN = 4
NLA_HDRLEN = 4

NLM_F_REQUEST = 0x1
NLM_F_DUMP = 0x300
NLMSG_ERROR = 2
NLMSG_DONE = 3

GENL_ID_CTRL = 0x10
CTRL_CMD_GETFAMILY = 3
CTRL_ATTR_FAMILY_ID = 1
CTRL_ATTR_FAMILY_NAME = 2

NL80211_CMD_GET_INTERFACE = 5
NL80211_CMD_GET_STATION = 17
NL80211_ATTR_IFINDEX = 3
NL80211_ATTR_STA_INFO = 21
NL80211_ATTR_SSID = 52
NL80211_STA_INFO_SIGNAL_AVG = 13

_FAMILY = b"nl80211\0"
_RESPONSE_SIZE = 4096

_NLMSGHDR = struct.Struct("=IHHII")
_GENLHDR = struct.Struct("=BBH")
_NLATTR = struct.Struct("=HH")


def _align(length: int) -> int:
    return (length + 3) & ~3


def rssi_to_perc(rssi: int) -> int:
    """Map a signal strength in dBm to a quality percentage."""
    if rssi >= -50:
        return 100
    if rssi <= -100:
        return 0
    return 2 * (rssi + 100)


def find_attr(attr: int, data: bytes) -> bytes | None:
    """Return the payload of the first netlink attribute of type ``attr``."""
    offset = 0
    while offset + NLA_HDRLEN <= len(data):
        length, kind = _NLATTR.unpack_from(data, offset)
        if length < NLA_HDRLEN:
            return None
        if kind == attr:
            return data[offset + NLA_HDRLEN:offset + length]
        offset += _align(length)
    return None


def _attr(kind: int, value: bytes) -> bytes:
    length = NLA_HDRLEN + len(value)
    padding = b"\0" * (_align(length) - length)
    return _NLATTR.pack(length, kind) + value + padding


def _message(msg_type: int, flags: int, seq: int, cmd: int, payload: bytes) -> bytes:
    length = NLMSG_HDRLEN + GENL_HDRLEN + len(payload)
    return (
        _NLMSGHDR.pack(length, msg_type, flags, seq, 0)
        + _GENLHDR.pack(cmd, 1, 0)
        + payload
    )


class _Netlink:
    """A generic netlink socket kept open between queries."""

    def __init__(self) -> None:
        self._sock: socket.socket | None = None
        self._seq = 1
        self._family = 0

    def _next_seq(self) -> int:
        seq = self._seq
        self._seq += 1
        return seq

    def _socket(self) -> socket.socket | None:
        if self._sock is None:
            family = getattr(socket, "AF_NETLINK", None)
            if family is None:
                warn("socket 'AF_NETLINK': not supported on this platform")
                return None
            try:
                self._sock = socket.socket(family, socket.SOCK_RAW, NETLINK_GENERIC)
            except OSError as err:
                warn(f"socket 'AF_NETLINK': {err.strerror or err}")
                return None
        return self._sock

    def send(self, message: bytes) -> bool:
        sock = self._socket()
        if sock is None:
            return False
        try:
            sent = sock.send(message)
        except OSError as err:
            warn(f"send 'AF_NETLINK': {err.strerror or err}")
            return False
        if sent != len(message):
            warn("send 'AF_NETLINK': short write")
            return False
        return True

    def recv(self) -> bytes | None:
        sock = self._socket()
        if sock is None:
            return None
        try:
            return sock.recv(_RESPONSE_SIZE)
        except OSError as err:
            warn(f"recv 'AF_NETLINK': {err.strerror or err}")
            return None

    def family_id(self) -> int:
        if self._family:
            return self._family
        request = _message(
            GENL_ID_CTRL,
            NLM_F_REQUEST,
            self._next_seq(),
            CTRL_CMD_GETFAMILY,
            _attr(CTRL_ATTR_FAMILY_NAME, _FAMILY),
        )
        if not self.send(request):
            return 0
        response = self.recv()
        if response is None or len(response) <= len(request):
            return 0
        payload = find_attr(CTRL_ATTR_FAMILY_ID, response[len(request):])
        if payload is not None and len(payload) == 2:
            (self._family,) = struct.unpack("=H", payload)
        return self._family

    def request(self, family: int, flags: int, cmd: int, ifindex: int) -> bool:
        message = _message(
            family,
            flags,
            self._next_seq(),
            cmd,
            _attr(NL80211_ATTR_IFINDEX, struct.pack("=I", ifindex)),
        )
        return self.send(message)


_netlink = _Netlink()


def _ifindex(interface: str) -> int | None:
    try:
        return socket.if_nametoindex(interface)
    except (OSError, ValueError):
        print(f"interface {interface} not found", file=sys.stderr)
        return None


def wifi_essid(interface: str) -> str | None:
    """Return the ESSID the interface is associated with."""
    idx = _ifindex(interface)
    if idx is None:
        return None
    family = _netlink.family_id()
    if not family:
        print("nl80211 family not found", file=sys.stderr)
        return None
    if not _netlink.request(family, NLM_F_REQUEST, NL80211_CMD_GET_INTERFACE, idx):
        return None
    response = _netlink.recv()
    if response is None or len(response) <= NLMSG_HDRLEN + GENL_HDRLEN:
        return None
    ssid = find_attr(NL80211_ATTR_SSID, response[NLMSG_HDRLEN + GENL_HDRLEN:])
    if ssid is None:
        return None
    return ssid.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def _signal(message: bytes) -> str | None:
    info = find_attr(NL80211_ATTR_STA_INFO, message[NLMSG_HDRLEN + GENL_HDRLEN:])
    if info is None:
        return None
    signal = find_attr(NL80211_STA_INFO_SIGNAL_AVG, info)
    if signal is None or len(signal) != 1:
        return None
    (rssi,) = struct.unpack("=b", signal)
    return str(rssi_to_perc(rssi))


def wifi_perc(interface: str) -> str | None:
    """Return the average signal quality of the associated station."""
    idx = _ifindex(interface)
    if idx is None:
        return None
    family = _netlink.family_id()
    if not family:
        print("nl80211 family not found", file=sys.stderr)
        return None
    flags = NLM_F_REQUEST | NLM_F_DUMP
    if not _netlink.request(family, flags, NL80211_CMD_GET_STATION, idx):
        return None

    strength: str | None = None
    while True:
        response = _netlink.recv()
        if response is None or len(response) < NLMSG_HDRLEN:
            return None
        offset = 0
        while len(response) - offset >= NLMSG_HDRLEN:
            length, msg_type = _NLMSGHDR.unpack_from(response, offset)[:2]
            if length < NLMSG_HDRLEN:
                break
            end = min(offset + length, len(response))
            if strength is None and length > NLMSG_HDRLEN + GENL_HDRLEN:
                strength = _signal(response[offset:end])
            if msg_type == NLMSG_DONE:
                return strength
            if msg_type == NLMSG_ERROR:
                return None
            offset = end