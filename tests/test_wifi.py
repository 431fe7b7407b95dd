import struct

import pytest

from slkit.wifi import (
    NL80211_ATTR_SSID,
    NL80211_ATTR_STA_INFO,
    NL80211_STA_INFO_SIGNAL_AVG,
    find_attr,
    rssi_to_perc,
    wifi_essid,
    wifi_perc,
)


def attr(kind, value):
    length = 4 + len(value)
    padding = b"\0" * ((-length) % 4)
    return struct.pack("=HH", length, kind) + value + padding


def test_rssi_thresholds():
    assert rssi_to_perc(-50) == 100
    assert rssi_to_perc(-100) == 0
    assert rssi_to_perc(-75) == 50


@pytest.mark.parametrize("rssi", range(-128, 128))
def test_rssi_in_range(rssi):
    assert 0 <= rssi_to_perc(rssi) <= 100


def test_rssi_monotonic():
    values = [rssi_to_perc(r) for r in range(-128, 128)]
    assert values == sorted(values)


def test_find_attr_after_padded_attribute():
    data = attr(1, b"ab") + attr(NL80211_ATTR_SSID, b"home")
    assert find_attr(NL80211_ATTR_SSID, data) == b"home"
    assert find_attr(1, data) == b"ab"


def test_find_attr_first_match_wins():
    data = attr(7, b"first") + attr(7, b"second")
    assert find_attr(7, data) == b"first"


def test_find_attr_missing():
    data = attr(1, b"x") + attr(2, b"yz")
    assert find_attr(9, data) is None
    assert find_attr(9, b"") is None


def test_find_attr_zero_length_stops():
    data = struct.pack("=HH", 0, 5) + attr(NL80211_ATTR_SSID, b"x")
    assert find_attr(NL80211_ATTR_SSID, data) is None


def test_find_attr_nested():
    inner = attr(NL80211_STA_INFO_SIGNAL_AVG, struct.pack("=b", -60))
    data = attr(3, b"\x01\x00\x00\x00") + attr(NL80211_ATTR_STA_INFO, inner)
    info = find_attr(NL80211_ATTR_STA_INFO, data)
    assert info == inner
    signal = find_attr(NL80211_STA_INFO_SIGNAL_AVG, info)
    assert struct.unpack("=b", signal)[0] == -60


def test_missing_interface_gives_none():
    assert wifi_essid("slkit-none0") is None
    assert wifi_perc("slkit-none0") is None