import pytest

from slkit.fmt import fmt_human
from slkit.memory import (
    ram_free,
    ram_perc,
    ram_total,
    ram_used,
    read_meminfo,
    swap_free,
    swap_perc,
    swap_total,
    swap_used,
)

SAMPLE = """MemTotal:        1048576 kB
MemFree:          104857 kB
MemAvailable:     524288 kB
Buffers:          104857 kB
Cached:           314572 kB
SwapCached:            0 kB
SwapTotal:          2048 kB
SwapFree:           1024 kB
HugePages_Total:       0
"""


@pytest.fixture
def meminfo(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text(SAMPLE)
    return str(path)


def test_read_meminfo_fields(meminfo):
    info = read_meminfo(meminfo)
    assert info["MemTotal"] == 1048576
    assert info["SwapFree"] == 1024
    assert info["HugePages_Total"] == 0


def test_read_meminfo_missing(tmp_path):
    assert read_meminfo(str(tmp_path / "absent")) is None


def test_ram_total(meminfo):
    assert ram_total(None, meminfo) == "1.0 Gi"


def test_ram_free_uses_available(meminfo):
    assert ram_free(None, meminfo) == fmt_human(524288 * 1024, 1024)


def test_ram_used(meminfo):
    used = 1048576 - 104857 - 104857 - 314572
    assert ram_used(None, meminfo) == fmt_human(used * 1024, 1024)


def test_ram_perc(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text(
        "MemTotal: 1000 kB\nMemFree: 100 kB\nMemAvailable: 500 kB\n"
        "Buffers: 100 kB\nCached: 300 kB\n"
    )
    assert ram_perc(None, str(path)) == "50"


def test_ram_perc_zero_total(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text(
        "MemTotal: 0 kB\nMemFree: 0 kB\nMemAvailable: 0 kB\n"
        "Buffers: 0 kB\nCached: 0 kB\n"
    )
    assert ram_perc(None, str(path)) is None


def test_swap_values(meminfo):
    assert swap_total(None, meminfo) == "2.0 Mi"
    assert swap_free(None, meminfo) == fmt_human(1024 * 1024, 1024)
    assert swap_used(None, meminfo) == fmt_human(1024 * 1024, 1024)


def test_swap_perc_in_range(meminfo):
    assert 0 <= int(swap_perc(None, meminfo)) <= 100


def test_swap_perc_zero_total(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text("SwapCached: 0 kB\nSwapTotal: 0 kB\nSwapFree: 0 kB\n")
    assert swap_perc(None, str(path)) is None


def test_missing_fields_give_none(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text("MemTotal: 1000 kB\n")
    assert ram_used(None, str(path)) is None
    assert swap_free(None, str(path)) is None


def test_missing_file_gives_none(tmp_path):
    missing = str(tmp_path / "absent")
    assert ram_total(None, missing) is None
    assert swap_total(None, missing) is None