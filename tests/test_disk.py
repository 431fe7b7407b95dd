import os

from slkit.disk import disk_free, disk_perc, disk_total, disk_used
from slkit.fmt import fmt_human


def _free_text():
    fs = os.statvfs("/")
    return fmt_human(fs.f_frsize * fs.f_bavail, 1024)


def _used_text():
    fs = os.statvfs("/")
    return fmt_human(fs.f_frsize * (fs.f_blocks - fs.f_bfree), 1024)


def test_disk_total_matches_statvfs():
    fs = os.statvfs("/")
    assert disk_total("/") == fmt_human(fs.f_frsize * fs.f_blocks, 1024)


def test_disk_free_and_used_are_human():
    free_before = _free_text()
    free = disk_free("/")
    free_after = _free_text()
    assert free in {free_before, free_after}

    used_before = _used_text()
    used = disk_used("/")
    used_after = _used_text()
    assert used in {used_before, used_after}


def test_disk_perc_in_range():
    value = disk_perc("/")
    assert value is not None
    assert 0 <= int(value) <= 100


def test_missing_path(tmp_path):
    missing = str(tmp_path / "missing")
    assert disk_free(missing) is None
    assert disk_perc(missing) is None
    assert disk_total(missing) is None
    assert disk_used(missing) is None