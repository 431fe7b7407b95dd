import os
import pwd
import re
import socket
import time

from slkit.system import (
    datetime,
    entropy,
    gid,
    hostname,
    kernel_release,
    load_avg,
    run_command,
    uid,
    uptime,
    username,
)


def _boot_seconds():
    clock = getattr(time, "CLOCK_BOOTTIME", time.CLOCK_MONOTONIC)
    return int(time.clock_gettime(clock))


def test_datetime_year():
    assert datetime("%Y") == time.strftime("%Y")


def test_datetime_empty_format_is_none():
    assert datetime("") is None


def test_entropy_from_file(tmp_path):
    path = tmp_path / "entropy_avail"
    path.write_text("256\n")
    assert entropy(None, str(path)) == "256"


def test_entropy_missing_file(tmp_path):
    assert entropy(None, str(tmp_path / "missing")) is None


def test_hostname():
    assert hostname(None) == socket.gethostname()


def test_kernel_release():
    assert kernel_release(None) == os.uname().release


def test_load_avg_three_values():
    parts = load_avg(None).split(" ")
    assert len(parts) == 3
    assert all(re.fullmatch(r"\d+\.\d\d", p) for p in parts)


def test_uptime_format():
    before = _boot_seconds()
    value = uptime(None)
    after = _boot_seconds()
    match = re.fullmatch(r"(\d+)h (\d+)m", value)
    assert match is not None
    hours, minutes = int(match.group(1)), int(match.group(2))
    assert 0 <= minutes < 60
    total = hours * 60 + minutes
    assert before // 60 - 2 <= total <= after // 60 + 2


def test_ids():
    assert gid(None) == str(os.getgid())
    assert uid(None) == str(os.geteuid())


def test_username():
    assert username(None) == pwd.getpwuid(os.geteuid()).pw_name


def test_run_command_first_line():
    assert run_command("printf 'one\\ntwo\\n'") == "one"


def test_run_command_echo():
    assert run_command("echo foo") == "foo"


def test_run_command_no_output():
    assert run_command("true") is None