from slkit.cpu import CpuMeter, cpu_freq, parse_stat


def test_parse_stat_reads_first_seven_counters():
    text = "cpu  1 2 3 4 5 6 7 8 9 10\ncpu0 1 1 1 1 1 1 1\n"
    assert parse_stat(text) == (1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0)


def test_parse_stat_too_short():
    assert parse_stat("cpu 1 2 3\n") is None


def test_parse_stat_empty():
    assert parse_stat("") is None


def test_meter_first_call_has_no_value(tmp_path):
    stat = tmp_path / "stat"
    stat.write_text("cpu 100 0 100 700 100 0 0 0\n")
    meter = CpuMeter(str(stat))
    assert meter() is None


def test_meter_measures_busy_share(tmp_path):
    stat = tmp_path / "stat"
    stat.write_text("cpu 100 0 100 700 100 0 0 0\n")
    meter = CpuMeter(str(stat))
    assert meter() is None
    stat.write_text("cpu 200 0 200 700 100 0 0 0\n")
    assert meter() == "100"


def test_meter_idle_only_is_zero(tmp_path):
    stat = tmp_path / "stat"
    stat.write_text("cpu 100 0 100 700 100 0 0 0\n")
    meter = CpuMeter(str(stat))
    meter()
    stat.write_text("cpu 100 0 100 900 100 0 0 0\n")
    assert meter() == "0"


def test_meter_no_change_gives_none(tmp_path):
    stat = tmp_path / "stat"
    stat.write_text("cpu 100 0 100 700 100 0 0 0\n")
    meter = CpuMeter(str(stat))
    meter()
    assert meter() is None


def test_meter_result_in_range(tmp_path):
    stat = tmp_path / "stat"
    stat.write_text("cpu 10 5 10 50 3 1 1 0\n")
    meter = CpuMeter(str(stat))
    meter()
    stat.write_text("cpu 37 9 25 120 8 2 4 0\n")
    value = int(meter())
    assert 0 <= value <= 100


def test_meter_missing_file(tmp_path):
    meter = CpuMeter(str(tmp_path / "absent"))
    assert meter() is None


def test_cpu_freq(tmp_path):
    freq = tmp_path / "freq"
    freq.write_text("2400000\n")
    assert cpu_freq(None, str(freq)) == "2.4 G"


def test_cpu_freq_missing(tmp_path):
    assert cpu_freq(None, str(tmp_path / "absent")) is None