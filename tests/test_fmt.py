import pytest

from slkit.fmt import fmt_human, read_int, read_line, warn


def test_fmt_human_binary_kibi():
    assert fmt_human(1024, 1024) == "1.0 Ki"


def test_fmt_human_small_number_has_no_prefix():
    assert fmt_human(0, 1000) == "0.0 "


def test_fmt_human_decimal_prefix():
    assert fmt_human(2_500_000, 1000).endswith(" M")


@pytest.mark.parametrize(
    "power,prefix", [(1, "Ki"), (2, "Mi"), (3, "Gi"), (4, "Ti")]
)
def test_fmt_human_binary_prefixes(power, prefix):
    result = fmt_human(3 * 1024**power, 1024)
    assert result.split(" ")[1] == prefix
    assert float(result.split(" ")[0]) == 3.0


def test_fmt_human_caps_at_largest_prefix():
    assert fmt_human(1000**12, 1000).endswith(" Y")


def test_fmt_human_invalid_base():
    with pytest.raises(ValueError):
        fmt_human(10, 10)


def test_read_int(tmp_path):
    path = tmp_path / "value"
    path.write_text("  42\n")
    assert read_int(str(path)) == 42


def test_read_int_not_a_number(tmp_path):
    path = tmp_path / "value"
    path.write_text("abc")
    assert read_int(str(path)) is None


def test_read_int_missing_file(tmp_path, capsys):
    assert read_int(str(tmp_path / "nope")) is None
    assert "fopen" in capsys.readouterr().err


def test_read_line_first_line(tmp_path):
    path = tmp_path / "text"
    path.write_text("hello\nworld\n")
    assert read_line(str(path)) == "hello"


def test_read_line_empty_file(tmp_path):
    path = tmp_path / "text"
    path.write_text("")
    assert read_line(str(path)) is None


def test_warn_writes_stderr(capsys):
    warn("something odd")
    assert capsys.readouterr().err == "something odd\n"