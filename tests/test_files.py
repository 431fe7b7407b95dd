from slkit.files import cat, num_files


def test_cat_first_line(tmp_path):
    path = tmp_path / "f"
    path.write_text("first\nsecond\n")
    assert cat(str(path)) == "first"


def test_cat_without_newline(tmp_path):
    path = tmp_path / "f"
    path.write_text("only")
    assert cat(str(path)) == "only"


def test_cat_empty_line_is_none(tmp_path):
    path = tmp_path / "f"
    path.write_text("\nmore\n")
    assert cat(str(path)) is None


def test_cat_missing(tmp_path):
    assert cat(str(tmp_path / "missing")) is None


def test_num_files_counts_entries(tmp_path):
    for name in ("a", "b", ".hidden"):
        (tmp_path / name).write_text("x")
    (tmp_path / "sub").mkdir()
    assert num_files(str(tmp_path)) == "4"


def test_num_files_empty_dir(tmp_path):
    assert num_files(str(tmp_path)) == "0"


def test_num_files_missing(tmp_path):
    assert num_files(str(tmp_path / "missing")) is None