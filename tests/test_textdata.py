import pytest

from tilemerge.textdata import (
    MAX_LOAD_BYTES,
    join_fields,
    load_fields,
    save_fields,
    split_fields,
)


def test_split_simple():
    assert split_fields("a,bb,ccc") == ["a", "bb", "ccc"]


def test_split_skips_empty_fields():
    assert split_fields(",a,,b,") == ["a", "b"]


def test_split_without_fields_raises():
    with pytest.raises(ValueError):
        split_fields(",,,")
    with pytest.raises(ValueError):
        split_fields("")


def test_join_and_split_round_trip():
    values = ["100", "200", "player"]
    assert split_fields(join_fields(values)) == values


def test_join_single_has_no_separator():
    assert join_fields(["only"]) == "only"


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "save.txt"
    values = ["2048", "15", "42"]
    save_fields(path, values)
    assert path.read_text(encoding="utf-8") == "2048,15,42"
    assert load_fields(path) == values


def test_save_overwrites(tmp_path):
    path = tmp_path / "save.txt"
    save_fields(path, ["long", "content", "here"])
    save_fields(path, ["x"])
    assert load_fields(path) == ["x"]


def test_load_reads_only_first_bytes(tmp_path):
    path = tmp_path / "big.txt"
    path.write_text("x" * 300, encoding="utf-8")
    loaded = load_fields(path)
    assert loaded == ["x" * MAX_LOAD_BYTES]


def test_load_stops_at_nul(tmp_path):
    path = tmp_path / "nul.txt"
    path.write_bytes(b"a,b\0c,d")
    assert load_fields(path) == ["a", "b"]


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_fields(tmp_path / "absent.txt")