from random import Random

import pytest

from sorting_comparison.input_data import MalformedInputError, generate_data, read_data_from_file, write_data_file


def test_read_data_from_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("10\n5 2 9 1 6 3 15 3 18 8\n")
    assert read_data_from_file(path) == [5, 2, 9, 1, 6, 3, 15, 3, 18, 8]


def test_read_takes_only_count_numbers(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("3\n-4 7  11 99 100\n")
    assert read_data_from_file(path) == [-4, 7, 11]


def test_read_skips_byte_order_mark(tmp_path):
    path = tmp_path / "input.txt"
    path.write_bytes("\ufeff3\n3 1 2\n".encode())
    assert read_data_from_file(path) == [3, 1, 2]


def test_read_zero_count(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("0\n")
    assert read_data_from_file(path) == []


def test_missing_file(tmp_path, capsys):
    path = tmp_path / "missing.txt"
    assert read_data_from_file(path) == []
    assert capsys.readouterr().out == f"File not found: {path}\n"


@pytest.mark.parametrize(
    "content, reason",
    [
        ("", "missing count line"),
        ("ten\n1 2 3\n", "not an integer"),
        ("-1\n1\n", "negative count"),
        ("2\n", "missing data line"),
        ("4\n1 2 3\n", "expected 4 numbers, found 3"),
        ("3\n1 x 3\n", "`x` is not an integer"),
    ],
)
def test_malformed_input(tmp_path, content, reason):
    path = tmp_path / "input.txt"
    path.write_text(content)
    with pytest.raises(MalformedInputError, match=reason) as exc_info:
        read_data_from_file(path)
    assert str(path) in str(exc_info.value)
    assert isinstance(exc_info.value, ValueError)


def test_write_then_read(tmp_path):
    data = generate_data(50, Random(3), -10, 10)
    path = tmp_path / "nested" / "data.txt"
    write_data_file(path, data)
    assert path.read_text().splitlines()[0] == "50"
    assert read_data_from_file(path) == data


def test_generate_data_range_and_seed():
    data = generate_data(1000, Random(5), -3, 3)
    assert len(data) == 1000
    assert set(data) <= set(range(-3, 4))
    assert data == generate_data(1000, Random(5), -3, 3)
