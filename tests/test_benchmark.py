from unittest import mock

import pytest

from sortbench.benchmark import (
    Result,
    format_table,
    load_int_data,
    load_str_data,
    measure_int_sort,
    measure_str_sort,
    run_benchmarks,
    to_mb,
    main,
)
from sortbench.sorting import merge_sort


@pytest.fixture
def data_files(tmp_path):
    nums = tmp_path / "nums.txt"
    words = tmp_path / "words.txt"
    nums.write_text("9\n4\n7\n1\n3\n8\n")
    words.write_text("pear\napple\nfig\nkiwi\nlime\nplum\n")
    return nums, words


def test_load_int_data_reads_prefix(data_files):
    nums, _ = data_files
    assert load_int_data(nums, 3) == [9, 4, 7]


def test_load_int_data_too_few(data_files):
    nums, _ = data_files
    with pytest.raises(ValueError):
        load_int_data(nums, 10)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_int_data(tmp_path / "none.txt", 1)


def test_load_str_data_strips_newlines(data_files):
    _, words = data_files
    assert load_str_data(words, 2) == ["pear", "apple"]


def test_load_str_data_too_few(data_files):
    _, words = data_files
    with pytest.raises(ValueError):
        load_str_data(words, 7)


def test_to_mb_of_one_mebibyte():
    assert to_mb(1024 * 1024) == 1.0


def test_measure_int_sort_leaves_input_and_scales_memory():
    data = [3, 1, 2, 5, 4]
    seen = []

    def recorder(items):
        merge_sort(items)
        seen.append(list(items))

    one = measure_int_sort("Merge Sort", recorder, data, 1)
    zero = measure_int_sort("Merge Sort", recorder, data, 0)
    assert data == [3, 1, 2, 5, 4]
    assert seen[0] == sorted(data)
    assert one.name == "Merge Sort"
    assert one.memory_mb == pytest.approx(2 * zero.memory_mb)
    assert one.time_sec >= 0


def test_measure_str_sort_memory_grows_with_extra_factor():
    data = ["bb", "a", "ccc"]
    base = measure_str_sort("Quick Sort", merge_sort, data, 0)
    extra = measure_str_sort("Quick Sort", merge_sort, data, 1)
    assert extra.memory_mb > base.memory_mb
    assert data == ["bb", "a", "ccc"]


def test_format_table_layout():
    table = format_table([Result("Bubble Sort", 1.5, 0.25)], "Judul")
    lines = table.splitlines()
    assert lines[0] == "Judul"
    assert len({len(line) for line in lines[1:]}) == 1
    assert "Bubble Sort" in lines[4]
    assert "1.50" in lines[4] and "0.25" in lines[4]
    assert lines[1] == lines[3] == lines[-1]


def test_run_benchmarks(data_files):
    nums, words = data_files
    number_results, word_results = run_benchmarks(5, nums, words)
    expected_names = [
        "Bubble Sort",
        "Selection Sort",
        "Insertion Sort",
        "Merge Sort",
        "Quick Sort",
        "Shell Sort",
    ]
    assert [r.name for r in number_results] == expected_names
    assert [r.name for r in word_results] == expected_names
    assert len({r.memory_mb for r in number_results}) == 1


def test_main_runs_once(data_files, capsys):
    nums, words = data_files
    with mock.patch("builtins.input", side_effect=["4", "n"]):
        code = main(["--numbers-file", str(nums), "--words-file", str(words)])
    out = capsys.readouterr().out
    assert code == 0
    assert "Hasil Sorting Data Angka:" in out
    assert "Hasil Sorting Data Kata:" in out


def test_main_missing_file(tmp_path):
    with mock.patch("builtins.input", side_effect=["2"]):
        code = main(["--numbers-file", str(tmp_path / "x"), "--words-file", str(tmp_path / "y")])
    assert code == 1