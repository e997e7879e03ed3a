"""Time the sorting algorithms on number and word data and report the results."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass
from itertools import islice
from os import PathLike
from typing import Callable, Iterable, Iterator, Sequence, TextIO

from sortbench.sorting import (
    bubble_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
    shell_sort,
)

__all__ = [
    "Result",
    "load_int_data",
    "load_str_data",
    "to_mb",
    "measure_int_sort",
    "measure_str_sort",
    "format_table",
    "run_benchmarks",
    "main",
]

MAX_DATA = 2_000_000
DATA_ANGKA = "data_angka.txt"
DATA_KATA = "data_kata.txt"
INT_SIZE = 4
POINTER_SIZE = 8

SortFunc = Callable[[list], None]

# name, sort function, extra factor for numbers, extra factor for words
ALGORITHMS: tuple[tuple[str, SortFunc, int, int], ...] = (
    ("Bubble Sort", bubble_sort, 1, 0),
    ("Selection Sort", selection_sort, 1, 0),
    ("Insertion Sort", insertion_sort, 1, 0),
    ("Merge Sort", merge_sort, 1, 1),
    ("Quick Sort", quick_sort, 1, 1),
    ("Shell Sort", shell_sort, 1, 0),
)


@dataclass(frozen=True)
class Result:
    """Timing and estimated memory use of one sort run."""

    name: str
    time_sec: float
    memory_mb: float


def _tokens(lines: TextIO) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def load_int_data(path: str | PathLike[str], count: int) -> list[int]:
    """Read the first ``count`` whitespace-separated integers from ``path``."""
    with open(path, encoding="ascii") as fp:
        values = [int(token) for token in islice(_tokens(fp), count)]
    if len(values) < count:
        raise ValueError(f"{path}: expected {count} numbers, found {len(values)}")
    return values


def load_str_data(path: str | PathLike[str], count: int) -> list[str]:
    """Read the first ``count`` lines from ``path`` without their newlines."""
    with open(path, encoding="utf-8") as fp:
        words = [line.rstrip("\n") for line in islice(fp, count)]
    if len(words) < count:
        raise ValueError(f"{path}: expected {count} words, found {len(words)}")
    return words


def to_mb(num_bytes: int) -> float:
    """Convert a byte count to mebibytes."""
    return num_bytes / (1024.0 * 1024.0)


def _timed(sort_func: SortFunc, items: list) -> float:
    start = time.process_time()
    sort_func(items)
    return time.process_time() - start


def measure_int_sort(
    name: str, sort_func: SortFunc, data: Sequence[int], extra_factor: int = 1
) -> Result:
    """Sort a copy of ``data`` and report CPU time and estimated memory."""
    copy = list(data)
    elapsed = _timed(sort_func, copy)
    mem_bytes = len(copy) * INT_SIZE * (1 + extra_factor)
    return Result(name, elapsed, to_mb(mem_bytes))


def measure_str_sort(
    name: str, sort_func: SortFunc, data: Sequence[str], extra_factor: int = 0
) -> Result:
    """Sort a copy of ``data`` and report CPU time and estimated memory."""
    copy = list(data)
    elapsed = _timed(sort_func, copy)
    mem_bytes = POINTER_SIZE * len(copy) * (1 + extra_factor)
    mem_bytes += sum(len(word.encode("utf-8")) + 1 for word in copy)
    return Result(name, elapsed, to_mb(mem_bytes))


def format_table(results: Iterable[Result], title: str) -> str:
    """Render results as a bordered text table under ``title``."""
    border = "+-----------------+------------+--------------+"
    lines = [
        title,
        border,
        f"| {'Algoritma':<15} | {'Waktu (s)':<10} | {'Memori (MB)':<12} |",
        border,
    ]
    lines.extend(
        f"| {r.name:<15} | {r.time_sec:10.2f} | {r.memory_mb:12.2f} |" for r in results
    )
    lines.append(border)
    return "\n".join(lines)


def run_benchmarks(
    count: int,
    numbers_path: str | PathLike[str] = DATA_ANGKA,
    words_path: str | PathLike[str] = DATA_KATA,
) -> tuple[list[Result], list[Result]]:
    """Run every algorithm on the first ``count`` numbers and words."""
    numbers = load_int_data(numbers_path, count)
    number_results = [
        measure_int_sort(name, func, numbers, int_extra)
        for name, func, int_extra, _ in ALGORITHMS
    ]
    del numbers

    words = load_str_data(words_path, count)
    word_results = [
        measure_str_sort(name, func, words, str_extra)
        for name, func, _, str_extra in ALGORITHMS
    ]
    return number_results, word_results


def main(argv: Sequence[str] | None = None) -> int:
    """Interactively ask for a data size, benchmark, and print the tables."""
    parser = argparse.ArgumentParser(description="Benchmark sorting algorithms.")
    parser.add_argument("--numbers-file", default=DATA_ANGKA)
    parser.add_argument("--words-file", default=DATA_KATA)
    args = parser.parse_args(argv)

    while True:
        try:
            raw = input(f"Masukkan jumlah data yang ingin diuji (max {MAX_DATA}): ")
        except EOFError:
            return 0
        try:
            count = int(raw.strip())
            if count < 0:
                raise ValueError(raw)
        except ValueError:
            print("Jumlah data tidak valid.", file=sys.stderr)
            continue

        try:
            number_results, word_results = run_benchmarks(
                count, args.numbers_file, args.words_file
            )
        except OSError as exc:
            print(f"Gagal membuka file: {exc}", file=sys.stderr)
            return 1
        except ValueError as exc:
            print(f"Data tidak valid: {exc}", file=sys.stderr)
            return 1

        print()
        print(format_table(number_results, "Hasil Sorting Data Angka:"))
        print()
        print(format_table(word_results, "Hasil Sorting Data Kata:"))

        try:
            again = input("\nIngin menjalankan program lagi? (y/n): ")
        except EOFError:
            return 0
        if again.strip().lower() != "y":
            return 0


if __name__ == "__main__":
    raise SystemExit(main())