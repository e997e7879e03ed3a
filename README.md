# sortbench

sortbench compares six classic sorting algorithms on two kinds of data:
integers and lowercase words. The algorithms are bubble, selection,
insertion, merge, quick and shell sort. For each one it records the CPU
time the sort took and an estimate of the memory it used, and prints the
results as two text tables.

## Installation

```
pip install .
```

## Generating data

Create the input files before you run the benchmark:

```
sortbench-datagen
```

By default this writes two files in the current directory:

- `data_angka.txt` holds random integers in the range `[0, 2000000)`, one per line.
- `data_kata.txt` holds random lowercase words of length 3 to 19, one per line.

Each file has 20,000,000 lines by default, so this takes a while. These
options change what is generated:

- `--only numbers` or `--only words` writes just one of the two files.
- `--count N` sets the number of lines in each file.
- `--max-value N` sets the exclusive upper bound for the integers.
- `--max-word-length N` sets the exclusive upper bound for word length.
  It must be greater than 3.
- `--numbers-file PATH` and `--words-file PATH` choose where the files go.
- `--seed N` seeds the random generator, so the output can be reproduced.

## Running the benchmark

```
sortbench
```

The program asks how many items to test. It suggests a maximum of
2,000,000, but it does not enforce one. It reads that many integers and
that many words from the data files and sorts a fresh copy of each with
every algorithm. Then it prints one table for the integers and one for the
words, giving the time in seconds and the memory in megabytes. Answer `y`
(or `Y`) to run again; any other answer, or end of input, quits.

If you enter a value that is not a non-negative integer, the program asks
again. If a data file cannot be opened, or holds fewer items than you asked
for, the program reports this and exits with status 1.

Use `--numbers-file PATH` and `--words-file PATH` to read data from files
other than `data_angka.txt` and `data_kata.txt`.

The quadratic algorithms (bubble, selection and insertion) slow down very
quickly as the count grows, so start with small counts.

The memory figures are estimates, not measurements. For integers the
estimate is 4 bytes per item times `1 + extra_factor`. For words it is
8 bytes per item times `1 + extra_factor`, plus each word's UTF-8 length
and one more byte.

## Using the library

Each function in `sortbench.sorting` sorts a list in place, in ascending
order, and returns `None`. The functions are `bubble_sort`,
`selection_sort`, `insertion_sort`, `merge_sort`, `quick_sort` and
`shell_sort`. They accept any mutable sequence of items that can be
compared with each other:

```python
from sortbench.sorting import merge_sort, quick_sort

values = [5, 3, 9, 1]
merge_sort(values)
print(values)  # [1, 3, 5, 9]
```

`sortbench.benchmark` provides the measuring tools:

- `load_int_data(path, count)` and `load_str_data(path, count)` read the
  first `count` items from a data file. They raise `ValueError` if the
  file holds fewer.
- `measure_int_sort(name, sort_func, data, extra_factor=1)` and
  `measure_str_sort(name, sort_func, data, extra_factor=0)` sort a copy of
  `data`. Each returns a `Result` with `name`, `time_sec` and `memory_mb`.
- `format_table(results, title)` renders results as a bordered text table.
- `run_benchmarks(count, numbers_path, words_path)` runs every algorithm
  and returns a pair of result lists: the first for integers, the second
  for words.
- `to_mb(num_bytes)` converts a byte count to mebibytes.

`sortbench.datagen` provides `generate_random_numbers(path, count,
max_value, rng=None)`, `generate_random_words(path, count,
max_word_length, rng=None)` and `random_word(length, rng=None)`. Pass a
`random.Random` instance as `rng` to make the output reproducible.

## Tests

```
pip install .[test]
pytest
```