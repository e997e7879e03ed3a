"""Generate files of random numbers and random lowercase words."""

from __future__ import annotations

import argparse
import random
import string
from os import PathLike
from typing import Sequence

__all__ = [
    "random_word",
    "generate_random_numbers",
    "generate_random_words",
    "main",
]

MIN_WORD_LENGTH = 3
DEFAULT_COUNT = 20_000_000
DEFAULT_MAX_VALUE = 2_000_000
DEFAULT_MAX_WORD_LENGTH = 20
DEFAULT_NUMBERS_FILE = "data_angka.txt"
DEFAULT_WORDS_FILE = "data_kata.txt"


def random_word(length: int, rng: random.Random | None = None) -> str:
    """Return a word of ``length`` random lowercase ASCII letters."""
    if length < 0:
        raise ValueError("length must not be negative")
    rng = rng or random.Random()
    return "".join(rng.choice(string.ascii_lowercase) for _ in range(length))


def generate_random_numbers(
    path: str | PathLike[str],
    count: int,
    max_value: int,
    rng: random.Random | None = None,
) -> None:
    """Write ``count`` random integers in ``[0, max_value)``, one per line."""
    if max_value <= 0:
        raise ValueError("max_value must be positive")
    rng = rng or random.Random()
    with open(path, "w", encoding="ascii") as fp:
        for _ in range(count):
            fp.write(f"{rng.randrange(max_value)}\n")


def generate_random_words(
    path: str | PathLike[str],
    count: int,
    max_word_length: int,
    rng: random.Random | None = None,
) -> None:
    """Write ``count`` random words, one per line.

    Word lengths are drawn from ``[3, max_word_length)``.
    """
    if max_word_length <= MIN_WORD_LENGTH:
        raise ValueError(f"max_word_length must be greater than {MIN_WORD_LENGTH}")
    rng = rng or random.Random()
    with open(path, "w", encoding="ascii") as fp:
        for _ in range(count):
            length = rng.randrange(max_word_length - MIN_WORD_LENGTH) + MIN_WORD_LENGTH
            fp.write(random_word(length, rng) + "\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Generate the number and word data files."""
    parser = argparse.ArgumentParser(description="Generate random benchmark data files.")
    parser.add_argument("--only", choices=("numbers", "words"), help="generate just one file")
    parser.add_argument("--count", type=int, default=DEFAULT_COUNT)
    parser.add_argument("--max-value", type=int, default=DEFAULT_MAX_VALUE)
    parser.add_argument("--max-word-length", type=int, default=DEFAULT_MAX_WORD_LENGTH)
    parser.add_argument("--numbers-file", default=DEFAULT_NUMBERS_FILE)
    parser.add_argument("--words-file", default=DEFAULT_WORDS_FILE)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    try:
        if args.only in (None, "numbers"):
            generate_random_numbers(args.numbers_file, args.count, args.max_value, rng)
        if args.only in (None, "words"):
            generate_random_words(args.words_file, args.count, args.max_word_length, rng)
    except OSError as exc:
        parser.exit(1, f"File tidak dapat dibuka: {exc}\n")
    except ValueError as exc:
        parser.error(str(exc))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())