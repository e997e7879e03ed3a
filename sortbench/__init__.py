"""Benchmark classic sorting algorithms on generated integer and word data."""

__version__ = "0.1.0"
__all__ = ["sorting", "datagen", "benchmark"]