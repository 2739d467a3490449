"""Triplet counting benchmark: wall time and agreement of every strategy."""

from .benchmark import run_benchmark, BENCHMARK_WORD_COUNTS

__all__ = ["run_benchmark", "BENCHMARK_WORD_COUNTS"]
