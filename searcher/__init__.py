"""Execution strategies for triplet frequency counting."""

from .searcher import (
    ONE_THREAD,
    PARALLEL_FILE,
    PARALLEL_WORDS,
    STRATEGIES,
    THREAD_POOL,
    TripletSearcher,
)

__all__ = [
    "ONE_THREAD",
    "PARALLEL_FILE",
    "PARALLEL_WORDS",
    "STRATEGIES",
    "THREAD_POOL",
    "TripletSearcher",
]
