"""
Frequency tables: triplet -> count.

Tables are plain Counters owned by a single producer. Concurrent producers
either keep a private table each and merge after the join, or feed one
SharedFrequencyTable whose updates go through a lock.
"""

import threading
from collections import Counter
from typing import Iterable


def new_table() -> Counter:
    return Counter()


def increment(table: Counter, triplet: str) -> None:
    table[triplet] += 1


def merge(a: Counter, b: Counter) -> Counter:
    """
    New table with counts summed per key. Inputs are left untouched.
    Counter.update is used instead of `+` so zero counts survive.
    """
    result = Counter(a)
    result.update(b)
    return result


def merge_all(tables: Iterable[Counter]) -> Counter:
    result = new_table()
    for table in tables:
        result.update(table)
    return result


class SharedFrequencyTable:
    """Frequency table written by several threads; every update holds the lock."""

    def __init__(self) -> None:
        self._table = new_table()
        self._lock = threading.Lock()

    def increment(self, triplet: str) -> None:
        with self._lock:
            self._table[triplet] += 1

    def merge_from(self, table: Counter) -> None:
        """Fold a worker's private table in as one atomic step."""
        with self._lock:
            self._table.update(table)

    def snapshot(self) -> Counter:
        with self._lock:
            return Counter(self._table)

    def __len__(self) -> int:
        with self._lock:
            return len(self._table)
