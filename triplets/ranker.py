"""Rank a frequency table: count descending, ties by triplet ascending."""

from typing import List, Mapping, Optional, Tuple


def top_k(table: Mapping[str, int], k: Optional[int] = None) -> List[Tuple[str, int]]:
    """Return the k most frequent (triplet, count) pairs; all of them when k is None or too large."""
    if k is not None and k < 0:
        raise ValueError("k must be non-negative")
    ranked = sorted(table.items(), key=lambda kv: (-kv[1], kv[0]))
    return ranked if k is None else ranked[:k]
