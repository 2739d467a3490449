"""
Triplet extraction: sliding 3-character window over a string.

- Fixed window width (TRIPLET_LENGTH); one window per start position 0..len-3.
- Optional filter keeps only windows whose characters are all letters (str.isalpha, Unicode-aware).
"""

from collections import Counter
from typing import Iterator

TRIPLET_LENGTH = 3


def is_alphabetic(triplet: str) -> bool:
    return all(ch.isalpha() for ch in triplet)


def extract_triplets(text: str, filter_alphabetic: bool = True) -> Iterator[str]:
    """
    Yield every 3-character window of text, left to right.
    Strings shorter than TRIPLET_LENGTH yield nothing.
    """
    for position in range(len(text) - TRIPLET_LENGTH + 1):
        triplet = text[position : position + TRIPLET_LENGTH]
        if filter_alphabetic and not is_alphabetic(triplet):
            continue
        yield triplet


def count_triplets(text: str, filter_alphabetic: bool = True) -> Counter:
    """Frequency table for a single string, counted in one pass."""
    return Counter(extract_triplets(text, filter_alphabetic))
