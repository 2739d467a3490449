"""Triplet primitives: tokenizing, extraction, frequency tables, chunked file reading, ranking."""

from .tokenizer import SEPARATORS, split_into_words
from .extractor import (
    TRIPLET_LENGTH,
    count_triplets,
    extract_triplets,
    is_alphabetic,
)
from .frequency import (
    SharedFrequencyTable,
    increment,
    merge,
    merge_all,
    new_table,
)
from .chunks import CHUNK_LENGTH, chunk_seams, read_chunks
from .ranker import top_k

__all__ = [
    "SEPARATORS",
    "split_into_words",
    "TRIPLET_LENGTH",
    "count_triplets",
    "extract_triplets",
    "is_alphabetic",
    "SharedFrequencyTable",
    "increment",
    "merge",
    "merge_all",
    "new_table",
    "CHUNK_LENGTH",
    "chunk_seams",
    "read_chunks",
    "top_k",
]
