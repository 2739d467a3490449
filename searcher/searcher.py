"""
Triplet searcher: frequency of letter triplets in a text or a text file.

Strategies:
  one-thread      whole text, filtered extraction, calling thread only
  parallel-words  word list split into slices over a thread pool
  thread-pool     words dispatched through a queue to worker threads
  parallel-file   file streamed in line chunks over a thread pool
"""

import logging
from collections import Counter
from pathlib import Path
from typing import List, Optional, Tuple, Union

from triplets.chunks import read_chunks
from triplets.extractor import count_triplets
from triplets.frequency import new_table
from triplets.ranker import top_k
from triplets.tokenizer import split_into_words

from . import config
from .workers import run_chunked, run_partitioned, run_queued

logger = logging.getLogger(__name__)

ONE_THREAD = "one-thread"
PARALLEL_WORDS = "parallel-words"
THREAD_POOL = "thread-pool"
PARALLEL_FILE = "parallel-file"
STRATEGIES = (ONE_THREAD, PARALLEL_WORDS, THREAD_POOL, PARALLEL_FILE)


def _require_text(source_text: Optional[str]) -> None:
    if not source_text:
        raise ValueError("source_text must be a non-empty string")


def _normalize(source_text: str, case_sensitive: bool) -> str:
    # casefold is per-character, so folding chunks separately equals folding the whole text
    return source_text if case_sensitive else source_text.casefold()


class TripletSearcher:
    """Counts letter triplets with one of several execution strategies."""

    def __init__(
        self,
        max_workers: int = config.MAX_WORKERS,
        chunk_length: int = config.CHUNK_LENGTH,
        filter_alphabetic: bool = config.FILTER_ALPHABETIC,
        stitch_chunks: bool = config.STITCH_CHUNKS,
        encoding: str = config.ENCODING,
    ):
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        if chunk_length < 1:
            raise ValueError("chunk_length must be at least 1")
        self.max_workers = max_workers
        self.chunk_length = chunk_length
        self.filter_alphabetic = filter_alphabetic
        self.stitch_chunks = stitch_chunks
        self.encoding = encoding

    def _filter(self, filter_alphabetic: Optional[bool]) -> bool:
        return self.filter_alphabetic if filter_alphabetic is None else filter_alphabetic

    def frequency_one_thread(
        self, source_text: str, case_sensitive: bool = config.CASE_SENSITIVE
    ) -> Counter:
        """Single pass over the whole text on the calling thread. Always filtered."""
        _require_text(source_text)
        return count_triplets(_normalize(source_text, case_sensitive), filter_alphabetic=True)

    def frequency_parallel_words(
        self,
        source_text: str,
        case_sensitive: bool = config.CASE_SENSITIVE,
        filter_alphabetic: Optional[bool] = None,
    ) -> Counter:
        """Split into words, count slices of the word list on a thread pool, merge."""
        _require_text(source_text)
        words = split_into_words(_normalize(source_text, case_sensitive))
        return run_partitioned(words, self.max_workers, self._filter(filter_alphabetic))

    def frequency_thread_pool(
        self,
        source_text: str,
        case_sensitive: bool = config.CASE_SENSITIVE,
        filter_alphabetic: Optional[bool] = None,
    ) -> Counter:
        """Words go through a queue to worker threads; returns after all workers join."""
        _require_text(source_text)
        words = split_into_words(_normalize(source_text, case_sensitive))
        return run_queued(words, self.max_workers, self._filter(filter_alphabetic))

    def frequency_parallel_file(
        self,
        file_path: Union[str, Path],
        case_sensitive: bool = config.CASE_SENSITIVE,
        filter_alphabetic: Optional[bool] = None,
    ) -> Counter:
        """
        Stream the file in chunks of chunk_length lines and count them on a pool.
        Raises FileNotFoundError before any worker starts.
        """
        chunks = read_chunks(file_path, self.chunk_length, self.encoding)
        if not case_sensitive:
            chunks = (_normalize(chunk, case_sensitive) for chunk in chunks)
        logger.debug(
            "Counting %s with %d worker(s), chunk_length=%d, stitch=%s",
            file_path, self.max_workers, self.chunk_length, self.stitch_chunks,
        )
        return run_chunked(
            chunks,
            self.max_workers,
            filter_alphabetic=self._filter(filter_alphabetic),
            stitch=self.stitch_chunks,
        )

    def frequency(
        self,
        source_text: str,
        strategy: str = ONE_THREAD,
        case_sensitive: bool = config.CASE_SENSITIVE,
        filter_alphabetic: Optional[bool] = None,
    ) -> Counter:
        """Run a text strategy by name."""
        if strategy == ONE_THREAD:
            return self.frequency_one_thread(source_text, case_sensitive)
        if strategy == PARALLEL_WORDS:
            return self.frequency_parallel_words(source_text, case_sensitive, filter_alphabetic)
        if strategy == THREAD_POOL:
            return self.frequency_thread_pool(source_text, case_sensitive, filter_alphabetic)
        raise ValueError(f"Unknown text strategy: {strategy!r}")

    def frequency_of_file(
        self,
        file_path: Union[str, Path],
        strategy: str = PARALLEL_FILE,
        case_sensitive: bool = config.CASE_SENSITIVE,
        filter_alphabetic: Optional[bool] = None,
    ) -> Counter:
        """
        Run any strategy on a file. Text strategies read the whole file into
        memory first; parallel-file streams it.
        """
        if strategy == PARALLEL_FILE:
            return self.frequency_parallel_file(file_path, case_sensitive, filter_alphabetic)
        if strategy not in STRATEGIES:
            raise ValueError(f"Unknown strategy: {strategy!r}")
        path = Path(file_path)
        if not path.is_file():
            raise FileNotFoundError(str(path))
        source_text = path.read_text(encoding=self.encoding)
        if not source_text:
            # An empty file is valid input with no triplets
            return new_table()
        return self.frequency(source_text, strategy, case_sensitive, filter_alphabetic)

    @staticmethod
    def top_triplets(table: Counter, k: Optional[int] = config.TOP_K) -> List[Tuple[str, int]]:
        return top_k(table, k)
