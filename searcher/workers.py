"""
Worker dispatch for the parallel strategies.

Every worker counts into its own private table. Tables are merged only after
the work they cover has finished, so no two threads ever write the same
mapping without a lock. The first worker failure is re-raised to the caller.
"""

import logging
import queue
import threading
from collections import Counter
from concurrent.futures import FIRST_COMPLETED, ThreadPoolExecutor, as_completed, wait
from typing import Iterable, List, Optional, Sequence

from triplets.chunks import chunk_seams
from triplets.extractor import count_triplets
from triplets.frequency import SharedFrequencyTable, merge_all, new_table

logger = logging.getLogger(__name__)

# Sentinel telling a queue worker to stop
_STOP = object()


def partition(items: Sequence[str], parts: int) -> List[Sequence[str]]:
    """Split items into at most `parts` contiguous, non-empty slices of near-equal size."""
    if parts < 1:
        raise ValueError("parts must be at least 1")
    parts = min(parts, len(items))
    if parts == 0:
        return []
    size, extra = divmod(len(items), parts)
    slices = []
    start = 0
    for i in range(parts):
        end = start + size + (1 if i < extra else 0)
        slices.append(items[start:end])
        start = end
    return slices


def count_words(words: Iterable[str], filter_alphabetic: bool = True) -> Counter:
    table = new_table()
    for word in words:
        table.update(count_triplets(word, filter_alphabetic))
    return table


def run_partitioned(words: Sequence[str], max_workers: int, filter_alphabetic: bool = True) -> Counter:
    """One slice of the word list per pool worker; private tables merged after the join."""
    slices = partition(words, max_workers)
    if not slices:
        return new_table()
    logger.debug("Dispatching %d words in %d slice(s)", len(words), len(slices))
    with ThreadPoolExecutor(max_workers=len(slices), thread_name_prefix="triplet-words") as pool:
        futures = [pool.submit(count_words, s, filter_alphabetic) for s in slices]
        try:
            tables = [f.result() for f in futures]
        except BaseException:
            for f in futures:
                f.cancel()
            raise
    return merge_all(tables)


class QueueWorker(threading.Thread):
    """Drains words from a queue into a private table; publishes it once when stopped."""

    def __init__(
        self,
        tasks: "queue.Queue",
        target: SharedFrequencyTable,
        filter_alphabetic: bool = True,
    ):
        super().__init__(daemon=True)
        self._tasks = tasks
        self._target = target
        self._filter_alphabetic = filter_alphabetic
        self.processed = 0
        self.error: Optional[BaseException] = None

    def run(self) -> None:
        table = new_table()
        try:
            while True:
                word = self._tasks.get()
                if word is _STOP:
                    break
                table.update(count_triplets(word, self._filter_alphabetic))
                self.processed += 1
        except Exception as e:
            self.error = e
            return
        self._target.merge_from(table)


def run_queued(words: Sequence[str], workers: int, filter_alphabetic: bool = True) -> Counter:
    """
    Queue-dispatched counting. Returns only after every worker has joined;
    the shared table is read after that barrier and never before.
    """
    workers = max(1, min(workers, len(words)))
    tasks: "queue.Queue" = queue.Queue()
    target = SharedFrequencyTable()
    threads = [QueueWorker(tasks, target, filter_alphabetic) for _ in range(workers)]
    for t in threads:
        t.start()
    for word in words:
        tasks.put(word)
    for _ in threads:
        tasks.put(_STOP)
    for t in threads:
        t.join()
    for t in threads:
        if t.error is not None:
            raise t.error
    logger.debug(
        "Queue workers processed %s word(s)", [t.processed for t in threads]
    )
    return target.snapshot()


def run_chunked(
    chunks: Iterable[str],
    max_workers: int,
    filter_alphabetic: bool = True,
    stitch: bool = True,
) -> Counter:
    """
    Count chunks on a pool while they are still being read. At most
    2 * max_workers chunks are in flight, so memory stays bounded by chunk size.
    Seam triplets are counted on the reading thread when stitch is set.
    """
    limit = 2 * max_workers
    total = new_table()
    seams = new_table()
    in_flight = set()
    dispatched = 0
    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="triplet-chunks") as pool:
        try:
            for chunk, seam in chunk_seams(chunks):
                if stitch and seam:
                    seams.update(count_triplets(seam, filter_alphabetic))
                in_flight.add(pool.submit(count_triplets, chunk, filter_alphabetic))
                dispatched += 1
                if len(in_flight) >= limit:
                    done, in_flight = wait(in_flight, return_when=FIRST_COMPLETED)
                    for f in done:
                        total.update(f.result())
            for f in as_completed(in_flight):
                total.update(f.result())
        except BaseException:
            for f in in_flight:
                f.cancel()
            raise
    logger.debug("Merged %d chunk table(s), %d seam triplet(s)", dispatched, sum(seams.values()))
    total.update(seams)
    return total
