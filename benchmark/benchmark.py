"""
Triplet counting benchmark.

Measures: wall time of every strategy on synthetic text of growing size, and
checks that all strategies produce the same table. Uses a temporary directory
for the file strategy; never touches user files.
"""

import csv
import random
import sys
import tempfile
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

# Project root on path
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from searcher import PARALLEL_FILE, STRATEGIES, TripletSearcher

BENCHMARK_WORD_COUNTS = (1000, 10000, 50000)
WORDS_PER_LINE = 12

_VOCABULARY = [
    "alpha", "beta", "gamma", "delta", "invoice", "confidential", "report", "data",
    "triplet", "frequency", "chunk", "parallel", "Über", "straße", "мир", "текст",
]


def _random_text(word_count: int, seed: int = 0) -> str:
    """Synthetic text: vocabulary words with punctuation, WORDS_PER_LINE words per line."""
    rng = random.Random(seed)
    lines = []
    for start in range(0, word_count, WORDS_PER_LINE):
        n = min(WORDS_PER_LINE, word_count - start)
        words = [rng.choice(_VOCABULARY) for _ in range(n)]
        lines.append(", ".join(words) + ".")
    return "\n".join(lines) + "\n"


def _time_strategy(searcher: TripletSearcher, strategy: str, text: str, path: Path):
    t0 = time.perf_counter()
    if strategy == PARALLEL_FILE:
        table = searcher.frequency_parallel_file(path)
    else:
        table = searcher.frequency(text, strategy)
    return table, time.perf_counter() - t0


def _compute_summary(results: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Fastest strategy at the largest size and whether all strategies agreed everywhere."""
    valid = [r for r in results if r.get("error") is None]
    if not valid:
        return {"summary": "Insufficient data.", "fastest_strategy": None, "all_consistent": False}
    largest = max(r["word_count"] for r in valid)
    at_max = [r for r in valid if r["word_count"] == largest]
    fastest = min(at_max, key=lambda r: r["elapsed_ms"])
    consistent = all(r["consistent"] for r in valid)
    parts = [f"Fastest at {largest} words: {fastest['strategy']} ({fastest['elapsed_ms']:.2f} ms)."]
    if not consistent:
        parts.append("WARNING: strategies disagree on at least one input.")
    return {
        "summary": " ".join(parts),
        "fastest_strategy": fastest["strategy"],
        "all_consistent": consistent,
        "max_word_count": largest,
    }


def run_benchmark(
    word_counts: tuple[int, ...] = BENCHMARK_WORD_COUNTS,
    max_workers: Optional[int] = None,
    chunk_length: int = 100,
    csv_path: Path | None = None,
) -> Dict[str, Any]:
    """
    Time every strategy for every input size.
    Returns per-run rows and a summary; writes CSV when csv_path is given.
    """
    kwargs: Dict[str, Any] = {"chunk_length": chunk_length, "stitch_chunks": True}
    if max_workers is not None:
        kwargs["max_workers"] = max_workers
    searcher = TripletSearcher(**kwargs)
    results: List[Dict[str, Any]] = []
    with tempfile.TemporaryDirectory() as tmp:
        for count in word_counts:
            text = _random_text(count, seed=count)
            path = Path(tmp) / f"words_{count}.txt"
            path.write_text(text, encoding="utf-8")
            # Chunks drop line breaks, so the file strategy matches the text with newlines removed
            reference = searcher.frequency_one_thread(text.replace("\n", ""))
            for strategy in STRATEGIES:
                row: Dict[str, Any] = {
                    "word_count": count,
                    "strategy": strategy,
                    "workers": searcher.max_workers,
                }
                try:
                    table, elapsed = _time_strategy(searcher, strategy, text, path)
                    row["elapsed_ms"] = round(elapsed * 1000, 3)
                    row["distinct_triplets"] = len(table)
                    row["total_triplets"] = sum(table.values())
                    if strategy == PARALLEL_FILE:
                        row["consistent"] = table == reference
                    else:
                        row["consistent"] = table == searcher.frequency_one_thread(text)
                    row["top"] = " ".join(f"{t}:{c}" for t, c in TripletSearcher.top_triplets(table, 3))
                except Exception as e:
                    row["error"] = str(e)
                    row.setdefault("elapsed_ms", -1)
                    row.setdefault("distinct_triplets", -1)
                    row.setdefault("total_triplets", -1)
                    row.setdefault("consistent", False)
                results.append(row)

    out: Dict[str, Any] = {
        "benchmark_results": results,
        "word_counts": list(word_counts),
        "strategies": list(STRATEGIES),
        "summary": _compute_summary(results),
    }
    if csv_path:
        fieldnames = [
            "word_count", "strategy", "workers", "elapsed_ms",
            "distinct_triplets", "total_triplets", "consistent", "top",
        ]
        if any("error" in r for r in results):
            fieldnames.append("error")
        with open(csv_path, "w", newline="", encoding="utf-8") as f:
            w = csv.DictWriter(f, fieldnames=fieldnames, extrasaction="ignore")
            w.writeheader()
            w.writerows(results)
    return out
