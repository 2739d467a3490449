#!/usr/bin/env python3
"""
CLI for letter-triplet frequency counting.

Commands:
  text <string>  Rank triplets of a literal string
  file <path>    Rank triplets of a text file (any strategy)
  demo           Time every strategy on a built-in sample text
  bench          Run the benchmark; optionally write CSV
"""

import argparse
import logging
import sys
import time
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent))

from searcher import ONE_THREAD, PARALLEL_FILE, STRATEGIES, TripletSearcher, config

TEXT_STRATEGIES = tuple(s for s in STRATEGIES if s != PARALLEL_FILE)

SAMPLE_TEXT = (
    "Once upon a midnight dreary, while I pondered, weak and weary,\n"
    "Over many a quaint and curious volume of forgotten lore,\n"
    "While I nodded, nearly napping, suddenly there came a tapping,\n"
    "As of some one gently rapping, rapping at my chamber door.\n"
    "\"'Tis some visitor,\" I muttered, \"tapping at my chamber door;\n"
    "Only this, and nothing more.\"\n"
)


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def make_searcher(args: argparse.Namespace) -> TripletSearcher:
    return TripletSearcher(
        max_workers=args.workers,
        chunk_length=args.chunk_length,
        filter_alphabetic=not args.no_filter,
        stitch_chunks=not args.no_stitch,
    )


def print_ranked(ranked) -> None:
    for triplet, count in ranked:
        print(f"{triplet} - {count}")


def cmd_text(args: argparse.Namespace) -> None:
    searcher = make_searcher(args)
    table = searcher.frequency(args.text, args.strategy, case_sensitive=args.case_sensitive)
    print_ranked(searcher.top_triplets(table, args.top))


def cmd_file(args: argparse.Namespace) -> None:
    searcher = make_searcher(args)
    t0 = time.perf_counter()
    table = searcher.frequency_of_file(args.path, args.strategy, case_sensitive=args.case_sensitive)
    elapsed_ms = (time.perf_counter() - t0) * 1000
    print(f"Strategy: {args.strategy}")
    print(f"Elapsed: {elapsed_ms:.1f} ms\n")
    print_ranked(searcher.top_triplets(table, args.top))


def cmd_demo(args: argparse.Namespace) -> None:
    """Run every text strategy on the sample text, then the file strategy on a copy of it."""
    import tempfile

    searcher = make_searcher(args)
    ranked = []
    for strategy in STRATEGIES:
        t0 = time.perf_counter()
        if strategy == PARALLEL_FILE:
            with tempfile.TemporaryDirectory() as tmp:
                path = Path(tmp) / "sample.txt"
                path.write_text(SAMPLE_TEXT, encoding="utf-8")
                table = searcher.frequency_parallel_file(path, case_sensitive=args.case_sensitive)
        else:
            table = searcher.frequency(SAMPLE_TEXT, strategy, case_sensitive=args.case_sensitive)
        ranked = searcher.top_triplets(table, args.top)
        print(strategy)
        print(f"Elapsed: {(time.perf_counter() - t0) * 1000:.2f} ms\n")
    print_ranked(ranked)


def cmd_bench(args: argparse.Namespace) -> None:
    from benchmark import run_benchmark

    csv_path = Path(args.csv) if args.csv else None
    result = run_benchmark(
        word_counts=tuple(args.sizes),
        max_workers=args.workers,
        chunk_length=args.chunk_length,
        csv_path=csv_path,
    )
    for row in result["benchmark_results"]:
        print(
            f"n={row['word_count']:>8} {row['strategy']:<15} "
            f"{row['elapsed_ms']:>10} ms  consistent={row['consistent']}"
        )
    print("\n" + result["summary"]["summary"])
    if csv_path:
        print("Wrote", csv_path)


def add_common_options(p: argparse.ArgumentParser) -> None:
    p.add_argument("--top", type=int, default=config.TOP_K, help="Number of triplets to print")
    p.add_argument(
        "--case-sensitive",
        action=argparse.BooleanOptionalAction,
        default=config.CASE_SENSITIVE,
        help="Keep letter case (--no-case-sensitive folds case)",
    )
    p.add_argument("--no-filter", action="store_true", help="Keep triplets with non-letters (word strategies)")
    p.add_argument("--workers", type=int, default=config.MAX_WORKERS, help="Worker threads")
    p.add_argument("--chunk-length", type=int, default=config.CHUNK_LENGTH, help="Lines per chunk")
    p.add_argument("--no-stitch", action="store_true", help="Ignore triplets spanning chunk boundaries")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")


def main() -> None:
    parser = argparse.ArgumentParser(description="Letter triplet frequency counter")
    sub = parser.add_subparsers(dest="command", required=True)
    p_text = sub.add_parser("text", help="Count triplets in a string")
    p_text.add_argument("text", help="Source text")
    p_text.add_argument("--strategy", choices=TEXT_STRATEGIES, default=ONE_THREAD)
    p_file = sub.add_parser("file", help="Count triplets in a text file")
    p_file.add_argument("path", help="Path to a text file")
    p_file.add_argument("--strategy", choices=STRATEGIES, default=PARALLEL_FILE)
    p_demo = sub.add_parser("demo", help="Time every strategy on a sample text")
    p_bench = sub.add_parser("bench", help="Run the benchmark")
    p_bench.add_argument("--sizes", type=int, nargs="+", default=[1000, 10000, 50000], help="Word counts")
    p_bench.add_argument("--csv", help="Write results to this CSV file")
    for p in (p_text, p_file, p_demo, p_bench):
        add_common_options(p)
    args = parser.parse_args()
    setup_logging(args.verbose)
    try:
        if args.command == "text":
            cmd_text(args)
        elif args.command == "file":
            cmd_file(args)
        elif args.command == "demo":
            cmd_demo(args)
        elif args.command == "bench":
            cmd_bench(args)
    except FileNotFoundError as e:
        print("File not found:", e, file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print("Error:", e, file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
