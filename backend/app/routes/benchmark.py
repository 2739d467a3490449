"""
Benchmark API: time every triplet strategy on synthetic text.
Uses a temporary directory only; never touches uploaded data.
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent.parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fastapi import APIRouter, Request

from ..config import RATE_LIMIT_BENCHMARK_PER_MINUTE, RATE_LIMIT_WINDOW_SECONDS
from ..rate_limit import check_rate_limit, client_id

router = APIRouter(prefix="/api/benchmark", tags=["benchmark"])

API_WORD_COUNTS = (1000, 10000)


@router.post("/run")
def run_benchmark_endpoint(request: Request):
    """
    Run the benchmark with small inputs (1000 and 10000 words).
    Returns metrics JSON for frontend graph rendering.
    """
    check_rate_limit(
        client_id(request), "benchmark", RATE_LIMIT_BENCHMARK_PER_MINUTE, RATE_LIMIT_WINDOW_SECONDS
    )
    from benchmark.benchmark import run_benchmark
    return run_benchmark(word_counts=API_WORD_COUNTS)
