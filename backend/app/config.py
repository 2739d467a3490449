"""App configuration from environment."""
import os
from pathlib import Path

from dotenv import load_dotenv

# Project root (tripleter/) for triplets, searcher, benchmark
ROOT_DIR = Path(__file__).resolve().parent.parent.parent

# Load .env from backend directory
load_dotenv(str(ROOT_DIR / "backend" / ".env"))

# Input validation
MAX_UPLOAD_BYTES = int(os.environ.get("TRIPLETER_MAX_UPLOAD_BYTES", 5 * 1024 * 1024))  # 5 MiB
MAX_TEXT_LENGTH = int(os.environ.get("TRIPLETER_MAX_TEXT_LENGTH", 1_000_000))
MAX_TOP_K = int(os.environ.get("TRIPLETER_MAX_TOP_K", 1000))


def _allowed_extensions() -> frozenset:
    raw = os.environ.get("TRIPLETER_ALLOWED_EXTENSIONS", ".txt,.md,.csv").lower().replace(" ", "")
    parts = [p.strip() for p in raw.split(",") if p.strip()]
    return frozenset(p if p.startswith(".") else f".{p}" for p in parts)


ALLOWED_UPLOAD_EXTENSIONS = _allowed_extensions()

# Rate limits (per client): requests per window
RATE_LIMIT_ANALYZE_PER_MINUTE = int(os.environ.get("TRIPLETER_RATE_LIMIT_ANALYZE", 60))
RATE_LIMIT_BENCHMARK_PER_MINUTE = int(os.environ.get("TRIPLETER_RATE_LIMIT_BENCHMARK", 2))
RATE_LIMIT_WINDOW_SECONDS = 60

CORS_ORIGINS = [
    o.strip()
    for o in os.environ.get(
        "TRIPLETER_CORS_ORIGINS",
        "http://localhost:5173,http://localhost:3000,http://127.0.0.1:5173,http://127.0.0.1:3000",
    ).split(",")
    if o.strip()
]
