"""Searcher configuration from environment."""
import os
from pathlib import Path

from dotenv import load_dotenv

from triplets.chunks import CHUNK_LENGTH as DEFAULT_CHUNK_LENGTH

# Project root (tripleter/)
ROOT_DIR = Path(__file__).resolve().parent.parent

# Load .env from project root; real environment variables win
load_dotenv(str(ROOT_DIR / ".env"))


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int, minimum: int = 0) -> int:
    value = int(os.environ.get(name, default))
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


# Lines grouped into one chunk on the large-file path
CHUNK_LENGTH = _env_int("TRIPLETER_CHUNK_LENGTH", DEFAULT_CHUNK_LENGTH, minimum=1)

# Worker threads for the parallel strategies
MAX_WORKERS = _env_int("TRIPLETER_MAX_WORKERS", os.cpu_count() or 1, minimum=1)

CASE_SENSITIVE = _env_bool("TRIPLETER_CASE_SENSITIVE", False)
FILTER_ALPHABETIC = _env_bool("TRIPLETER_FILTER_ALPHABETIC", True)

# Count triplets that cross chunk boundaries on the large-file path
STITCH_CHUNKS = _env_bool("TRIPLETER_STITCH_CHUNKS", True)

TOP_K = _env_int("TRIPLETER_TOP_K", 10)
ENCODING = os.environ.get("TRIPLETER_ENCODING", "utf-8")
