"""Simple in-memory rate limiter per client (by client address)."""
import threading
import time
from collections import defaultdict

from fastapi import HTTPException, Request

# (client_id, key) -> list of timestamps in window
_store: defaultdict[str, list[float]] = defaultdict(list)
_lock = threading.Lock()


def client_id(request: Request) -> str:
    return request.client.host if request.client else "anonymous"


def check_rate_limit(
    client: str,
    key: str,
    max_per_window: int,
    window_seconds: float = 60,
) -> None:
    """Raise 429 if client has exceeded max_per_window requests in the last window_seconds."""
    now = time.monotonic()
    cutoff = now - window_seconds
    k = f"{client}:{key}"
    with _lock:
        _store[k] = [t for t in _store[k] if t > cutoff]
        if len(_store[k]) >= max_per_window:
            raise HTTPException(
                status_code=429,
                detail="Too many requests. Please try again in a minute.",
            )
        _store[k].append(now)


def reset() -> None:
    with _lock:
        _store.clear()
