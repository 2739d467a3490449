"""
HTTP API: text and upload analysis, input validation, rate limiting.
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
from fastapi.testclient import TestClient

from backend.app import rate_limit
from backend.app.main import app
from backend.app.routes import triplets as triplet_routes

client = TestClient(app)


@pytest.fixture(autouse=True)
def _reset_rate_limit():
    rate_limit.reset()
    yield
    rate_limit.reset()


def test_health():
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_info_lists_strategies():
    data = client.get("/api/info").json()
    assert data["triplet_length"] == 3
    assert "parallel-file" in data["strategies"]


def test_text_ranking():
    r = client.post("/api/triplets/text", json={"text": "ababab", "top_k": 5})
    assert r.status_code == 200
    data = r.json()
    assert data["strategy"] == "one-thread"
    assert data["total"] == 4
    assert data["distinct"] == 2
    assert data["top"] == [{"triplet": "aba", "count": 2}, {"triplet": "bab", "count": 2}]


@pytest.mark.parametrize("strategy", ["one-thread", "parallel-words", "thread-pool"])
def test_text_strategies_agree(strategy):
    body = {"text": "The cat sat on the mat. The end!", "strategy": strategy, "top_k": 3}
    data = client.post("/api/triplets/text", json=body).json()
    assert data["top"][0] == {"triplet": "the", "count": 3}


def test_text_case_sensitive():
    body = {"text": "ABC abc", "case_sensitive": True, "top_k": 10}
    data = client.post("/api/triplets/text", json=body).json()
    assert data["top"] == [{"triplet": "ABC", "count": 1}, {"triplet": "abc", "count": 1}]


def test_empty_text_rejected():
    r = client.post("/api/triplets/text", json={"text": ""})
    assert r.status_code == 400


def test_unknown_strategy_rejected():
    r = client.post("/api/triplets/text", json={"text": "abc", "strategy": "parallel-file"})
    assert r.status_code == 400


def test_top_k_bounds():
    assert client.post("/api/triplets/text", json={"text": "abc", "top_k": -1}).status_code == 422
    r = client.post("/api/triplets/text", json={"text": "abc", "top_k": 10**6})
    assert r.status_code == 400


def test_upload_uses_chunked_file_strategy():
    files = {"file": ("sample.txt", "Ababab\nabab\n".encode("utf-8"), "text/plain")}
    r = client.post("/api/triplets/upload?top_k=5", files=files)
    assert r.status_code == 200
    data = r.json()
    assert data["strategy"] == "parallel-file"
    # Lines are joined without a separator: "ababababab"
    assert data["total"] == 8
    assert data["top"] == [{"triplet": "aba", "count": 4}, {"triplet": "bab", "count": 4}]


def test_upload_rejects_extension():
    files = {"file": ("image.png", b"abc", "image/png")}
    assert client.post("/api/triplets/upload", files=files).status_code == 400


def test_upload_rejects_empty_file():
    files = {"file": ("empty.txt", b"", "text/plain")}
    assert client.post("/api/triplets/upload", files=files).status_code == 400


def test_upload_rejects_binary():
    files = {"file": ("bad.txt", b"\xff\xfe\xfa\x00abc", "text/plain")}
    assert client.post("/api/triplets/upload", files=files).status_code == 400


def test_one_thread_rejects_unfiltered():
    body = {"text": "a1b cd", "strategy": "one-thread", "filter_alphabetic": False}
    assert client.post("/api/triplets/text", json=body).status_code == 400


def test_word_strategy_honours_unfiltered():
    body = {"text": "a1b cd", "strategy": "parallel-words", "filter_alphabetic": False}
    r = client.post("/api/triplets/text", json=body)
    assert r.status_code == 200
    assert r.json()["top"] == [{"triplet": "a1b", "count": 1}]


def test_rate_limit(monkeypatch):
    monkeypatch.setattr(triplet_routes, "RATE_LIMIT_ANALYZE_PER_MINUTE", 2)
    for _ in range(2):
        assert client.post("/api/triplets/text", json={"text": "abc"}).status_code == 200
    r = client.post("/api/triplets/text", json={"text": "abc"})
    assert r.status_code == 429
