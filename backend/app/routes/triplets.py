"""Triplet routes: rank triplets of posted text or of an uploaded text file."""
import sys
import tempfile
from collections import Counter
from pathlib import Path
from typing import Optional

ROOT = Path(__file__).resolve().parent.parent.parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fastapi import APIRouter, File, HTTPException, Query, Request, UploadFile
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, Field

from searcher import ONE_THREAD, PARALLEL_FILE, STRATEGIES, TripletSearcher
from searcher import config as searcher_config

from ..config import (
    ALLOWED_UPLOAD_EXTENSIONS,
    MAX_TEXT_LENGTH,
    MAX_TOP_K,
    MAX_UPLOAD_BYTES,
    RATE_LIMIT_ANALYZE_PER_MINUTE,
    RATE_LIMIT_WINDOW_SECONDS,
)
from ..rate_limit import check_rate_limit, client_id

router = APIRouter(prefix="/api/triplets", tags=["triplets"])

_searcher = TripletSearcher()


class TextRequest(BaseModel):
    text: str
    case_sensitive: bool = searcher_config.CASE_SENSITIVE
    # None uses the server default; one-thread always filters and rejects false
    filter_alphabetic: Optional[bool] = None
    strategy: str = ONE_THREAD
    top_k: int = Field(searcher_config.TOP_K, ge=0)


class TripletCount(BaseModel):
    triplet: str
    count: int


class TripletResponse(BaseModel):
    strategy: str
    total: int  # occurrences counted
    distinct: int
    top: list[TripletCount]


def _check_top_k(top_k: int) -> None:
    if top_k > MAX_TOP_K:
        raise HTTPException(status_code=400, detail=f"top_k must be at most {MAX_TOP_K}.")


def _to_response(strategy: str, table: Counter, top_k: int) -> TripletResponse:
    ranked = _searcher.top_triplets(table, top_k)
    return TripletResponse(
        strategy=strategy,
        total=sum(table.values()),
        distinct=len(table),
        top=[TripletCount(triplet=t, count=c) for t, c in ranked],
    )


@router.post("/text", response_model=TripletResponse)
def analyze_text(body: TextRequest, request: Request):
    check_rate_limit(
        client_id(request), "analyze", RATE_LIMIT_ANALYZE_PER_MINUTE, RATE_LIMIT_WINDOW_SECONDS
    )
    _check_top_k(body.top_k)
    if body.strategy not in STRATEGIES or body.strategy == PARALLEL_FILE:
        raise HTTPException(status_code=400, detail=f"Unknown text strategy: {body.strategy}")
    if len(body.text) > MAX_TEXT_LENGTH:
        raise HTTPException(
            status_code=413,
            detail=f"Text too long (max {MAX_TEXT_LENGTH} characters). Upload it as a file instead.",
        )
    if body.strategy == ONE_THREAD and body.filter_alphabetic is False:
        raise HTTPException(
            status_code=400,
            detail="one-thread always filters non-letter triplets; use parallel-words or thread-pool.",
        )
    try:
        table = _searcher.frequency(
            body.text,
            body.strategy,
            case_sensitive=body.case_sensitive,
            filter_alphabetic=body.filter_alphabetic,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _to_response(body.strategy, table, body.top_k)


@router.post("/upload", response_model=TripletResponse)
async def analyze_upload(
    request: Request,
    file: UploadFile = File(...),
    case_sensitive: bool = Query(searcher_config.CASE_SENSITIVE),
    top_k: int = Query(searcher_config.TOP_K, ge=0),
):
    """Count triplets of an uploaded text file with the chunked file strategy."""
    check_rate_limit(
        client_id(request), "analyze", RATE_LIMIT_ANALYZE_PER_MINUTE, RATE_LIMIT_WINDOW_SECONDS
    )
    _check_top_k(top_k)
    ext = Path(file.filename or "").suffix.lower()
    if ext and ext not in ALLOWED_UPLOAD_EXTENSIONS:
        raise HTTPException(
            status_code=400,
            detail=f"Upload failed: file type not allowed. Allowed: {', '.join(sorted(ALLOWED_UPLOAD_EXTENSIONS))}.",
        )
    content = await file.read()
    if not content:
        raise HTTPException(status_code=400, detail="Upload failed: file is empty.")
    if len(content) > MAX_UPLOAD_BYTES:
        raise HTTPException(
            status_code=413,
            detail=f"Upload failed: file too large (max {MAX_UPLOAD_BYTES // (1024*1024)} MiB).",
        )
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "upload.txt"
        path.write_bytes(content)
        try:
            table = await run_in_threadpool(
                _searcher.frequency_parallel_file, path, case_sensitive
            )
        except ValueError as e:
            # Includes UnicodeDecodeError for files that are not valid text
            raise HTTPException(status_code=400, detail=f"Upload failed: {e!s}")
    return _to_response(PARALLEL_FILE, table, top_k)
