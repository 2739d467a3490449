"""FastAPI application: CORS, triplet and benchmark routes."""
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from searcher import STRATEGIES
from triplets.extractor import TRIPLET_LENGTH

from .config import CORS_ORIGINS
from .routes import benchmark, triplets

app = FastAPI(
    title="Tripleter API",
    description="Frequency of letter triplets in text and text files",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(triplets.router)
app.include_router(benchmark.router)


@app.get("/api/health")
def health():
    return {"status": "ok"}


@app.get("/api/info")
def info():
    """Strategies and fixed parameters, for clients building a request form."""
    return {
        "triplet_length": TRIPLET_LENGTH,
        "strategies": list(STRATEGIES),
    }
