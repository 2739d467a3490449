"""
Chunked reading of large text files.

- Lines are streamed and grouped CHUNK_LENGTH at a time, terminators stripped,
  concatenated with nothing in between.
- Chunks never overlap; chunk_seams() recovers the windows that cross a boundary.
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator, Tuple, Union

from .extractor import TRIPLET_LENGTH

logger = logging.getLogger(__name__)

CHUNK_LENGTH = 1000

# Characters kept on each side of a chunk boundary
SEAM_WIDTH = TRIPLET_LENGTH - 1


def read_chunks(
    path: Union[str, Path],
    chunk_length: int = CHUNK_LENGTH,
    encoding: str = "utf-8",
) -> Iterator[str]:
    """
    Return a lazy sequence of chunks of up to chunk_length lines each.
    Missing files and bad chunk lengths are reported here, not on first iteration.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(str(path))
    if chunk_length < 1:
        raise ValueError("chunk_length must be at least 1")
    return _iter_chunks(path, chunk_length, encoding)


def _iter_chunks(path: Path, chunk_length: int, encoding: str) -> Iterator[str]:
    lines = []
    emitted = 0
    with open(path, "r", encoding=encoding) as f:
        for line in f:
            lines.append(line.rstrip("\n"))
            if len(lines) == chunk_length:
                emitted += 1
                yield "".join(lines)
                lines = []
    if lines:
        emitted += 1
        yield "".join(lines)
    logger.debug("Read %d chunk(s) of up to %d lines from %s", emitted, chunk_length, path)


def chunk_seams(chunks: Iterable[str]) -> Iterator[Tuple[str, str]]:
    """
    Yield (chunk, seam) pairs. The seam is the last SEAM_WIDTH characters read
    before the chunk followed by its first SEAM_WIDTH characters, so each of
    its windows crosses exactly one chunk boundary. The first seam is "".
    """
    tail = ""
    for chunk in chunks:
        seam = tail + chunk[:SEAM_WIDTH] if tail else ""
        tail = (tail + chunk)[-SEAM_WIDTH:]
        yield chunk, seam
