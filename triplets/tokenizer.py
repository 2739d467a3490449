"""Split text into words on a fixed separator set."""

import re
from typing import List

SEPARATORS = (
    " ", ",", ".", ":", "!", "?", '"', ";", "*", "(", ")",
    "»", "«", "…", "–", "-", "'", "\n", "\t", "\r",
)

_SEPARATOR_RE = re.compile("[" + "".join(re.escape(s) for s in SEPARATORS) + "]+")


def split_into_words(text: str) -> List[str]:
    """Words of text in order; empty pieces between adjacent separators are dropped."""
    return [w for w in _SEPARATOR_RE.split(text) if w]
