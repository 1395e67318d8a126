"""Text normalisation shared by every ranker."""
from __future__ import annotations

import re
import unicodedata

_NON_TERM_CHARS = re.compile(r"[^a-z0-9\s]+")


def tokenize(text: str | None) -> list[str]:
    """Split text into lowercase ASCII alphanumeric terms.

    NFKD decomposition turns accented letters into a base letter plus
    combining marks, and the marks are then replaced with spaces together
    with the punctuation. A word-final accent therefore folds ("Café" yields
    "cafe") while a mid-word accent splits the word ("naïve" yields "nai",
    "ve"). Duplicates are kept.
    """

    if not text:
        return []
    normalized = unicodedata.normalize("NFKD", text.lower())
    return _NON_TERM_CHARS.sub(" ", normalized).split()


__all__ = ["tokenize"]
