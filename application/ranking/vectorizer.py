"""Sparse TF-IDF vectors."""
from __future__ import annotations

from collections import Counter
from typing import Sequence

from application.ranking.corpus_stats import CorpusStatistics

TermVector = dict[str, float]


def vectorize(tokens: Sequence[str], statistics: CorpusStatistics) -> TermVector:
    """Weight each distinct term by raw count times corpus IDF."""

    counts = Counter(tokens)
    return {term: tf * statistics.idf(term) for term, tf in counts.items()}


__all__ = ["TermVector", "vectorize"]
