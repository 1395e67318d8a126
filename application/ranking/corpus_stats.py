"""Document frequency and IDF weights over a fixed corpus."""
from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Sequence

# Document frequency assumed for terms that never occur in the corpus.
UNSEEN_TERM_DOCUMENT_FREQUENCY = 0.5


@dataclass(slots=True, frozen=True)
class CorpusStatistics:
    document_count: int
    document_frequency: dict[str, int] = field(default_factory=dict)

    def idf(self, term: str) -> float:
        """``ln((N + 1) / df)`` with ``N`` clamped to at least one."""

        n = max(self.document_count, 1)
        df = self.document_frequency.get(term) or UNSEEN_TERM_DOCUMENT_FREQUENCY
        return math.log((n + 1) / df)


def build_corpus_statistics(tokenized_documents: Iterable[Sequence[str]]) -> CorpusStatistics:
    """Count, for each term, how many documents contain it at least once."""

    frequency: Counter[str] = Counter()
    document_count = 0
    for tokens in tokenized_documents:
        document_count += 1
        frequency.update(set(tokens))
    return CorpusStatistics(document_count=document_count, document_frequency=dict(frequency))


__all__ = ["UNSEEN_TERM_DOCUMENT_FREQUENCY", "CorpusStatistics", "build_corpus_statistics"]
