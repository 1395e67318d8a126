"""BM25 baseline ranker for offline comparison with TF-IDF."""
from __future__ import annotations

import logging
from typing import Sequence

from rank_bm25 import BM25Plus

from application.ranking.ordering import top_ids
from application.ranking.tokenizer import tokenize
from domain.entities import Document, ScoredDocument
from domain.interfaces import Ranker

logger = logging.getLogger(__name__)


class Bm25Ranker(Ranker):
    """BM25+ over the same tokenizer as the TF-IDF ranker.

    BM25+ keeps IDF positive for terms present in half the corpus or more,
    so any matching document outscores a non-matching one even in tiny
    corpora. The lower-bound delta is added to every document alike. A fresh
    index is built for every call, matching the stateless TF-IDF ranker.
    """

    name = "bm25"

    def __init__(self, k1: float = 1.5, b: float = 0.75, delta: float = 1.0) -> None:
        self._k1 = k1
        self._b = b
        self._delta = delta

    def score(self, documents: Sequence[Document], query_tokens: Sequence[str]) -> list[ScoredDocument]:
        corpus = [tokenize(document.text) for document in documents]
        query = tokenize(" ".join(query_tokens))
        if not query or not any(corpus):
            return [ScoredDocument(id=document.id, score=0.0) for document in documents]
        index = BM25Plus(corpus, k1=self._k1, b=self._b, delta=self._delta)
        values = index.get_scores(query)
        return [ScoredDocument(id=document.id, score=float(value)) for document, value in zip(documents, values)]

    def rank(self, documents: Sequence[Document], query_tokens: Sequence[str], top_n: int) -> list[str]:
        if top_n <= 0 or not documents:
            return []
        ranked = top_ids(self.score(documents, query_tokens), top_n)
        logger.debug("BM25 ranked %d documents for %d query tokens", len(documents), len(query_tokens))
        return ranked


__all__ = ["Bm25Ranker"]
