"""Content-based TF-IDF ranker used for catalog recommendations."""
from __future__ import annotations

import logging
from typing import Sequence

from application.ranking.corpus_stats import build_corpus_statistics
from application.ranking.ordering import top_ids
from application.ranking.similarity import cosine_similarity
from application.ranking.tokenizer import tokenize
from application.ranking.vectorizer import vectorize
from domain.entities import Document, ScoredDocument
from domain.interfaces import Ranker

logger = logging.getLogger(__name__)


def score_documents(documents: Sequence[Document], query_tokens: Sequence[str]) -> list[ScoredDocument]:
    """Score every document against the query, keeping input order.

    The query is weighted with the corpus IDF table, not its own, so that
    rare catalog terms dominate the match.
    """

    corpus_tokens = [tokenize(document.text) for document in documents]
    statistics = build_corpus_statistics(corpus_tokens)
    query_vector = vectorize(tokenize(" ".join(query_tokens)), statistics)

    scored: list[ScoredDocument] = []
    for document, tokens in zip(documents, corpus_tokens):
        document_vector = vectorize(tokens, statistics)
        scored.append(ScoredDocument(id=document.id, score=cosine_similarity(document_vector, query_vector)))
    return scored


def rank(documents: Sequence[Document], query_tokens: Sequence[str], top_n: int = 6) -> list[str]:
    """Return the ids of the ``top_n`` documents most similar to the query."""

    if top_n <= 0 or not documents:
        return []
    ranked = top_ids(score_documents(documents, query_tokens), top_n)
    logger.debug("TF-IDF ranked %d documents for %d query tokens", len(documents), len(query_tokens))
    return ranked


class TfidfRanker(Ranker):
    """``Ranker`` wrapper around :func:`rank`."""

    name = "tfidf"

    def score(self, documents: Sequence[Document], query_tokens: Sequence[str]) -> list[ScoredDocument]:
        return score_documents(documents, query_tokens)

    def rank(self, documents: Sequence[Document], query_tokens: Sequence[str], top_n: int) -> list[str]:
        return rank(documents, query_tokens, top_n)


__all__ = ["score_documents", "rank", "TfidfRanker"]
