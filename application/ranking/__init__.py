from application.ranking.corpus_stats import UNSEEN_TERM_DOCUMENT_FREQUENCY, CorpusStatistics, build_corpus_statistics
from application.ranking.ordering import top_ids
from application.ranking.similarity import cosine_similarity, vector_norm
from application.ranking.tfidf_ranker import TfidfRanker, rank, score_documents
from application.ranking.tokenizer import tokenize
from application.ranking.vectorizer import TermVector, vectorize

__all__ = [
    "tokenize",
    "UNSEEN_TERM_DOCUMENT_FREQUENCY",
    "CorpusStatistics",
    "build_corpus_statistics",
    "TermVector",
    "vectorize",
    "vector_norm",
    "cosine_similarity",
    "top_ids",
    "score_documents",
    "rank",
    "TfidfRanker",
]
