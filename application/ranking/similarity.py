"""Cosine similarity between sparse term vectors."""
from __future__ import annotations

import math
from typing import Mapping


def vector_norm(vector: Mapping[str, float]) -> float:
    return math.sqrt(sum(weight * weight for weight in vector.values()))


def cosine_similarity(document_vector: Mapping[str, float], query_vector: Mapping[str, float]) -> float:
    """Cosine of the angle between two vectors; ``0.0`` if either is empty.

    Only the document's terms are walked for the dot product, since terms
    missing from the query contribute nothing.
    """

    dot = sum(weight * query_vector.get(term, 0.0) for term, weight in document_vector.items())
    denominator = vector_norm(document_vector) * vector_norm(query_vector)
    if not denominator:
        return 0.0
    return dot / denominator


__all__ = ["vector_norm", "cosine_similarity"]
