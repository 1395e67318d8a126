"""Ranking quality metrics over ranked id lists."""
from __future__ import annotations

import math


def precision_at_k(ranked_ids: list[str], relevant_ids: set[str], k: int) -> float:
    if k <= 0:
        return 0.0
    top = ranked_ids[:k]
    if not top:
        return 0.0
    return sum(1 for item_id in top if item_id in relevant_ids) / len(top)


def recall_at_k(ranked_ids: list[str], relevant_ids: set[str], k: int) -> float:
    if not relevant_ids:
        return 0.0
    hits = sum(1 for item_id in ranked_ids[:k] if item_id in relevant_ids)
    return hits / len(relevant_ids)


def hit_at_k(ranked_ids: list[str], relevant_ids: set[str], k: int) -> float:
    return 1.0 if any(item_id in relevant_ids for item_id in ranked_ids[:k]) else 0.0


def mrr_at_k(ranked_ids: list[str], relevant_ids: set[str], k: int) -> float:
    for position, item_id in enumerate(ranked_ids[:k], start=1):
        if item_id in relevant_ids:
            return 1.0 / position
    return 0.0


def _dcg(ids: list[str], gains: dict[str, int], k: int) -> float:
    score = 0.0
    for position, item_id in enumerate(ids[:k], start=1):
        grade = max(0, gains.get(item_id, 0))
        if grade:
            score += (2**grade - 1) / math.log2(position + 1)
    return score


def ndcg_at_k(ranked_ids: list[str], gains: dict[str, int], k: int) -> float:
    """Normalised DCG with exponential gain ``2**grade - 1``."""

    if k <= 0:
        return 0.0
    ideal_ids = sorted(gains, key=gains.__getitem__, reverse=True)
    ideal = _dcg(ideal_ids, gains, k)
    if ideal == 0:
        return 0.0
    return _dcg(ranked_ids, gains, k) / ideal


def aggregate_mean(metrics: list[dict[str, float]]) -> dict[str, float]:
    """Average each metric key over the cases that report it."""

    if not metrics:
        return {}
    keys = set().union(*(m.keys() for m in metrics))
    out: dict[str, float] = {}
    for key in sorted(keys):
        values = [m[key] for m in metrics if key in m]
        out[key] = sum(values) / len(values)
    return out
