"""Result ordering shared by the rankers."""
from __future__ import annotations

from typing import Iterable

from domain.entities import ScoredDocument


def top_ids(scored: Iterable[ScoredDocument], top_n: int) -> list[str]:
    """Sort by score descending and return the first ``top_n`` ids.

    ``sorted`` is stable with ``reverse=True`` too, so equal scores keep
    their input order.
    """

    if top_n <= 0:
        return []
    ranked = sorted(scored, key=lambda item: item.score, reverse=True)
    return [item.id for item in ranked[:top_n]]


__all__ = ["top_ids"]
