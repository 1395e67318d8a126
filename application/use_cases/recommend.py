"""Use case that builds per-category recommendations for a user."""
from __future__ import annotations

import logging

from application.services.document_projection import to_documents
from application.services.preference_tokens import collect_preference_tokens
from domain.entities import CatalogItem, ItemKind, Recommendations
from domain.interfaces import CatalogRepository, Ranker, SessionTokenCache, UserProfileRepository

logger = logging.getLogger(__name__)


def recommend(
    uid: str,
    *,
    session_id: str | None,
    catalog_repository: CatalogRepository,
    profile_repository: UserProfileRepository,
    token_cache: SessionTokenCache,
    ranker: Ranker,
    top_n: int = 8,
    candidate_window: int = 50,
) -> Recommendations:
    """Rank the most recent products and foods against the user's preferences."""

    profile = profile_repository.get(uid)
    session_tokens = token_cache.get(session_id) if session_id else []
    tokens = collect_preference_tokens(profile.preferences if profile else None, session_tokens)

    # The profile now carries everything the session cache held.
    if profile is not None and profile.survey_completed and session_id:
        token_cache.clear(session_id)

    return Recommendations(
        query_tokens=tokens,
        products=_recommend_kind("product", tokens, catalog_repository, ranker, top_n, candidate_window),
        foods=_recommend_kind("food", tokens, catalog_repository, ranker, top_n, candidate_window),
    )


def _recommend_kind(
    kind: ItemKind,
    tokens: list[str],
    catalog_repository: CatalogRepository,
    ranker: Ranker,
    top_n: int,
    candidate_window: int,
) -> list[CatalogItem]:
    if not tokens:
        return []
    candidates = catalog_repository.list_recent(kind, candidate_window)
    if not candidates:
        return []
    ranked_ids = ranker.rank(to_documents(candidates), tokens, top_n)
    by_id = {item.id: item for item in candidates}
    logger.debug("Recommended %d of %d %s items with %s", len(ranked_ids), len(candidates), kind, ranker.name)
    return [by_id[item_id] for item_id in ranked_ids if item_id in by_id]
