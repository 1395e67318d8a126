"""Use case that records onboarding survey answers."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Sequence

from application.services.preference_tokens import parse_liked_keywords, survey_tokens
from domain.entities import Preferences, UserProfile
from domain.interfaces import SessionTokenCache, UserProfileRepository

logger = logging.getLogger(__name__)


def submit_survey(
    uid: str,
    *,
    product_categories: Sequence[str],
    food_categories: Sequence[str],
    keywords: str | None,
    profile_repository: UserProfileRepository,
    token_cache: SessionTokenCache,
    session_id: str | None = None,
) -> UserProfile:
    """Persist survey preferences and cache them for the current session.

    The session cache lets recommendations use the answers before a fresh
    profile read reflects them.
    """

    preferences = Preferences(
        product_categories=list(product_categories),
        food_categories=list(food_categories),
        liked_keywords=parse_liked_keywords(keywords),
    )
    profile = profile_repository.get(uid) or UserProfile(uid=uid)
    profile.preferences = preferences
    profile.survey_completed = True
    profile.updated_at = datetime.now(timezone.utc)
    profile_repository.save(profile)

    if session_id:
        token_cache.put(session_id, survey_tokens(preferences))
    logger.info("Survey saved for user %s", uid)
    return profile
