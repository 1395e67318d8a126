"""Helpers turning survey answers into ranker query tokens."""
from __future__ import annotations

import re
from typing import Iterable

from domain.entities import Preferences

_KEYWORD_SEPARATORS = re.compile(r"[,\s]+")


def parse_liked_keywords(raw: str | None) -> list[str]:
    """Split the free-text keyword field on commas and whitespace."""

    if not raw:
        return []
    return [part.strip() for part in _KEYWORD_SEPARATORS.split(raw) if part.strip()]


def _profile_tokens(preferences: Preferences) -> list[str]:
    return [
        *preferences.product_categories,
        *preferences.food_categories,
        *preferences.liked_keywords,
    ]


def _normalized(tokens: Iterable[str]) -> list[str]:
    return [token.lower() for token in tokens if token]


def survey_tokens(preferences: Preferences) -> list[str]:
    """Tokens cached for a session right after the survey. Duplicates are kept."""

    return _normalized(_profile_tokens(preferences))


def collect_preference_tokens(preferences: Preferences | None, session_tokens: Iterable[str] = ()) -> list[str]:
    """Merge profile and session tokens, de-duplicated in first-seen order."""

    profile = _profile_tokens(preferences) if preferences is not None else []
    merged = _normalized([*profile, *session_tokens])
    return list(dict.fromkeys(merged))


__all__ = ["parse_liked_keywords", "survey_tokens", "collect_preference_tokens"]
