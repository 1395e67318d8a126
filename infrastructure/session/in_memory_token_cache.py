"""Per-session preference token cache kept in process memory."""
from __future__ import annotations

from typing import Sequence

from domain.interfaces import SessionTokenCache


class InMemorySessionTokenCache(SessionTokenCache):
    """Dict-backed cache; callers always receive copies."""

    def __init__(self) -> None:
        self._tokens: dict[str, list[str]] = {}

    def get(self, session_id: str) -> list[str]:
        return list(self._tokens.get(session_id, []))

    def put(self, session_id: str, tokens: Sequence[str]) -> None:
        self._tokens[session_id] = list(tokens)

    def clear(self, session_id: str) -> None:
        self._tokens.pop(session_id, None)


__all__ = ["InMemorySessionTokenCache"]
