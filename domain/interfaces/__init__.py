"""Abstract interfaces for the catalog recommender."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from domain.entities import CatalogItem, Document, ItemKind, ScoredDocument, UserProfile


class Ranker(ABC):
    """Orders a corpus of documents by relevance to a list of query tokens."""

    name: str

    @abstractmethod
    def score(self, documents: Sequence[Document], query_tokens: Sequence[str]) -> list[ScoredDocument]:
        """Return one score per document, in input order."""

    @abstractmethod
    def rank(self, documents: Sequence[Document], query_tokens: Sequence[str], top_n: int) -> list[str]:
        """Return the ids of the best ``top_n`` documents, best first."""


class CatalogRepository(ABC):
    """Persists catalog items."""

    @abstractmethod
    def add(self, item: CatalogItem) -> None:
        """Store or replace an item."""

    @abstractmethod
    def get(self, item_id: str) -> CatalogItem | None:
        """Retrieve an item by id."""

    @abstractmethod
    def list_recent(self, kind: ItemKind, limit: int) -> list[CatalogItem]:
        """Return up to ``limit`` items of one kind, newest first."""


class UserProfileRepository(ABC):
    """Persists user profiles and their survey preferences."""

    @abstractmethod
    def get(self, uid: str) -> UserProfile | None:
        """Retrieve a profile by user id."""

    @abstractmethod
    def save(self, profile: UserProfile) -> None:
        """Store or replace a profile."""


class SessionTokenCache(ABC):
    """Holds preference tokens for a session until the profile catches up."""

    @abstractmethod
    def get(self, session_id: str) -> list[str]:
        """Return cached tokens, or an empty list."""

    @abstractmethod
    def put(self, session_id: str, tokens: Sequence[str]) -> None:
        """Replace the cached tokens for a session."""

    @abstractmethod
    def clear(self, session_id: str) -> None:
        """Drop the cached tokens for a session."""


__all__ = [
    "Ranker",
    "CatalogRepository",
    "UserProfileRepository",
    "SessionTokenCache",
]
