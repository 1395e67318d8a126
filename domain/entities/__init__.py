"""Domain entities for the catalog recommender."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Literal

ItemKind = Literal["product", "food"]


@dataclass(slots=True)
class Document:
    """Ranker input: an id plus the concatenated searchable text of an item."""

    id: str
    text: str


@dataclass(slots=True)
class ScoredDocument:
    """Similarity score of one document against a query."""

    id: str
    score: float


@dataclass(slots=True)
class CatalogItem:
    """A product or food listing shown in the catalog."""

    id: str
    kind: ItemKind
    name: str
    category: str
    description: str = ""
    created_at: int = 0
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class Preferences:
    """Answers collected by the onboarding survey."""

    product_categories: list[str] = field(default_factory=list)
    food_categories: list[str] = field(default_factory=list)
    liked_keywords: list[str] = field(default_factory=list)


@dataclass(slots=True)
class UserProfile:
    uid: str
    preferences: Preferences = field(default_factory=Preferences)
    survey_completed: bool = False
    updated_at: datetime | None = None


@dataclass(slots=True)
class Recommendations:
    """Ranked recommendations per catalog category."""

    query_tokens: list[str]
    products: list[CatalogItem] = field(default_factory=list)
    foods: list[CatalogItem] = field(default_factory=list)


__all__ = [
    "ItemKind",
    "Document",
    "ScoredDocument",
    "CatalogItem",
    "Preferences",
    "UserProfile",
    "Recommendations",
]
