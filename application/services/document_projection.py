"""Projection of catalog items onto ranker documents."""
from __future__ import annotations

from typing import Iterable

from domain.entities import CatalogItem, Document


def to_document(item: CatalogItem) -> Document:
    fields = (item.name, item.description, item.category)
    text = " ".join(value for value in fields if value).lower()
    return Document(id=item.id, text=text)


def to_documents(items: Iterable[CatalogItem]) -> list[Document]:
    return [to_document(item) for item in items]


__all__ = ["to_document", "to_documents"]
