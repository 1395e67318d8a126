"""Use cases for maintaining and browsing the catalog."""
from __future__ import annotations

import logging
from typing import Iterable

from domain.entities import CatalogItem, ItemKind
from domain.interfaces import CatalogRepository

logger = logging.getLogger(__name__)


def add_items(items: Iterable[CatalogItem], *, catalog_repository: CatalogRepository) -> int:
    """Store catalog items and return how many were written."""

    count = 0
    for item in items:
        catalog_repository.add(item)
        count += 1
    logger.info("Stored %d catalog items", count)
    return count


def latest_items(kind: ItemKind, *, catalog_repository: CatalogRepository, limit: int = 8) -> list[CatalogItem]:
    return catalog_repository.list_recent(kind, limit)
