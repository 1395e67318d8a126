"""SQLite repository for catalog items."""
from __future__ import annotations

import json
import sqlite3
from pathlib import Path

from domain.entities import CatalogItem, ItemKind
from domain.interfaces import CatalogRepository

_COLUMNS = "id, kind, name, category, description, created_at, metadata"


class SqliteCatalogRepository(CatalogRepository):
    """Stores products and foods in a single ``items`` table."""

    def __init__(self, db_path: str | Path = "catalog.db") -> None:
        self._db_path = Path(db_path)
        self._ensure_schema()

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(self._db_path)

    def _ensure_schema(self) -> None:
        with self._connect() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS items (
                    id TEXT PRIMARY KEY,
                    kind TEXT NOT NULL,
                    name TEXT NOT NULL,
                    category TEXT NOT NULL,
                    description TEXT,
                    created_at INTEGER NOT NULL,
                    metadata TEXT NOT NULL
                )
                """
            )
            conn.execute("CREATE INDEX IF NOT EXISTS idx_items_kind_created ON items (kind, created_at)")

    def add(self, item: CatalogItem) -> None:
        with self._connect() as conn:
            conn.execute(
                f"REPLACE INTO items ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?)",
                (
                    item.id,
                    item.kind,
                    item.name,
                    item.category,
                    item.description,
                    item.created_at,
                    json.dumps(item.metadata),
                ),
            )

    def get(self, item_id: str) -> CatalogItem | None:
        with self._connect() as conn:
            row = conn.execute(f"SELECT {_COLUMNS} FROM items WHERE id = ?", (item_id,)).fetchone()
        return self._row_to_item(row) if row else None

    def list_recent(self, kind: ItemKind, limit: int) -> list[CatalogItem]:
        if limit <= 0:
            return []
        with self._connect() as conn:
            rows = conn.execute(
                f"""
                SELECT {_COLUMNS} FROM items
                WHERE kind = ?
                ORDER BY created_at DESC, id
                LIMIT ?
                """,
                (kind, limit),
            ).fetchall()
        return [self._row_to_item(row) for row in rows]

    @staticmethod
    def _row_to_item(row: tuple) -> CatalogItem:
        return CatalogItem(
            id=row[0],
            kind=row[1],
            name=row[2],
            category=row[3],
            description=row[4] or "",
            created_at=row[5],
            metadata=json.loads(row[6]),
        )


__all__ = ["SqliteCatalogRepository"]
