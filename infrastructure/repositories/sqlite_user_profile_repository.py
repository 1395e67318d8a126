"""SQLite repository for user profiles and survey preferences."""
from __future__ import annotations

import json
import sqlite3
from dataclasses import asdict
from datetime import datetime
from pathlib import Path

from domain.entities import Preferences, UserProfile
from domain.interfaces import UserProfileRepository


class SqliteUserProfileRepository(UserProfileRepository):
    """Keeps one row per user; preferences are stored as JSON."""

    def __init__(self, db_path: str | Path = "catalog.db") -> None:
        self._db_path = Path(db_path)
        self._ensure_schema()

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(self._db_path)

    def _ensure_schema(self) -> None:
        with self._connect() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS user_profiles (
                    uid TEXT PRIMARY KEY,
                    preferences TEXT NOT NULL,
                    survey_completed INTEGER NOT NULL DEFAULT 0,
                    updated_at TEXT
                )
                """
            )

    def get(self, uid: str) -> UserProfile | None:
        with self._connect() as conn:
            row = conn.execute(
                "SELECT uid, preferences, survey_completed, updated_at FROM user_profiles WHERE uid = ?",
                (uid,),
            ).fetchone()
        if row is None:
            return None
        return UserProfile(
            uid=row[0],
            preferences=Preferences(**json.loads(row[1])),
            survey_completed=bool(row[2]),
            updated_at=datetime.fromisoformat(row[3]) if row[3] else None,
        )

    def save(self, profile: UserProfile) -> None:
        with self._connect() as conn:
            conn.execute(
                """
                REPLACE INTO user_profiles (uid, preferences, survey_completed, updated_at)
                VALUES (?, ?, ?, ?)
                """,
                (
                    profile.uid,
                    json.dumps(asdict(profile.preferences)),
                    int(profile.survey_completed),
                    profile.updated_at.isoformat() if profile.updated_at else None,
                ),
            )


__all__ = ["SqliteUserProfileRepository"]
