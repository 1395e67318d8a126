"""Dependency wiring for the catalog recommender."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Literal

from domain.interfaces import CatalogRepository, Ranker, SessionTokenCache, UserProfileRepository
from infrastructure.repositories.sqlite_catalog_repository import SqliteCatalogRepository
from infrastructure.repositories.sqlite_user_profile_repository import SqliteUserProfileRepository
from infrastructure.session.in_memory_token_cache import InMemorySessionTokenCache

RankerName = Literal["tfidf", "bm25"]


@dataclass(slots=True)
class ContainerConfig:
    """Storage location, ranker choice and recommendation sizes."""

    data_root: str = "data"
    ranker: RankerName = "tfidf"
    top_n: int = 8
    candidate_window: int = 50
    latest_limit: int = 8

    @classmethod
    def from_env(cls) -> "ContainerConfig":
        defaults = cls()
        return cls(
            data_root=os.getenv("CATALOGRECO_DATA_ROOT", defaults.data_root),
            ranker=os.getenv("CATALOGRECO_RANKER", defaults.ranker),  # type: ignore[arg-type]
            top_n=int(os.getenv("CATALOGRECO_TOP_N", defaults.top_n)),
            candidate_window=int(os.getenv("CATALOGRECO_CANDIDATE_WINDOW", defaults.candidate_window)),
            latest_limit=int(os.getenv("CATALOGRECO_LATEST_LIMIT", defaults.latest_limit)),
        )


@dataclass(slots=True)
class Container:
    """Concrete implementations shared by the API and scripts."""

    config: ContainerConfig
    catalog_repository: CatalogRepository
    profile_repository: UserProfileRepository
    token_cache: SessionTokenCache
    ranker: Ranker


def _tfidf_ranker() -> Ranker:
    from application.ranking.tfidf_ranker import TfidfRanker

    return TfidfRanker()


def _bm25_ranker() -> Ranker:
    from application.ranking.bm25_ranker import Bm25Ranker

    return Bm25Ranker()


_RANKER_FACTORIES: dict[RankerName, Callable[[], Ranker]] = {
    "tfidf": _tfidf_ranker,
    "bm25": _bm25_ranker,
}


def build_ranker(name: str) -> Ranker:
    try:
        factory = _RANKER_FACTORIES[name]  # type: ignore[index]
    except KeyError as exc:
        raise ValueError(f"Unknown ranker '{name}'") from exc
    return factory()


def build_default_container(config: ContainerConfig | None = None) -> Container:
    """Instantiate the default infrastructure stack."""

    cfg = config or ContainerConfig()
    ranker = build_ranker(cfg.ranker)
    data_root = Path(cfg.data_root).expanduser()
    data_root.mkdir(parents=True, exist_ok=True)
    db_path = data_root / "catalog.db"

    return Container(
        config=cfg,
        catalog_repository=SqliteCatalogRepository(db_path=db_path),
        profile_repository=SqliteUserProfileRepository(db_path=db_path),
        token_cache=InMemorySessionTokenCache(),
        ranker=ranker,
    )


__all__ = ["RankerName", "Container", "ContainerConfig", "build_ranker", "build_default_container"]
