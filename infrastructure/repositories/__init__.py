from infrastructure.repositories.sqlite_catalog_repository import SqliteCatalogRepository
from infrastructure.repositories.sqlite_user_profile_repository import SqliteUserProfileRepository

__all__ = [
    "SqliteCatalogRepository",
    "SqliteUserProfileRepository",
]
