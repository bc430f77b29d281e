"""Database layer: ORM models, repositories and the catalog store."""

from moviedb.database.models import Base
from moviedb.database.store import CatalogStore

__all__ = ["Base", "CatalogStore"]
