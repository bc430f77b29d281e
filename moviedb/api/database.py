"""Database session management for FastAPI.

Provides the SQLAlchemy engine, one session per request and the
request-scoped services built on it.
"""

from collections.abc import Generator
from functools import lru_cache
from typing import Annotated, Any

from fastapi import Depends
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from moviedb.database.repositories import UserRepository
from moviedb.database.store import CatalogStore
from moviedb.services.catalog.movies import MovieService
from moviedb.services.catalog.people import PersonService
from moviedb.services.profile.service import ProfileService
from moviedb.settings import settings


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Get cached SQLAlchemy engine.

    Returns:
        Engine with connection pooling (pool sizing skipped on SQLite).
    """
    db = settings.database
    options: dict[str, Any] = {"echo": db.echo, "pool_pre_ping": True}
    if db.is_sqlite:
        options["connect_args"] = {"check_same_thread": False}
    else:
        options.update(
            pool_size=db.pool_size,
            max_overflow=db.pool_overflow,
            pool_timeout=db.pool_timeout,
        )
    return create_engine(db.sync_url, **options)


@lru_cache(maxsize=1)
def get_session_factory() -> sessionmaker[Session]:
    """Get cached session factory."""
    return sessionmaker(
        bind=get_engine(),
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency for database sessions.

    Yields:
        Database session, committed on success and always closed.
    """
    session = get_session_factory()()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


DbSession = Annotated[Session, Depends(get_db)]


def get_movie_service(db: DbSession) -> MovieService:
    """Movie aggregation service for the request session."""
    return MovieService(CatalogStore(db))


def get_person_service(db: DbSession) -> PersonService:
    """Person aggregation service for the request session."""
    return PersonService(CatalogStore(db))


def get_profile_service(db: DbSession) -> ProfileService:
    """Profile service for the request session."""
    return ProfileService(UserRepository(db))
