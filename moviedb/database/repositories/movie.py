"""Movie repository with search queries.

Title matching is case-insensitive on every backend (ILIKE is
emulated with lower() where the dialect lacks it).
"""

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session

from moviedb.database.models import Movie
from moviedb.database.repositories.base import BaseRepository

_LIKE_ESCAPE = "\\"


def escape_like(text: str) -> str:
    """Escape LIKE wildcards so user text matches literally.

    Args:
        text: Raw search text.

    Returns:
        Text with %, _ and the escape character escaped.
    """
    return (
        text.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", f"{_LIKE_ESCAPE}%")
        .replace("_", f"{_LIKE_ESCAPE}_")
    )


class MovieRepository(BaseRepository[Movie]):
    """Repository for Movie entity operations."""

    model = Movie

    def __init__(self, session: Session) -> None:
        """Initialize movie repository.

        Args:
            session: SQLAlchemy session instance.
        """
        super().__init__(session)

    def search(
        self,
        title: str | None = None,
        year: int | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[Movie]:
        """Search movies by title substring and/or release year.

        Args:
            title: Substring to find anywhere in the title.
            year: Exact release year.
            limit: Maximum number of results.
            offset: Number of results to skip.

        Returns:
            Matching movies ordered by IMDb identifier.
        """
        stmt = self._filtered(select(Movie), title, year)
        stmt = stmt.order_by(Movie.imdb_id.asc()).limit(limit).offset(offset)
        return list(self._session.scalars(stmt).all())

    def count_matching(self, title: str | None = None, year: int | None = None) -> int:
        """Count movies matching the search filters.

        Args:
            title: Substring to find anywhere in the title.
            year: Exact release year.

        Returns:
            Number of matching rows.
        """
        stmt = self._filtered(select(func.count()).select_from(Movie), title, year)
        return self._session.execute(stmt).scalar() or 0

    @staticmethod
    def _filtered(stmt: Select, title: str | None, year: int | None) -> Select:
        """Apply search filters to a statement."""
        if title:
            stmt = stmt.where(Movie.title.ilike(f"%{escape_like(title)}%", escape=_LIKE_ESCAPE))
        if year is not None:
            stmt = stmt.where(Movie.year == year)
        return stmt
