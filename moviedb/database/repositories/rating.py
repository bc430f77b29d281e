"""Rating repository."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from moviedb.database.models import Rating
from moviedb.database.repositories.base import BaseRepository


class RatingRepository(BaseRepository[Rating]):
    """Repository for per-source movie ratings."""

    model = Rating

    def __init__(self, session: Session) -> None:
        """Initialize rating repository.

        Args:
            session: SQLAlchemy session instance.
        """
        super().__init__(session)

    def get_by_movie(self, movie_id: str) -> list[Rating]:
        """Get all ratings for a movie.

        Args:
            movie_id: IMDb title identifier.

        Returns:
            Ratings in insertion order.
        """
        stmt = select(Rating).where(Rating.movie_id == movie_id).order_by(Rating.id)
        return list(self._session.scalars(stmt).all())
