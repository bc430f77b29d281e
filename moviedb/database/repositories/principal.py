"""Principal (credit) repository.

Credits are returned joined with the other side of the
movie/person relation, as flat read-only rows.
"""

from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.orm import Session

from moviedb.database.models import Movie, Person, Principal
from moviedb.database.repositories.base import BaseRepository

# =============================================================================
# DATA STRUCTURES
# =============================================================================


@dataclass(frozen=True)
class MovieCreditRow:
    """Credit of a movie joined with the person name.

    Attributes:
        person_id: IMDb name identifier.
        name: Person primary name.
        category: Role label.
        characters: Raw JSON characters text.
    """

    person_id: str
    name: str
    category: str | None
    characters: str | None


@dataclass(frozen=True)
class PersonCreditRow:
    """Credit of a person joined with the movie title and rating.

    Attributes:
        movie_id: IMDb title identifier.
        movie_title: Movie primary title.
        imdb_rating: Raw IMDb rating text of the movie.
        category: Role label.
        characters: Raw JSON characters text.
    """

    movie_id: str
    movie_title: str
    imdb_rating: str | None
    category: str | None
    characters: str | None


# =============================================================================
# REPOSITORY
# =============================================================================


class PrincipalRepository(BaseRepository[Principal]):
    """Repository for movie/person credits."""

    model = Principal

    def __init__(self, session: Session) -> None:
        """Initialize principal repository.

        Args:
            session: SQLAlchemy session instance.
        """
        super().__init__(session)

    def get_by_movie(self, movie_id: str) -> list[MovieCreditRow]:
        """Get credits of a movie with person names.

        Args:
            movie_id: IMDb title identifier.

        Returns:
            Credits ordered by their canonical ordering.
        """
        stmt = (
            select(
                Principal.person_id,
                Person.name,
                Principal.category,
                Principal.characters,
            )
            .join(Person, Principal.person_id == Person.person_id)
            .where(Principal.movie_id == movie_id)
            .order_by(Principal.ordering.asc(), Principal.id.asc())
        )
        return [
            MovieCreditRow(
                person_id=row.person_id,
                name=row.name,
                category=row.category,
                characters=row.characters,
            )
            for row in self._session.execute(stmt)
        ]

    def get_by_person(self, person_id: str) -> list[PersonCreditRow]:
        """Get credits of a person with movie titles and ratings.

        Args:
            person_id: IMDb name identifier.

        Returns:
            Credits in store order.
        """
        stmt = (
            select(
                Movie.imdb_id,
                Movie.title,
                Movie.imdb_rating,
                Principal.category,
                Principal.characters,
            )
            .join(Movie, Principal.movie_id == Movie.imdb_id)
            .where(Principal.person_id == person_id)
            .order_by(Principal.id.asc())
        )
        return [
            PersonCreditRow(
                movie_id=row.imdb_id,
                movie_title=row.title,
                imdb_rating=row.imdb_rating,
                category=row.category,
                characters=row.characters,
            )
            for row in self._session.execute(stmt)
        ]
