"""Read interface of the catalog store.

Groups the per-entity repositories behind the handful of reads
the aggregation services need. One instance per request session.
"""

from sqlalchemy.orm import Session

from moviedb.database.models import Movie, Person, Rating
from moviedb.database.repositories import (
    MovieCreditRow,
    MovieRepository,
    PersonCreditRow,
    PersonRepository,
    PrincipalRepository,
    RatingRepository,
)


class CatalogStore:
    """Catalog reads over a single database session."""

    def __init__(self, session: Session) -> None:
        self._movies = MovieRepository(session)
        self._ratings = RatingRepository(session)
        self._persons = PersonRepository(session)
        self._principals = PrincipalRepository(session)

    def find_movies(
        self,
        title: str | None,
        year: int | None,
        limit: int,
        offset: int,
    ) -> list[Movie]:
        return self._movies.search(title=title, year=year, limit=limit, offset=offset)

    def count_movies(self, title: str | None, year: int | None) -> int:
        return self._movies.count_matching(title=title, year=year)

    def find_movie_by_id(self, movie_id: str) -> Movie | None:
        return self._movies.get_by_id(movie_id)

    def find_ratings_by_movie(self, movie_id: str) -> list[Rating]:
        return self._ratings.get_by_movie(movie_id)

    def find_credits_by_movie(self, movie_id: str) -> list[MovieCreditRow]:
        return self._principals.get_by_movie(movie_id)

    def find_person_by_id(self, person_id: str) -> Person | None:
        return self._persons.get_by_id(person_id)

    def find_credits_by_person(self, person_id: str) -> list[PersonCreditRow]:
        return self._principals.get_by_person(person_id)
