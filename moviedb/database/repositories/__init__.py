"""Database repositories for the movie catalog.

Usage:
    from moviedb.database.repositories import MovieRepository

    with session_factory() as session:
        movies = MovieRepository(session).search(title="Matrix")
"""

from moviedb.database.repositories.base import BaseRepository
from moviedb.database.repositories.movie import MovieRepository
from moviedb.database.repositories.person import PersonRepository
from moviedb.database.repositories.principal import (
    MovieCreditRow,
    PersonCreditRow,
    PrincipalRepository,
)
from moviedb.database.repositories.rating import RatingRepository
from moviedb.database.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "MovieRepository",
    "RatingRepository",
    "PersonRepository",
    "PrincipalRepository",
    "MovieCreditRow",
    "PersonCreditRow",
    "UserRepository",
]
