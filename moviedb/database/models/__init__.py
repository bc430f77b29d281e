"""SQLAlchemy ORM models for the movie catalog.

Usage:
    from moviedb.database.models import Base, Movie, Person

Tables:
    - basics: Movies
    - ratings: Ratings per source
    - names: Credited persons
    - principals: Movie-Person credits
    - users: User profiles
"""

from moviedb.database.models.base import Base
from moviedb.database.models.movie import Movie, Rating
from moviedb.database.models.person import Person, Principal
from moviedb.database.models.user import User

__all__ = [
    "Base",
    "Movie",
    "Rating",
    "Person",
    "Principal",
    "User",
]
