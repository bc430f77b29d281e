"""Shared fixtures for unit tests.

Provides an in-memory catalog store double that records every call,
so tests can assert that validation failures never reach storage.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest
from sqlalchemy.exc import OperationalError

from moviedb.database.models import Movie, Person, Rating
from moviedb.database.repositories import MovieCreditRow, PersonCreditRow

# ---------------------------------------------------------------------------
# Store double
# ---------------------------------------------------------------------------


@dataclass
class FakeCatalogStore:
    """CatalogStore stand-in backed by plain lists.

    Attributes:
        movies: Movie rows, already in store order.
        ratings: Rating rows of every movie.
        movie_credits: Credit rows keyed by movie id.
        persons: Person rows keyed by person id.
        person_credits: Credit rows keyed by person id.
        fail: When set, every read raises OperationalError.
        calls: Names of the store methods invoked, in order.
    """

    movies: list[Movie] = field(default_factory=list)
    ratings: list[Rating] = field(default_factory=list)
    movie_credits: dict[str, list[MovieCreditRow]] = field(default_factory=dict)
    persons: dict[str, Person] = field(default_factory=dict)
    person_credits: dict[str, list[PersonCreditRow]] = field(default_factory=dict)
    fail: bool = False
    calls: list[str] = field(default_factory=list)

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if self.fail:
            raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    def _matching(self, title: str | None, year: int | None) -> list[Movie]:
        return [
            movie
            for movie in self.movies
            if (not title or title.lower() in movie.title.lower())
            and (year is None or movie.year == year)
        ]

    def find_movies(self, title, year, limit, offset):
        self._record("find_movies")
        return self._matching(title, year)[offset : offset + limit]

    def count_movies(self, title, year):
        self._record("count_movies")
        return len(self._matching(title, year))

    def find_movie_by_id(self, movie_id):
        self._record("find_movie_by_id")
        return next((movie for movie in self.movies if movie.imdb_id == movie_id), None)

    def find_ratings_by_movie(self, movie_id):
        self._record("find_ratings_by_movie")
        return [rating for rating in self.ratings if rating.movie_id == movie_id]

    def find_credits_by_movie(self, movie_id):
        self._record("find_credits_by_movie")
        return list(self.movie_credits.get(movie_id, []))

    def find_person_by_id(self, person_id):
        self._record("find_person_by_id")
        return self.persons.get(person_id)

    def find_credits_by_person(self, person_id):
        self._record("find_credits_by_person")
        return list(self.person_credits.get(person_id, []))


def make_movie(imdb_id: str, title: str, year: int | None = 2000, **overrides) -> Movie:
    """Build a detached Movie row with sensible defaults."""
    values = {
        "imdb_id": imdb_id,
        "title": title,
        "year": year,
        "runtime": 120,
        "genres": "Drama",
        "country": "United States",
        "plot": None,
        "poster": None,
        "box_office": None,
        "imdb_rating": "7.5",
        "rotten_tomatoes_rating": "80",
        "metacritic_rating": "70",
        "classification": "PG-13",
    }
    values.update(overrides)
    return Movie(**values)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def store() -> FakeCatalogStore:
    """Store double holding a small catalog."""
    godfather = make_movie(
        "tt0068646",
        "The Godfather",
        1972,
        genres="Crime,Drama",
        box_office="$136,381,073",
        imdb_rating="9.2",
        rotten_tomatoes_rating="97",
        metacritic_rating="100",
        classification="R",
    )
    return FakeCatalogStore(
        movies=[
            godfather,
            make_movie("tt0071562", "The Godfather Part II", 1974, imdb_rating="9.0"),
            make_movie("tt0111161", "The Shawshank Redemption", 1994, imdb_rating="N/A",
                       rotten_tomatoes_rating=None, metacritic_rating="tbd"),
        ],
        ratings=[
            Rating(movie_id="tt0068646", source="Internet Movie Database", value="9.2/10"),
            Rating(movie_id="tt0068646", source="Rotten Tomatoes", value="97%"),
            Rating(movie_id="tt0068646", source="Metacritic", value="N/A"),
        ],
        movie_credits={
            "tt0068646": [
                MovieCreditRow("nm0000008", "Marlon Brando", "actor", '["Don Vito Corleone"]'),
                MovieCreditRow("nm0000025", "Nino Rota", "composer", "not json"),
                MovieCreditRow("nm0000338", "Francis Ford Coppola", "director", None),
                MovieCreditRow("nm0750026", "Albert S. Ruddy", "producer", None),
            ],
        },
        persons={
            "nm0000199": Person(person_id="nm0000199", name="Al Pacino", birth_year=1940,
                                death_year=None, professions="actor"),
        },
        person_credits={
            "nm0000199": [
                PersonCreditRow("tt0068646", "The Godfather", "9.2", "actor", '["Michael Corleone"]'),
                PersonCreditRow("tt0099674", "The Godfather Part III", None, "actor", "[]"),
            ],
        },
    )
