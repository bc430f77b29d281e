"""Shared pytest fixtures.

Environment defaults are set before any moviedb import so the
settings singleton is built for tests: in-memory SQLite, no log
files, a fixed JWT secret.
"""

import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("JWT_SECRET_KEY", "test_jwt_secret_key_12345678901234567890")
os.environ.setdefault("JWT_ALGORITHM", "HS256")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_TO_FILE", "false")
os.environ.setdefault("LOG_LEVEL", "INFO")

from collections.abc import Generator  # noqa: E402
from datetime import UTC, date, datetime, timedelta  # noqa: E402

import jwt  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.engine import Engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from moviedb.database.models import Base, Movie, Person, Principal, Rating, User  # noqa: E402
from moviedb.settings import settings  # noqa: E402

GODFATHER = "tt0068646"
GODFATHER_II = "tt0071562"
SHAWSHANK = "tt0111161"
LOVE_STORY = "tt0000001"

BRANDO = "nm0000008"
PACINO = "nm0000199"
COPPOLA = "nm0000338"


# ---------------------------------------------------------------------------
# Sample catalog
# ---------------------------------------------------------------------------


def sample_movies() -> list[Movie]:
    """Movies of the sample catalog."""
    return [
        Movie(
            imdb_id=SHAWSHANK,
            title="The Shawshank Redemption",
            year=1994,
            runtime=142,
            genres="Drama",
            country="United States",
            plot="Two imprisoned men bond over a number of years.",
            poster="https://example.org/posters/shawshank.jpg",
            box_office="$28,767,189",
            imdb_rating="9.3",
            rotten_tomatoes_rating="91",
            metacritic_rating="82",
            classification="R",
        ),
        Movie(
            imdb_id=GODFATHER,
            title="The Godfather",
            year=1972,
            runtime=175,
            genres="Crime,Drama",
            country="United States",
            plot="The aging patriarch of an organized crime dynasty transfers control to his son.",
            poster="https://example.org/posters/godfather.jpg",
            box_office="$136,381,073",
            imdb_rating="9.2",
            rotten_tomatoes_rating="97",
            metacritic_rating="100",
            classification="R",
        ),
        Movie(
            imdb_id=GODFATHER_II,
            title="The Godfather Part II",
            year=1974,
            runtime=202,
            genres="Crime,Drama",
            country="United States",
            plot="The early life and career of Vito Corleone.",
            poster=None,
            box_office="$47,834,595",
            imdb_rating="9.0",
            rotten_tomatoes_rating="96",
            metacritic_rating="90",
            classification="R",
        ),
        Movie(
            imdb_id=LOVE_STORY,
            title="100% Love_Story",
            year=2001,
            runtime=None,
            genres=None,
            country=None,
            plot=None,
            poster=None,
            box_office="N/A",
            imdb_rating="N/A",
            rotten_tomatoes_rating=None,
            metacritic_rating="N/A",
            classification=None,
        ),
    ]


def sample_ratings() -> list[Rating]:
    """Ratings of the sample catalog."""
    return [
        Rating(movie_id=GODFATHER, source="Internet Movie Database", value="9.2/10"),
        Rating(movie_id=GODFATHER, source="Rotten Tomatoes", value="97%"),
        Rating(movie_id=GODFATHER, source="Metacritic", value="100/100"),
        Rating(movie_id=SHAWSHANK, source="Internet Movie Database", value="9.3/10"),
        Rating(movie_id=SHAWSHANK, source="Box Office Mojo", value="N/A"),
    ]


def sample_persons() -> list[Person]:
    """Persons of the sample catalog."""
    return [
        Person(person_id=BRANDO, name="Marlon Brando", birth_year=1924, death_year=2004,
               professions="actor,soundtrack,director"),
        Person(person_id=PACINO, name="Al Pacino", birth_year=1940, death_year=None, professions="actor"),
        Person(person_id=COPPOLA, name="Francis Ford Coppola", birth_year=1939, death_year=None,
               professions="producer,director,writer"),
        Person(person_id="nm0000025", name="Nino Rota", birth_year=1911, death_year=1979,
               professions="composer"),
        Person(person_id="nm0701374", name="Mario Puzo", birth_year=1920, death_year=1999,
               professions="writer"),
        Person(person_id="nm0750026", name="Albert S. Ruddy", birth_year=1930, death_year=2024,
               professions="producer"),
        Person(person_id="nm0932509", name="Gordon Willis", birth_year=1931, death_year=2014,
               professions="cinematographer"),
        Person(person_id="nm0000380", name="Fred Roos", birth_year=1934, death_year=2024,
               professions="producer,casting_director"),
    ]


def sample_principals() -> list[Principal]:
    """Credits of the sample catalog, in join order."""
    return [
        Principal(movie_id=GODFATHER, ordering=1, person_id=BRANDO, category="actor",
                  characters='["Don Vito Corleone"]'),
        Principal(movie_id=GODFATHER, ordering=2, person_id=PACINO, category="actor",
                  characters='["Michael Corleone"]'),
        Principal(movie_id=GODFATHER, ordering=3, person_id="nm0000025", category="composer",
                  characters="\\N"),
        Principal(movie_id=GODFATHER, ordering=4, person_id=COPPOLA, category="director",
                  characters=None),
        Principal(movie_id=GODFATHER, ordering=5, person_id="nm0701374", category="writer",
                  characters=""),
        Principal(movie_id=GODFATHER, ordering=6, person_id="nm0750026", category="producer",
                  characters=None),
        Principal(movie_id=GODFATHER, ordering=7, person_id="nm0932509", category="cinematographer",
                  characters=None),
        Principal(movie_id=GODFATHER, ordering=8, person_id="nm0000380", category="casting_director",
                  characters='{"not": "a list"}'),
        Principal(movie_id=GODFATHER_II, ordering=1, person_id=PACINO, category="actor",
                  characters='["Michael"]'),
        Principal(movie_id=GODFATHER_II, ordering=2, person_id=COPPOLA, category="director",
                  characters=None),
    ]


def sample_users() -> list[User]:
    """Users with and without a filled-in profile."""
    return [
        User(
            email="alice@example.com",
            password_hash="$2b$10$abcdefghijklmnopqrstuv",
            first_name="Alice",
            last_name="Liddell",
            dob=date(1990, 5, 17),
            address="1 Wonderland Way",
        ),
        User(email="bob@example.com", password_hash="$2b$10$abcdefghijklmnopqrstuv"),
    ]


# ---------------------------------------------------------------------------
# Database fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """In-memory SQLite engine holding the sample catalog."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        session.add_all(sample_movies())
        session.add_all(sample_persons())
        session.flush()
        session.add_all(sample_ratings())
        session.add_all(sample_principals())
        session.add_all(sample_users())
        session.commit()
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker[Session]:
    """Session factory bound to the sample catalog."""
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db_session(session_factory: sessionmaker[Session]) -> Generator[Session, None, None]:
    """Session on the sample catalog, closed after the test."""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


# ---------------------------------------------------------------------------
# Tokens
# ---------------------------------------------------------------------------


def make_token(
    email: str | None = "alice@example.com",
    expires_in: timedelta = timedelta(minutes=10),
    claim: str = "email",
    secret: str | None = None,
) -> str:
    """Sign a token the way the account service does.

    Args:
        email: Identity to carry; None leaves the claim out.
        expires_in: Lifetime, negative for an expired token.
        claim: Claim holding the identity ("email" or "sub").
        secret: Signing key, defaults to JWT_SECRET_KEY.
    """
    now = datetime.now(UTC)
    payload: dict = {"iat": now, "exp": now + expires_in}
    if email is not None:
        payload[claim] = email
    return jwt.encode(payload, secret or settings.security.jwt_secret_key, algorithm="HS256")
