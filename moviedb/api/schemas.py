"""Pydantic schemas for API responses and request bodies.

Response keys follow the camelCase contract of the public API;
Python attributes stay snake_case and map through aliases.
"""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

from moviedb.services.catalog.pagination import Pagination


class CamelModel(BaseModel):
    """Base model accepting both attribute names and aliases."""

    model_config = ConfigDict(populate_by_name=True)


# =============================================================================
# ERRORS & HEALTH
# =============================================================================


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: bool = True
    message: str = Field(examples=["No record exists of a movie with this ID"])


class DatabaseComponentHealth(BaseModel):
    """Database connection health status."""

    connected: bool = False
    pool_available: int | None = None


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(examples=["healthy"])
    version: str = Field(examples=["1.0.0"])
    database: DatabaseComponentHealth = Field(default_factory=DatabaseComponentHealth)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))


# =============================================================================
# MOVIE SEARCH
# =============================================================================


class MovieSummary(CamelModel):
    """Movie row of a search result."""

    title: str
    year: int | None = None
    imdb_id: str = Field(alias="imdbID")
    imdb_rating: float | None = Field(default=None, alias="imdbRating")
    rotten_tomatoes_rating: int | None = Field(default=None, alias="rottenTomatoesRating")
    metacritic_rating: int | None = Field(default=None, alias="metacriticRating")
    classification: str | None = None


class MovieSearchResponse(BaseModel):
    """Paginated movie search response."""

    data: list[MovieSummary]
    pagination: Pagination


# =============================================================================
# MOVIE DETAIL
# =============================================================================


class MovieCredit(BaseModel):
    """Credited person of a movie."""

    id: str
    name: str
    category: str | None = None
    characters: list[str] = Field(default_factory=list)


class MovieRating(BaseModel):
    """Normalized rating from one source."""

    source: str
    value: int | float | str | None = None


class MovieDetail(CamelModel):
    """Aggregated movie document."""

    title: str
    year: int | None = None
    runtime: int | None = None
    genres: list[str] = Field(default_factory=list)
    country: str | None = None
    principals: list[MovieCredit] = Field(default_factory=list)
    ratings: list[MovieRating] = Field(default_factory=list)
    box_office: str | None = Field(default=None, alias="boxoffice")
    plot: str | None = None
    poster: str | None = None


# =============================================================================
# PERSON DETAIL
# =============================================================================


class PersonRole(CamelModel):
    """Film credit of a person."""

    movie_name: str = Field(alias="movieName")
    movie_id: str = Field(alias="movieId")
    category: str | None = None
    characters: list[str] = Field(default_factory=list)
    imdb_rating: float | None = Field(default=None, alias="imdbRating")


class PersonDetail(CamelModel):
    """Aggregated person document."""

    name: str
    birth_year: int | None = Field(default=None, alias="birthYear")
    death_year: int | None = Field(default=None, alias="deathYear")
    roles: list[PersonRole] = Field(default_factory=list)


# =============================================================================
# USER PROFILE
# =============================================================================


class UserProfile(CamelModel):
    """Profile of a user.

    `dob` and `address` are only set when the owner asks; the route
    excludes unset fields so strangers never see the keys.
    """

    email: str
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    dob: str | None = None
    address: str | None = None


class UpdatedProfile(CamelModel):
    """Profile as stored after an update."""

    email: str
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    dob: str
    address: str
