"""Movie and rating models.

The catalog tables keep the column names of the IMDb-derived dump
they are loaded from; attributes use snake_case.
"""

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from moviedb.database.models.base import Base


class Movie(Base):
    """Film entry of the catalog.

    Attributes:
        imdb_id: IMDb title identifier (tconst, e.g. tt0111161).
        title: Primary title.
        genres: Comma-delimited genre names.
        imdb_rating: Raw IMDb rating text.
        rotten_tomatoes_rating: Raw Rotten Tomatoes rating text.
        metacritic_rating: Raw Metacritic rating text.
        classification: Classification label (e.g. PG-13).
    """

    __tablename__ = "basics"

    imdb_id: Mapped[str] = mapped_column("tconst", String(20), primary_key=True)
    title: Mapped[str] = mapped_column("primaryTitle", String(500), nullable=False, index=True)
    year: Mapped[int | None] = mapped_column(Integer, index=True)
    runtime: Mapped[int | None] = mapped_column("runtimeMinutes", Integer)
    genres: Mapped[str | None] = mapped_column(String(255))
    country: Mapped[str | None] = mapped_column(String(255))
    plot: Mapped[str | None] = mapped_column(Text)
    poster: Mapped[str | None] = mapped_column(String(500))
    box_office: Mapped[str | None] = mapped_column("boxoffice", String(50))

    imdb_rating: Mapped[str | None] = mapped_column("imdbRating", String(20))
    rotten_tomatoes_rating: Mapped[str | None] = mapped_column("rottentomatoesRating", String(20))
    metacritic_rating: Mapped[str | None] = mapped_column("metacriticRating", String(20))
    classification: Mapped[str | None] = mapped_column("rated", String(20))

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<Movie(imdb_id='{self.imdb_id}', title='{self.title}')>"


class Rating(Base):
    """Rating of a movie issued by one source.

    Attributes:
        source: Rating body (e.g. 'Internet Movie Database').
        value: Raw value text ('7.5/10', '85%', '74/100').
    """

    __tablename__ = "ratings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    movie_id: Mapped[str] = mapped_column(
        "tconst",
        String(20),
        ForeignKey("basics.tconst", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    source: Mapped[str] = mapped_column(String(100), nullable=False)
    value: Mapped[str | None] = mapped_column(String(50))

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<Rating(movie_id='{self.movie_id}', source='{self.source}', value='{self.value}')>"
