"""Person and principal (credit) models."""

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from moviedb.database.models.base import Base


class Person(Base):
    """Credited person.

    Attributes:
        person_id: IMDb name identifier (nconst, e.g. nm0000151).
        name: Primary name.
        professions: Comma-delimited profession list.
    """

    __tablename__ = "names"

    person_id: Mapped[str] = mapped_column("nconst", String(20), primary_key=True)
    name: Mapped[str] = mapped_column("primaryName", String(255), nullable=False)
    birth_year: Mapped[int | None] = mapped_column("birthYear", Integer)
    death_year: Mapped[int | None] = mapped_column("deathYear", Integer)
    professions: Mapped[str | None] = mapped_column("primaryProfession", String(255))

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<Person(person_id='{self.person_id}', name='{self.name}')>"


class Principal(Base):
    """Credit linking a person to a movie.

    Attributes:
        ordering: Canonical position of the credit within the movie.
        category: Free-text role label ('director', 'actor', ...).
        characters: JSON-encoded list of character names, often malformed.
    """

    __tablename__ = "principals"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    movie_id: Mapped[str] = mapped_column(
        "tconst",
        String(20),
        ForeignKey("basics.tconst", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    ordering: Mapped[int] = mapped_column(Integer, default=0)
    person_id: Mapped[str] = mapped_column(
        "nconst",
        String(20),
        ForeignKey("names.nconst", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    category: Mapped[str | None] = mapped_column(String(100))
    job: Mapped[str | None] = mapped_column(Text)
    characters: Mapped[str | None] = mapped_column(Text)

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<Principal(movie_id='{self.movie_id}', person_id='{self.person_id}', "
            f"category='{self.category}')>"
        )
