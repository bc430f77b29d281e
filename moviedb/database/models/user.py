"""User account model.

Credentials are managed by the identity provider; this service
only reads and writes the profile columns.
"""

from datetime import date

from sqlalchemy import Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from moviedb.database.models.base import Base


class User(Base):
    """Registered user and profile."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column("passwordHash", String(255), nullable=False)
    first_name: Mapped[str | None] = mapped_column("firstName", String(255))
    last_name: Mapped[str | None] = mapped_column("lastName", String(255))
    dob: Mapped[date | None] = mapped_column(Date)
    address: Mapped[str | None] = mapped_column(String(255))

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<User(id={self.id}, email='{self.email}')>"
