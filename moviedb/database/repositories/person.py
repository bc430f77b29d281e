"""Person repository."""

from sqlalchemy.orm import Session

from moviedb.database.models import Person
from moviedb.database.repositories.base import BaseRepository


class PersonRepository(BaseRepository[Person]):
    """Repository for credited persons."""

    model = Person

    def __init__(self, session: Session) -> None:
        """Initialize person repository.

        Args:
            session: SQLAlchemy session instance.
        """
        super().__init__(session)
