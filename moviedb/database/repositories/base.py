"""
Base repository with generic read operations.

The catalog is read-only from this service's perspective, so
repositories expose lookups only.
"""

from datetime import date
from typing import Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

from moviedb.database.models.base import Base

# Type alias for valid database field values
FieldValue = str | int | float | bool | date | None

# Generic type variable bound to Base model
ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """Generic repository providing common read operations.

    Attributes:
        model: SQLAlchemy model class.
    """

    model: type[ModelT]

    def __init__(self, session: Session) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy session instance.
        """
        self._session = session

    def get_by_id(self, entity_id: str | int) -> ModelT | None:
        """Retrieve entity by primary key.

        Args:
            entity_id: Primary key value.

        Returns:
            Entity instance or None if not found.
        """
        return self._session.get(self.model, entity_id)

    def get_by_field(self, field_name: str, value: FieldValue) -> ModelT | None:
        """Retrieve entity by a specific field value.

        Args:
            field_name: Name of the mapped attribute to filter on.
            value: Value to match.

        Returns:
            Entity instance or None if not found.
        """
        field = getattr(self.model, field_name)
        stmt = select(self.model).where(field == value)
        return self._session.scalars(stmt).first()
