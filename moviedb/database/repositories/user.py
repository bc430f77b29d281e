"""User repository for profile reads and updates."""

from datetime import date

from sqlalchemy.orm import Session

from moviedb.database.models import User
from moviedb.database.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User entity operations."""

    model = User

    def __init__(self, session: Session) -> None:
        """Initialize user repository.

        Args:
            session: SQLAlchemy session instance.
        """
        super().__init__(session)

    def get_by_email(self, email: str) -> User | None:
        """Retrieve user by email address.

        Args:
            email: Account email.

        Returns:
            User instance or None.
        """
        return self.get_by_field("email", email)

    def update_profile(
        self,
        user: User,
        first_name: str,
        last_name: str,
        dob: date,
        address: str,
    ) -> User:
        """Overwrite the profile columns of a user.

        Args:
            user: Persistent user instance.
            first_name: New first name.
            last_name: New last name.
            dob: New date of birth.
            address: New postal address.

        Returns:
            Updated user.
        """
        user.first_name = first_name
        user.last_name = last_name
        user.dob = dob
        user.address = address
        self._session.flush()
        return user
