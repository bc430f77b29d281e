"""Profile service.

Reads are public but only the owner sees private fields; updates
require the caller to be the owner. The identity comes from the
bearer token and is the account email.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any

from moviedb.api.schemas import UpdatedProfile, UserProfile
from moviedb.database.repositories import UserRepository
from moviedb.services.catalog.errors import (
    InvalidArgument,
    NotFound,
    PermissionDenied,
    Unauthenticated,
    store_errors,
)
from moviedb.utils.logger import setup_logger

logger = setup_logger("services.profile")

_REQUIRED_FIELDS = ("firstName", "lastName", "dob", "address")
_TEXT_FIELDS = ("firstName", "lastName", "address")
_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


@dataclass(frozen=True)
class ProfileUpdate:
    """Validated profile update."""

    first_name: str
    last_name: str
    dob: date
    address: str


def validate_profile_update(body: Mapping[str, Any], today: date | None = None) -> ProfileUpdate:
    """Validate a profile update body.

    Presence and type are checked explicitly: a field is present when
    the key exists and its value is neither None nor an empty string.

    Args:
        body: Decoded JSON body.
        today: Reference date for the past-date check.

    Returns:
        Validated update.

    Raises:
        InvalidArgument: On missing fields, wrong types or a bad date.
    """
    if any(body.get(field) is None or body.get(field) == "" for field in _REQUIRED_FIELDS):
        raise InvalidArgument(
            "Request body incomplete: firstName, lastName, dob and address are required."
        )

    if not all(isinstance(body[field], str) for field in _TEXT_FIELDS):
        raise InvalidArgument(
            "Request body invalid: firstName, lastName and address must be strings only."
        )

    dob = _parse_dob(body["dob"])
    if dob > (today or date.today()):
        raise InvalidArgument("Invalid input: dob must be a date in the past.")

    return ProfileUpdate(
        first_name=body["firstName"],
        last_name=body["lastName"],
        dob=dob,
        address=body["address"],
    )


def _parse_dob(raw: Any) -> date:
    """Parse a YYYY-MM-DD calendar date, rejecting impossible days."""
    if not isinstance(raw, str) or not _DATE_PATTERN.fullmatch(raw):
        raise InvalidArgument("Invalid input: dob must be a real date in format YYYY-MM-DD.")
    try:
        return date.fromisoformat(raw)
    except ValueError:
        raise InvalidArgument(
            "Invalid input: dob must be a real date in format YYYY-MM-DD."
        ) from None


class ProfileService:
    """Profile operations over the users table."""

    def __init__(self, users: UserRepository) -> None:
        self._users = users
        self._logger = logger

    def get_profile(self, email: str, identity: str | None) -> UserProfile:
        """Get a user profile.

        Args:
            email: Email of the profile to read.
            identity: Email of the authenticated caller, if any.

        Returns:
            Public profile, plus dob and address for the owner.

        Raises:
            NotFound: If no user has this email.
            StoreUnavailable: If the store fails.
        """
        with store_errors(self._logger, "profile read"):
            user = self._users.get_by_email(email)
        if user is None:
            raise NotFound("User not found")

        fields: dict[str, Any] = {
            "email": user.email,
            "first_name": user.first_name,
            "last_name": user.last_name,
        }
        if identity is not None and identity == email:
            fields["dob"] = user.dob.isoformat() if user.dob else None
            fields["address"] = user.address
        return UserProfile(**fields)

    def update_profile(
        self,
        email: str,
        identity: str | None,
        body: Mapping[str, Any],
    ) -> UpdatedProfile:
        """Update the profile of the authenticated owner.

        Args:
            email: Email of the profile to update.
            identity: Email of the authenticated caller.
            body: Decoded JSON body.

        Returns:
            The stored profile.

        Raises:
            Unauthenticated: If there is no caller identity.
            PermissionDenied: If the caller is not the owner.
            InvalidArgument: If the body is invalid.
            NotFound: If no user has this email.
            StoreUnavailable: If the store fails.
        """
        if identity is None:
            raise Unauthenticated("Authorization header ('Bearer token') not found")
        if identity != email:
            raise PermissionDenied("Forbidden")

        update = validate_profile_update(body)

        with store_errors(self._logger, "profile update"):
            user = self._users.get_by_email(email)
            if user is None:
                raise NotFound("User not found")
            self._users.update_profile(
                user,
                first_name=update.first_name,
                last_name=update.last_name,
                dob=update.dob,
                address=update.address,
            )

        self._logger.info("Profile updated for %s", email)
        return UpdatedProfile(
            email=email,
            first_name=update.first_name,
            last_name=update.last_name,
            dob=update.dob.isoformat(),
            address=update.address,
        )
