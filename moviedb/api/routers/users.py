"""User profile endpoints for REST API."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends

from moviedb.api.database import get_profile_service
from moviedb.api.dependencies.auth import CurrentUser, OptionalIdentity
from moviedb.api.schemas import ErrorResponse, UpdatedProfile, UserProfile
from moviedb.services.profile.service import ProfileService

router = APIRouter(prefix="/user", tags=["Users"])

ProfileServiceDep = Annotated[ProfileService, Depends(get_profile_service)]


@router.get(
    "/{email}/profile",
    response_model=UserProfile,
    response_model_exclude_unset=True,
    summary="Get user profile",
    description="Public profile; dob and address are included for the owner only.",
    responses={
        404: {"model": ErrorResponse, "description": "Unknown user"},
        500: {"model": ErrorResponse, "description": "Database error"},
    },
)
def get_profile(
    email: str,
    identity: OptionalIdentity,
    service: ProfileServiceDep,
) -> UserProfile:
    """Get a user profile, with private fields for the owner."""
    return service.get_profile(email, identity)


@router.put(
    "/{email}/profile",
    response_model=UpdatedProfile,
    summary="Update user profile",
    description="Replace firstName, lastName, dob and address. Owner only.",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid body"},
        401: {"model": ErrorResponse, "description": "Missing or invalid token"},
        403: {"model": ErrorResponse, "description": "Not the profile owner"},
        404: {"model": ErrorResponse, "description": "Unknown user"},
        500: {"model": ErrorResponse, "description": "Database error"},
    },
)
def update_profile(
    email: str,
    user: CurrentUser,
    service: ProfileServiceDep,
    body: Annotated[dict[str, Any] | None, Body()] = None,
) -> UpdatedProfile:
    """Update the caller's own profile.

    The body is validated by the service so every failure carries
    the API's own 400 message.
    """
    return service.update_profile(email, user.email, body or {})
