"""Person endpoints for REST API.

Person documents are only served to authenticated callers.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from moviedb.api.database import get_person_service
from moviedb.api.dependencies.auth import CurrentUser
from moviedb.api.dependencies.rate_limit import check_rate_limit
from moviedb.api.schemas import ErrorResponse, PersonDetail
from moviedb.services.catalog.people import PersonService

router = APIRouter(
    prefix="/people",
    tags=["People"],
    dependencies=[Depends(check_rate_limit)],
)


@router.get(
    "/{person_id}",
    response_model=PersonDetail,
    summary="Get person details",
    description="Person with all film credits. Requires a bearer token. No query parameters.",
    responses={
        400: {"model": ErrorResponse, "description": "Query parameters supplied"},
        401: {"model": ErrorResponse, "description": "Missing or invalid token"},
        404: {"model": ErrorResponse, "description": "Unknown person"},
        500: {"model": ErrorResponse, "description": "Database error"},
    },
)
def get_person(
    person_id: str,
    request: Request,
    _user: CurrentUser,
    service: Annotated[PersonService, Depends(get_person_service)],
) -> PersonDetail:
    """Get person by IMDb name identifier."""
    return service.get_person(person_id, params=request.query_params.keys())
