"""Movie endpoints for REST API.

Provides paginated movie search and the aggregated movie document.
Both endpoints are public.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from moviedb.api.database import get_movie_service
from moviedb.api.dependencies.rate_limit import check_rate_limit
from moviedb.api.schemas import ErrorResponse, MovieDetail, MovieSearchResponse
from moviedb.services.catalog.movies import MovieService

router = APIRouter(
    prefix="/movies",
    tags=["Movies"],
    dependencies=[Depends(check_rate_limit)],
)

MovieServiceDep = Annotated[MovieService, Depends(get_movie_service)]


@router.get(
    "/search",
    response_model=MovieSearchResponse,
    summary="Search movies",
    description="Search movies by title substring and release year, 100 per page.",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid page or year"},
        500: {"model": ErrorResponse, "description": "Database error"},
    },
)
def search_movies(
    service: MovieServiceDep,
    title: Annotated[str | None, Query(description="Substring of the title")] = None,
    year: Annotated[str | None, Query(description="Release year (yyyy)")] = None,
    page: Annotated[str | None, Query(description="Page number, default 1")] = None,
) -> MovieSearchResponse:
    """Search movies.

    Page and year arrive as raw strings so malformed values get the
    API's 400 message instead of a generic validation error.
    """
    return service.search(title=title, year=year, page=page)


@router.get(
    "/data/{imdb_id}",
    response_model=MovieDetail,
    summary="Get movie details",
    description="Movie with genres, ratings and ranked principals. No query parameters.",
    responses={
        400: {"model": ErrorResponse, "description": "Query parameters supplied"},
        404: {"model": ErrorResponse, "description": "Unknown movie"},
        500: {"model": ErrorResponse, "description": "Database error"},
    },
)
def get_movie(
    imdb_id: str,
    request: Request,
    service: MovieServiceDep,
) -> MovieDetail:
    """Get movie by IMDb identifier."""
    return service.get_movie(imdb_id, params=request.query_params.keys())
