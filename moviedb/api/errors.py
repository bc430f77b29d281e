"""Exception handlers giving every error the same JSON body.

Bodies are `{"error": true, "message": ...}`; store failure details
never leave the server.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from moviedb.services.catalog.errors import CatalogError, Unauthenticated
from moviedb.utils.logger import setup_logger

logger = setup_logger("api.errors")


def error_response(
    status_code: int,
    message: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build an error response with the API body shape."""
    return JSONResponse(
        status_code=status_code,
        content={"error": True, "message": message},
        headers=headers,
    )


async def handle_catalog_error(request: Request, exc: CatalogError) -> JSONResponse:
    """Map service errors to their HTTP status."""
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, Unauthenticated) else None
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return error_response(exc.status_code, exc.message, headers)


async def handle_http_exception(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Reshape framework HTTP errors (404 routes, 405, 429)."""
    return error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


async def handle_validation_error(_request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report request validation failures as client errors."""
    fields = sorted({str(err["loc"][-1]) for err in exc.errors() if err.get("loc")})
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        f"Invalid request: {', '.join(fields)}.",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers on an application.

    Args:
        app: FastAPI application instance.
    """
    app.add_exception_handler(CatalogError, handle_catalog_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
