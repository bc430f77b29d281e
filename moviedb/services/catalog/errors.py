"""Error taxonomy of the catalog and profile services.

Each error carries the client-facing message and the HTTP status
the API layer answers with.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError


class CatalogError(Exception):
    """Base exception for service-level failures."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidArgument(CatalogError):
    """Raised when a request parameter is malformed or not permitted."""

    status_code = 400


class Unauthenticated(CatalogError):
    """Raised when a bearer token is required but missing or invalid."""

    status_code = 401


class PermissionDenied(CatalogError):
    """Raised when the caller may not act on the resource."""

    status_code = 403


class NotFound(CatalogError):
    """Raised when no entity matches the identifier."""

    status_code = 404


class StoreUnavailable(CatalogError):
    """Raised when the underlying store fails.

    The message is deliberately generic; the cause is logged only.
    """

    status_code = 500

    def __init__(self, message: str = "Database error") -> None:
        super().__init__(message)


@contextmanager
def store_errors(logger: logging.Logger, operation: str) -> Iterator[None]:
    """Translate storage failures into StoreUnavailable.

    Args:
        logger: Logger receiving the failure with traceback.
        operation: Short label of the failing operation.

    Raises:
        StoreUnavailable: On any SQLAlchemy error inside the block.
    """
    try:
        yield
    except SQLAlchemyError as e:
        logger.exception("Store failure during %s", operation)
        raise StoreUnavailable() from e
