"""Authentication dependencies for FastAPI.

Turn the bearer token of a request into the caller identity.
Routes only ever see the verified identity or the account email,
never the raw token.
"""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from moviedb.api.services.jwt_service import (
    CallerIdentity,
    InvalidTokenError,
    JWTService,
    TokenExpiredError,
    get_jwt_service,
)
from moviedb.services.catalog.errors import Unauthenticated

# =============================================================================
# SECURITY SCHEME
# =============================================================================

# auto_error=False so missing credentials use the API error body
security_scheme = HTTPBearer(
    scheme_name="JWT",
    description="Bearer token issued by the account service",
    auto_error=False,
)


# =============================================================================
# DEPENDENCIES
# =============================================================================


def get_current_user(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None,
        Depends(security_scheme),
    ],
    jwt_service: Annotated[JWTService, Depends(get_jwt_service)],
) -> CallerIdentity:
    """Extract and validate current user from JWT token.

    Args:
        credentials: Bearer token from Authorization header.
        jwt_service: JWT service for token validation.

    Returns:
        Verified caller identity.

    Raises:
        Unauthenticated: If the token is missing, invalid or expired.
    """
    if credentials is None:
        raise Unauthenticated("Authorization header ('Bearer token') not found")
    try:
        return jwt_service.decode_token(credentials.credentials)
    except TokenExpiredError:
        raise Unauthenticated("JWT token has expired") from None
    except InvalidTokenError:
        raise Unauthenticated("Invalid JWT token") from None


def get_optional_identity(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None,
        Depends(security_scheme),
    ],
    jwt_service: Annotated[JWTService, Depends(get_jwt_service)],
) -> str | None:
    """Identity of the caller when a valid token is present.

    Missing, invalid and expired tokens all mean an anonymous caller.

    Returns:
        Account email or None.
    """
    if credentials is None:
        return None
    try:
        return jwt_service.decode_token(credentials.credentials).email
    except (TokenExpiredError, InvalidTokenError):
        return None


# Type aliases for cleaner endpoint signatures
CurrentUser = Annotated[CallerIdentity, Depends(get_current_user)]
OptionalIdentity = Annotated[str | None, Depends(get_optional_identity)]
