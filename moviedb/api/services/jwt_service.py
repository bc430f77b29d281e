"""Bearer token verification.

Tokens are issued by the account service sharing JWT_SECRET_KEY and
carry the account email in an `email` claim. Tokens from issuers that
use the registered `sub` claim are accepted as well. This API never
mints tokens.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

import jwt

from moviedb.settings import settings

IDENTITY_CLAIMS = ("email", "sub")


@dataclass(frozen=True)
class CallerIdentity:
    """Verified caller behind a bearer token.

    Attributes:
        email: Account email.
        expires_at: Token expiry.
    """

    email: str
    expires_at: datetime


class TokenExpiredError(Exception):
    """Raised when token has expired."""


class InvalidTokenError(Exception):
    """Raised when token is malformed, badly signed or has no identity."""


class JWTService:
    """Verifies HS256 tokens against the shared secret."""

    def __init__(self) -> None:
        security = settings.security
        self._secret_key = security.jwt_secret_key
        self._algorithm = security.jwt_algorithm

    def decode_token(self, token: str) -> CallerIdentity:
        """Verify a token and extract the caller.

        Args:
            token: Encoded JWT string.

        Returns:
            Identity from the `email` claim, else from `sub`.

        Raises:
            TokenExpiredError: If token has expired.
            InvalidTokenError: If the token does not verify or names nobody.
        """
        try:
            claims = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["exp"], "verify_sub": False},
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError("Invalid token") from e
        return CallerIdentity(
            email=_identity(claims),
            expires_at=datetime.fromtimestamp(claims["exp"], tz=UTC),
        )


def _identity(claims: dict[str, Any]) -> str:
    """First non-empty string among the identity claims."""
    for name in IDENTITY_CLAIMS:
        value = claims.get(name)
        if isinstance(value, str) and value:
            return value
    raise InvalidTokenError("Token carries no identity")


def get_jwt_service() -> JWTService:
    """FastAPI dependency returning a configured JWTService."""
    return JWTService()
