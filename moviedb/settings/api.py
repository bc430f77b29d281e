"""API configuration settings.

FastAPI, security (JWT), and CORS settings.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class APISettings(BaseSettings):
    """FastAPI configuration.

    Attributes:
        host: API host address.
        port: API port.
        reload: Enable auto-reload in development.
        title: OpenAPI title.
        version: API version string.
    """

    host: str = Field(default="0.0.0.0", alias="API_HOST")
    port: int = Field(default=3000, alias="API_PORT")
    reload: bool = Field(default=False, alias="API_RELOAD")
    title: str = Field(default="Movie Catalog API", alias="API_TITLE")
    version: str = Field(default="1.0.0", alias="API_VERSION")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


class SecuritySettings(BaseSettings):
    """JWT and rate limiting configuration.

    Attributes:
        jwt_secret_key: Secret key shared with the token issuer.
        jwt_algorithm: JWT algorithm (HS256).
        rate_limit_per_minute: Max requests per minute per client.
    """

    jwt_secret_key: str = Field(alias="JWT_SECRET_KEY")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    rate_limit_per_minute: int = Field(default=100, alias="RATE_LIMIT_PER_MINUTE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def is_configured(self) -> bool:
        """Check if JWT secret is configured and secure."""
        return bool(self.jwt_secret_key and len(self.jwt_secret_key) >= 32)


class CORSSettings(BaseSettings):
    """CORS configuration.

    Attributes:
        origins_raw: Comma-separated allowed origins.
    """

    origins_raw: str = Field(default="*", alias="CORS_ORIGINS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def origins(self) -> list[str]:
        """Parse origins from comma-separated string."""
        return [o.strip() for o in self.origins_raw.split(",") if o.strip()]
