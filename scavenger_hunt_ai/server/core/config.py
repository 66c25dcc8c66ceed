"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class JWTConfig(BaseModel):
    """JSON Web Token signing configuration."""

    secret: str = Field(
        default="fallback-secret", alias="JWT_SECRET", description="Secret key used to sign access tokens"
    )
    algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM", description="JWT signing algorithm")
    expire_hours: int = Field(default=24, alias="JWT_EXPIRE_HOURS", description="Access token lifetime in hours")

    model_config = {"populate_by_name": True}


class CORSConfig(BaseModel):
    """CORS configuration."""

    origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS", description="Allowed CORS origins (use * for all)")
    allow_credentials: bool = Field(
        default=True, alias="CORS_ALLOW_CREDENTIALS", description="Allow credentials in CORS requests"
    )
    allow_methods: list[str] = Field(
        default=["*"], alias="CORS_ALLOW_METHODS", description="Allowed HTTP methods (use * for all)"
    )
    allow_headers: list[str] = Field(
        default=["*"], alias="CORS_ALLOW_HEADERS", description="Allowed HTTP headers (use * for all)"
    )

    model_config = {"populate_by_name": True}


class GenerationConfig(BaseModel):
    """Hunt generation pipeline configuration."""

    timeout_seconds: float = Field(
        default=60.0,
        alias="GENERATION_TIMEOUT_SECONDS",
        description="Upper bound for a single hunt generation before it is marked as failed",
    )
    image_base_url: str = Field(
        default="https://images.scavenger-hunt.local",
        alias="IMAGE_BASE_URL",
        description="Base URL of the placeholder clue illustrations",
    )

    model_config = {"populate_by_name": True}


class RateLimitConfig(BaseModel):
    """Per-client request rate limiting."""

    enabled: bool = Field(default=True, alias="RATE_LIMIT_ENABLED", description="Reject clients exceeding the limit")
    default_limit: str = Field(
        default="100/15minutes",
        alias="RATE_LIMIT_DEFAULT",
        description="Requests allowed per client IP, e.g. 100/15minutes",
    )

    model_config = {"populate_by_name": True}


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    # =====================================================================
    # Pydantic Configuration
    # =====================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # Scavenger Hunt Server Configuration
    # =====================================================================
    server_host: str = Field(
        default="0.0.0.0",
        description="Server host address to bind to",
        alias="SCAVENGER_HUNT_SERVER_HOST",
    )
    server_port: int = Field(
        default=3001,
        description="Server port number",
        alias="SCAVENGER_HUNT_SERVER_PORT",
    )
    log_level: str = Field(
        default="INFO",
        description="Server logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="SCAVENGER_HUNT_LOG_LEVEL",
    )
    client_url: str = Field(
        default="http://localhost:5173",
        description="Origin of the browser client, always allowed by CORS",
        alias="CLIENT_URL",
    )

    # =====================================================================
    # Database Configuration
    # =====================================================================
    database_url: str = Field(
        default="sqlite+aiosqlite:///./scavenger_hunt.db",
        description="Async connection URL for the application database",
        alias="DATABASE_URL",
    )

    # =====================================================================
    # Flat fields backing the grouped configurations below
    # =====================================================================
    jwt_secret: str = Field(default="fallback-secret", alias="JWT_SECRET")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    jwt_expire_hours: int = Field(default=24, alias="JWT_EXPIRE_HOURS")
    cors_origins: Optional[list[str]] = Field(default=None, alias="CORS_ORIGINS")
    generation_timeout_seconds: float = Field(default=60.0, alias="GENERATION_TIMEOUT_SECONDS")
    image_base_url: str = Field(default="https://images.scavenger-hunt.local", alias="IMAGE_BASE_URL")
    rate_limit_enabled: bool = Field(default=True, alias="RATE_LIMIT_ENABLED")
    rate_limit_default: str = Field(default="100/15minutes", alias="RATE_LIMIT_DEFAULT")

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def jwt(self) -> JWTConfig:
        """Get JWT configuration from environment variables."""
        return JWTConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def cors(self) -> CORSConfig:
        """Get CORS configuration, always including the client origin."""
        origins = list(self.cors_origins or [])
        if self.client_url not in origins:
            origins.append(self.client_url)
        return CORSConfig(origins=origins)

    @property
    def generation(self) -> GenerationConfig:
        """Get generation pipeline configuration from environment variables."""
        return GenerationConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def rate_limit(self) -> RateLimitConfig:
        """Get rate limiting configuration from environment variables."""
        return RateLimitConfig.model_validate(self.model_dump(by_alias=True))


settings = Settings()
