"""Configuration for the Open Data Gateway Service.

Uses Pydantic settings for environment-based configuration. Upstream base
URLs and the map-provider API key are supplied entirely by the environment.
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Defines application environments."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class GatewaySettings(BaseSettings):
    """Configuration settings for the Open Data Gateway Service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="OPENDATA_GATEWAY_",
        case_sensitive=False,
        extra="ignore",
    )

    # Service identity
    SERVICE_NAME: str = "opendata-gateway-service"
    SERVICE_VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: Environment = Field(
        default=Environment.DEVELOPMENT,
        validation_alias="ENVIRONMENT",
        description="Runtime environment for the service",
    )

    # HTTP server configuration
    HOST: str = Field(default="0.0.0.0", description="HTTP server host")
    PORT: int = Field(default=8080, description="HTTP server port")

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")

    # CORS configuration for the map frontend
    CORS_ORIGINS: list[str] = Field(
        default=["http://localhost:5173", "http://localhost:4200", "http://localhost:3000"],
        description="Allowed CORS origins for the frontend dev servers",
    )
    CORS_ALLOW_CREDENTIALS: bool = Field(
        default=True, description="Allow credentials in CORS requests"
    )
    CORS_ALLOW_METHODS: list[str] = Field(
        default=["GET", "OPTIONS"],
        description="Allowed HTTP methods for CORS (the gateway is read-only)",
    )
    CORS_ALLOW_HEADERS: list[str] = Field(
        default=["*"], description="Allowed headers for CORS requests"
    )

    # Upstream service URLs
    CORE_SERVICE_URL: str = Field(
        default="http://localhost:8081",
        description="Core service base URL (cultural hotspots)",
    )
    MAP_SERVICE_URL: str | None = Field(
        default=None,
        description="Map service base URL; falls back to CORE_SERVICE_URL when unset",
    )

    # Third-party map provider
    GOOGLE_MAPS_API_KEY: SecretStr = Field(
        default=SecretStr(""),
        description="Google Maps API key handed to the frontend (restrict it by domain)",
    )

    # HTTP client configuration (httpx defaults)
    HTTP_CLIENT_TIMEOUT_SECONDS: float = Field(
        default=5.0,
        description="HTTP client request timeout in seconds",
    )
    HTTP_CLIENT_CONNECT_TIMEOUT_SECONDS: float = Field(
        default=5.0,
        description="HTTP client connection timeout in seconds",
    )

    @field_validator("CORE_SERVICE_URL", "MAP_SERVICE_URL")
    @classmethod
    def _strip_trailing_slash(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.rstrip("/")

    @property
    def map_service_url(self) -> str:
        """Effective map service base URL."""
        return self.MAP_SERVICE_URL or self.CORE_SERVICE_URL

    def is_development(self) -> bool:
        return self.ENVIRONMENT == Environment.DEVELOPMENT

    def is_production(self) -> bool:
        return self.ENVIRONMENT == Environment.PRODUCTION


# Global settings instance
settings = GatewaySettings()
