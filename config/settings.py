"""Application configuration settings."""

from typing import List

from pydantic import Field, ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = ConfigDict(
        env_file=".env",
        case_sensitive=False
    )

    # PWS observations API Configuration
    pws_api_key: str = Field(..., alias="PWS_API_KEY", description="Weather provider API key")
    pws_base_url: str = Field(
        default="https://api.weather.com/v2/pws/observations/current",
        alias="PWS_BASE_URL",
        description="Current PWS observations endpoint"
    )
    upstream_timeout_seconds: float = Field(
        default=10.0,
        alias="UPSTREAM_TIMEOUT_SECONDS",
        description="Upper bound on a single upstream request"
    )

    # HTTP Configuration
    cors_allow_origins: List[str] = Field(default=["*"], alias="CORS_ALLOW_ORIGINS", description="Allowed CORS origins")

    # Application Configuration
    app_host: str = Field(default="0.0.0.0", alias="APP_HOST", description="Application host")
    app_port: int = Field(default=8000, alias="APP_PORT", description="Application port")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL", description="Log level")


# Global settings instance
settings = Settings()
