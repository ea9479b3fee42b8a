"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import structlog
from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Path constants - calculated once at module load
BACKEND_ROOT = Path(__file__).parent.parent.resolve()

# Only used outside production when SECRET_KEY is not set
DEVELOPMENT_SECRET_KEY = "lexiboard-development-secret-key-not-for-production"  # noqa: S105


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Database
    DATABASE_URL: str = f"sqlite:///{BACKEND_ROOT / 'lexiboard.db'}"

    SECRET_KEY: str = ""

    # API (constants, not from env)
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "lexiboard API"
    VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # Admin account
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str = "admin"  # noqa: S105

    # Auth
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # Dictionary lookups
    DICTIONARY_API_URL: str = "https://api.dictionaryapi.dev/api/v2/entries/en"
    DICTIONARY_TIMEOUT_SECONDS: float = 10.0
    DICTIONARY_CACHE_TTL_SECONDS: int = 24 * 60 * 60
    DICTIONARY_CACHE_MAX_ENTRIES: int = 1000

    @field_validator("ADMIN_PASSWORD", mode="after")
    @classmethod
    def strip_admin_password(cls, value: str) -> str:
        """Strip whitespace from admin password."""
        return value.strip()

    @field_validator("DICTIONARY_API_URL", mode="after")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @model_validator(mode="after")
    def validate_secret_key(self) -> "Settings":
        """Require a real secret in production; use a fixed one elsewhere."""
        if not self.SECRET_KEY:
            if self.ENVIRONMENT == "production":
                msg = "SECRET_KEY is required when ENVIRONMENT is 'production'"
                raise ValueError(msg)
            self.SECRET_KEY = DEVELOPMENT_SECRET_KEY
        return self


def configure_logging(environment: str = "development") -> None:
    """Configure structured logging with structlog."""
    # Determine if we should use JSON output (production) or console output (dev)
    use_json = environment == "production"

    # Configure stdlib logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if environment == "development" else logging.INFO,
    )

    # Configure structlog
    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
