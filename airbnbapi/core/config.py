"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from
environment variables (prefixed with ``AIRBNB_``) and an optional ``.env``
file in the working directory.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic
- Every field has a default, the library works without any configuration

Usage:
    from airbnbapi.core.config import get_settings

    settings = get_settings()
    base_url = settings.api_base_url

    # Explicit configuration (tests, multiple accounts)
    settings = Settings(currency="EUR", locale="de-DE")
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from airbnbapi.core.constants import (
    AIRBNB_API_BASE_URL,
    AIRBNB_PUBLIC_API_KEY,
    DEFAULT_CURRENCY,
    DEFAULT_LOCALE,
    DEFAULT_USER_AGENT,
    PROVIDER_TIMEOUT_DEFAULT,
)
from airbnbapi.core.enums import Environment

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Library settings (flat structure).

    Configuration precedence:
        1. Keyword arguments passed to ``Settings(...)``
        2. Environment variables (``AIRBNB_*``)
        3. ``.env`` file
        4. Default values
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Upstream API
    api_base_url: str = Field(
        default=AIRBNB_API_BASE_URL,
        description="Upstream API base URL",
    )
    api_key: str = Field(
        default=AIRBNB_PUBLIC_API_KEY,
        description="Client key sent as the `key` query parameter",
    )
    currency: str = Field(
        default=DEFAULT_CURRENCY,
        description="Currency sent with every request (ISO 4217)",
    )
    locale: str = Field(
        default=DEFAULT_LOCALE,
        description="Locale sent with every request",
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-Agent header for authenticated requests",
    )
    timeout: float = Field(
        default=PROVIDER_TIMEOUT_DEFAULT,
        description="HTTP request timeout in seconds",
    )

    model_config = SettingsConfigDict(
        env_prefix="AIRBNB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("api_base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """
        Remove trailing slashes from URLs.

        Args:
            v: URL string.

        Returns:
            str: URL without trailing slash.
        """
        return v.rstrip("/")

    @field_validator("currency")
    @classmethod
    def normalize_currency(cls, v: str) -> str:
        """Upper-case the currency code."""
        return v.strip().upper()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate the log level name.

        Args:
            v: Log level name, any case.

        Returns:
            str: Upper-cased level name.

        Raises:
            ValueError: If the level is not one of the standard five.
        """
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("timeout must be greater than 0")
        return v

    @property
    def default_query(self) -> dict[str, str]:
        """
        Query parameters the upstream expects on every request.

        Returns:
            dict[str, str]: ``key``, ``currency`` and ``locale``.
        """
        return {
            "key": self.api_key,
            "currency": self.currency,
            "locale": self.locale,
        }

    # Convenience properties for environment checks
    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == Environment.TESTING

    @property
    def is_ci(self) -> bool:
        """Check if running in CI environment."""
        return self.environment == Environment.CI

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache so the environment is read only once per process.
    Call ``get_settings.cache_clear()`` after changing the environment.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
