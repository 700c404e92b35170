# locloom/config.py
from functools import lru_cache

from pydantic import Field, PositiveFloat, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    DEFAULT_BACKOFF_FACTOR,
    DEFAULT_RETRIES,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    LOC_API_BASE_URL,
)
from .exceptions import ConfigurationError


class LocApiSettings(BaseSettings):
    """
    Manages user-configurable settings for the locloom client, loaded from
    environment variables (prefixed with 'LOC_API_') or a .env file.

    The base URL set here sits between an explicit `LocClient(base_url=...)`
    argument and the built-in production default.
    """

    model_config = SettingsConfigDict(
        env_file=(".env", "secrets.env"),  # Look in both .env and secrets.env
        env_file_encoding="utf-8",
        # Environment variables should be prefixed, e.g., LOC_API_BASE_URL
        env_prefix="LOC_API_",
        extra="ignore",  # Ignore extra fields found in environment
        case_sensitive=False,  # Allow LOC_API_base_url etc.
    )

    base_url: str = Field(
        default=LOC_API_BASE_URL,
        description="Base URL of the Library of Congress API",
    )

    # --- Client Behavior Settings ---
    request_timeout: PositiveFloat = Field(
        default=DEFAULT_TIMEOUT, description="Default request timeout in seconds"
    )
    max_retries: int = Field(
        default=DEFAULT_RETRIES,
        ge=0,
        description="Maximum number of retries for failed requests",
    )
    backoff_factor: float = Field(
        default=DEFAULT_BACKOFF_FACTOR,
        ge=0,
        description="Backoff factor for retries (seconds)",
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-Agent header for requests",
    )


# Create a single, cached instance of settings
@lru_cache
def get_settings() -> LocApiSettings:
    """
    Provides access to the application settings.

    Settings are loaded from environment variables (prefixed with 'LOC_API_')
    or .env/secrets.env files. The instance is cached for performance.

    Returns:
        LocApiSettings: The application settings instance.

    Raises:
        ConfigurationError: If an environment value fails validation.
    """
    try:
        return LocApiSettings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid locloom settings: {e}") from e
