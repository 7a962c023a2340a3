"""Client settings with Pydantic Settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, PositiveFloat, SecretStr, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from twitter154.errors import Twitter154Error


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    app_mode: Literal["development", "production"] = Field(
        default="development",
        alias="APP_MODE",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "silent"] = Field(
        default="INFO",
        alias="LOG_LEVEL",
    )

    # RapidAPI
    twitter154_apikey: SecretStr | None = Field(default=None, alias="TWITTER154_APIKEY")
    twitter154_host: str | None = Field(default=None, alias="TWITTER154_HOST")
    twitter154_rate_limit: PositiveFloat | None = Field(
        default=None,
        alias="TWITTER154_RATE_LIMIT",
        description="Requests per second; unset means unlimited",
    )
    twitter154_timeout: PositiveFloat = Field(default=30.0, alias="TWITTER154_TIMEOUT")

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_mode == "production"

    @property
    def is_silent(self) -> bool:
        """Check if logging should be suppressed."""
        return self.log_level == "silent"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()  # type: ignore[call-arg]


def load_settings() -> Settings:
    """Get settings, reporting a malformed environment as a configuration error.

    Raises:
        Twitter154Error: CONFIGURATION, naming every invalid variable.
    """
    try:
        return get_settings()
    except ValidationError as e:
        problems = [f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors()]
        raise Twitter154Error.configuration(problems) from e
