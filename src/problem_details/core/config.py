# This project was developed with assistance from AI tools.
"""
Application configuration.

All settings read from environment variables with sensible local dev defaults.
A `.env` file is read from the working directory of the process, so an
installed copy picks up the application's file rather than one beside the
package.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings -- single source of truth for env-driven config."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- App --
    APP_NAME: str = "problem-details"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # -- Problem details --
    PROBLEM_DETAILS_INCLUDE_PATHS: list[str] = Field(
        default=["/"],
        description="Path prefixes whose error responses may be rewritten. '/' matches every path.",
    )
    PROBLEM_DETAILS_EXCLUDE_PATHS: list[str] = Field(
        default=[],
        description="Path prefixes never rewritten, even when included.",
    )
    INCLUDE_ERROR_DETAIL: bool = Field(
        default=False,
        description="Expose exception message and traceback in server error documents.",
    )


settings = Settings()
