"""Library configuration and settings.

Handles environment variables and `.env` files for the memcached client.
"""
import logging
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Load environment variables (process environment wins over .env)
ROOT = Path(__file__).resolve().parents[2]
load_dotenv(dotenv_path=ROOT / ".env", override=False)


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    environment: str = Field(default="development", alias="MEMCACHED_ENVIRONMENT")

    # Logging
    log_level: str = Field(default="WARNING", alias="MEMCACHED_LOG_LEVEL")
    log_json: bool = Field(default=False, alias="MEMCACHED_LOG_JSON")

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )

    def validate_required_settings(self):
        """Validate that settings hold usable values."""
        if self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(
                f"MEMCACHED_LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}, "
                f"got {self.log_level!r}."
            )


def get_settings(env_file: Optional[str] = ".env") -> Settings:
    """Build a fresh, validated settings instance.

    Args:
        env_file: Optional dotenv file to read in addition to the environment

    Returns:
        Settings instance

    Raises:
        ValueError: If a setting holds an unusable value
    """
    current = Settings(_env_file=env_file)
    current.validate_required_settings()
    return current


def check_environment(current: Settings) -> None:
    """Validate settings according to the deployment environment.

    Skipped when ``environment`` is ``"test"``. A bad value only warns in
    development and staging so partial setups keep working, but raises in
    ``"production"``.

    Args:
        current: Settings to check

    Raises:
        ValueError: If validation fails and the environment is production
    """
    if current.environment == "test":
        return

    try:
        current.validate_required_settings()
    except ValueError as e:
        logger.warning(f"Configuration error: {e}")
        if current.environment == "production":
            raise


# Global settings instance
settings = Settings()

# Validate settings on module import (only in non-test environments)
check_environment(settings)
