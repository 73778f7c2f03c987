"""Library settings"""

import logging
import os
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API Configuration
    api_base_url: str = "https://api.notion.com/v1"
    api_access_token: str = ""

    # Transport Configuration
    request_timeout: float = 30.0  # seconds
    max_retries: int = 3
    user_agent: str = "endpointspec/0.1.0"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


def validate_environment() -> None:
    """
    Validate environment variables on startup.

    Access tokens can also be passed to the client programmatically, so a
    missing token only produces a warning.
    """
    if os.getenv("TESTING") == "true":
        logger.info("Skipping environment validation in test mode")
        return

    settings = get_settings()

    if not settings.api_access_token:
        logger.warning(
            "No API access token configured. Pass one to HTTPClient or set "
            "API_ACCESS_TOKEN to call endpoints that require authentication."
        )
