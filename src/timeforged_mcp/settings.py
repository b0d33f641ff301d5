"""
Application settings with environment variable support.

All settings can be overridden via TF_* environment variables
(or a .env file in the working directory).
"""

import logging
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_SERVER_URL = "http://127.0.0.1:6175"

# Fixed per-request deadline for backend calls, in seconds
REQUEST_TIMEOUT = 10.0


logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """TimeForged MCP configuration. Built once at process start."""

    # TimeForged daemon base URL, paths are appended verbatim
    server_url: str = DEFAULT_SERVER_URL

    # Sent as X-Api-Key when non-empty
    api_key: str = ""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="TF_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)

    def warn_if_unauthenticated(self) -> bool:
        """Log a warning when no API key is configured. Returns True if warned."""
        if self.has_api_key:
            return False
        logger.warning(
            "TF_API_KEY not set. Requests will be sent without authentication."
        )
        return True
