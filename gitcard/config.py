"""Configuration management using Pydantic Settings."""

from enum import Enum

from pydantic import field_validator
from pydantic_settings import BaseSettings


class LogFormat(str, Enum):
    """Log output format."""
    JSON = "json"
    CONSOLE = "console"


class GitCardConfig(BaseSettings):
    """Configuration for the gitcard loader, views and server."""

    # Profile source
    username: str = "anuj8553"
    api_base_url: str = "https://api.github.com"

    # HTTP settings
    request_timeout_seconds: float | None = 10.0
    user_agent: str = "gitcard"

    # Rendering
    avatar_width: int = 300

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    # Logging
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.CONSOLE

    model_config = {
        "env_prefix": "GITCARD_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("username")
    @classmethod
    def _strip_username(cls, value: str) -> str:
        value = value.strip().lstrip("@")
        if not value:
            raise ValueError("username must not be empty")
        return value

    @property
    def profile_url(self) -> str:
        """Endpoint of the configured user's public profile."""
        return f"{self.api_base_url.rstrip('/')}/users/{self.username}"
