"""Settings for readme-forge, loaded with pydantic-settings.

Values come from ``README_FORGE_*`` environment variables or a ``.env`` file.
Generation parameters (model, temperature, token ceiling) are fixed constants
in :mod:`readme_forge.prompts` and are not configurable here.

Usage:
    from readme_forge.config import get_settings

    settings = get_settings()
    store = JsonFileStore(settings.credential_store_path)
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_BASE_URL = "https://api.groq.com/openai/v1"
DEFAULT_STORE_PATH = Path.home() / ".config" / "readme-forge" / "storage.json"


class Settings(BaseSettings):
    """Application settings.

    All fields are optional with sensible defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="README_FORGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging configuration
    log_format: Literal["json", "console"] = Field(
        default="console",
        description="Log output format",
    )
    log_level: str = Field(
        default="WARNING",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )

    # Generation endpoint
    api_base_url: str = Field(
        default=DEFAULT_API_BASE_URL,
        description="Base URL of the OpenAI-compatible chat completion API",
        examples=["https://api.groq.com/openai/v1"],
    )
    request_timeout: float = Field(
        default=60.0,
        gt=0,
        description="HTTP timeout in seconds for the generation request",
    )

    # Credential cache
    credential_store_path: Path = Field(
        default=DEFAULT_STORE_PATH,
        description="JSON file holding the cached API key",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return upper_v


def get_settings() -> Settings:
    return Settings()
