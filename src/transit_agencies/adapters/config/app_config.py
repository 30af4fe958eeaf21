"""12-factor configuration adapter using environment variables and a TOML agency file."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Agency sources
    agencies_file: str | None = Field(
        default=None,
        description="Path to a TOML file adding or replacing agency configurations",
    )
    include_builtin_agencies: bool = Field(
        default=True,
        description="Start from the built-in agency catalog",
    )
    enabled_agencies: str = Field(
        default="",
        description="Comma-separated agency ids to enable (e.g. 'TFI,MVG'); empty enables all",
    )

    log_level: str = Field(default="INFO", description="Log level: DEBUG, INFO, WARNING or ERROR")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the supported names."""
        if v.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v.upper()

    def get_enabled_agencies(self) -> list[str]:
        """Enabled agency names, upper-cased, in declaration order."""
        return [name.strip().upper() for name in self.enabled_agencies.split(",") if name.strip()]

    def load_agencies_file(self) -> dict[str, Any]:
        """Load and parse the TOML agency file.

        Returns an empty document when no file is configured.

        Raises:
            FileNotFoundError: If the configured file does not exist.
            tomllib.TOMLDecodeError: If the file is not valid TOML.
        """
        if not self.agencies_file:
            return {}

        config_path = Path(self.agencies_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Agency file not found: {config_path}")

        with open(config_path, "rb") as f:
            return tomllib.load(f)
