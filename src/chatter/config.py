# ABOUTME: Configuration management for Chatter using pydantic-settings
# ABOUTME: Loads settings from environment variables, .env files and the chat logs JSON file

import json
import logging
from pathlib import Path
from zoneinfo import ZoneInfo

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from chatter.chat.log_config import DEFAULT_LOG_DIRECTORY, Configuration

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Chatter configuration settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="CHATTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Output
    log_directory: Path = DEFAULT_LOG_DIRECTORY
    chat_logs_file: Path | None = None  # JSON file with the chat log groups

    # Time stamps are taken in this zone
    timezone: str = "UTC"

    # Player settings
    default_home_world: str = ""

    # Diagnostics
    debug: bool = False
    log_level: str = "INFO"

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate the timezone string is a known IANA timezone."""
        try:
            ZoneInfo(v)
            return v
        except (KeyError, ValueError) as e:
            raise ValueError(f"Invalid timezone: {v}") from e

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Invalid log level: {v}")
        return level

    def validate_ready(self) -> list[str]:
        """Check if all required settings are usable. Returns list of errors."""
        errors = []

        if self.chat_logs_file and not self.chat_logs_file.is_file():
            errors.append(f"CHATTER_CHAT_LOGS_FILE does not exist: {self.chat_logs_file}")

        if self.log_directory.exists() and not self.log_directory.is_dir():
            errors.append(f"CHATTER_LOG_DIRECTORY is not a directory: {self.log_directory}")

        return errors

    def get_configuration(self) -> Configuration:
        """
        Build the chat log Configuration.

        Debug mode and the default log directory come from the environment
        unless the chat logs file sets them.

        Raises:
            ValueError: If the chat logs file is not valid JSON
            pydantic.ValidationError: If the chat logs file is not a valid configuration
        """
        data: dict = {"is_debug": self.debug, "log_directory": self.log_directory}

        if self.chat_logs_file:
            data.update(json.loads(self.chat_logs_file.read_text(encoding="utf-8")))
            logger.info(f"Loaded chat log configuration from {self.chat_logs_file}")

        return Configuration.model_validate(data)


def get_settings() -> Settings:
    """Get settings instance."""
    return Settings()
