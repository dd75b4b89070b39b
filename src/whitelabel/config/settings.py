"""Application settings loaded from environment variables and an optional .env file."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from whitelabel.constants import ENV_FILE_PATH, MANIFEST_PATH, STRINGS_XML_PATH
from whitelabel.exceptions import ConfigurationError

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Settings for the white label CLI.

    Every field can be overridden with a ``WHITELABEL_``-prefixed environment
    variable, e.g. ``WHITELABEL_LOG_LEVEL=DEBUG``.
    """

    model_config = SettingsConfigDict(
        env_prefix="WHITELABEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: LogLevel = Field(default="WARNING", description="Logging level")
    session_file: Path = Field(
        default_factory=lambda: Path.home() / ".whitelabel" / "session.json",
        description="Editor session file holding the brand list",
    )
    output_dir: Path = Field(default=Path("."), description="Directory for exported files")

    # Installer outputs, relative to the project root
    env_file_path: str = Field(default=ENV_FILE_PATH)
    strings_xml_path: str = Field(default=STRINGS_XML_PATH)
    manifest_path: str = Field(default=MANIFEST_PATH)

    def describe(self) -> dict[str, str]:
        """Return settings as display strings, keyed by env var name."""
        return {
            "WHITELABEL_LOG_LEVEL": self.log_level,
            "WHITELABEL_SESSION_FILE": str(self.session_file),
            "WHITELABEL_OUTPUT_DIR": str(self.output_dir),
            "WHITELABEL_ENV_FILE_PATH": self.env_file_path,
            "WHITELABEL_STRINGS_XML_PATH": self.strings_xml_path,
            "WHITELABEL_MANIFEST_PATH": self.manifest_path,
        }


@lru_cache
def get_settings() -> Settings:
    """Get the cached settings instance.

    Raises:
        ConfigurationError: If an environment value is invalid.
    """
    try:
        return Settings()
    except PydanticValidationError as e:
        raise ConfigurationError("Invalid configuration values", details=str(e)) from e


def clear_settings_cache() -> None:
    """Clear the settings cache so the next call re-reads the environment."""
    get_settings.cache_clear()
