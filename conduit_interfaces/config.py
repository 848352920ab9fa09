"""
Configuration management using pydantic-settings.
Loads from conduit.yaml, .env, and environment variables.
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from conduit_interfaces.output.formatters import OutputFormat

# Load .env file at module import
load_dotenv()

DEFAULT_CONFIG_PATH = Path("conduit.yaml")


class OutputSettings(BaseSettings):
    """Output format settings shared by every command."""

    model_config = SettingsConfigDict(
        env_prefix="CONDUIT_OUTPUT_",
        extra="ignore",
    )

    default_format: OutputFormat = Field(
        default=OutputFormat.TERMINAL,
        description="Format used when --format is not given",
    )
    json_indent: int = Field(default=4, ge=0, description="Indentation for JSON output")
    ensure_ascii: bool = Field(default=False, description="Escape non-ASCII characters in JSON output")
    auto_json_when_piped: bool = Field(
        default=True,
        description="Switch terminal output to JSON when stdout is not a TTY",
    )

    @field_validator("default_format", mode="before")
    @classmethod
    def _lowercase_format(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.lower()
        return value


class LoggingSettings(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(
        env_prefix="CONDUIT_LOG_",
        extra="ignore",
    )

    level: str = Field(default="warning", description="Console log level")
    file: Path | None = Field(default=None, description="Optional log file path")


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="CONDUIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    output: OutputSettings = Field(default_factory=OutputSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    debug: bool = Field(default=False)

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Settings":
        """Load settings from conduit.yaml and environment."""
        config_data: dict[str, Any] = {}

        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH

        if config_path.exists():
            with open(config_path, encoding="utf-8") as f:
                yaml_content: Any = yaml.safe_load(f)
                yaml_config: dict[str, Any] = yaml_content or {}

            if not isinstance(yaml_config, dict):
                logging.getLogger(__name__).warning(
                    "Ignoring %s: expected a mapping at the top level", config_path
                )
                yaml_config = {}

            # Map yaml structure to settings
            if "output" in yaml_config:
                config_data["output"] = OutputSettings(**yaml_config["output"])
            if "logging" in yaml_config:
                config_data["logging"] = LoggingSettings(**yaml_config["logging"])
            if "debug" in yaml_config:
                config_data["debug"] = yaml_config["debug"]

        return cls(**config_data)


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reload_settings(config_path: Path | None = None) -> Settings:
    """Reload settings from config."""
    global _settings
    _settings = Settings.load(config_path)
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() reloads them."""
    global _settings
    _settings = None
