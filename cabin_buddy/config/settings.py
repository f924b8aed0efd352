"""Application settings and configuration management."""
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class SelectionSettings(BaseSettings):
    """Rotation and selection-window configuration."""

    selection_days: int = 14  # Length of each primary selection window
    start_month: str = "October"  # Month primary selection opens
    first_last_option: Literal["first", "last"] = "first"

    model_config = SettingsConfigDict(env_prefix="SELECTION_")


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["json", "console"] = "json"

    model_config = SettingsConfigDict(env_prefix="LOG_")


class Settings(BaseSettings):
    """Main application settings."""

    environment: Literal["dev", "staging", "prod"] = "dev"
    debug: bool = False

    # Organization the CLI acts for; bound into log events when set
    organization_id: Optional[str] = None

    # Sub-settings
    selection: SelectionSettings = SelectionSettings()
    logging: LoggingSettings = LoggingSettings()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = Settings()
