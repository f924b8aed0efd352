"""Configuration package."""

from cabin_buddy.config.logging import configure_logging, get_logger
from cabin_buddy.config.settings import Settings, settings

__all__ = ["settings", "Settings", "configure_logging", "get_logger"]
