"""Configuration module for application settings."""

from .settings import Settings, get_settings
from .logger import setup_logger, get_logger, ROOT_LOGGER_NAME

__all__ = ["Settings", "get_settings", "setup_logger", "get_logger", "ROOT_LOGGER_NAME"]
