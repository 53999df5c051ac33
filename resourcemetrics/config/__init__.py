"""Configuration loading for resourcemetrics."""

from resourcemetrics.config.config_manager import ConfigManager

__all__ = ["ConfigManager"]
