"""Configuration loading, schema, defaults, and logging setup."""

from imgreview.config.loader import ConfigError, load_config
from imgreview.config.logging import configure_logging, get_logger
from imgreview.config.schema import ReviewConfig

__all__ = [
    "ConfigError",
    "ReviewConfig",
    "configure_logging",
    "get_logger",
    "load_config",
]
