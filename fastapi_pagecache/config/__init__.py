"""Settings and logging configuration."""

from .logger import config_logger
from .settings import Settings, settings

__all__ = ["Settings", "config_logger", "settings"]
