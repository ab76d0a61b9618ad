"""Core app configuration, security and logging."""

from tasklist.core.config import get_settings, settings
from tasklist.core.logging_config import configure_logging

__all__ = ["configure_logging", "get_settings", "settings"]
