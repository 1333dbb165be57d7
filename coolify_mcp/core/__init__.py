"""Core infrastructure utilities."""

from .config import CoolifySettings, get_settings
from .coolify_client import CoolifyClient
from .logging_config import configure_logging, get_logger

__all__ = [
    "CoolifyClient",
    "CoolifySettings",
    "configure_logging",
    "get_logger",
    "get_settings",
]
