"""Core package - configuration, logging, and extension loading."""

from .config import Settings, get_settings
from .extensions import load_extensions
from .logging_config import configure_logging

__all__ = [
    "Settings",
    "get_settings",
    "load_extensions",
    "configure_logging",
]
