"""
Settings and logging configuration.
"""

from .logging import configure_logging
from .settings import GridSettings, get_settings

__all__ = ["GridSettings", "get_settings", "configure_logging"]
