"""
Configuration package.

Usage:
    from appconfig.config import get_settings

    print(get_settings().log_level)
"""

from appconfig.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
