"""
Services Package
================

Available services:
- ConfigStore: process-wide singleton holding the API base URL
"""

from appconfig.services.config_store import (
    ConfigStore,
    get_config_store,
    get_api_url,
    set_api_url,
    is_initialized,
)

__all__ = [
    "ConfigStore",
    "get_config_store",
    "get_api_url",
    "set_api_url",
    "is_initialized",
]
