"""Process-wide singleton configuration holder."""

from appconfig.services.config_store import ConfigStore, get_config_store

__all__ = [
    "ConfigStore",
    "get_config_store",
]
