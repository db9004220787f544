"""Data models."""

from appconfig.models.config_record import ConfigRecord

__all__ = [
    "ConfigRecord",
]
