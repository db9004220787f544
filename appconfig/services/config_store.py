"""
Config Store
============

Process-wide access to the single ConfigRecord.

States:
- Uninitialized: no record exists yet
- Initialized: the record exists; it is never replaced or torn down

The first call to ``ConfigStore.get_instance()`` moves the store from
Uninitialized to Initialized. Every later call returns the same object,
so a change made through one reference is seen through all of them.

Usage:
    from appconfig.services.config_store import ConfigStore

    config = ConfigStore.get_instance()
    config.set_api_url("https://api.new-example.com")
    assert ConfigStore.get_instance().get_api_url() == "https://api.new-example.com"
"""

import threading
from typing import Optional

from appconfig.core.logging import get_logger
from appconfig.models.config_record import ConfigRecord

logger = get_logger(__name__)


# ========================================
# Singleton Instance
# ========================================

_config_record: Optional[ConfigRecord] = None
_init_lock = threading.Lock()


class ConfigStore:
    """Static accessor for the shared ConfigRecord."""

    @staticmethod
    def get_instance() -> ConfigRecord:
        """
        Get the shared config record, creating it on first use.

        Returns:
            The same ConfigRecord on every call within the process
        """
        global _config_record

        if _config_record is None:
            with _init_lock:
                # Another thread may have won the race while we waited.
                if _config_record is None:
                    _config_record = ConfigRecord()
                    logger.debug("config_record_created", api_url=_config_record.api_url)

        return _config_record

    @staticmethod
    def is_initialized() -> bool:
        """True once the shared record has been created."""
        return _config_record is not None


# ========================================
# Convenience Functions
# ========================================

def get_config_store() -> ConfigRecord:
    """Get the shared config record (same as ``ConfigStore.get_instance()``)."""
    return ConfigStore.get_instance()


def is_initialized() -> bool:
    """True once the shared record has been created."""
    return ConfigStore.is_initialized()


def get_api_url() -> str:
    """Read the API URL from the shared record."""
    return ConfigStore.get_instance().get_api_url()


def set_api_url(new_url: str) -> None:
    """Write the API URL on the shared record."""
    ConfigStore.get_instance().set_api_url(new_url)
