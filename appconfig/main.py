"""
Demo program for the config store.

Usage:
    python -m appconfig

Prints two lines: whether two lookups returned the same record, then the
URL read back through a third lookup after it was changed.
"""

from appconfig.core.constants import DEMO_API_URL
from appconfig.core.logging import configure_logging
from appconfig.services.config_store import ConfigStore


def main() -> None:
    configure_logging()

    config1 = ConfigStore.get_instance()
    config2 = ConfigStore.get_instance()

    print(str(config1 is config2).lower())

    config1.set_api_url(DEMO_API_URL)

    config3 = ConfigStore.get_instance()
    print(config3.get_api_url())


if __name__ == "__main__":
    main()
