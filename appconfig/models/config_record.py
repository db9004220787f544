"""
Config Record
=============

The single mutable holder for the API base URL.

Only one of these is meant to exist per process; get it through
``appconfig.services.config_store.ConfigStore.get_instance()`` rather than
constructing it directly.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from appconfig.core.constants import DEFAULT_API_URL
from appconfig.core.logging import get_logger

logger = get_logger(__name__)


class ConfigRecord(BaseModel):
    """
    Holds the current API base URL.

    The URL is stored verbatim: no trimming, normalization or URL checks.
    Any ``str`` is accepted, including the empty string. Anything else is
    rejected with ``pydantic.ValidationError`` and the stored value is kept.

    Example:
        record = ConfigRecord()
        record.get_api_url()          # "https://api.example.com"
        record.set_api_url("")
        record.get_api_url()          # ""
    """

    model_config = ConfigDict(validate_assignment=True)

    api_url: StrictStr = Field(default=DEFAULT_API_URL)

    def get_api_url(self) -> str:
        """Return the current API URL."""
        return self.api_url

    def set_api_url(self, new_url: str) -> None:
        """
        Overwrite the API URL in place.

        Args:
            new_url: Any string; stored as given

        Raises:
            pydantic.ValidationError: If new_url is not a str
        """
        old_url = self.api_url
        self.api_url = new_url
        logger.debug("api_url_updated", old=old_url, new=new_url)

    def __repr__(self) -> str:
        return f"<ConfigRecord(api_url='{self.api_url}')>"
