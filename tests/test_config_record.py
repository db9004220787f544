"""Tests for the ConfigRecord model."""

from appconfig.core.constants import DEFAULT_API_URL
from appconfig.models import ConfigRecord


class TestConfigRecord:

    def test_default_url(self) -> None:
        assert ConfigRecord().get_api_url() == DEFAULT_API_URL

    def test_set_mutates_in_place(self) -> None:
        record = ConfigRecord()
        original_id = id(record)

        record.set_api_url("https://api.new-example.com")

        assert id(record) == original_id
        assert record.api_url == "https://api.new-example.com"

    def test_repr_shows_url(self) -> None:
        assert repr(ConfigRecord()) == "<ConfigRecord(api_url='https://api.example.com')>"
