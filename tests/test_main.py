"""Tests for the demo program."""

import pytest

from appconfig.main import main


def test_demo_output(capsys: pytest.CaptureFixture[str]) -> None:
    """
    Given: A fresh process
    When: The demo runs
    Then: It prints the identity check and the updated URL, nothing else
    """
    main()

    captured = capsys.readouterr()
    assert captured.out == "true\nhttps://api.new-example.com\n"
