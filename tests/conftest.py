"""Root pytest configuration for all tests."""

import logging

import pytest

# atlassian-python-api logs every failed request at ERROR level, which is
# expected noise in tests that exercise 4xx translation.
logging.getLogger("atlassian").setLevel(logging.WARNING)


@pytest.fixture(autouse=True)
def clean_confluence_env(monkeypatch):
    """Keep a developer's real .env from leaking into unit tests."""
    for name in (
        "CONFLUENCE_URL",
        "CONFLUENCE_USER",
        "CONFLUENCE_API_TOKEN",
        "CONFLUENCE_TIMEOUT",
        "CONFLUENCE_CLOUD",
    ):
        monkeypatch.delenv(name, raising=False)
