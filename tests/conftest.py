"""Shared fixtures for the setup-dotnet test suite."""

import logging

import pytest

from constants import Constants
from common import http_client
from versioning.release_index import ReleaseIndexSource, StaticReleaseIndex

INDEX_URL = "https://example.test/releases-index.json"

RELEASES_INDEX = {
    "releases-index": [
        {"channel-version": "8.0", "latest-release": "8.0.4"},
        {"channel-version": "7.0", "latest-release": "7.0.18"},
        {"channel-version": "6.0", "latest-release": "6.0.29"},
        {"channel-version": "5.0", "latest-release": "5.0.17"},
        {"channel-version": "3.1", "latest-release": "3.1.32"},
        {"channel-version": "3.0", "latest-release": "3.0.3"},
    ]
}


class CountingReleaseIndex(ReleaseIndexSource):
    """Wraps a static index and records how often it was fetched."""

    def __init__(self, document, url=INDEX_URL):
        self.url = url
        self._static = StaticReleaseIndex(document, url)
        self.fetch_count = 0

    def fetch(self):
        self.fetch_count += 1
        return self._static.fetch()


@pytest.fixture(autouse=True)
def restore_constants():
    """Undo Constants overrides and drop cached HTTP responses after each test."""
    saved = {k: v for k, v in vars(Constants).items() if k.isupper()}
    http_client.clear_cache()
    yield
    for key in [k for k in vars(Constants) if k.isupper()]:
        if key not in saved:
            delattr(Constants, key)
    for key, value in saved.items():
        setattr(Constants, key, value)
    http_client.clear_cache()


@pytest.fixture(autouse=True)
def restore_logging():
    """main() reconfigures the root logger; put the test harness handlers back."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def release_index():
    return CountingReleaseIndex(RELEASES_INDEX)
