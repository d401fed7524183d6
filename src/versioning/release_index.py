"""Release index sources and latest-channel lookup.

The releases-index document lists one record per .NET channel:

    {"releases-index": [{"channel-version": "8.0", ...}, ...]}

Only ``channel-version`` is consumed. Sources are interchangeable so that
resolution can run against HTTPS, a local copy of the document, or fixture
data.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional

from common.http_client import get_json
from common.logging_utils import extra_context, is_debug_enabled, safe_url
from constants import Constants
from errors import ChannelNotFoundError, TransportError
from .models import ReleaseIndexEntry

logger = logging.getLogger(__name__)

RELEASES_KEY = "releases-index"
CHANNEL_VERSION_KEY = "channel-version"


def parse_releases_index(document: Any, url: str) -> List[ReleaseIndexEntry]:
    """Convert a decoded releases-index document into entries, keeping order.

    Raises:
        TransportError: when the document does not have the expected shape.
    """
    releases = document.get(RELEASES_KEY) if isinstance(document, dict) else None
    if not isinstance(releases, list):
        raise TransportError(
            f"Unexpected releases index format at {safe_url(url)}: missing '{RELEASES_KEY}' list",
            url=url,
        )

    entries = []
    for item in releases:
        channel = item.get(CHANNEL_VERSION_KEY) if isinstance(item, dict) else None
        if isinstance(channel, str) and channel:
            entries.append(ReleaseIndexEntry(channel_version=channel))
        else:
            logger.debug("Skipping releases index record without %s: %r", CHANNEL_VERSION_KEY, item)
    return entries


def find_latest_channel(
    entries: Iterable[ReleaseIndexEntry],
    major: str,
    url: str,
    requested: Optional[str] = None,
) -> str:
    """Return the channel of the first entry whose major equals ``major``.

    Entries are scanned in index order; no sorting is applied.

    Raises:
        ChannelNotFoundError: when no entry matches.
    """
    for entry in entries:
        if entry.major == major:
            return entry.channel_version
    raise ChannelNotFoundError(requested or major, url)


class ReleaseIndexSource(ABC):
    """Provider of release index entries."""

    url: str

    @abstractmethod
    def fetch(self) -> List[ReleaseIndexEntry]:
        """Return all entries in document order."""

    def latest_channel(self, major: str, requested: Optional[str] = None) -> str:
        """Fetch the index once and pick the first channel for ``major``."""
        channel = find_latest_channel(self.fetch(), major, self.url, requested)
        if is_debug_enabled(logger):
            logger.debug(
                "Latest channel resolved",
                extra=extra_context(
                    event="channel_lookup",
                    component="release_index",
                    outcome="success",
                    major=major,
                    channel=channel,
                    target=safe_url(self.url),
                ),
            )
        return channel


class HttpReleaseIndex(ReleaseIndexSource):
    """Release index fetched over HTTPS with the shared retrying client."""

    def __init__(self, url: Optional[str] = None):
        self.url = url or Constants.RELEASES_INDEX_URL

    def fetch(self) -> List[ReleaseIndexEntry]:
        logger.info("Fetching .NET releases index from %s", safe_url(self.url))
        return parse_releases_index(get_json(self.url), self.url)


class FileReleaseIndex(ReleaseIndexSource):
    """Release index read from a local copy of the JSON document."""

    def __init__(self, path: str):
        self.url = path

    def fetch(self) -> List[ReleaseIndexEntry]:
        try:
            with open(self.url, "r", encoding="utf-8") as fh:
                document = json.load(fh)
        except FileNotFoundError as exc:
            raise TransportError(f"Releases index file not found: {self.url}", url=self.url) from exc
        except (OSError, json.JSONDecodeError) as exc:
            raise TransportError(f"Could not read releases index file {self.url}: {exc}", url=self.url) from exc
        return parse_releases_index(document, self.url)


class StaticReleaseIndex(ReleaseIndexSource):
    """Release index backed by an in-memory document."""

    def __init__(self, document: Any, url: str = "<static>"):
        self.url = url
        self._entries = parse_releases_index(document, url)

    def fetch(self) -> List[ReleaseIndexEntry]:
        return list(self._entries)
