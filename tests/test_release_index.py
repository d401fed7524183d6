"""Tests for release index sources and latest-channel lookup."""

import json
from unittest.mock import patch

import pytest

from conftest import RELEASES_INDEX
from constants import Constants
from errors import ChannelNotFoundError, TransportError
from versioning.models import ReleaseIndexEntry
from versioning.release_index import (
    FileReleaseIndex,
    HttpReleaseIndex,
    StaticReleaseIndex,
    find_latest_channel,
    parse_releases_index,
)


class TestParseReleasesIndex:
    """Tests for document parsing."""

    def test_keeps_document_order(self):
        entries = parse_releases_index(RELEASES_INDEX, "u")
        assert [e.channel_version for e in entries] == ["8.0", "7.0", "6.0", "5.0", "3.1", "3.0"]

    def test_skips_records_without_channel(self):
        doc = {"releases-index": [{"latest-release": "1.0.0"}, {"channel-version": "2.1"}, "junk"]}
        assert parse_releases_index(doc, "u") == [ReleaseIndexEntry("2.1")]

    @pytest.mark.parametrize("doc", [{}, {"releases-index": {}}, [], None])
    def test_bad_shape_raises(self, doc):
        with pytest.raises(TransportError, match="Unexpected releases index format"):
            parse_releases_index(doc, "https://example.test/index.json")


class TestFindLatestChannel:
    """Tests for major-version matching."""

    def test_major_compared_as_whole_component(self):
        entries = [ReleaseIndexEntry("10.0"), ReleaseIndexEntry("1.1")]
        assert find_latest_channel(entries, "1", "u") == "1.1"
        assert find_latest_channel(entries, "10", "u") == "10.0"

    def test_not_found_names_request_and_url(self):
        with pytest.raises(ChannelNotFoundError) as exc_info:
            find_latest_channel([ReleaseIndexEntry("8.0")], "99", "https://idx", requested="99.x")
        assert str(exc_info.value) == "Could not find info for version 99.x at https://idx"


class TestHttpReleaseIndex:
    """Tests for the HTTPS-backed source."""

    def test_defaults_to_configured_url(self):
        assert HttpReleaseIndex().url == Constants.RELEASES_INDEX_URL

    @patch("versioning.release_index.get_json")
    def test_fetch_parses_response(self, mock_get_json):
        mock_get_json.return_value = RELEASES_INDEX
        index = HttpReleaseIndex("https://example.test/index.json")

        assert index.latest_channel("6") == "6.0"
        mock_get_json.assert_called_once_with("https://example.test/index.json")

    @patch("versioning.release_index.get_json")
    def test_transport_error_propagates(self, mock_get_json):
        mock_get_json.side_effect = TransportError("boom", url="u", attempts=3)
        with pytest.raises(TransportError):
            HttpReleaseIndex("u").latest_channel("6")


class TestFileReleaseIndex:
    """Tests for the local-file source."""

    def test_reads_local_document(self, tmp_path):
        path = tmp_path / "releases-index.json"
        path.write_text(json.dumps(RELEASES_INDEX), encoding="utf-8")
        assert FileReleaseIndex(str(path)).latest_channel("5") == "5.0"

    def test_missing_file(self, tmp_path):
        with pytest.raises(TransportError, match="not found"):
            FileReleaseIndex(str(tmp_path / "nope.json")).fetch()

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "releases-index.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(TransportError):
            FileReleaseIndex(str(path)).fetch()


class TestStaticReleaseIndex:
    """Tests for the in-memory source."""

    def test_fetch_returns_copy(self):
        index = StaticReleaseIndex(RELEASES_INDEX)
        first = index.fetch()
        first.clear()
        assert len(index.fetch()) == 6
