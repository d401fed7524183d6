"""Tests for the retrying HTTP helpers."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from common import http_client
from constants import Constants
from errors import TransportError


def _response(status_code=200, text="{}"):
    res = MagicMock()
    res.status_code = status_code
    res.text = text
    res.headers = {"Content-Type": "application/json"}
    return res


@pytest.fixture(autouse=True)
def no_sleep():
    with patch("common.http_client.time.sleep") as mock_sleep:
        yield mock_sleep


class TestRobustGet:
    """Tests for retry and cache behaviour."""

    @patch("common.http_client.requests.get")
    def test_success_first_attempt(self, mock_get):
        mock_get.return_value = _response(200, '{"a": 1}')

        status, headers, text = http_client.robust_get("https://example.test/x")

        assert status == 200
        assert text == '{"a": 1}'
        assert mock_get.call_count == 1
        _, kwargs = mock_get.call_args
        assert kwargs["timeout"] == Constants.REQUEST_TIMEOUT
        assert kwargs["headers"]["User-Agent"] == Constants.USER_AGENT

    @patch("common.http_client.requests.get")
    def test_retries_transient_errors_then_succeeds(self, mock_get, no_sleep):
        mock_get.side_effect = [
            requests.Timeout("slow"),
            requests.ConnectionError("reset"),
            _response(200, "ok"),
        ]

        status, _, text = http_client.robust_get("https://example.test/x")

        assert (status, text) == (200, "ok")
        assert mock_get.call_count == 3
        assert no_sleep.call_count == 2

    @patch("common.http_client.requests.get")
    def test_retries_gateway_errors(self, mock_get):
        mock_get.side_effect = [_response(503, ""), _response(200, "ok")]
        assert http_client.robust_get("https://example.test/x")[0] == 200
        assert mock_get.call_count == 2

    @patch("common.http_client.requests.get")
    def test_raises_after_retry_budget(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("down")

        with pytest.raises(TransportError) as exc_info:
            http_client.robust_get("https://user:pw@example.test/x?sig=1")

        assert mock_get.call_count == Constants.HTTP_RETRY_MAX
        assert exc_info.value.attempts == Constants.HTTP_RETRY_MAX
        assert "pw" not in str(exc_info.value)

    @patch("common.http_client.requests.get")
    def test_retry_max_is_configurable(self, mock_get):
        Constants.HTTP_RETRY_MAX = 5
        mock_get.side_effect = requests.Timeout("slow")
        with pytest.raises(TransportError):
            http_client.robust_get("https://example.test/x")
        assert mock_get.call_count == 5

    @patch("common.http_client.requests.get")
    def test_successful_response_is_cached(self, mock_get):
        mock_get.return_value = _response(200, "ok")
        http_client.robust_get("https://example.test/x")
        http_client.robust_get("https://example.test/x")
        assert mock_get.call_count == 1

        http_client.clear_cache()
        http_client.robust_get("https://example.test/x")
        assert mock_get.call_count == 2


class TestGetJson:
    """Tests for JSON decoding."""

    @patch("common.http_client.requests.get")
    def test_decodes_json(self, mock_get):
        mock_get.return_value = _response(200, '{"releases-index": []}')
        assert http_client.get_json("https://example.test/x") == {"releases-index": []}
        _, kwargs = mock_get.call_args
        assert kwargs["headers"]["Accept"] == "application/json"

    @patch("common.http_client.requests.get")
    def test_non_200_raises_without_retry(self, mock_get):
        mock_get.return_value = _response(404, "missing")
        with pytest.raises(TransportError, match="404"):
            http_client.get_json("https://example.test/x")
        assert mock_get.call_count == 1

    @patch("common.http_client.requests.get")
    def test_bad_json_raises(self, mock_get):
        mock_get.return_value = _response(200, "<html>bad</html>")
        with pytest.raises(TransportError, match="not valid JSON"):
            http_client.get_json("https://example.test/x")
