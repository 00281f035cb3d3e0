"""Unit tests for the response checker."""

from unittest.mock import MagicMock

import pytest
import requests

from ab_gnuplot.benchmark.exceptions import ResponseCheckError
from ab_gnuplot.benchmark.models import Site
from ab_gnuplot.benchmark.request_session_manager import RequestSessionManager
from ab_gnuplot.benchmark.response_checker import ResponseChecker
from ..test_const import TEST_URL


class TestResponseChecker:
    """Test ResponseChecker."""

    def test_ok(self, mock_session):
        ResponseChecker().check(mock_session, Site(TEST_URL))
        mock_session.get.assert_called_once_with(TEST_URL, timeout=10, allow_redirects=False)

    def test_uses_request_url(self, mock_session):
        ResponseChecker(timeout=3).check(mock_session, Site(TEST_URL, request_url="http://10.0.0.1/"))
        mock_session.get.assert_called_once_with("http://10.0.0.1/", timeout=3, allow_redirects=False)

    @pytest.mark.parametrize("status_code", [201, 204, 301, 302, 404, 500])
    def test_status_not_200(self, mock_session, status_code):
        """Test that every status code but 200 is an error, redirects included."""
        mock_session.get.return_value.status_code = status_code
        with pytest.raises(ResponseCheckError) as exc_info:
            ResponseChecker().check(mock_session, Site(TEST_URL))
        assert str(status_code) in str(exc_info.value)

    def test_transport_failure(self):
        session = MagicMock()
        session.get.side_effect = requests.ConnectionError("Connection refused")
        with pytest.raises(ResponseCheckError) as exc_info:
            ResponseChecker().check(session, Site(TEST_URL))
        assert "Connection refused" in str(exc_info.value)

    def test_timeout(self):
        session = MagicMock()
        session.get.side_effect = requests.Timeout("timed out")
        with pytest.raises(ResponseCheckError):
            ResponseChecker().check(session, Site(TEST_URL))


class TestRequestSessionManager:
    """Test RequestSessionManager."""

    def test_no_retries_by_default(self):
        session = RequestSessionManager.create_session_with_retries()
        adapter = session.get_adapter("http://example.test/")
        assert adapter.max_retries.total == 0
        session.close()

    def test_custom_retries(self):
        session = RequestSessionManager.create_session_with_retries(3)
        assert session.get_adapter("https://example.test/").max_retries.total == 3
        session.close()
