"""Manages the HTTP session used to check the responses."""
import logging
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry
from .constants import BenchmarkConstants


# Configure logging
logger = logging.getLogger(__name__)


class RequestSessionManager:
    """Manages HTTP request sessions."""

    @staticmethod
    def create_session_with_retries(max_retries: int = -1) -> requests.Session:
        """Create a requests session; by default failed requests are not retried."""
        if max_retries == -1:
            max_retries = BenchmarkConstants.DEFAULT_MAX_RETRIES
        session = requests.Session()
        retry = Retry(
            total=max_retries,
            redirect=False,
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        return session
