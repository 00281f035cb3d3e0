"""Checks that the benchmarked pages respond correctly."""
import logging
import requests

from ab_gnuplot.const import HTTP_SUCCESS
from .constants import BenchmarkConstants
from .exceptions import ResponseCheckError
from .models import Site


# Configure logging
logger = logging.getLogger(__name__)


class ResponseChecker:
    """Sends a single request to a site, requiring a 200 response."""

    def __init__(self, timeout: float = BenchmarkConstants.DEFAULT_TIMEOUT):
        self.timeout = timeout

    def check(self, session: requests.Session, site: Site) -> None:
        """
        Send a GET request to the site (redirects are not followed).

        Args:
            session: Requests session.
            site: The site to be checked.

        Raises:
            ResponseCheckError: If the request fails or the status code is not 200.
        """
        url = site.target_url
        logger.info(f"Checking the response of {url}")
        try:
            response = session.get(url, timeout=self.timeout, allow_redirects=False)
        except requests.RequestException as e:
            raise ResponseCheckError(f"Request to {url} failed: {e}") from e
        if response.status_code != HTTP_SUCCESS:
            raise ResponseCheckError(
                f"{url} responded with HTTP {response.status_code} {response.reason or ''}".rstrip()
                + f" instead of {HTTP_SUCCESS}"
            )
