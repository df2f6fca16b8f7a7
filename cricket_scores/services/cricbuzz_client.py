"""HTTP client for the Cricbuzz API on RapidAPI"""
from typing import Any, Dict, Optional
import requests

from ..errors import FetchError
from ..utils.logger import setup_logger

logger = setup_logger(__name__)


class CricbuzzClient:
    """Fetches JSON documents from Cricbuzz endpoints"""

    def __init__(
        self,
        api_key: str,
        api_host: str,
        base_url: Optional[str] = None,
        timeout: float = 30,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize Cricbuzz client

        Args:
            api_key: RapidAPI key
            api_host: RapidAPI host, e.g. 'cricbuzz-cricket.p.rapidapi.com'
            base_url: Override for the API base URL (defaults to https://<api_host>)
            timeout: Request timeout in seconds
            session: Optional requests session to send requests with
        """
        self.api_host = api_host
        self.base_url = (base_url or f"https://{api_host}").rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "X-RapidAPI-Key": api_key,
            "X-RapidAPI-Host": api_host,
            "Accept": "application/json",
        })

    def fetch_json(self, endpoint: str) -> Dict[str, Any]:
        """
        Fetch and decode one endpoint

        Args:
            endpoint: Path relative to the base URL, e.g. 'matches/v1/live'

        Returns:
            Decoded JSON document

        Raises:
            FetchError: On transport failure, HTTP error status or a non-JSON body
        """
        url = f"{self.base_url}/{endpoint.lstrip('/')}"

        try:
            logger.debug(f"Fetching {url}")
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            logger.debug(f"HTTP error from {url}: {e}")
            raise FetchError(endpoint, str(e), status_code=status) from e
        except requests.RequestException as e:
            logger.debug(f"Request to {url} failed: {e}")
            raise FetchError(endpoint, str(e)) from e

        # The API answers 204 with no body when a listing is empty
        if not response.content:
            return {}

        try:
            return response.json()
        except ValueError as e:
            raise FetchError(endpoint, f"Response is not valid JSON: {e}") from e
