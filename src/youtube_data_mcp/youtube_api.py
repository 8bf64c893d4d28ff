"""
YouTube Data API Integration - Thin client over the v3 REST endpoints.

Requires a YouTube Data API v3 key from Google Cloud Console.
"""

import logging
from typing import Any, Optional

import requests
import urllib3
from requests.adapters import HTTPAdapter

from .errors import MissingCredential, RemoteCallFailed


logger = logging.getLogger(__name__)


class YouTubeAPI:
    """
    YouTube Data API v3 client.

    Each call to get() is a single GET against one resource endpoint
    (videos, search, channels, playlists, playlistItems). Responses are
    returned as decoded JSON, unmodified.
    """

    BASE_URL = "https://www.googleapis.com/youtube/v3"

    def __init__(
        self,
        api_key: Optional[str],
        timeout: float = 30.0,
        ssl_bypass: bool = False,
    ):
        """
        Initialize YouTube API client.

        Args:
            api_key: YouTube Data API key
            timeout: Per-request timeout in seconds
            ssl_bypass: Bypass SSL certificate verification (for corporate environments)

        Raises:
            MissingCredential: If no API key is given
        """
        if not api_key:
            raise MissingCredential()

        self.api_key = api_key
        self.timeout = timeout
        self.ssl_bypass = ssl_bypass
        self._session = None

    @property
    def session(self) -> requests.Session:
        """Lazy initialization of requests session."""
        if self._session is None:
            self._session = requests.Session()
            if self.ssl_bypass:
                urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
                self._session.verify = False
            adapter = HTTPAdapter()
            self._session.mount('http://', adapter)
            self._session.mount('https://', adapter)
        return self._session

    @staticmethod
    def _encode_params(params: dict[str, Any]) -> dict[str, Any]:
        """Drop empty values and join list values with commas, as the API expects."""
        encoded = {}
        for name, value in params.items():
            if value is None or value == "" or value == []:
                continue
            if isinstance(value, (list, tuple)):
                value = ",".join(str(v) for v in value)
            encoded[name] = value
        return encoded

    @staticmethod
    def _error_message(response: requests.Response) -> Optional[str]:
        """Pull error.message out of an API error body, if there is one."""
        try:
            body = response.json()
        except ValueError:
            return None
        if isinstance(body, dict) and isinstance(body.get("error"), dict):
            return body["error"].get("message")
        return None

    def get(self, resource: str, **params) -> dict:
        """
        Make a GET request against one API resource.

        Args:
            resource: Endpoint name, e.g. 'videos' or 'search'
            **params: Query parameters using the API's camelCase names

        Returns:
            Decoded JSON response body

        Raises:
            RemoteCallFailed: On any transport, HTTP or decoding error
        """
        query = self._encode_params(params)
        logger.debug("GET %s %s", resource, query)
        query["key"] = self.api_key
        url = f"{self.BASE_URL}/{resource}"

        try:
            response = self.session.get(url, params=query, timeout=self.timeout)
        except requests.RequestException as e:
            raise RemoteCallFailed(str(e))

        if not response.ok:
            message = self._error_message(response) or f"HTTP {response.status_code} {response.reason}"
            raise RemoteCallFailed(message)

        try:
            return response.json()
        except ValueError as e:
            raise RemoteCallFailed(f"Invalid JSON response from {resource}: {e}")
