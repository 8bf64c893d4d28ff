"""
Shared plumbing for the YouTube Data API resource services.
"""

import logging
from typing import Any, Optional

from .config import ServerConfig
from .errors import RemoteCallFailed
from .youtube_api import YouTubeAPI


logger = logging.getLogger(__name__)


class DataAPIService:
    """
    Base for services that wrap one YouTube Data API resource family.

    The API client is created on first use and memoized for the life of the
    service. A missing API key raises MissingCredential on every use, before
    any request is made.
    """

    def __init__(self, config: ServerConfig, api: Optional[YouTubeAPI] = None):
        self.config = config
        self._api = api

    @property
    def api(self) -> YouTubeAPI:
        """Lazy initialization of the API client."""
        if self._api is None:
            self._api = YouTubeAPI(
                api_key=self.config.api_key,
                timeout=self.config.timeout,
                ssl_bypass=self.config.ssl_bypass,
            )
        return self._api

    def _call(self, action: str, resource: str, **params) -> dict:
        """Call one endpoint, re-raising failures with the action in the message."""
        api = self.api
        try:
            return api.get(resource, **params)
        except RemoteCallFailed as e:
            logger.warning("Failed to %s: %s", action, e.message)
            raise RemoteCallFailed(f"Failed to {action}: {e.message}")

    @staticmethod
    def _items(data: dict) -> list[dict[str, Any]]:
        return data.get("items") or []

    @classmethod
    def _first_item(cls, data: dict) -> Optional[dict[str, Any]]:
        items = cls._items(data)
        return items[0] if items else None
