"""
Channel lookups - channel details, statistics and recent uploads.
"""

from typing import Any, Optional

from .base import DataAPIService
from .params import ChannelParams, ChannelVideosParams


def _channel_selector(channel_id: str) -> dict[str, str]:
    """Channels can be looked up by ID or, for '@handle' values, by handle."""
    if channel_id.startswith("@"):
        return {"forHandle": channel_id[1:]}
    return {"id": channel_id}


class ChannelService(DataAPIService):
    """Service for interacting with YouTube channels."""

    def get_channel(self, params: ChannelParams) -> Optional[dict[str, Any]]:
        data = self._call(
            "get channel",
            "channels",
            part=["snippet", "statistics", "contentDetails"],
            **_channel_selector(params.channel_id),
        )
        return self._first_item(data)

    def list_videos(self, params: ChannelVideosParams) -> list[dict[str, Any]]:
        """List a channel's videos, newest first."""
        data = self._call(
            "list channel videos",
            "search",
            part=["snippet"],
            channelId=params.channel_id,
            maxResults=params.max_results,
            order="date",
            type="video",
        )
        return self._items(data)[:params.max_results]

    def get_statistics(self, params: ChannelParams) -> Optional[dict[str, Any]]:
        data = self._call(
            "get channel statistics",
            "channels",
            part=["statistics"],
            **_channel_selector(params.channel_id),
        )
        item = self._first_item(data)
        if item is None:
            return None
        return item.get("statistics")
