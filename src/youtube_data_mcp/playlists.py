"""
Playlist lookups - playlist details, items and playlist search.
"""

from typing import Any, Optional

from .base import DataAPIService
from .params import PlaylistItemsParams, PlaylistParams, PlaylistSearchParams


class PlaylistService(DataAPIService):
    """Service for interacting with YouTube playlists."""

    def get_playlist(self, params: PlaylistParams) -> Optional[dict[str, Any]]:
        data = self._call(
            "get playlist",
            "playlists",
            part=["snippet", "contentDetails"],
            id=params.playlist_id,
        )
        return self._first_item(data)

    def get_playlist_items(self, params: PlaylistItemsParams) -> list[dict[str, Any]]:
        """Get the first page of videos in a playlist, in playlist order."""
        data = self._call(
            "get playlist items",
            "playlistItems",
            part=["snippet", "contentDetails"],
            playlistId=params.playlist_id,
            maxResults=params.max_results,
        )
        return self._items(data)[:params.max_results]

    def search_playlists(self, params: PlaylistSearchParams) -> list[dict[str, Any]]:
        data = self._call(
            "search playlists",
            "search",
            part=["snippet"],
            q=params.query,
            maxResults=params.max_results,
            type="playlist",
        )
        return self._items(data)[:params.max_results]
