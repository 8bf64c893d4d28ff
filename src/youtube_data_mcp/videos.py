"""
Video lookups - details, search, statistics, trending and related videos.
"""

from typing import Any, Optional

from .base import DataAPIService
from .errors import RemoteCallFailed
from .params import (
    MAX_RESULTS_LIMIT,
    RelatedVideosParams,
    SearchParams,
    TrendingParams,
    VideoParams,
    VideoStatsParams,
)


class VideoService(DataAPIService):
    """Service for interacting with YouTube videos."""

    def get_video(self, params: VideoParams) -> Optional[dict[str, Any]]:
        """Get detailed information about a video, or None if it does not exist."""
        data = self._call("get video", "videos", part=params.parts, id=params.video_id)
        return self._first_item(data)

    def search_videos(self, params: SearchParams) -> list[dict[str, Any]]:
        """Search for videos by keyword."""
        data = self._call(
            "search videos",
            "search",
            part=["snippet"],
            q=params.query,
            maxResults=params.max_results,
            type="video",
        )
        return self._items(data)[:params.max_results]

    def get_video_stats(self, params: VideoStatsParams) -> Optional[dict[str, Any]]:
        """Get view, like and comment counts for a video."""
        data = self._call("get video stats", "videos", part=["statistics"], id=params.video_id)
        item = self._first_item(data)
        if item is None:
            return None
        return item.get("statistics")

    def get_trending_videos(self, params: TrendingParams) -> list[dict[str, Any]]:
        """Get the most popular videos for a region, optionally within one category."""
        data = self._call(
            "get trending videos",
            "videos",
            part=["snippet", "contentDetails", "statistics"],
            chart="mostPopular",
            regionCode=params.region_code,
            maxResults=params.max_results,
            videoCategoryId=params.video_category_id,
        )
        return self._items(data)[:params.max_results]

    def get_related_videos(self, params: RelatedVideosParams) -> list[dict[str, Any]]:
        """
        Get videos related to a source video.

        The API's relatedToVideoId search filter is no longer available, so
        the source video's title is used as the search keyword instead. One
        extra result is requested, up to the API page limit, and the source
        video itself is filtered out.

        Raises:
            RemoteCallFailed: If either request fails or the source video does not exist
        """
        source = self._first_item(
            self._call("get similar videos", "videos", part=["snippet"], id=params.video_id)
        )
        snippet = (source or {}).get("snippet")
        if not snippet:
            raise RemoteCallFailed("Failed to get similar videos: Source video not found")

        data = self._call(
            "get similar videos",
            "search",
            part=["snippet"],
            q=snippet.get("title", ""),
            maxResults=min(params.max_results + 1, MAX_RESULTS_LIMIT),
            type="video",
        )

        related = [
            item for item in self._items(data)
            if (item.get("id") or {}).get("videoId") != params.video_id
        ]
        return related[:params.max_results]
