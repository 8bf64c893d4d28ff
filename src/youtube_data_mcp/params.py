"""
Typed tool parameters.

Uses Pydantic BaseModel to validate the loosely-typed argument mapping of a
tool call. Fields accept the camelCase names used on the wire (videoId,
maxResults, ...) as well as their Python names.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .url_parser import extract_channel_id, extract_playlist_id, extract_video_id


DEFAULT_VIDEO_PARTS = ["snippet", "contentDetails", "statistics"]
DEFAULT_SEARCH_RESULTS = 10
DEFAULT_LIST_RESULTS = 50
MAX_RESULTS_LIMIT = 50


class ToolParams(BaseModel):
    """Base for all tool parameter models."""

    model_config = ConfigDict(
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
        frozen=True,
    )


class VideoIdMixin(ToolParams):
    video_id: str = Field(alias="videoId", min_length=1)

    @field_validator("video_id")
    @classmethod
    def _normalize_video_id(cls, value: str) -> str:
        return extract_video_id(value)


class ChannelIdMixin(ToolParams):
    channel_id: str = Field(alias="channelId", min_length=1)

    @field_validator("channel_id")
    @classmethod
    def _normalize_channel_id(cls, value: str) -> str:
        return extract_channel_id(value)


class PlaylistIdMixin(ToolParams):
    playlist_id: str = Field(alias="playlistId", min_length=1)

    @field_validator("playlist_id")
    @classmethod
    def _normalize_playlist_id(cls, value: str) -> str:
        return extract_playlist_id(value)


class VideoParams(VideoIdMixin):
    parts: List[str] = Field(default_factory=lambda: list(DEFAULT_VIDEO_PARTS), min_length=1)


class SearchParams(ToolParams):
    query: str = Field(min_length=1)
    max_results: int = Field(default=DEFAULT_SEARCH_RESULTS, alias="maxResults", ge=1, le=MAX_RESULTS_LIMIT)


class VideoStatsParams(VideoIdMixin):
    pass


class TrendingParams(ToolParams):
    region_code: str = Field(default="US", alias="regionCode", min_length=2, max_length=2)
    max_results: int = Field(default=DEFAULT_SEARCH_RESULTS, alias="maxResults", ge=1, le=MAX_RESULTS_LIMIT)
    video_category_id: str = Field(default="", alias="videoCategoryId")

    @field_validator("region_code")
    @classmethod
    def _upper_region(cls, value: str) -> str:
        return value.upper()


class RelatedVideosParams(VideoIdMixin):
    max_results: int = Field(default=DEFAULT_SEARCH_RESULTS, alias="maxResults", ge=1, le=MAX_RESULTS_LIMIT)


class TranscriptParams(VideoIdMixin):
    language: Optional[str] = None


class SearchTranscriptParams(VideoIdMixin):
    query: str = Field(min_length=1)
    language: Optional[str] = None


class ChannelParams(ChannelIdMixin):
    pass


class ChannelVideosParams(ChannelIdMixin):
    max_results: int = Field(default=DEFAULT_LIST_RESULTS, alias="maxResults", ge=1, le=MAX_RESULTS_LIMIT)

    @field_validator("channel_id")
    @classmethod
    def _normalize_channel_id(cls, value: str) -> str:
        value = extract_channel_id(value)
        if value.startswith("@"):
            raise ValueError("listing videos requires a channel ID (UC...), not a handle")
        return value


class PlaylistParams(PlaylistIdMixin):
    pass


class PlaylistItemsParams(PlaylistIdMixin):
    max_results: int = Field(default=DEFAULT_LIST_RESULTS, alias="maxResults", ge=1, le=MAX_RESULTS_LIMIT)


class PlaylistSearchParams(ToolParams):
    query: str = Field(min_length=1)
    max_results: int = Field(default=DEFAULT_SEARCH_RESULTS, alias="maxResults", ge=1, le=MAX_RESULTS_LIMIT)
