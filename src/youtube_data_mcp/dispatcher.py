"""
Tool dispatch - resolve a tool name, validate its arguments, call the service
and wrap the outcome in a CallToolResult.
"""

import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from mcp.types import CallToolResult, TextContent, Tool
from pydantic import BaseModel, ValidationError

from .channels import ChannelService
from .config import ServerConfig
from .errors import InvalidArguments, UnknownTool, YouTubeMCPError
from .params import (
    ChannelParams,
    ChannelVideosParams,
    PlaylistItemsParams,
    PlaylistParams,
    PlaylistSearchParams,
    RelatedVideosParams,
    SearchParams,
    SearchTranscriptParams,
    TranscriptParams,
    TrendingParams,
    VideoParams,
    VideoStatsParams,
)
from .playlists import PlaylistService
from .tools import TOOLS
from .transcript import TranscriptService
from .videos import VideoService


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Route:
    """A tool's parameter model and the service method that handles it."""

    params_model: type[BaseModel]
    handler: Callable[[Any], Any]


def format_validation_error(error: ValidationError) -> str:
    """Summarize a pydantic error as 'field: problem; field: problem'."""
    problems = []
    for err in error.errors():
        field = ".".join(str(part) for part in err["loc"]) or "arguments"
        problems.append(f"{field}: {err['msg']}")
    return "; ".join(problems)


def text_result(text: str, is_error: bool = False) -> CallToolResult:
    return CallToolResult(
        content=[TextContent(type="text", text=text)],
        isError=is_error,
    )


class ToolDispatcher:
    """Map tool names onto the resource services."""

    def __init__(
        self,
        config: ServerConfig,
        videos: Optional[VideoService] = None,
        transcripts: Optional[TranscriptService] = None,
        channels: Optional[ChannelService] = None,
        playlists: Optional[PlaylistService] = None,
    ):
        self.config = config
        self.videos = videos or VideoService(config)
        self.transcripts = transcripts or TranscriptService(config)
        self.channels = channels or ChannelService(config)
        self.playlists = playlists or PlaylistService(config)

        self.routes: dict[str, Route] = {
            "videos_getVideo": Route(VideoParams, self.videos.get_video),
            "videos_searchVideos": Route(SearchParams, self.videos.search_videos),
            "videos_getVideoStats": Route(VideoStatsParams, self.videos.get_video_stats),
            "videos_getTrendingVideos": Route(TrendingParams, self.videos.get_trending_videos),
            "videos_getRelatedVideos": Route(RelatedVideosParams, self.videos.get_related_videos),
            "transcripts_getTranscript": Route(TranscriptParams, self.transcripts.get_transcript),
            "transcripts_searchTranscript": Route(SearchTranscriptParams, self.transcripts.search_transcript),
            "transcripts_getTimestampedTranscript": Route(TranscriptParams, self.transcripts.get_timestamped_transcript),
            "channels_getChannel": Route(ChannelParams, self.channels.get_channel),
            "channels_listVideos": Route(ChannelVideosParams, self.channels.list_videos),
            "channels_getStatistics": Route(ChannelParams, self.channels.get_statistics),
            "playlists_getPlaylist": Route(PlaylistParams, self.playlists.get_playlist),
            "playlists_getPlaylistItems": Route(PlaylistItemsParams, self.playlists.get_playlist_items),
            "playlists_searchPlaylists": Route(PlaylistSearchParams, self.playlists.search_playlists),
        }

    def list_tools(self) -> list[Tool]:
        return list(TOOLS)

    def resolve(self, name: str, arguments: Optional[dict[str, Any]]) -> tuple[Route, BaseModel]:
        """
        Look up a tool and validate its arguments.

        Raises:
            UnknownTool: If the name is not in the catalog
            InvalidArguments: If the arguments fail validation
        """
        route = self.routes.get(name)
        if route is None:
            raise UnknownTool(name)

        try:
            params = route.params_model.model_validate(arguments or {})
        except ValidationError as e:
            raise InvalidArguments(f"Invalid arguments for {name}: {format_validation_error(e)}")

        return route, params

    def dispatch(self, name: str, arguments: Optional[dict[str, Any]]) -> Any:
        """Run one tool call and return the service's raw result."""
        route, params = self.resolve(name, arguments)
        return route.handler(params)

    async def call_tool(self, name: str, arguments: Optional[dict[str, Any]]) -> CallToolResult:
        """
        Handle a call_tool request.

        Every failure, including an unknown tool name, comes back as an
        error-flagged result rather than a protocol error.
        """
        logger.info("Tool call: %s", name)
        try:
            # Services use blocking requests; keep them off the event loop
            result = await asyncio.to_thread(self.dispatch, name, arguments)
        except YouTubeMCPError as e:
            logger.warning("Tool %s failed: %s", name, e)
            return text_result(f"Error: {e}", is_error=True)
        except Exception as e:
            logger.exception("Unexpected error in tool %s", name)
            return text_result(f"Error: {e}", is_error=True)

        return text_result(json.dumps(result, indent=2))
