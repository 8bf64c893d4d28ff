"""
Tool catalog returned by list_tools.
"""

from mcp.types import Tool

from .params import DEFAULT_LIST_RESULTS, DEFAULT_SEARCH_RESULTS, DEFAULT_VIDEO_PARTS, MAX_RESULTS_LIMIT


def _max_results(default: int) -> dict:
    return {
        "type": "integer",
        "description": f"Maximum number of results to return (1-{MAX_RESULTS_LIMIT}). Defaults to {default}.",
        "minimum": 1,
        "maximum": MAX_RESULTS_LIMIT,
        "default": default,
    }


VIDEO_ID = {
    "type": "string",
    "description": "The YouTube video ID or video URL",
}

CHANNEL_ID = {
    "type": "string",
    "description": "The YouTube channel ID (UC...), channel URL, or @handle URL",
}

PLAYLIST_ID = {
    "type": "string",
    "description": "The YouTube playlist ID or playlist URL",
}

LANGUAGE = {
    "type": "string",
    "description": "Language code for the transcript (e.g., 'en', 'es', 'fr'). Defaults to the server's configured language.",
}


TOOLS = [
    Tool(
        name="videos_getVideo",
        description="Get detailed information about a YouTube video",
        inputSchema={
            "type": "object",
            "properties": {
                "videoId": VIDEO_ID,
                "parts": {
                    "type": "array",
                    "description": f"Parts of the video to retrieve. Defaults to {', '.join(DEFAULT_VIDEO_PARTS)}.",
                    "items": {"type": "string"},
                },
            },
            "required": ["videoId"],
        },
    ),
    Tool(
        name="videos_searchVideos",
        description="Search for videos on YouTube",
        inputSchema={
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": "Search query"},
                "maxResults": _max_results(DEFAULT_SEARCH_RESULTS),
            },
            "required": ["query"],
        },
    ),
    Tool(
        name="videos_getVideoStats",
        description="Get statistics (views, likes, comments) for a YouTube video",
        inputSchema={
            "type": "object",
            "properties": {"videoId": VIDEO_ID},
            "required": ["videoId"],
        },
    ),
    Tool(
        name="videos_getTrendingVideos",
        description="Get the most popular videos for a region",
        inputSchema={
            "type": "object",
            "properties": {
                "regionCode": {
                    "type": "string",
                    "description": "ISO 3166-1 alpha-2 region code. Defaults to 'US'.",
                },
                "maxResults": _max_results(DEFAULT_SEARCH_RESULTS),
                "videoCategoryId": {
                    "type": "string",
                    "description": "Restrict to one video category ID",
                },
            },
            "required": [],
        },
    ),
    Tool(
        name="videos_getRelatedVideos",
        description="Get videos similar to a YouTube video, found by searching for its title. The source video is excluded.",
        inputSchema={
            "type": "object",
            "properties": {
                "videoId": VIDEO_ID,
                "maxResults": _max_results(DEFAULT_SEARCH_RESULTS),
            },
            "required": ["videoId"],
        },
    ),
    Tool(
        name="transcripts_getTranscript",
        description="Get the transcript of a YouTube video",
        inputSchema={
            "type": "object",
            "properties": {"videoId": VIDEO_ID, "language": LANGUAGE},
            "required": ["videoId"],
        },
    ),
    Tool(
        name="transcripts_searchTranscript",
        description="Find the transcript segments of a YouTube video that contain a phrase",
        inputSchema={
            "type": "object",
            "properties": {
                "videoId": VIDEO_ID,
                "query": {"type": "string", "description": "Text to look for (case-insensitive)"},
                "language": LANGUAGE,
            },
            "required": ["videoId", "query"],
        },
    ),
    Tool(
        name="transcripts_getTimestampedTranscript",
        description="Get the transcript of a YouTube video with a readable timestamp on each segment",
        inputSchema={
            "type": "object",
            "properties": {"videoId": VIDEO_ID, "language": LANGUAGE},
            "required": ["videoId"],
        },
    ),
    Tool(
        name="channels_getChannel",
        description="Get information about a YouTube channel",
        inputSchema={
            "type": "object",
            "properties": {"channelId": CHANNEL_ID},
            "required": ["channelId"],
        },
    ),
    Tool(
        name="channels_listVideos",
        description="Get videos from a specific channel, newest first",
        inputSchema={
            "type": "object",
            "properties": {
                "channelId": {"type": "string", "description": "The YouTube channel ID (UC...) or channel URL"},
                "maxResults": _max_results(DEFAULT_LIST_RESULTS),
            },
            "required": ["channelId"],
        },
    ),
    Tool(
        name="channels_getStatistics",
        description="Get statistics (subscribers, views, video count) for a YouTube channel",
        inputSchema={
            "type": "object",
            "properties": {"channelId": CHANNEL_ID},
            "required": ["channelId"],
        },
    ),
    Tool(
        name="playlists_getPlaylist",
        description="Get information about a YouTube playlist",
        inputSchema={
            "type": "object",
            "properties": {"playlistId": PLAYLIST_ID},
            "required": ["playlistId"],
        },
    ),
    Tool(
        name="playlists_getPlaylistItems",
        description="Get videos in a YouTube playlist",
        inputSchema={
            "type": "object",
            "properties": {
                "playlistId": PLAYLIST_ID,
                "maxResults": _max_results(DEFAULT_LIST_RESULTS),
            },
            "required": ["playlistId"],
        },
    ),
    Tool(
        name="playlists_searchPlaylists",
        description="Search for playlists on YouTube",
        inputSchema={
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": "Search query"},
                "maxResults": _max_results(DEFAULT_SEARCH_RESULTS),
            },
            "required": ["query"],
        },
    ),
]
