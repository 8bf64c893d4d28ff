"""
YouTube URL Parser - Accept any YouTube URL format where a tool expects an ID.
"""

import re
from urllib.parse import urlparse, parse_qs
from dataclasses import dataclass
from typing import Optional


YOUTUBE_DOMAINS = ('youtube.com', 'youtu.be')


@dataclass
class YouTubeURL:
    """Parsed YouTube URL with extracted components."""

    url_type: str  # 'video', 'playlist', 'channel', 'video_in_playlist'
    video_id: Optional[str] = None
    playlist_id: Optional[str] = None
    channel_id: Optional[str] = None
    channel_handle: Optional[str] = None


def is_youtube_url(value: str) -> bool:
    return any(domain in value.lower() for domain in YOUTUBE_DOMAINS)


def parse_youtube_url(url: str) -> YouTubeURL:
    """
    Parse any YouTube URL and extract video_id, playlist_id, or channel info.

    Supported formats:
    - https://www.youtube.com/watch?v=VIDEO_ID
    - https://youtu.be/VIDEO_ID
    - https://www.youtube.com/shorts/VIDEO_ID
    - https://www.youtube.com/embed/VIDEO_ID
    - https://www.youtube.com/watch?v=VIDEO_ID&list=PLAYLIST_ID
    - https://www.youtube.com/playlist?list=PLAYLIST_ID
    - https://www.youtube.com/@channel_handle
    - https://www.youtube.com/channel/CHANNEL_ID

    Returns:
        YouTubeURL dataclass with parsed components

    Raises:
        ValueError: If URL is not a valid YouTube URL
    """
    url = url.strip()

    if not is_youtube_url(url):
        raise ValueError(f"Not a YouTube URL: {url}")

    if '://' not in url:
        url = f"https://{url}"

    parsed = urlparse(url)
    query = parse_qs(parsed.query)
    path = parsed.path

    video_id = query['v'][0] if 'v' in query else None
    playlist_id = query['list'][0] if 'list' in query else None
    channel_id = None
    channel_handle = None
    url_type = None

    if 'youtu.be' in parsed.netloc:
        match = re.match(r'/([a-zA-Z0-9_-]{11})', path)
        if match:
            video_id = match.group(1)
    elif '/shorts/' in path or '/embed/' in path or '/live/' in path:
        match = re.search(r'/(?:shorts|embed|live)/([a-zA-Z0-9_-]{11})', path)
        if match:
            video_id = match.group(1)
    elif '/playlist' in path:
        url_type = 'playlist'
    elif '/@' in path:
        match = re.search(r'/@([^/?]+)', path)
        if match:
            url_type = 'channel'
            channel_handle = match.group(1)
    elif '/channel/' in path:
        match = re.search(r'/channel/([^/?]+)', path)
        if match:
            url_type = 'channel'
            channel_id = match.group(1)

    if video_id and not url_type:
        url_type = 'video_in_playlist' if playlist_id else 'video'

    if not url_type:
        raise ValueError(f"Could not determine URL type: {url}")

    return YouTubeURL(
        url_type=url_type,
        video_id=video_id,
        playlist_id=playlist_id,
        channel_id=channel_id,
        channel_handle=channel_handle,
    )


def extract_video_id(value: str) -> str:
    """Return the video ID from a URL, or the value itself if it is already an ID."""
    value = value.strip()
    if not is_youtube_url(value):
        return value

    parsed = parse_youtube_url(value)
    if not parsed.video_id:
        raise ValueError(f"URL does not contain a video ID: {value}")
    return parsed.video_id


def extract_playlist_id(value: str) -> str:
    """Return the playlist ID from a URL, or the value itself if it is already an ID."""
    value = value.strip()
    if not is_youtube_url(value):
        return value

    parsed = parse_youtube_url(value)
    if not parsed.playlist_id:
        raise ValueError(f"URL does not contain a playlist ID: {value}")
    return parsed.playlist_id


def extract_channel_id(value: str) -> str:
    """
    Return the channel ID from a URL, or the value itself if it is already an ID.

    Handle URLs come back as '@handle', which the channels endpoint resolves
    through its forHandle parameter.
    """
    value = value.strip()
    if not is_youtube_url(value):
        return value

    parsed = parse_youtube_url(value)
    if parsed.channel_id:
        return parsed.channel_id
    if parsed.channel_handle:
        return f"@{parsed.channel_handle}"
    raise ValueError(f"URL does not contain a channel ID or handle: {value}")
