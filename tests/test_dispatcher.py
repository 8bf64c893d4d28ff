import json
from xml.etree.ElementTree import ParseError

import pytest
import requests

from youtube_data_mcp.channels import ChannelService
from youtube_data_mcp.dispatcher import ToolDispatcher
from youtube_data_mcp.errors import RemoteCallFailed
from youtube_data_mcp.playlists import PlaylistService
from youtube_data_mcp.transcript import TranscriptService
from youtube_data_mcp.videos import VideoService

from conftest import (
    TEST_CHANNEL_ID,
    TEST_PLAYLIST_ID,
    TEST_VIDEO_ID,
    TOOL_NAMES,
    FakeTranscriptApi,
    FakeYouTubeAPI,
    search_item,
    video_item,
)


RESPONSES = {
    "videos": {"items": [video_item()]},
    "search": {"items": [search_item("other000001", "Cats"), search_item("other000002", "More cats")]},
    "channels": {"items": [{"id": TEST_CHANNEL_ID, "statistics": {"subscriberCount": "42"}}]},
    "playlists": {"items": [{"id": TEST_PLAYLIST_ID, "snippet": {"title": "Lessons"}}]},
    "playlistItems": {"items": [{"snippet": {"position": 0, "title": "Lesson 1"}}]},
}

SEGMENTS = [{"text": "hello world", "start": 0.0, "duration": 1.5}]


def make_dispatcher(config, responses=None, transcript_api=None) -> ToolDispatcher:
    api = FakeYouTubeAPI(responses or RESPONSES)
    return ToolDispatcher(
        config,
        videos=VideoService(config, api=api),
        transcripts=TranscriptService(config, api=transcript_api or FakeTranscriptApi(SEGMENTS)),
        channels=ChannelService(config, api=api),
        playlists=PlaylistService(config, api=api),
    )


MINIMAL_ARGUMENTS = {
    "videos_getVideo": ({"videoId": TEST_VIDEO_ID}, dict),
    "videos_searchVideos": ({"query": "cats"}, list),
    "videos_getVideoStats": ({"videoId": TEST_VIDEO_ID}, dict),
    "videos_getTrendingVideos": ({}, list),
    "videos_getRelatedVideos": ({"videoId": TEST_VIDEO_ID}, list),
    "transcripts_getTranscript": ({"videoId": TEST_VIDEO_ID}, dict),
    "transcripts_searchTranscript": ({"videoId": TEST_VIDEO_ID, "query": "hello"}, dict),
    "transcripts_getTimestampedTranscript": ({"videoId": TEST_VIDEO_ID}, dict),
    "channels_getChannel": ({"channelId": TEST_CHANNEL_ID}, dict),
    "channels_listVideos": ({"channelId": TEST_CHANNEL_ID}, list),
    "channels_getStatistics": ({"channelId": TEST_CHANNEL_ID}, dict),
    "playlists_getPlaylist": ({"playlistId": TEST_PLAYLIST_ID}, dict),
    "playlists_getPlaylistItems": ({"playlistId": TEST_PLAYLIST_ID}, list),
    "playlists_searchPlaylists": ({"query": "lessons"}, list),
}


def test_every_tool_has_a_route(config):
    dispatcher = make_dispatcher(config)
    assert set(dispatcher.routes) == TOOL_NAMES == set(MINIMAL_ARGUMENTS)


def test_list_tools_schemas(config):
    tools = make_dispatcher(config).list_tools()
    assert len(tools) == len(TOOL_NAMES)
    for tool in tools:
        assert tool.description
        assert tool.inputSchema["type"] == "object"
        for required in tool.inputSchema["required"]:
            assert required in tool.inputSchema["properties"]


@pytest.mark.parametrize("name", sorted(MINIMAL_ARGUMENTS))
async def test_known_tools_succeed(config, name):
    arguments, expected_type = MINIMAL_ARGUMENTS[name]
    result = await make_dispatcher(config).call_tool(name, arguments)

    assert result.isError is False
    assert result.content[0].type == "text"
    assert isinstance(json.loads(result.content[0].text), expected_type)


async def test_get_video_shape(config):
    result = await make_dispatcher(config).call_tool("videos_getVideo", {"videoId": "abc123"})
    video = json.loads(result.content[0].text)
    assert {"snippet", "contentDetails", "statistics"} <= set(video)


async def test_get_video_missing_returns_null(config):
    dispatcher = make_dispatcher(config, responses={"videos": {"items": []}})
    result = await dispatcher.call_tool("videos_getVideo", {"videoId": "abc123"})

    assert result.isError is False
    assert json.loads(result.content[0].text) is None


async def test_search_honors_limit(config):
    responses = {"search": {"items": [search_item(f"vid{i}", f"Cat {i}") for i in range(5)]}}
    result = await make_dispatcher(config, responses=responses).call_tool(
        "videos_searchVideos", {"query": "cats", "maxResults": 2}
    )

    items = json.loads(result.content[0].text)
    assert len(items) == 2
    assert all(item["snippet"]["title"] for item in items)


async def test_related_excludes_source(config):
    responses = dict(RESPONSES, search={"items": [search_item(TEST_VIDEO_ID), search_item("other000001")]})
    result = await make_dispatcher(config, responses=responses).call_tool(
        "videos_getRelatedVideos", {"videoId": TEST_VIDEO_ID}
    )

    ids = [item["id"]["videoId"] for item in json.loads(result.content[0].text)]
    assert ids == ["other000001"]


async def test_unknown_tool(config):
    result = await make_dispatcher(config).call_tool("videos_deleteVideo", {})

    assert result.isError is True
    assert "videos_deleteVideo" in result.content[0].text


async def test_invalid_arguments(config):
    result = await make_dispatcher(config).call_tool("videos_searchVideos", {"maxResults": 500})

    assert result.isError is True
    text = result.content[0].text
    assert "query" in text
    assert "maxResults" in text


async def test_none_arguments(config):
    result = await make_dispatcher(config).call_tool("videos_getTrendingVideos", None)
    assert result.isError is False


async def test_remote_failure(config):
    dispatcher = make_dispatcher(config, responses={"channels": RemoteCallFailed("channelNotFound")})
    result = await dispatcher.call_tool("channels_getChannel", {"channelId": TEST_CHANNEL_ID})

    assert result.isError is True
    assert result.content[0].text == "Error: Failed to get channel: channelNotFound"


async def test_transcript_parse_error_reported_as_remote_failure(config):
    dispatcher = make_dispatcher(
        config, transcript_api=FakeTranscriptApi(error=ParseError("no element found: line 1, column 0"))
    )
    result = await dispatcher.call_tool("transcripts_getTranscript", {"videoId": TEST_VIDEO_ID})

    assert result.isError is True
    assert result.content[0].text == "Error: Failed to get transcript: no element found: line 1, column 0"


async def test_unexpected_error_enveloped(config):
    dispatcher = make_dispatcher(config, responses={"videos": RuntimeError("boom")})
    result = await dispatcher.call_tool("videos_getVideo", {"videoId": TEST_VIDEO_ID})

    assert result.isError is True
    assert result.content[0].text == "Error: boom"


@pytest.mark.parametrize("name", sorted(MINIMAL_ARGUMENTS))
async def test_missing_credential_makes_no_request(no_key_config, monkeypatch, name):
    def no_network(*args, **kwargs):
        raise AssertionError("network call attempted")

    monkeypatch.setattr(requests.Session, "get", no_network)
    monkeypatch.setattr(requests.Session, "request", no_network)

    arguments, _ = MINIMAL_ARGUMENTS[name]
    result = await ToolDispatcher(no_key_config).call_tool(name, arguments)

    assert result.isError is True
    assert "YOUTUBE_API_KEY" in result.content[0].text
