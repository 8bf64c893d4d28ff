from types import SimpleNamespace
from typing import Any, Callable, Union

import pytest

from youtube_data_mcp.config import ServerConfig
from youtube_data_mcp.tools import TOOLS


TEST_API_KEY = "test-api-key"
TEST_VIDEO_ID = "KSiWKfPOlh4"
TEST_CHANNEL_ID = "UC_x5XG1OV2P6uZZ5FSM9Ttw"
TEST_PLAYLIST_ID = "PLKE_22Jx497twaT62Qv9DAiagynP4dAYV"

TOOL_NAMES = frozenset(tool.name for tool in TOOLS)


def video_item(video_id: str = TEST_VIDEO_ID, title: str = "Test Video") -> dict:
    return {
        "kind": "youtube#video",
        "id": video_id,
        "snippet": {"title": title, "channelId": TEST_CHANNEL_ID, "channelTitle": "Test Channel"},
        "contentDetails": {"duration": "PT4M13S"},
        "statistics": {"viewCount": "1000", "likeCount": "50", "commentCount": "7"},
    }


def search_item(video_id: str, title: str = "Result") -> dict:
    return {
        "kind": "youtube#searchResult",
        "id": {"kind": "youtube#video", "videoId": video_id},
        "snippet": {"title": title, "channelTitle": "Test Channel"},
    }


class FakeYouTubeAPI:
    """Stands in for YouTubeAPI; records calls and returns canned responses per resource."""

    def __init__(self, responses: dict[str, Union[dict, Callable[..., dict], Exception]]):
        self.responses = responses
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def get(self, resource: str, **params) -> dict:
        self.calls.append((resource, params))
        response = self.responses.get(resource, {"items": []})
        if isinstance(response, Exception):
            raise response
        if callable(response):
            return response(**params)
        return response


class FakeTranscriptApi:
    """Stands in for YouTubeTranscriptApi.fetch."""

    def __init__(self, segments=None, error: Exception = None, language_code: str = None):
        self.segments = segments or []
        self.error = error
        self.language_code = language_code
        self.calls = []

    def fetch(self, video_id, languages=("en",)):
        self.calls.append((video_id, list(languages)))
        if self.error is not None:
            raise self.error
        return FakeFetchedTranscript(
            [SimpleNamespace(**seg) for seg in self.segments],
            self.language_code or languages[0],
        )


class FakeFetchedTranscript:
    def __init__(self, snippets, language_code):
        self.snippets = snippets
        self.language_code = language_code

    def __iter__(self):
        return iter(self.snippets)


@pytest.fixture
def config() -> ServerConfig:
    return ServerConfig(api_key=TEST_API_KEY)


@pytest.fixture
def no_key_config() -> ServerConfig:
    return ServerConfig(api_key=None)
