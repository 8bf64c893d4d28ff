"""
YouTube Transcript Service - Fetch, search and timestamp video transcripts.
"""

import logging
from dataclasses import dataclass, asdict
from typing import Any, Optional

import requests
import urllib3
from requests.adapters import HTTPAdapter

from youtube_transcript_api import YouTubeTranscriptApi
from youtube_transcript_api._errors import CouldNotRetrieveTranscript

from .config import ServerConfig
from .errors import MissingCredential, RemoteCallFailed
from .params import SearchTranscriptParams, TranscriptParams


logger = logging.getLogger(__name__)


@dataclass
class TranscriptSegment:
    """A single segment of a transcript."""

    text: str
    start: float
    duration: float


def format_timestamp(seconds: float) -> str:
    """Format seconds as m:ss, or h:mm:ss for an hour or more."""
    total = int(seconds)
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


class TranscriptService:
    """
    Fetch transcripts through youtube-transcript-api.

    Transcripts do not need the Data API key, but the service is gated on it
    like the others so every tool reports a missing key the same way.
    """

    def __init__(self, config: ServerConfig, api: Optional[YouTubeTranscriptApi] = None):
        self.config = config
        self._api = api

    @property
    def api(self) -> YouTubeTranscriptApi:
        """Lazy initialization of the transcript API."""
        if not self.config.has_credential:
            raise MissingCredential()
        if self._api is None:
            self._api = YouTubeTranscriptApi(http_client=self._create_session())
        return self._api

    def _create_session(self) -> requests.Session:
        session = requests.Session()
        if self.config.ssl_bypass:
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
            session.verify = False

        adapter = HTTPAdapter()
        session.mount('http://', adapter)
        session.mount('https://', adapter)

        return session

    def _fetch(self, video_id: str, language: Optional[str]) -> tuple[str, list[TranscriptSegment]]:
        """
        Fetch one transcript.

        Returns:
            The transcript's language code and its segments

        Raises:
            MissingCredential: If the API key is not configured
            RemoteCallFailed: If the transcript cannot be retrieved
        """
        lang = language or self.config.default_language
        api = self.api

        try:
            fetched = api.fetch(video_id, languages=[lang])
        except CouldNotRetrieveTranscript as e:
            logger.warning("Transcript unavailable for %s (%s): %s", video_id, lang, type(e).__name__)
            raise RemoteCallFailed(f"Failed to get transcript: {e}")
        except requests.RequestException as e:
            raise RemoteCallFailed(f"Failed to get transcript: {e}")
        except Exception as e:
            # Malformed or empty transcript bodies surface as parser errors
            logger.warning("Unexpected transcript error for %s: %s", video_id, type(e).__name__)
            raise RemoteCallFailed(f"Failed to get transcript: {e}")

        segments = [
            TranscriptSegment(text=seg.text, start=seg.start, duration=seg.duration)
            for seg in fetched
        ]
        return getattr(fetched, "language_code", None) or lang, segments

    def get_transcript(self, params: TranscriptParams) -> dict[str, Any]:
        language, segments = self._fetch(params.video_id, params.language)
        return {
            "videoId": params.video_id,
            "language": language,
            "transcript": [asdict(seg) for seg in segments],
        }

    def search_transcript(self, params: SearchTranscriptParams) -> dict[str, Any]:
        """Find transcript segments containing the query, case-insensitively."""
        language, segments = self._fetch(params.video_id, params.language)
        needle = params.query.lower()
        return {
            "videoId": params.video_id,
            "language": language,
            "query": params.query,
            "matches": [asdict(seg) for seg in segments if needle in seg.text.lower()],
        }

    def get_timestamped_transcript(self, params: TranscriptParams) -> dict[str, Any]:
        language, segments = self._fetch(params.video_id, params.language)
        return {
            "videoId": params.video_id,
            "language": language,
            "timestampedTranscript": [
                {
                    "timestamp": format_timestamp(seg.start),
                    "start": seg.start,
                    "duration": seg.duration,
                    "text": seg.text,
                }
                for seg in segments
            ],
        }
