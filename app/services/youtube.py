"""
YouTube service for parsing video URLs, reading video metadata and
fetching transcripts.
"""
import asyncio
import re
from typing import Any, List, Optional

from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from googleapiclient.http import build_http
from loguru import logger
from youtube_transcript_api import (
    IpBlocked,
    NoTranscriptFound,
    RequestBlocked,
    TranscriptsDisabled,
    VideoUnavailable,
    YouTubeTranscriptApi,
)

from app.core.constants import YouTubeConfig
from app.core.exceptions import TranscriptFetchError, UpstreamServiceError
from app.models import TranscriptSegment, VideoMetadata
from app.models.enums import TranscriptErrorKind
from app.services.proxy import ProxyService

_VIDEO_ID_RE = re.compile(YouTubeConfig.VIDEO_ID_PATTERN)


def extract_video_id(url: Any) -> Optional[str]:
    """
    Extract the 11-character video ID from a YouTube URL.

    Handles watch, embed, /v/, youtu.be and channel-prefixed URLs; the ID may
    sit anywhere in a longer string. Returns None when nothing matches.
    """
    if not isinstance(url, str) or not url:
        return None
    match = _VIDEO_ID_RE.search(url)
    return match.group(1) if match else None


def pick_thumbnail(thumbnails: dict) -> str:
    """Return the URL of the highest-resolution thumbnail available."""
    for size in YouTubeConfig.THUMBNAIL_PRIORITY:
        thumbnail = thumbnails.get(size)
        if thumbnail and thumbnail.get("url"):
            return thumbnail["url"]
    return ""


def classify_transcript_error(error: Exception) -> TranscriptErrorKind:
    """
    Map a transcript library failure to a user-facing category.

    Typed library errors are checked first; the message is inspected for
    anything else.
    """
    if isinstance(error, (RequestBlocked, IpBlocked)):
        return TranscriptErrorKind.BLOCKED
    if isinstance(error, (TranscriptsDisabled, NoTranscriptFound, VideoUnavailable)):
        return TranscriptErrorKind.NO_TRANSCRIPT

    message = str(error).lower()
    if any(marker in message for marker in YouTubeConfig.BLOCKED_MARKERS):
        return TranscriptErrorKind.BLOCKED
    if YouTubeConfig.NO_TRANSCRIPT_MARKER in message:
        return TranscriptErrorKind.NO_TRANSCRIPT
    return TranscriptErrorKind.UNKNOWN


class YouTubeService:
    """
    Service for interacting with YouTube.

    This service handles:
    1. Reading a video's public snippet through the YouTube Data API v3.
    2. Fetching transcripts using youtube-transcript-api.

    Both third-party clients are blocking and run in a worker thread.
    """

    def __init__(self, api_key: str, proxy_service: ProxyService):
        """
        Initialize the YouTubeService.

        Args:
            api_key: YouTube Data API key.
            proxy_service: Builds the proxy configuration for transcript requests.
        """
        self.api_key = api_key
        self.proxy_service = proxy_service
        self._client = None

    def _get_client(self):
        if self._client is None:
            self._client = build(
                "youtube", "v3", developerKey=self.api_key, cache_discovery=False
            )
        return self._client

    def _list_videos_sync(self, video_id: str) -> dict:
        request = self._get_client().videos().list(part="snippet", id=video_id)
        # httplib2 connections are not thread-safe; one per call
        return request.execute(http=build_http())

    async def get_video_metadata(self, video_id: str) -> Optional[VideoMetadata]:
        """
        Fetch title, channel name and thumbnail for a video.

        Returns:
            VideoMetadata, or None when the API reports no such video.

        Raises:
            UpstreamServiceError: The API call itself failed.
        """
        try:
            response = await asyncio.to_thread(self._list_videos_sync, video_id)
        except HttpError as e:
            logger.error(f"YouTube Data API error for {video_id}: {e}")
            raise UpstreamServiceError("YouTube Data API", str(e)) from e
        except Exception as e:
            logger.exception(f"Unexpected error calling YouTube Data API for {video_id}")
            raise UpstreamServiceError("YouTube Data API", str(e)) from e

        items = response.get("items") or []
        if not items:
            logger.info(f"Video {video_id} not found")
            return None

        snippet = items[0].get("snippet", {})
        return VideoMetadata(
            title=snippet.get("title", ""),
            channel_title=snippet.get("channelTitle", ""),
            thumbnail_url=pick_thumbnail(snippet.get("thumbnails", {})),
        )

    def _fetch_transcript_sync(self, video_id: str):
        api = YouTubeTranscriptApi(proxy_config=self.proxy_service.get_proxy_config())
        return api.fetch(video_id)

    async def fetch_transcript(self, video_id: str) -> List[TranscriptSegment]:
        """
        Fetch the transcript of a video in playback order.

        Raises:
            TranscriptFetchError: With the failure category attached.
        """
        logger.info(f"Attempting to get transcript for video {video_id}...")
        try:
            raw_transcript = await asyncio.to_thread(self._fetch_transcript_sync, video_id)
        except Exception as e:
            kind = classify_transcript_error(e)
            logger.error(f"Transcript fetch failed for {video_id} ({kind.value}): {e}")
            raise TranscriptFetchError(kind, str(e), video_id=video_id) from e

        segments = [
            TranscriptSegment(text=item.text, start=item.start, duration=item.duration)
            for item in raw_transcript
        ]
        logger.info(f"Fetched {len(segments)} transcript segments for {video_id}")
        return segments
