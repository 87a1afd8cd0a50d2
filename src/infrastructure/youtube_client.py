"""Client for the YouTube Data API playlist endpoint."""

from datetime import datetime
from typing import Any, Optional

from loguru import logger

from domain.models import PlaylistVideo
from infrastructure.errors import ConfigurationError, PlaylistFetchError
from infrastructure.http_client import AsyncHTTPClient
from infrastructure.parsers.url_parser import PlaylistURLParser

PLAYLIST_ITEMS_URL = "https://www.googleapis.com/youtube/v3/playlistItems"
MAX_RESULTS = 50


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an RFC 3339 timestamp as returned by Google APIs."""
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        logger.warning(f"Unparsable timestamp: {value}")
        return None


class YouTubeClient:
    """Fetches playlist items from the YouTube Data API v3."""

    def __init__(
        self,
        http_client: Optional[AsyncHTTPClient] = None,
        api_key: str | None = None,
    ):
        """
        Initialize client.

        Args:
            http_client: Async HTTP client instance
            api_key: Default API key, used when a call does not pass one
        """
        self.http_client = http_client or AsyncHTTPClient()
        self.api_key = api_key

    async def fetch_playlist_videos(
        self, playlist_url: str, api_key: str | None = None
    ) -> list[PlaylistVideo]:
        """
        Fetch the first page (up to 50 items) of a playlist.

        Args:
            playlist_url: Any YouTube URL carrying a playlist id
            api_key: YouTube Data API key, overrides the client default

        Returns:
            Videos in playlist order

        Raises:
            ConfigurationError: If no API key is available
            PlaylistURLError: If the URL has no playlist id
            PlaylistFetchError: If the API request fails
        """
        key = api_key or self.api_key
        if not key:
            raise ConfigurationError("YouTube API key is required")

        playlist_id = PlaylistURLParser.parse(playlist_url)
        params = {
            "part": "snippet",
            "maxResults": MAX_RESULTS,
            "playlistId": playlist_id,
            "key": key,
        }

        logger.info(f"Fetching videos of playlist {playlist_id}")

        try:
            response = await self.http_client.get(PLAYLIST_ITEMS_URL, params=params)
        except Exception as e:
            logger.error(f"Playlist request failed for {playlist_id}: {e}")
            raise PlaylistFetchError(playlist_id, str(e)) from e

        if response.status_code >= 400:
            reason = self._error_message(
                response, f"API request failed with status {response.status_code}"
            )
            logger.error(f"YouTube API error for playlist {playlist_id}: {reason}")
            raise PlaylistFetchError(playlist_id, reason)

        try:
            data = response.json()
        except ValueError as e:
            raise PlaylistFetchError(playlist_id, "Malformed API response") from e

        videos = self._parse_items(data, playlist_id)
        logger.info(f"Fetched {len(videos)} videos from playlist {playlist_id}")
        return videos

    def _parse_items(self, data: Any, playlist_id: str) -> list[PlaylistVideo]:
        items = data.get("items") if isinstance(data, dict) else None
        if not isinstance(items, list):
            return []

        videos = []
        for item in items:
            snippet = item.get("snippet") or {}
            video_id = (snippet.get("resourceId") or {}).get("videoId")
            if not video_id:
                logger.debug(f"Skipping playlist item without video id in {playlist_id}")
                continue

            thumbnails = snippet.get("thumbnails") or {}
            thumbnail_url = next(
                (
                    thumbnails[size]["url"]
                    for size in ("high", "medium", "default")
                    if thumbnails.get(size, {}).get("url")
                ),
                "",
            )

            videos.append(
                PlaylistVideo(
                    video_id=video_id,
                    title=snippet.get("title", ""),
                    description=snippet.get("description") or "",
                    published_at=parse_timestamp(snippet.get("publishedAt")),
                    thumbnail_url=thumbnail_url,
                    playlist_id=playlist_id,
                )
            )
        return videos

    @staticmethod
    def _error_message(response: Any, default: str) -> str:
        try:
            payload = response.json()
        except ValueError:
            return default
        error = payload.get("error") if isinstance(payload, dict) else None
        if isinstance(error, dict) and error.get("message"):
            return error["message"]
        return default
