"""Parser for YouTube playlist URLs."""

import re

from loguru import logger

from infrastructure.errors import PlaylistURLError


class PlaylistURLParser:
    """Parser for the YouTube URL formats that carry a playlist id."""

    PATTERNS = (
        # youtube.com/playlist?list=PL...
        re.compile(r"youtube\.com/playlist\?list=([^&]+)", re.IGNORECASE),
        # youtube.com/watch?v=...&list=PL...
        re.compile(r"youtube\.com/watch\?v=[^&]+&list=([^&]+)", re.IGNORECASE),
        # youtu.be/<id>?list=PL...
        re.compile(r"youtu\.be/[^&]+\?list=([^&]+)", re.IGNORECASE),
    )

    @classmethod
    def extract_playlist_id(cls, url: str | None) -> str | None:
        """Return the playlist id of a URL, or None if it has none."""
        if not url:
            return None

        for pattern in cls.PATTERNS:
            match = pattern.search(url)
            if match and match.group(1):
                return match.group(1)

        return None

    @classmethod
    def parse(cls, url: str | None) -> str:
        """
        Parse playlist URL and extract the playlist id.

        Raises:
            PlaylistURLError: If the URL is empty or carries no playlist id
        """
        logger.debug(f"Parsing playlist URL: {url}")

        playlist_id = cls.extract_playlist_id(url)
        if not playlist_id:
            raise PlaylistURLError(url or "")

        logger.debug(f"Parsed playlist id: {playlist_id}")
        return playlist_id
