"""Error types raised by infrastructure and services."""


class ContestMatcherError(Exception):
    """Base error for the contest matcher."""

    pass


class ConfigurationError(ContestMatcherError):
    """Required configuration, such as the YouTube API key, is missing."""

    pass


class HTTPError(ContestMatcherError):
    """Non-success HTTP response."""

    def __init__(self, url: str, status_code: int, body: str = ""):
        self.url = url
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP {status_code} for {url}")


class PlaylistURLError(ContestMatcherError, ValueError):
    """Playlist URL is missing or has no playlist id."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Invalid playlist URL: {url!r}")


class PlaylistFetchError(ContestMatcherError):
    """YouTube playlist could not be retrieved."""

    def __init__(self, playlist_id: str, reason: str):
        self.playlist_id = playlist_id
        self.reason = reason
        super().__init__(f"Failed to fetch playlist {playlist_id}: {reason}")


class ContestFetchError(ContestMatcherError):
    """Contest list of a platform could not be retrieved."""

    def __init__(self, platform: str, reason: str):
        self.platform = platform
        self.reason = reason
        super().__init__(f"Failed to fetch {platform} contests: {reason}")


class LinkStoreError(ContestMatcherError):
    """Solution links could not be written."""

    pass
