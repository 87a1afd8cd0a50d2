"""Protocol interfaces for infrastructure collaborators."""

from typing import Protocol

from domain.models import Contest, PlaylistVideo


class PlaylistClientProtocol(Protocol):
    """Protocol for the video-listing service."""

    async def fetch_playlist_videos(
        self, playlist_url: str, api_key: str | None = None
    ) -> list[PlaylistVideo]:
        """Fetch up to 50 videos of a playlist."""
        ...


class ContestClientProtocol(Protocol):
    """Protocol for a platform contest-list source."""

    async def fetch_contests(self) -> list[Contest]:
        """Fetch all contests of one platform."""
        ...


class KeyValueStoreProtocol(Protocol):
    """Protocol for a string key-value store."""

    async def get(self, key: str) -> str | None:
        """Return the stored value or None."""
        ...

    async def set(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""
        ...

    async def delete(self, key: str) -> None:
        """Remove a key if present."""
        ...
