"""YouTube playlist video model."""

from dataclasses import dataclass
from datetime import datetime

WATCH_URL_TEMPLATE = "https://www.youtube.com/watch?v={video_id}"


@dataclass(frozen=True)
class PlaylistVideo:
    """A single entry of a YouTube playlist."""

    video_id: str
    title: str
    description: str = ""
    published_at: datetime | None = None
    thumbnail_url: str = ""
    playlist_id: str | None = None

    @property
    def watch_url(self) -> str:
        """Link that opens this video on YouTube."""
        return WATCH_URL_TEMPLATE.format(video_id=self.video_id)
