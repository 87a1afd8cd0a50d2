"""Runtime configuration."""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from domain.models import Platform

SOLUTION_LINKS_KEY = "contest-tracker-solution-links"

DEFAULT_PLAYLISTS: dict[Platform, str] = {
    Platform.CODEFORCES: "https://www.youtube.com/playlist?list=PLcXpkI9A-RZLUfBSNp-YQBCOezZKbDSgB",
    Platform.CODECHEF: "https://www.youtube.com/playlist?list=PLcXpkI9A-RZIZ6lsE0KCcLWeKNoG45fYr",
    Platform.LEETCODE: "https://www.youtube.com/playlist?list=PLcXpkI9A-RZI6FhydNz3JBt_-p_i25Cbr",
}

CODEFORCES_CONTESTS_URL = "https://codeforces.com/api/contest.list"


@dataclass(frozen=True)
class SmartMatchConfig:
    """Settings passed explicitly to the services.

    A playlist mapped to an empty string disables matching for that platform.
    """

    youtube_api_key: str | None = None
    playlists: dict[Platform, str] = field(default_factory=lambda: dict(DEFAULT_PLAYLISTS))
    solution_links_key: str = SOLUTION_LINKS_KEY
    solution_links_path: str = "data/solution_links.json"
    redis_url: str | None = None
    codeforces_contests_url: str = CODEFORCES_CONTESTS_URL
    codechef_contests_url: str | None = None
    leetcode_contests_url: str | None = None
    http_timeout: float = 30.0

    def playlist_for(self, platform: Platform) -> str | None:
        return self.playlists.get(platform) or None


def load_config(env_file: str | None = None) -> SmartMatchConfig:
    """Build configuration from the environment, reading .env first."""
    load_dotenv(env_file)

    playlists = {
        platform: os.getenv(f"{platform.value.upper()}_PLAYLIST_URL", default)
        for platform, default in DEFAULT_PLAYLISTS.items()
    }

    return SmartMatchConfig(
        youtube_api_key=os.getenv("YOUTUBE_API_KEY") or None,
        playlists=playlists,
        solution_links_path=os.getenv("SOLUTION_LINKS_PATH", "data/solution_links.json"),
        redis_url=os.getenv("REDIS_URL") or None,
        codeforces_contests_url=os.getenv("CODEFORCES_CONTESTS_URL", CODEFORCES_CONTESTS_URL),
        codechef_contests_url=os.getenv("CODECHEF_CONTESTS_URL") or None,
        leetcode_contests_url=os.getenv("LEETCODE_CONTESTS_URL") or None,
        http_timeout=float(os.getenv("HTTP_TIMEOUT", "30")),
    )
