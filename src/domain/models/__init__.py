"""Domain models package."""

from .contest import Contest, ContestStatus, Platform
from .matching import (
    MatchedVideo,
    MatchStatistics,
    MatchType,
    PlatformMatchStats,
    SmartMatchResult,
    VideoMatch,
    compute_match_rate,
)
from .video import PlaylistVideo

__all__ = [
    "Contest",
    "ContestStatus",
    "MatchedVideo",
    "MatchStatistics",
    "MatchType",
    "Platform",
    "PlatformMatchStats",
    "PlaylistVideo",
    "SmartMatchResult",
    "VideoMatch",
    "compute_match_rate",
]
