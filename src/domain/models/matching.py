"""Value objects produced by a smart-match run."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .video import PlaylistVideo


class MatchType(str, Enum):
    """Matcher tier that produced a match."""

    EXACT = "exact"
    FLEXIBLE = "flexible"
    WORD_BASED = "word-based"


@dataclass(frozen=True)
class VideoMatch:
    """A video selected for a contest and the tier that selected it."""

    video: PlaylistVideo
    match_type: MatchType


@dataclass(frozen=True)
class MatchedVideo:
    """Record of one successful match, kept for reporting."""

    contest_name: str
    video_title: str
    match_type: MatchType

    def to_dict(self) -> dict[str, str]:
        return {
            "contest_name": self.contest_name,
            "video_title": self.video_title,
            "match_type": self.match_type.value,
        }


def compute_match_rate(matched: int, total: int, skipped: int) -> float:
    """Percentage of matched contests among those that were not skipped."""
    denominator = total - skipped
    if denominator <= 0:
        return 0.0
    return round(matched / denominator * 100, 1)


@dataclass
class PlatformMatchStats:
    """Per-platform counters."""

    total: int = 0
    matched: int = 0
    skipped: int = 0
    matched_videos: list[MatchedVideo] = field(default_factory=list)
    error: str | None = None

    @property
    def match_rate(self) -> float:
        return compute_match_rate(self.matched, self.total, self.skipped)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "total": self.total,
            "matched": self.matched,
            "skipped": self.skipped,
            "match_rate": self.match_rate,
            "matched_videos": [m.to_dict() for m in self.matched_videos],
        }
        if self.error:
            data["error"] = self.error
        return data


@dataclass
class MatchStatistics:
    """Aggregate counters of a smart-match run.

    Contests skipped because of a manual link are included in ``total`` but
    excluded from the ``match_rate`` denominator.
    """

    total: int = 0
    matched: int = 0
    skipped: int = 0
    platforms: dict[str, PlatformMatchStats] = field(default_factory=dict)
    error: str | None = None

    @property
    def match_rate(self) -> float:
        return compute_match_rate(self.matched, self.total, self.skipped)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "total": self.total,
            "matched": self.matched,
            "skipped": self.skipped,
            "match_rate": self.match_rate,
            "platforms": {name: p.to_dict() for name, p in self.platforms.items()},
        }
        if self.error:
            data["error"] = self.error
        return data


@dataclass
class SmartMatchResult:
    """Outcome of ``SmartMatchService.smart_match``."""

    result_map: dict[str, str]
    stats: MatchStatistics
