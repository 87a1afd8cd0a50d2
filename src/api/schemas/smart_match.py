"""Pydantic schemas for smart matching and contest endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from domain.models import Contest, ContestStatus, Platform


class ContestPayload(BaseModel):
    """Contest as supplied by the caller."""

    id: str
    name: str
    platform: Platform
    start_time: datetime
    end_time: datetime
    status: ContestStatus
    url: str | None = None
    duration: int | None = None

    def to_domain(self) -> Contest:
        return Contest(
            id=self.id,
            name=self.name,
            platform=self.platform,
            start_time=self.start_time,
            end_time=self.end_time,
            status=self.status,
            url=self.url,
            duration=self.duration,
        )


class SmartMatchRequest(BaseModel):
    """Contests to run smart matching on."""

    contests: list[ContestPayload]


class MatchedVideoResponse(BaseModel):
    contest_name: str
    video_title: str
    match_type: str


class PlatformStatsResponse(BaseModel):
    """Per-platform matching statistics."""

    total: int
    matched: int
    skipped: int
    match_rate: float
    matched_videos: list[MatchedVideoResponse]
    error: str | None = None


class SmartMatchResponse(BaseModel):
    """Statistics of a smart-match run."""

    total: int
    matched: int
    skipped: int
    match_rate: float
    platforms: dict[str, PlatformStatsResponse]
    error: str | None = None


class ContestResponse(BaseModel):
    """Contest with its solution link."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    platform: Platform
    start_time: datetime
    end_time: datetime
    status: ContestStatus
    url: str | None = None
    duration: int | None = None
    solution_link: str | None = None
