"""Shared fixtures for tests."""

from datetime import datetime, timedelta, timezone

import pytest

from config import SmartMatchConfig
from domain.models import Contest, ContestStatus, Platform, PlaylistVideo
from infrastructure.storage import InMemoryKeyValueStore
from services.solution_links import SolutionLinkStore

BASE_TIME = datetime(2024, 3, 1, 14, 35, tzinfo=timezone.utc)

PLAYLISTS = {
    Platform.CODEFORCES: "https://www.youtube.com/playlist?list=PLcf",
    Platform.CODECHEF: "https://www.youtube.com/playlist?list=PLcc",
    Platform.LEETCODE: "https://www.youtube.com/playlist?list=PLlc",
}


def make_contest(
    contest_id: str,
    name: str,
    platform: Platform,
    days_ago: int = 1,
    status: ContestStatus = ContestStatus.PAST,
) -> Contest:
    start = BASE_TIME - timedelta(days=days_ago)
    return Contest(
        id=contest_id,
        name=name,
        platform=platform,
        start_time=start,
        end_time=start + timedelta(hours=2),
        status=status,
    )


def make_video(video_id: str, title: str) -> PlaylistVideo:
    return PlaylistVideo(video_id=video_id, title=title)


@pytest.fixture
def config() -> SmartMatchConfig:
    return SmartMatchConfig(youtube_api_key="test-key", playlists=dict(PLAYLISTS))


@pytest.fixture
def kv_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def link_store(kv_store) -> SolutionLinkStore:
    return SolutionLinkStore(kv_store)
