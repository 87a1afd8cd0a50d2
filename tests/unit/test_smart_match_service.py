"""Unit tests for the smart-match service."""

import json
from dataclasses import replace
from unittest.mock import AsyncMock

import pytest

from config import SOLUTION_LINKS_KEY, SmartMatchConfig
from domain.models import ContestStatus, MatchType, Platform
from infrastructure.errors import PlaylistFetchError
from services.smart_match import SmartMatchService

from tests.conftest import PLAYLISTS, make_contest, make_video

CF_VIDEOS = [
    make_video("cf930", "Codeforces Round 930 (Div 1) Solutions"),
    make_video("cfedu", "Educational Round 150 | A-E"),
]
CC_VIDEOS = [
    make_video("cc80", "CodeChef 80 Starters Problems"),
    make_video("cc12", "Starters 12 recap"),
]
LC_VIDEOS = [make_video("lc390", "LeetCode Weekly Contest 390 Solutions")]


def playlist_client_for(videos_by_playlist):
    client = AsyncMock()

    async def fetch(playlist_url, api_key=None):
        return videos_by_playlist[playlist_url]

    client.fetch_playlist_videos.side_effect = fetch
    return client


@pytest.fixture
def playlist_client():
    return playlist_client_for(
        {
            PLAYLISTS[Platform.CODEFORCES]: CF_VIDEOS,
            PLAYLISTS[Platform.CODECHEF]: CC_VIDEOS,
            PLAYLISTS[Platform.LEETCODE]: LC_VIDEOS,
        }
    )


@pytest.fixture
def service(config, playlist_client, link_store):
    return SmartMatchService(config=config, playlist_client=playlist_client, link_store=link_store)


@pytest.fixture
def contests():
    return [
        make_contest("cf-930", "Codeforces Round 930 (Div. 1)", Platform.CODEFORCES, days_ago=3),
        make_contest("cf-999", "Codeforces Round 999 (Div. 2)", Platform.CODEFORCES, days_ago=1),
        make_contest("cc-80", "CodeChef Starters 80", Platform.CODECHEF),
        make_contest("cc-99", "CodeChef Starters 99 (Rated till 5 star)", Platform.CODECHEF),
        make_contest("lc-390", "LeetCode Weekly Contest 390", Platform.LEETCODE),
    ]


@pytest.mark.asyncio
async def test_smart_match_records_matches_and_fallbacks(service, contests, kv_store):
    result = await service.smart_match(contests)

    assert result.result_map == {
        "cf-930": "https://www.youtube.com/watch?v=cf930",
        "cf-999": PLAYLISTS[Platform.CODEFORCES],
        "cc-80": "https://www.youtube.com/watch?v=cc80",
        "cc-99": "https://www.youtube.com/watch?v=cc80",
        "lc-390": "https://www.youtube.com/watch?v=lc390",
    }

    stats = result.stats
    assert stats.total == 5
    assert stats.matched == 3
    assert stats.skipped == 0
    assert stats.match_rate == 60.0

    cf_stats = stats.platforms["codeforces"]
    assert (cf_stats.total, cf_stats.matched, cf_stats.skipped) == (2, 1, 0)
    assert cf_stats.matched_videos[0].match_type == MatchType.EXACT
    assert stats.platforms["codechef"].matched_videos[0].match_type == MatchType.FLEXIBLE

    stored = json.loads(await kv_store.get(SOLUTION_LINKS_KEY))
    assert stored == result.result_map


@pytest.mark.asyncio
async def test_fetches_each_playlist_once(service, contests, playlist_client):
    await service.smart_match(contests)

    assert playlist_client.fetch_playlist_videos.await_count == 3
    fetched = [call.args[0] for call in playlist_client.fetch_playlist_videos.await_args_list]
    assert fetched == [
        PLAYLISTS[Platform.CODEFORCES],
        PLAYLISTS[Platform.CODECHEF],
        PLAYLISTS[Platform.LEETCODE],
    ]


@pytest.mark.asyncio
async def test_manual_link_skips_matching_and_playlist_fetch(service, link_store, playlist_client):
    await link_store.set("lc-390", "https://example.com/manual")
    contests = [make_contest("lc-390", "LeetCode Weekly Contest 390", Platform.LEETCODE)]

    result = await service.smart_match(contests)

    playlist_client.fetch_playlist_videos.assert_not_awaited()
    assert result.result_map == {}
    lc_stats = result.stats.platforms["leetcode"]
    assert (lc_stats.total, lc_stats.skipped, lc_stats.matched) == (1, 1, 0)
    assert lc_stats.matched_videos == []
    assert lc_stats.match_rate == 0.0
    assert result.stats.match_rate == 0.0


@pytest.mark.asyncio
async def test_manual_links_survive_run(service, contests, link_store):
    manual = "https://www.youtube.com/watch?v=manual"
    await link_store.set("cf-930", manual)
    await link_store.set("other-contest", "https://example.com/other")

    result = await service.smart_match(contests)

    assert "cf-930" not in result.result_map
    assert result.stats.skipped == 1
    assert result.stats.match_rate == 50.0  # 2 matched out of 5 - 1

    links = await link_store.get()
    assert links["cf-930"] == manual
    assert links["other-contest"] == "https://example.com/other"
    assert links["lc-390"] == "https://www.youtube.com/watch?v=lc390"


@pytest.mark.asyncio
async def test_smart_match_is_idempotent(service, contests):
    first = await service.smart_match(contests)
    second = await service.smart_match(contests)

    assert first.result_map == second.result_map
    assert first.stats.matched == second.stats.matched
    assert second.stats.skipped == 0
    assert second.result_map["cf-999"] == PLAYLISTS[Platform.CODEFORCES]


@pytest.mark.asyncio
async def test_saved_fallback_is_matched_again_once_video_exists(config, link_store):
    contest = make_contest("cf-999", "Codeforces Round 999 (Div. 2)", Platform.CODEFORCES)
    videos = {PLAYLISTS[Platform.CODEFORCES]: CF_VIDEOS}
    first = SmartMatchService(
        config=config, playlist_client=playlist_client_for(videos), link_store=link_store
    )
    await first.smart_match([contest])

    videos = {PLAYLISTS[Platform.CODEFORCES]: [make_video("cf999", "Codeforces Round 999 A-F")]}
    second = SmartMatchService(
        config=config, playlist_client=playlist_client_for(videos), link_store=link_store
    )
    result = await second.smart_match([contest])

    assert result.stats.matched == 1
    assert (await link_store.get())["cf-999"] == "https://www.youtube.com/watch?v=cf999"


@pytest.mark.asyncio
async def test_empty_manual_link_does_not_skip(service, link_store):
    await link_store.set("lc-390", "")
    contests = [make_contest("lc-390", "LeetCode Weekly Contest 390", Platform.LEETCODE)]

    result = await service.smart_match(contests)

    assert result.stats.skipped == 0
    assert result.stats.matched == 1
    assert result.result_map == {"lc-390": "https://www.youtube.com/watch?v=lc390"}


@pytest.mark.asyncio
async def test_missing_api_key_aborts_without_persisting(
    playlist_client, link_store, kv_store, contests
):
    service = SmartMatchService(
        config=SmartMatchConfig(youtube_api_key=None, playlists=dict(PLAYLISTS)),
        playlist_client=playlist_client,
        link_store=link_store,
    )

    result = await service.smart_match(contests)

    assert result.result_map == {}
    assert result.stats.error == "YouTube API key is missing"
    playlist_client.fetch_playlist_videos.assert_not_awaited()
    assert await kv_store.get(SOLUTION_LINKS_KEY) is None


@pytest.mark.asyncio
async def test_platform_fetch_error_is_isolated(config, link_store, contests):
    client = AsyncMock()

    async def fetch(playlist_url, api_key=None):
        if playlist_url == PLAYLISTS[Platform.CODECHEF]:
            raise PlaylistFetchError("PLcc", "quota exceeded")
        return CF_VIDEOS if playlist_url == PLAYLISTS[Platform.CODEFORCES] else LC_VIDEOS

    client.fetch_playlist_videos.side_effect = fetch
    service = SmartMatchService(config=config, playlist_client=client, link_store=link_store)

    result = await service.smart_match(contests)

    cc_stats = result.stats.platforms["codechef"]
    assert "quota exceeded" in cc_stats.error
    assert cc_stats.matched == 0
    assert "cc-80" not in result.result_map
    assert result.stats.platforms["leetcode"].matched == 1
    assert result.stats.matched == 2


@pytest.mark.asyncio
async def test_only_past_contests_are_matched(service, playlist_client):
    contests = [
        make_contest(
            "lc-1", "LeetCode Weekly Contest 390", Platform.LEETCODE,
            status=ContestStatus.UPCOMING
        ),
        make_contest(
            "lc-2", "LeetCode Weekly Contest 391", Platform.LEETCODE,
            status=ContestStatus.ONGOING
        ),
    ]

    result = await service.smart_match(contests)

    assert result.stats.total == 0
    assert result.result_map == {}
    playlist_client.fetch_playlist_videos.assert_not_awaited()


@pytest.mark.asyncio
async def test_platform_without_playlist_is_counted_but_not_fetched(link_store, playlist_client):
    config = SmartMatchConfig(
        youtube_api_key="test-key",
        playlists={**PLAYLISTS, Platform.CODECHEF: ""},
    )
    service = SmartMatchService(
        config=config, playlist_client=playlist_client, link_store=link_store
    )
    contest = make_contest("cc-80", "CodeChef Starters 80", Platform.CODECHEF)

    result = await service.smart_match([contest])

    assert result.stats.total == 1
    assert result.stats.platforms["codechef"].matched == 0
    assert result.result_map == {}
    playlist_client.fetch_playlist_videos.assert_not_awaited()


@pytest.mark.asyncio
async def test_persist_flag_leaves_store_untouched(service, contests, kv_store):
    await service.smart_match(contests, persist=False)

    assert await kv_store.get(SOLUTION_LINKS_KEY) is None


@pytest.mark.asyncio
async def test_contests_processed_most_recent_first(service):
    older = make_contest("cf-old", "Codeforces Div Special", Platform.CODEFORCES, days_ago=10)
    newer = replace(older, id="cf-new", start_time=older.start_time.replace(year=2025))

    result = await service.smart_match([older, newer])

    cf_stats = result.stats.platforms["codeforces"]
    assert list(result.result_map) == ["cf-new", "cf-old"]
    assert cf_stats.matched == 0


class TestFindVideoForContest:
    @pytest.mark.asyncio
    async def test_round_match(self, service):
        url = await service.find_video_for_contest(
            "Codeforces Round 930 (Div. 1)", PLAYLISTS[Platform.CODEFORCES]
        )

        assert url == "https://www.youtube.com/watch?v=cf930"

    @pytest.mark.asyncio
    async def test_all_terms_match(self, service):
        url = await service.find_video_for_contest("starters recap", PLAYLISTS[Platform.CODECHEF])

        assert url == "https://www.youtube.com/watch?v=cc12"

    @pytest.mark.asyncio
    async def test_falls_back_to_playlist(self, service):
        playlist = PLAYLISTS[Platform.LEETCODE]

        assert await service.find_video_for_contest("Something else", playlist) == playlist

    @pytest.mark.asyncio
    async def test_empty_name_returns_playlist(self, service, playlist_client):
        playlist = PLAYLISTS[Platform.LEETCODE]

        assert await service.find_video_for_contest("", playlist) == playlist
        playlist_client.fetch_playlist_videos.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_fetch_error_returns_playlist(self, config, link_store):
        client = AsyncMock()
        client.fetch_playlist_videos.side_effect = PlaylistFetchError("PLlc", "boom")
        service = SmartMatchService(config=config, playlist_client=client, link_store=link_store)
        playlist = PLAYLISTS[Platform.LEETCODE]

        url = await service.find_video_for_contest("LeetCode Weekly Contest 1", playlist)

        assert url == playlist
