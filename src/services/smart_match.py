"""Service matching past contests with YouTube solution videos."""

from loguru import logger

from config import SmartMatchConfig
from domain.matching import VideoMatcher, fallback_url
from domain.models import (
    Contest,
    MatchedVideo,
    MatchStatistics,
    Platform,
    PlatformMatchStats,
    PlaylistVideo,
    SmartMatchResult,
)
from domain.parsers.round_number import RoundNumberExtractor
from infrastructure.interfaces import PlaylistClientProtocol
from services.solution_links import SolutionLinkStore

MISSING_API_KEY = "YouTube API key is missing"


class SmartMatchService:
    """Links past contests to videos of their platform's solution playlist."""

    def __init__(
        self,
        *,
        config: SmartMatchConfig,
        playlist_client: PlaylistClientProtocol,
        link_store: SolutionLinkStore,
        matcher: VideoMatcher | None = None,
        extractor: type[RoundNumberExtractor] = RoundNumberExtractor,
    ):
        """Initialize service with dependencies."""
        self.config = config
        self.playlist_client = playlist_client
        self.link_store = link_store
        self.matcher = matcher or VideoMatcher()
        self.extractor = extractor

    async def smart_match(self, contests: list[Contest], persist: bool = True) -> SmartMatchResult:
        """
        Match past contests against their platform playlists.

        Manual links are read once up front; contests that have one are
        skipped before any playlist is fetched. Each platform playlist is
        fetched at most once. When ``persist`` is set, automatic results are
        merged under the manual links and written back as a whole.

        Args:
            contests: Contests of any platform and status
            persist: Whether to write the merged links to the store

        Returns:
            SmartMatchResult with the automatic links and statistics
        """
        if not self.config.youtube_api_key:
            logger.error("YouTube API key is missing, cannot perform smart matching")
            return SmartMatchResult(result_map={}, stats=MatchStatistics(error=MISSING_API_KEY))

        logger.info(f"Starting smart matching for {len(contests)} contests")

        buckets = self._group_by_platform(contests)
        manual_links = await self.link_store.get_manual()

        result_map: dict[str, str] = {}
        stats = MatchStatistics()

        for platform, platform_contests in buckets.items():
            platform_stats = PlatformMatchStats(total=len(platform_contests))
            stats.platforms[platform.value] = platform_stats
            stats.total += len(platform_contests)

            playlist_url = self.config.playlist_for(platform)
            if not platform_contests or not playlist_url:
                logger.debug(f"Skipping {platform.value}: no contests or no playlist URL")
                continue

            to_process = [c for c in platform_contests if not manual_links.get(c.id)]
            platform_stats.skipped = len(platform_contests) - len(to_process)
            stats.skipped += platform_stats.skipped

            if not to_process:
                logger.info(f"Skipping {platform.value}: all contests already have manual links")
                continue

            try:
                videos = await self.playlist_client.fetch_playlist_videos(
                    playlist_url, self.config.youtube_api_key
                )
            except Exception as e:
                logger.error(f"Error processing {platform.value} contests: {e}")
                platform_stats.error = f"Error: {e}"
                continue

            logger.debug(f"Fetched {len(videos)} videos from {platform.value} playlist")

            for contest in to_process:
                result_map[contest.id] = self._link_for(
                    contest, videos, playlist_url, stats, platform_stats
                )

            logger.info(
                f"Matched {platform_stats.matched} out of {len(to_process)} "
                f"{platform.value} contests"
            )

        logger.info(
            f"Smart matching completed: {stats.matched} matched, {stats.skipped} skipped, "
            f"{stats.total} total ({stats.match_rate}%)"
        )

        if persist:
            # Manual links win on collision
            await self.link_store.replace({**result_map, **manual_links})

        return SmartMatchResult(result_map=result_map, stats=stats)

    def _link_for(
        self,
        contest: Contest,
        videos: list[PlaylistVideo],
        playlist_url: str,
        stats: MatchStatistics,
        platform_stats: PlatformMatchStats,
    ) -> str:
        round_id = self.extractor.extract(contest.name)
        match = self.matcher.match(contest, round_id, videos)

        if match is None:
            logger.debug(f"No match for {contest.name!r}, using fallback link")
            return fallback_url(contest, videos, playlist_url)

        stats.matched += 1
        platform_stats.matched += 1
        platform_stats.matched_videos.append(
            MatchedVideo(
                contest_name=contest.name,
                video_title=match.video.title,
                match_type=match.match_type,
            )
        )
        return match.video.watch_url

    @staticmethod
    def _group_by_platform(contests: list[Contest]) -> dict[Platform, list[Contest]]:
        """Bucket past contests per platform, most recent first."""
        buckets: dict[Platform, list[Contest]] = {platform: [] for platform in Platform}
        for contest in contests:
            if contest.platform in buckets and contest.is_past:
                buckets[contest.platform].append(contest)

        for bucket in buckets.values():
            bucket.sort(key=lambda c: c.start_time, reverse=True)
        return buckets

    async def find_video_for_contest(
        self, contest_name: str, playlist_url: str | None
    ) -> str | None:
        """
        Look up the video for a single contest in one playlist.

        Tries the extracted round identifier first, then requires every word
        of the contest name in the video title. Falls back to the playlist URL
        when nothing matches or the playlist cannot be fetched.
        """
        if not contest_name:
            return playlist_url or None

        if not playlist_url or not self.config.youtube_api_key:
            return None

        try:
            videos = await self.playlist_client.fetch_playlist_videos(
                playlist_url, self.config.youtube_api_key
            )
        except Exception as e:
            logger.error(f"Error finding video for contest {contest_name!r}: {e}")
            return playlist_url

        round_id = self.extractor.extract(contest_name)
        if round_id:
            needle = round_id.lower()
            for video in videos:
                if needle in video.title.lower():
                    return video.watch_url

        terms = contest_name.lower().split(" ")
        for video in videos:
            title = video.title.lower()
            if all(term in title for term in terms):
                return video.watch_url

        return playlist_url
