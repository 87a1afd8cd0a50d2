"""Tiered matching of contests against playlist videos."""

import math
import re
from typing import Iterable, Protocol

from loguru import logger

from domain.models import MatchType, Platform, PlaylistVideo, VideoMatch

# Tunable constants. The word-based tier needs this share of significant words
# to appear in a video title; words of MIN_SIGNIFICANT_WORD_LENGTH characters or
# fewer are ignored. Changing either value changes reported match rates.
WORD_COVERAGE_THRESHOLD = 0.66
MIN_SIGNIFICANT_WORD_LENGTH = 3
STOP_WORDS = frozenset({"round", "contest", "the", "and", "div"})

DIGITS_PATTERN = re.compile(r"\d+")


class ContestLike(Protocol):
    """Anything with a contest name and platform."""

    name: str
    platform: Platform


def significant_words(contest_name: str) -> list[str]:
    """Lower-cased words of a contest name that are worth searching for."""
    return [
        word
        for word in contest_name.lower().split()
        if len(word) > MIN_SIGNIFICANT_WORD_LENGTH and word not in STOP_WORDS
    ]


class VideoMatcher:
    """Picks the playlist video that best corresponds to a contest."""

    def match(
        self,
        contest: ContestLike,
        round_id: str | None,
        videos: Iterable[PlaylistVideo],
    ) -> VideoMatch | None:
        """
        Find a video for the contest; first successful tier wins.

        Args:
            contest: Contest being matched
            round_id: Identifier from the round-number extractor, or None
            videos: Candidate playlist videos

        Returns:
            VideoMatch with the winning tier, or None when nothing matches
        """
        videos = list(videos)

        if round_id is None:
            return self._match_words(contest, videos)

        video = self._match_exact(round_id, videos)
        if video:
            logger.debug(f"Exact match: {contest.name!r} -> {video.title!r}")
            return VideoMatch(video=video, match_type=MatchType.EXACT)

        logger.debug(f"No exact match for {contest.name!r} with round {round_id!r}")

        digits = DIGITS_PATTERN.search(round_id)
        if not digits:
            return None

        video = self._match_flexible(contest, digits.group(0), videos)
        if video:
            logger.debug(f"Flexible match: {contest.name!r} -> {video.title!r}")
            return VideoMatch(video=video, match_type=MatchType.FLEXIBLE)

        logger.debug(f"No flexible match for {contest.name!r} with number {digits.group(0)}")
        return None

    def _match_exact(self, round_id: str, videos: list[PlaylistVideo]) -> PlaylistVideo | None:
        needle = round_id.lower()
        return next((v for v in videos if needle in v.title.lower()), None)

    def _match_flexible(
        self, contest: ContestLike, number: str, videos: list[PlaylistVideo]
    ) -> PlaylistVideo | None:
        contest_name = contest.name.lower()
        platform = contest.platform
        for video in videos:
            if self._flexible_predicate(platform, contest_name, video.title.lower(), number):
                return video
        return None

    @staticmethod
    def _flexible_predicate(
        platform: Platform, contest_name: str, title: str, number: str
    ) -> bool:
        if number not in title:
            return False

        if platform == Platform.CODEFORCES:
            return "round" in title

        if platform == Platform.LEETCODE:
            return ("weekly" in title or "biweekly" in title) and "contest" in title

        if platform == Platform.CODECHEF:
            if "starters" in contest_name:
                return "starters" in title
            if "cook" in contest_name:
                return "cook" in title
            if "lunchtime" in contest_name:
                return "lunchtime" in title
            return "codechef" in title or "chef" in title

        return False

    def _match_words(self, contest: ContestLike, videos: list[PlaylistVideo]) -> VideoMatch | None:
        words = significant_words(contest.name)
        if not words:
            logger.debug(f"No significant words in {contest.name!r}")
            return None

        min_matches = math.ceil(len(words) * WORD_COVERAGE_THRESHOLD)
        logger.debug(f"Word-based match for {contest.name!r} with: {', '.join(words)}")

        for video in videos:
            title = video.title.lower()
            if sum(1 for word in words if word in title) >= min_matches:
                logger.debug(f"Word-based match: {contest.name!r} -> {video.title!r}")
                return VideoMatch(video=video, match_type=MatchType.WORD_BASED)

        logger.debug(f"No word-based match for {contest.name!r}")
        return None


def match_video(
    contest: ContestLike, round_id: str | None, videos: Iterable[PlaylistVideo]
) -> VideoMatch | None:
    """Convenience function for matching a single contest."""
    return VideoMatcher().match(contest, round_id, videos)


def fallback_url(
    contest: ContestLike, videos: Iterable[PlaylistVideo], playlist_url: str
) -> str:
    """
    Link assigned to a contest the matcher could not place.

    CodeChef Starters contests get any Starters video from the playlist; every
    other contest gets the playlist itself.
    """
    if contest.platform == Platform.CODECHEF and "starters" in contest.name.lower():
        for video in videos:
            if "starters" in video.title.lower():
                return video.watch_url
    return playlist_url
