"""Extraction of round identifiers from contest titles."""

import re

from loguru import logger

from domain.models import Platform

# Order matters: the first keyword found decides the platform branch
PLATFORM_KEYWORDS: tuple[tuple[str, Platform], ...] = (
    ("codeforces", Platform.CODEFORCES),
    ("codechef", Platform.CODECHEF),
    ("leetcode", Platform.LEETCODE),
)


def classify_title(title: str) -> Platform | None:
    """Detect which platform a raw contest title names, if any."""
    if not title:
        return None

    title_lower = title.lower()
    for keyword, platform in PLATFORM_KEYWORDS:
        if keyword in title_lower:
            return platform
    return None


class RoundNumberExtractor:
    """Turns contest titles like "Codeforces Round 1010 (Div. 1)" into "Round 1010"."""

    EDUCATIONAL_PATTERN = re.compile(r"Educational\s+(?:Codeforces\s+)?Round\s+\d+", re.IGNORECASE)
    GLOBAL_PATTERN = re.compile(r"Global\s+Round\s+\d+", re.IGNORECASE)
    ROUND_PATTERN = re.compile(r"Round\s+\d+", re.IGNORECASE)

    COOK_OFF_PATTERN = re.compile(r"Cook[- ]Off\s+\d+", re.IGNORECASE)
    LUNCHTIME_PATTERN = re.compile(r"Lunchtime\s+\d+", re.IGNORECASE)
    # Matches "Starters 177" and "Starters 177 (Rated till 5 star)"
    STARTERS_PATTERN = re.compile(r"Starters\s+\d+(?:\s*\([\w\s]+\))?", re.IGNORECASE)
    QUALIFIER_PATTERN = re.compile(r"\([\w\s]+\)")

    WEEKLY_PATTERN = re.compile(r"Weekly\s+Contest\s+\d+", re.IGNORECASE)
    BIWEEKLY_PATTERN = re.compile(r"Biweekly\s+Contest\s+\d+", re.IGNORECASE)

    GENERIC_PATTERN = re.compile(r"(?:round|contest)\s+\d+", re.IGNORECASE)

    @classmethod
    def extract(cls, title: str) -> str | None:
        """
        Extract a normalized round identifier from a contest title.

        Returns None when the title carries no recognizable round number.
        """
        if not title:
            return None

        title_lower = title.lower()
        platform = classify_title(title)

        round_id = None
        if platform == Platform.CODEFORCES:
            round_id = cls._extract_codeforces(title, title_lower)
        elif platform == Platform.CODECHEF:
            round_id = cls._extract_codechef(title)
        elif platform == Platform.LEETCODE:
            round_id = cls._extract_leetcode(title)

        # CodeChef titles frequently omit the platform name
        if round_id is None and "starters" in title_lower:
            round_id = cls._extract_starters(title)

        if round_id is None:
            round_id = cls._search(cls.GENERIC_PATTERN, title)

        logger.debug(f"Extracted round number {round_id!r} from {title!r}")
        return round_id

    @classmethod
    def _extract_codeforces(cls, title: str, title_lower: str) -> str | None:
        if "educational" in title_lower:
            round_id = cls._search(cls.EDUCATIONAL_PATTERN, title)
            if round_id:
                return round_id

        if "global" in title_lower:
            round_id = cls._search(cls.GLOBAL_PATTERN, title)
            if round_id:
                return round_id

        return cls._search(cls.ROUND_PATTERN, title)

    @classmethod
    def _extract_codechef(cls, title: str) -> str | None:
        return (
            cls._search(cls.COOK_OFF_PATTERN, title)
            or cls._search(cls.LUNCHTIME_PATTERN, title)
            or cls._extract_starters(title)
        )

    @classmethod
    def _extract_leetcode(cls, title: str) -> str | None:
        return cls._search(cls.WEEKLY_PATTERN, title) or cls._search(cls.BIWEEKLY_PATTERN, title)

    @classmethod
    def _extract_starters(cls, title: str) -> str | None:
        match = cls.STARTERS_PATTERN.search(title)
        if not match:
            return None
        # Keep only "Starters X", the rating qualifier varies between listings
        return cls.QUALIFIER_PATTERN.sub("", match.group(0)).strip()

    @staticmethod
    def _search(pattern: re.Pattern[str], title: str) -> str | None:
        match = pattern.search(title)
        return match.group(0).strip() if match else None


def extract_round_number(title: str) -> str | None:
    """Convenience function for extracting a round identifier."""
    return RoundNumberExtractor.extract(title)
