"""Contest to video matching."""

from .video_matcher import (
    MIN_SIGNIFICANT_WORD_LENGTH,
    STOP_WORDS,
    WORD_COVERAGE_THRESHOLD,
    VideoMatcher,
    fallback_url,
    match_video,
    significant_words,
)

__all__ = [
    "MIN_SIGNIFICANT_WORD_LENGTH",
    "STOP_WORDS",
    "WORD_COVERAGE_THRESHOLD",
    "VideoMatcher",
    "fallback_url",
    "match_video",
    "significant_words",
]
