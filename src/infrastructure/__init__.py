from .errors import (
    ConfigurationError,
    ContestFetchError,
    ContestMatcherError,
    HTTPError,
    LinkStoreError,
    PlaylistFetchError,
    PlaylistURLError,
)

__all__ = [
    "ConfigurationError",
    "ContestFetchError",
    "ContestMatcherError",
    "HTTPError",
    "LinkStoreError",
    "PlaylistFetchError",
    "PlaylistURLError",
]
