"""Parsers for extracting data from external sources."""

from .contest_list_parser import ContestListParser
from .url_parser import PlaylistURLParser

__all__ = [
    "ContestListParser",
    "PlaylistURLParser",
]
