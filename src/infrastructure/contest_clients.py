"""Clients fetching contest lists from the platforms."""

from typing import Optional

from loguru import logger

from config import CODEFORCES_CONTESTS_URL
from domain.models import Contest, Platform
from infrastructure.errors import ContestFetchError
from infrastructure.http_client import AsyncHTTPClient
from infrastructure.parsers.contest_list_parser import ContestListParser


class CodeforcesContestClient:
    """Reads contests from the public Codeforces API."""

    platform = Platform.CODEFORCES

    def __init__(
        self,
        http_client: Optional[AsyncHTTPClient] = None,
        url: str = CODEFORCES_CONTESTS_URL,
    ):
        self.http_client = http_client or AsyncHTTPClient()
        self.url = url

    async def fetch_contests(self) -> list[Contest]:
        logger.debug(f"Fetching Codeforces contests from {self.url}")
        try:
            data = await self.http_client.get_json(self.url)
            return ContestListParser.parse_codeforces(data)
        except Exception as e:
            raise ContestFetchError(self.platform.value, str(e)) from e


class ProxyContestClient:
    """Reads normalized contest records from a proxy endpoint.

    The endpoint returns either a JSON list of records or an object with the
    list under ``contests``.
    """

    def __init__(self, platform: Platform, url: str, http_client: Optional[AsyncHTTPClient] = None):
        self.platform = platform
        self.url = url
        self.http_client = http_client or AsyncHTTPClient()

    async def fetch_contests(self) -> list[Contest]:
        logger.debug(f"Fetching {self.platform.value} contests from {self.url}")
        try:
            data = await self.http_client.get_json(self.url)
            records = data.get("contests", []) if isinstance(data, dict) else data
            return ContestListParser.parse_records(records, self.platform)
        except Exception as e:
            raise ContestFetchError(self.platform.value, str(e)) from e
