"""Async HTTP client built on curl_cffi."""

from typing import Any

from curl_cffi.requests import AsyncSession, Response
from loguru import logger

from infrastructure.errors import HTTPError

DEFAULT_HEADERS = {
    "Accept": "*/*",
    "User-Agent": "Mozilla/5.0 (X11; Linux x86_64; rv:109.0) Gecko/20100101 Firefox/115.0",
}


class AsyncHTTPClient:
    """Thin async wrapper around a curl_cffi session.

    A new session is opened per request so the client can be shared freely
    without lifecycle management.
    """

    def __init__(self, timeout: float = 30, impersonate: str = "chrome"):
        self.timeout = timeout
        self.impersonate = impersonate

    async def get(self, url: str, params: dict[str, Any] | None = None) -> Response:
        """Perform a GET request and return the raw response."""
        logger.debug(f"GET {url}")
        async with AsyncSession(impersonate=self.impersonate) as session:
            response = await session.get(
                url, params=params, headers=DEFAULT_HEADERS, timeout=self.timeout
            )
        logger.debug(f"GET {url} -> {response.status_code}")
        return response

    async def get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        """GET a URL and decode its JSON body, raising HTTPError on failure."""
        response = await self.get(url, params=params)
        if response.status_code >= 400:
            raise HTTPError(url, response.status_code, response.text)
        return response.json()
