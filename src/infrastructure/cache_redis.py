"""Redis-backed key-value store."""

import redis.asyncio as redis
from loguru import logger

from infrastructure.errors import LinkStoreError

DEFAULT_REDIS_URL = "redis://localhost:6379/0"


class AsyncRedisCache:
    """Async Redis client exposing the key-value store interface."""

    def __init__(self, url: str = DEFAULT_REDIS_URL):
        self.url = url
        self._client: redis.Redis | None = None

    async def connect(self) -> None:
        """Open the connection and verify the server answers."""
        self._client = redis.from_url(self.url, decode_responses=True)
        await self._client.ping()
        logger.debug(f"Connected to Redis at {self.url}")

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.debug("Redis connection closed")

    def _require_client(self) -> redis.Redis:
        if self._client is None:
            raise LinkStoreError("Redis client is not connected")
        return self._client

    async def get(self, key: str) -> str | None:
        return await self._require_client().get(key)

    async def set(self, key: str, value: str) -> None:
        await self._require_client().set(key, value)

    async def delete(self, key: str) -> None:
        await self._require_client().delete(key)
