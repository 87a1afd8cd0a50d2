from collections.abc import AsyncGenerator

from litestar.datastructures import State
from litestar.params import SkipValidation
from loguru import logger

from config import SmartMatchConfig
from infrastructure.cache_redis import AsyncRedisCache
from infrastructure.interfaces import KeyValueStoreProtocol
from infrastructure.storage import JSONFileKeyValueStore


async def provide_config(state: State) -> SmartMatchConfig:
    return state.config


async def provide_kv_store(
    state: State,
) -> AsyncGenerator[KeyValueStoreProtocol, None]:
    """Redis when configured and reachable, the JSON file otherwise."""
    config: SmartMatchConfig = state.config
    file_store = JSONFileKeyValueStore(config.solution_links_path)

    if not config.redis_url:
        yield file_store
        return

    client = AsyncRedisCache(config.redis_url)
    try:
        await client.connect()
        logger.debug("Connected to Redis for request")
    except Exception as e:
        logger.warning(f"Failed to connect to Redis, using file store: {e}")
        await client.close()
        yield file_store
        return

    try:
        yield client
    finally:
        await client.close()


ConfigDependency = SkipValidation[SmartMatchConfig]
StoreDependency = SkipValidation[KeyValueStoreProtocol]
