from config import SmartMatchConfig, load_config
from domain.models import Platform
from infrastructure.interfaces import KeyValueStoreProtocol
from services.contest_feed import ContestFeedService
from services.smart_match import SmartMatchService
from services.solution_links import SolutionLinkStore


def create_link_store(
    config: SmartMatchConfig, store: KeyValueStoreProtocol | None = None
) -> SolutionLinkStore:
    """Factory function for the solution link store, file-backed by default."""
    from infrastructure.storage import JSONFileKeyValueStore

    return SolutionLinkStore(
        store or JSONFileKeyValueStore(config.solution_links_path),
        key=config.solution_links_key,
    )


def create_smart_match_service(
    config: SmartMatchConfig | None = None,
    store: KeyValueStoreProtocol | None = None,
) -> SmartMatchService:
    """Factory function to create smart match service with all dependencies."""
    from infrastructure.http_client import AsyncHTTPClient
    from infrastructure.youtube_client import YouTubeClient

    config = config or load_config()
    http_client = AsyncHTTPClient(timeout=config.http_timeout)

    return SmartMatchService(
        config=config,
        playlist_client=YouTubeClient(http_client, api_key=config.youtube_api_key),
        link_store=create_link_store(config, store),
    )


def create_contest_feed_service(
    config: SmartMatchConfig | None = None,
    store: KeyValueStoreProtocol | None = None,
) -> ContestFeedService:
    """Factory function to create contest feed service with all dependencies."""
    from infrastructure.contest_clients import CodeforcesContestClient, ProxyContestClient
    from infrastructure.http_client import AsyncHTTPClient

    config = config or load_config()
    http_client = AsyncHTTPClient(timeout=config.http_timeout)

    clients = [CodeforcesContestClient(http_client, config.codeforces_contests_url)]
    if config.codechef_contests_url:
        clients.append(
            ProxyContestClient(Platform.CODECHEF, config.codechef_contests_url, http_client)
        )
    if config.leetcode_contests_url:
        clients.append(
            ProxyContestClient(Platform.LEETCODE, config.leetcode_contests_url, http_client)
        )

    return ContestFeedService(
        config=config,
        clients=clients,
        link_store=create_link_store(config, store),
    )


__all__ = [
    "ContestFeedService",
    "SmartMatchService",
    "SolutionLinkStore",
    "create_contest_feed_service",
    "create_link_store",
    "create_smart_match_service",
]
