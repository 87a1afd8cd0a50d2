"""Service aggregating contests from all platforms."""

import asyncio
from dataclasses import replace

from loguru import logger

from config import SmartMatchConfig
from domain.models import Contest
from infrastructure.interfaces import ContestClientProtocol
from services.solution_links import SolutionLinkStore


class ContestFeedService:
    """Fetches contest lists concurrently and decorates them with solution links."""

    def __init__(
        self,
        *,
        config: SmartMatchConfig,
        clients: list[ContestClientProtocol],
        link_store: SolutionLinkStore,
    ):
        self.config = config
        self.clients = clients
        self.link_store = link_store

    async def fetch_all_contests(self) -> list[Contest]:
        """
        Fetch every platform's contests in parallel.

        A platform whose fetch fails contributes no contests; the others are
        returned regardless.
        """
        results = await asyncio.gather(
            *(client.fetch_contests() for client in self.clients), return_exceptions=True
        )

        contests: list[Contest] = []
        for client, result in zip(self.clients, results):
            if isinstance(result, Exception):
                logger.warning(f"Failed to fetch contests via {type(client).__name__}: {result}")
                continue
            contests.extend(result)

        logger.info(f"Fetched {len(contests)} contests from {len(self.clients)} sources")
        return contests

    async def attach_solution_links(self, contests: list[Contest]) -> list[Contest]:
        """Set each contest's solution link to its saved link or its platform playlist."""
        links = await self.link_store.get()
        return [
            replace(
                contest,
                solution_link=links.get(contest.id) or self.config.playlist_for(contest.platform),
            )
            for contest in contests
        ]

    async def get_contests(self) -> list[Contest]:
        """Fetch all contests with solution links applied."""
        contests = await self.fetch_all_contests()
        return await self.attach_solution_links(contests)
