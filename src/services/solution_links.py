"""Persisted mapping of contest ids to solution video URLs."""

import json

from loguru import logger

from config import SOLUTION_LINKS_KEY
from infrastructure.interfaces import KeyValueStoreProtocol

MANUAL_KEY_SUFFIX = ":manual"


class SolutionLinkStore:
    """Contest id -> URL mapping kept as JSON blobs in a key-value store.

    The combined mapping (automatic matches plus manual links) lives under
    ``key``; the links a user set explicitly are also kept under
    ``key + ":manual"`` so later matching runs can tell them apart.

    Every write reads, modifies and rewrites whole blobs. Concurrent
    writers are not coordinated.
    """

    def __init__(self, store: KeyValueStoreProtocol, key: str = SOLUTION_LINKS_KEY):
        self.store = store
        self.key = key
        self.manual_key = f"{key}{MANUAL_KEY_SUFFIX}"

    async def get(self) -> dict[str, str]:
        """Return all saved links; a missing or corrupt blob reads as empty."""
        links = await self._read(self.key)
        manual = await self._read(self.manual_key)
        return {**links, **manual}

    async def get_manual(self) -> dict[str, str]:
        """Return only the links set explicitly by a user."""
        return await self._read(self.manual_key)

    async def set(self, contest_id: str, url: str) -> None:
        """Add or update the manual link of one contest."""
        manual = await self._read(self.manual_key)
        manual[contest_id] = url
        await self._write(self.manual_key, manual)

        links = await self._read(self.key)
        links[contest_id] = url
        await self._write(self.key, links)
        logger.info(f"Solution link saved for contest {contest_id}: {url}")

    async def remove(self, contest_id: str) -> bool:
        """Remove the link of one contest; returns whether one existed."""
        removed = False
        for key in (self.manual_key, self.key):
            links = await self._read(key)
            if contest_id in links:
                del links[contest_id]
                await self._write(key, links)
                removed = True

        if removed:
            logger.info(f"Solution link removed for contest {contest_id}")
        return removed

    async def replace(self, links: dict[str, str]) -> None:
        """Overwrite the whole combined mapping; manual links are kept."""
        await self._write(self.key, links)
        logger.debug(f"Replaced solution links with {len(links)} entries")

    async def _read(self, key: str) -> dict[str, str]:
        raw = await self.store.get(key)
        if not raw:
            return {}

        try:
            links = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error(f"Error reading saved solution links under {key}: {e}")
            return {}

        if not isinstance(links, dict):
            logger.error(f"Saved solution links are not a mapping: {type(links).__name__}")
            return {}

        return {str(k): str(v) for k, v in links.items()}

    async def _write(self, key: str, links: dict[str, str]) -> None:
        await self.store.set(key, json.dumps(links))
