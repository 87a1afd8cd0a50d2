"""API routes for manual solution links."""

from litestar import Controller, delete, get, put
from litestar.exceptions import NotFoundException
from litestar.status_codes import HTTP_200_OK, HTTP_204_NO_CONTENT
from loguru import logger

from api.dependencies import ConfigDependency, StoreDependency
from api.schemas.solutions import (
    SolutionLinkRequest,
    SolutionLinkResponse,
    SolutionLinksResponse,
)
from services import create_link_store


class SolutionController(Controller):
    """Controller for solution link endpoints."""

    path = "/solutions"

    @get("/", status_code=HTTP_200_OK)
    async def list_links(
        self, config: ConfigDependency, kv_store: StoreDependency
    ) -> SolutionLinksResponse:
        """Return every saved solution link."""
        links = await create_link_store(config, kv_store).get()
        return SolutionLinksResponse(links=links)

    @put("/{contest_id:str}", status_code=HTTP_200_OK)
    async def save_link(
        self,
        contest_id: str,
        data: SolutionLinkRequest,
        config: ConfigDependency,
        kv_store: StoreDependency,
    ) -> SolutionLinkResponse:
        """
        Save or replace the manual solution link of a contest.

        Manual links are never overwritten by smart matching.
        """
        logger.debug(f"API request to save solution link: contest_id={contest_id}")

        url = data.url
        await create_link_store(config, kv_store).set(contest_id, url)
        return SolutionLinkResponse(contest_id=contest_id, url=url)

    @delete("/{contest_id:str}", status_code=HTTP_204_NO_CONTENT)
    async def remove_link(
        self, contest_id: str, config: ConfigDependency, kv_store: StoreDependency
    ) -> None:
        """Remove the solution link of a contest."""
        logger.debug(f"API request to remove solution link: contest_id={contest_id}")

        removed = await create_link_store(config, kv_store).remove(contest_id)
        if not removed:
            raise NotFoundException(f"No solution link for contest {contest_id}")
