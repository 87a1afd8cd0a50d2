"""API routes for contest listings."""

from litestar import Controller, get
from litestar.status_codes import HTTP_200_OK
from loguru import logger

from api.dependencies import ConfigDependency, StoreDependency
from api.schemas.smart_match import ContestResponse
from services import create_contest_feed_service


class ContestController(Controller):
    """Controller for contest-related endpoints."""

    path = "/contests"

    @get("/", status_code=HTTP_200_OK)
    async def list_contests(
        self, config: ConfigDependency, kv_store: StoreDependency
    ) -> list[ContestResponse]:
        """Return contests of all platforms with their solution links."""
        logger.debug("API request for contest list")

        service = create_contest_feed_service(config, kv_store)
        contests = await service.get_contests()
        return [ContestResponse.model_validate(contest) for contest in contests]
