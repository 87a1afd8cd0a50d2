"""API routes for smart matching."""

from litestar import Controller, post
from litestar.status_codes import HTTP_200_OK
from loguru import logger

from api.dependencies import ConfigDependency, StoreDependency
from api.schemas.smart_match import SmartMatchRequest, SmartMatchResponse
from services import create_smart_match_service


class SmartMatchController(Controller):
    """Controller for the smart-match endpoint."""

    path = "/smart-match"

    @post("/", status_code=HTTP_200_OK)
    async def run_smart_match(
        self,
        data: SmartMatchRequest,
        config: ConfigDependency,
        kv_store: StoreDependency,
    ) -> SmartMatchResponse:
        """
        Match the given contests with solution videos and save the links.

        A missing YouTube API key is reported in the ``error`` field and
        nothing is saved.
        """
        logger.debug(f"API request for smart matching: {len(data.contests)} contests")

        service = create_smart_match_service(config, kv_store)
        result = await service.smart_match([c.to_domain() for c in data.contests])

        return SmartMatchResponse.model_validate(result.stats.to_dict())
