"""Litestar application factory."""

from litestar import Litestar, MediaType, Request, Response
from litestar.datastructures import State
from litestar.di import Provide
from litestar.status_codes import HTTP_502_BAD_GATEWAY, HTTP_503_SERVICE_UNAVAILABLE
from loguru import logger

from api.dependencies import provide_config, provide_kv_store
from api.routes import ContestController, SmartMatchController, SolutionController
from config import SmartMatchConfig, load_config
from infrastructure.errors import ConfigurationError, ContestMatcherError


def handle_matcher_error(request: Request, exc: ContestMatcherError) -> Response:
    if isinstance(exc, ConfigurationError):
        status_code = HTTP_503_SERVICE_UNAVAILABLE
    else:
        status_code = HTTP_502_BAD_GATEWAY
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return Response(
        content={"detail": str(exc)},
        status_code=status_code,
        media_type=MediaType.JSON,
    )


def create_app(config: SmartMatchConfig | None = None) -> Litestar:
    """Build the API application."""
    return Litestar(
        route_handlers=[ContestController, SmartMatchController, SolutionController],
        dependencies={
            "config": Provide(provide_config),
            "kv_store": Provide(provide_kv_store),
        },
        exception_handlers={ContestMatcherError: handle_matcher_error},
        state=State({"config": config or load_config()}),
    )
