from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from corsgate.api.handler import build_router
from corsgate.core.config import config
from corsgate.core.errors import ResourceDefinitionError, ResourcesFileNotFoundError
from corsgate.core.utils.logging import configure_logging
from corsgate.resources.loader import YamlResourceLoader
from corsgate.resources.models import Resource

logger = structlog.get_logger(__name__)

RESERVED_PATHS = frozenset({"/health"})


def demo_resources() -> list[Resource]:
    """Resources served when no resources file is configured."""
    access_control: dict[str, object] = {}
    if config.cors.default_allow_origin is not None:
        access_control = {"allow-origin": config.cors.default_allow_origin}
    return [Resource.model_validate({"path": "/", "methods": {"GET": "Hello"}, "access-control": access_control})]


async def load_resources() -> list[Resource]:
    loader = YamlResourceLoader(config.resources.file_path, default_allow_origin=config.cors.default_allow_origin)
    try:
        return await loader.get_resources()
    except ResourcesFileNotFoundError:
        logger.warning("resources_file_missing", file=config.resources.file_path, fallback="demo")
        return demo_resources()


def mount_resources(app: FastAPI, resources: list[Resource]) -> None:
    reserved = sorted(r.path for r in resources if r.path in RESERVED_PATHS)
    if reserved:
        raise ResourceDefinitionError(f"Resource paths reserved by the service: {', '.join(reserved)}")
    app.state.resources = resources
    app.include_router(build_router(resources))


def create_app(resources: list[Resource] | None = None) -> FastAPI:
    """
    Build the application.

    When ``resources`` is None they are loaded from the configured file at startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if resources is None:
            mount_resources(app, await load_resources())
        logger.info("corsgate_started", resources=len(app.state.resources), environment=config.environment)
        yield
        logger.info("corsgate_stopped")

    app = FastAPI(
        title="corsgate",
        description="Resources served with per-resource CORS origin policies.",
        version="0.1.0",
        debug=config.debug,
        lifespan=lifespan,
    )
    app.state.resources = []

    # --- Health Check ---

    @app.get("/health", tags=["Health Check"])
    async def health() -> dict[str, object]:
        """A simple health check endpoint to confirm the service is running."""
        return {"status": "ok", "resources": len(app.state.resources)}

    if resources is not None:
        mount_resources(app, resources)

    return app


# --- Application Setup ---

config.validate()
configure_logging(config.logging.level, config.logging.format)

app = create_app()
