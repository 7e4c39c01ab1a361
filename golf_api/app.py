from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator, Optional

from fastapi import APIRouter, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from golf_api import __version__
from golf_api.api.health import health as _health_handler
from golf_api.api.routers import courses, holes, players, welcome
from golf_api.config import Settings, get_settings
from golf_api.db import DATABASE_NAME, build_client, probe_connection
from golf_api.errors import StoreError
from golf_api.metrics import MetricsMiddleware, metrics_app

logger = logging.getLogger(__name__)


def _attach_client(app: FastAPI, client: Any, *, owned: bool) -> None:
    app.state.mongo_client = client
    app.state.owns_mongo_client = owned
    app.state.database = client[DATABASE_NAME]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    if app.state.mongo_client is None:
        _attach_client(app, build_client(app.state.settings), owned=True)
        await probe_connection(app.state.mongo_client)
    try:
        yield
    finally:
        if app.state.owns_mongo_client:
            await app.state.mongo_client.close()
            app.state.mongo_client = None
            app.state.database = None


async def _store_error_handler(_request: Request, exc: StoreError) -> JSONResponse:
    return JSONResponse(
        {"error": exc.message}, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


def create_app(
    settings: Optional[Settings] = None, mongo_client: Any = None
) -> FastAPI:
    """Build the API.

    An injected ``mongo_client`` is used as-is and never closed by the app;
    otherwise a client is created during startup, before requests are served.
    """

    settings = settings or get_settings()
    app = FastAPI(
        title="Golf Course Database API", version=__version__, lifespan=lifespan
    )
    app.state.settings = settings
    app.state.mongo_client = None
    app.state.owns_mongo_client = False
    app.state.database = None
    if mongo_client is not None:
        _attach_client(app, mongo_client, owned=False)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(MetricsMiddleware)
    app.add_exception_handler(StoreError, _store_error_handler)

    app.include_router(welcome.router)
    app.include_router(courses.router)
    app.include_router(players.router)
    app.include_router(holes.router)
    app.add_api_route(
        "/health",
        _health_handler,
        methods=["GET"],
        response_model=None,
        tags=["health"],
    )

    _metrics_router = APIRouter()

    @_metrics_router.get("/metrics", include_in_schema=False)
    async def _metrics_endpoint(request: Request):
        return await metrics_app(request)

    app.include_router(_metrics_router)

    static_dir = Path(settings.static_dir).expanduser()
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(static_dir), html=True), name="static")
    else:
        logger.debug("static directory %s not found; not serving files", static_dir)

    return app


app = create_app()


def main() -> None:
    import uvicorn

    from golf_api.log import configure_logging

    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("app listening on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


__all__ = ["app", "create_app", "lifespan", "main"]
