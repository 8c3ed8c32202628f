"""FastAPI application factory.

Main entry point for the Tutorials Web API.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from tutorials import __version__
from tutorials.config.app_config import AppConfig, load_app_config
from tutorials.core.tutorial_store import (
    StorageError,
    TutorialNotFoundError,
    TutorialStore,
    TutorialValidationError,
)
from tutorials.db.database import open_tutorial_store
from tutorials.web.routes import health_router, tutorials_router

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Open the store at startup and close it at shutdown.

    A store injected through ``create_app`` is used as-is and left open;
    its owner closes it.
    """
    config: AppConfig = app.state.config
    owns_store = app.state.store is None

    if owns_store:
        app.state.store = open_tutorial_store(config.database)

    store: TutorialStore = app.state.store
    logger.info(
        "api_startup",
        store=type(store).__name__,
        database=config.database.get_database_name(),
        database_reachable=await store.ping(),
    )
    yield

    if owns_store:
        await store.close()
        app.state.store = None
    logger.info("api_shutdown")


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ()) if p != "body"]
        prefix = f"{'.'.join(loc)}: " if loc else ""
        parts.append(f"{prefix}{err.get('msg', 'invalid value')}")
    return "; ".join(parts) or "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    """Map store errors and request failures to ``{"message": ...}`` bodies."""

    @app.exception_handler(TutorialValidationError)
    async def handle_validation_error(request: Request, exc: TutorialValidationError):
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        return _error(status.HTTP_400_BAD_REQUEST, _format_validation_errors(exc))

    @app.exception_handler(TutorialNotFoundError)
    async def handle_not_found(request: Request, exc: TutorialNotFoundError):
        return _error(status.HTTP_404_NOT_FOUND, str(exc))

    @app.exception_handler(StorageError)
    async def handle_storage_error(request: Request, exc: StorageError):
        logger.error("api.storage_error", path=request.url.path, error=str(exc))
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.exception("api.unhandled_error", path=request.url.path)
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Some error occurred while processing the request.",
        )


def create_app(
    store: TutorialStore | None = None,
    config: AppConfig | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Store handle to serve from. When omitted, a MongoDB store is
            opened from configuration at startup.
        config: Configuration; defaults to ``load_app_config()``.

    Returns:
        Configured FastAPI app instance
    """
    config = config or load_app_config()

    app = FastAPI(
        title="Tutorials API",
        description="REST API for managing tutorials",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(tutorials_router)

    return app


# Default app instance for uvicorn
app = create_app()
