"""FastAPI application entry point for Case Registry."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from structlog import get_logger

from case_registry import __version__
from case_registry.api.middleware.logging_middleware import LoggingMiddleware
from case_registry.api.routes.case_registration import router as case_registration_router
from case_registry.api.routes.health import router as health_router
from case_registry.api.routes.metrics import router as metrics_router
from case_registry.bootstrap.case_registration import (
    get_case_backend_config,
    get_registration_config,
)
from case_registry.bootstrap.logging import configure_structlog

logger = get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    config = get_registration_config()
    configure_structlog(config.environment)
    logger.info(
        "case_registry_started",
        environment=config.environment,
        backend="stub" if get_case_backend_config().uses_stubs else "http",
    )
    yield


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    app = FastAPI(
        title="Case Registry API",
        description="Authorization-gated legal case registration",
        version=__version__,
        lifespan=lifespan,
    )
    app.add_middleware(LoggingMiddleware)
    app.include_router(health_router)
    app.include_router(metrics_router)
    app.include_router(case_registration_router)
    return app


app = create_app()
