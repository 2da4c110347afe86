"""FastAPI application factory.

Creates and configures the FastAPI application receiving Algoan webhooks.
The webhook endpoint lives at /hooks; /health is available for probes.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import FastAPI

from algoan_bridge.presentation.api.dependencies import (
    get_algoan_client,
    get_bridge_adapter,
    get_service_account_registry,
)
from algoan_bridge.presentation.api.exception_handlers import (
    setup_exception_handlers,
)
from algoan_bridge.presentation.api.routers import hooks_router
from algoan_bridge_config.settings import Settings, get_settings

API_VERSION = "1.0.0"


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging.

    - Console output with timestamps and module names
    - Configurable log level for connector modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    settings = get_settings()
    log_level_str = settings.log_level.upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("algoan_bridge").setLevel(log_level)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings = get_settings()
    logger.info("Starting %s v%s...", settings.app_name, API_VERSION)

    registry = get_service_account_registry()
    await registry.initialize(
        event_names=settings.event_names,
        target=settings.algoan_webhook_target,
    )
    yield

    logger.info("Shutting down %s...", settings.app_name)
    await get_algoan_client().close()
    await get_bridge_adapter().close()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    _configure_logging()

    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Receives Algoan webhooks and synchronizes Bridge data.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
    )

    setup_exception_handlers(app)

    app.include_router(hooks_router, prefix="/hooks", tags=["Hooks"])

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint."""
        registry = get_service_account_registry()
        return {
            "status": "healthy",
            "version": API_VERSION,
            "service_accounts": len(registry.service_accounts),
        }

    return app
