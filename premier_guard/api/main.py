"""
FastAPI application with assembled routers.

Initializes FastAPI app, registers routers, adds middleware, and configures
lifespan.

Dependencies: fastapi, premier_guard.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

from contextlib import asynccontextmanager
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from premier_guard.api import api_router
from premier_guard.api.deps.dependencies import get_service_cache
from premier_guard.configs import get_settings
from premier_guard.observability.logger import configure_logging
from premier_guard.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging and builds the classifier once so configuration
    errors surface at startup instead of on the first request.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Application startup: logging configured")

    cache = get_service_cache()
    try:
        _ = cache.classifier
        logger.info("Team classifier initialized")
    except Exception as e:
        logger.exception(
            "Failed to initialize team classifier",
            extra={"error": str(e)},
        )
        raise

    yield

    # Shutdown
    cache.clear()
    logger.info("Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title="Premier League Mention Classifier",
        description="Flags messages that reference a Premier League team",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Observability middleware (added first = last to execute)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Permissive CORS: any origin may call the classifier
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "premier_guard.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
