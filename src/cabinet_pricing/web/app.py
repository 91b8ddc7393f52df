"""FastAPI application factory."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cabinet_pricing import __version__
from cabinet_pricing.web.exceptions import register_exception_handlers
from cabinet_pricing.web.routers import (
    price_list_router,
    quote_router,
    validate_router,
)

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title="Cabinet Pricing API",
        description="REST API for quoting cabinets and generating price lists",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(quote_router, prefix="/api/v1")
    app.include_router(validate_router, prefix="/api/v1")
    app.include_router(price_list_router, prefix="/api/v1")

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    logger.debug("Created pricing API application")
    return app


# Application instance for ASGI servers (uvicorn)
app = create_app()
