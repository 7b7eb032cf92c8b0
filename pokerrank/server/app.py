"""
FastAPI Application Entry Point for PokerRank.

This module creates and configures the FastAPI application with:
- HTTP routes for hand evaluation and comparison
- HTTP routes for the heads-up deal sequence
- CORS middleware for development
"""

import os
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pokerrank import __version__
from pokerrank.server.routes import router

LOG_LEVEL_ENV = "POKERRANK_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the server process."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def create_app(log_level: str = "INFO") -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        log_level: Logging level name for the server process

    Returns:
        Configured FastAPI application instance
    """
    configure_logging(log_level)

    app = FastAPI(
        title="PokerRank",
        description="Texas Hold'em hand ranking engine with a heads-up deal API",
        version=__version__,
    )

    # CORS middleware for development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include HTTP routes
    app.include_router(router)

    @app.on_event("startup")
    async def startup_event():
        logger.info("PokerRank server starting up...")

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info("PokerRank server shutting down...")

    return app


# Create the application instance
app = create_app(log_level=os.environ.get(LOG_LEVEL_ENV, "INFO"))
