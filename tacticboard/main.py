"""Tactical Board Server - FastAPI Backend.

Tactical analysis, coach chat and real-time relay for the tactical board.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from . import __version__
from .config import Settings, get_settings
from .api import api_router
from .services.llm import get_llm_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan - startup and shutdown."""
    settings = app.state.settings
    logger.info(f"Starting {settings.app_name} on port {settings.port}...")
    if not get_llm_client().is_configured:
        logger.warning(
            "No LLM credential configured; coach remarks will use the fallback text"
        )

    yield

    logger.info(f"Shutting down {settings.app_name}...")
    await get_llm_client().close()


def create_app(settings: Settings = None) -> FastAPI:
    """Build the FastAPI application."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title=settings.app_name,
        description="""
        Tactical board API.

        Features:
        - Formation and game phase detection from board snapshots
        - Counter-formation placement for the red team
        - Coach persona chat backed by an LLM
        - Real-time relay of cursor and drawing events
        """,
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    app.include_router(api_router)

    @app.get("/info")
    async def info():
        """API info."""
        return {
            "name": settings.app_name,
            "version": __version__,
            "status": "running",
            "docs": "/docs",
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    if settings.static_dir:
        static_path = Path(settings.static_dir)
        if static_path.is_dir():
            app.mount("/", StaticFiles(directory=str(static_path), html=True), name="static")
        else:
            logger.warning(f"Static directory not found: {static_path}")

    return app


app = create_app()


def run():
    """Console entry point."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "tacticboard.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


# For running with uvicorn directly
if __name__ == "__main__":
    run()
