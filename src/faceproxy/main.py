"""FastAPI application entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

import httpx
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from faceproxy.api.routes import router
from faceproxy.config import get_settings
from faceproxy.face.proxy import FaceProxy

logger = logging.getLogger(__name__)


def create_upstream_client(transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    """Build the shared outbound client; redirects from the provider are followed."""
    return httpx.AsyncClient(transport=transport, follow_redirects=True)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: initialize on startup, clean up on shutdown."""
    settings = get_settings()
    app.state.settings = settings

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    logger.info(
        "Starting FaceProxy (endpoint=%s, profile=%s)",
        settings.endpoint or "<unset>",
        settings.detection_profile,
    )
    if not settings.configured:
        logger.warning("AZURE_FACE_ENDPOINT and AZURE_FACE_KEY must both be set; detection calls will fail")

    async with create_upstream_client() as client:
        app.state.face_proxy = FaceProxy(settings, client)
        logger.info("FaceProxy ready")
        yield
        logger.info("Shutting down FaceProxy")

    logger.info("FaceProxy shutdown complete")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    application = FastAPI(
        title="FaceProxy",
        description="Request proxy for Azure Face detection by image URL",
        version="0.1.0",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(router)
    return application


app = create_app()


def run() -> None:
    """Serve the application with uvicorn using the configured host and port."""
    settings = get_settings()
    uvicorn.run("faceproxy.main:app", host=settings.host, port=settings.port)
