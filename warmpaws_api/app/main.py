"""
Main entrypoint for the WarmPaws API.

This module assembles the FastAPI application: logging, a permissive
CORS policy, the storage lifecycle and the routers mounted under
``/api``.  The ``create_app`` function builds the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn warmpaws_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .api.router import router as api_router
from .core.config import settings
from .core.db import connect_storage
from .core.errors import register_error_handlers
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Connect to MongoDB on startup and close the client on shutdown."""
    app.state.storage = await connect_storage(settings.mongo_uri, settings.mongo_db_name)
    try:
        yield
    finally:
        await app.state.storage.close()


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so startup is visible.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(api_router, prefix="/api")

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def root() -> str:
        return "WarmPaws Server is Running..."

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
