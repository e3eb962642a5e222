"""
Main entrypoint for the Football Academy API.

This module assembles the FastAPI application: logging, CORS, error
handlers, the ``/api`` router and the liveness route.  The external
collaborators (Supabase record store and auth, Cloudinary uploads and
the token verifier) are built once when the application starts and
kept on ``app.state``.  ``create_app`` accepts pre-built collaborators
so tests and alternative deployments can supply their own.

Run locally with::

    uvicorn academy_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .api.dependencies import ensure_collaborators
from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.security import TokenVerifier

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    record_store=None,
    media_uploader=None,
    credential_store=None,
    token_verifier: Optional[TokenVerifier] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Collaborators that are not passed in are created from ``settings``
    during startup.  The record store and the credential store each get
    their own Supabase client.
    """
    settings = settings or default_settings
    setup_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        ensure_collaborators(app)
        logger.info("%s %s ready", settings.project_name, settings.api_version)
        yield

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug, lifespan=lifespan)

    app.state.settings = settings
    app.state.record_store = record_store
    app.state.media_uploader = media_uploader
    app.state.credential_store = credential_store
    app.state.token_verifier = token_verifier or TokenVerifier(settings.jwt_secret, settings.jwt_audience)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(api_router, prefix="/api")

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def liveness() -> str:
        return "Server akademi sepak bola berjalan"

    return app


# Create the application instance at import time so that uvicorn and
# serverless runtimes can discover it without calling create_app.
app = create_app()
