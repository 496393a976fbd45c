"""
Web Application
===============

FastAPI application factory.

Builds the app from an ApplicationDefinition:
- API metadata (title, description, version, docs URLs)
- CORS middleware configuration
- Router registration
- Lifespan handler recording the start time
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from maven_essentials.boot.definition import ApplicationDefinition
from maven_essentials.core.config import Settings
from maven_essentials.utils.datetime_utils import now

logger = logging.getLogger(__name__)


def create_application(definition: ApplicationDefinition, settings: Settings) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        definition: What to build (metadata and routers)
        settings: Resolved application settings

    Returns:
        Configured FastAPI application instance
    """
    app_name = settings.application_name or definition.name

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        application.state.started_at = now(settings.timezone)
        logger.info("Web application '%s' ready", app_name)
        yield
        logger.info("Web application '%s' stopped", app_name)

    application = FastAPI(
        title=definition.title,
        description=definition.description,
        version=definition.version,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    application.state.started_at = None

    allow_any = "*" in settings.cors_allowed_origins
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        # Credentials cannot be combined with a wildcard origin
        allow_credentials=not allow_any,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for mount in definition.routers:
        application.include_router(
            mount.router,
            prefix=mount.prefix,
            tags=list(mount.tags) or None,
        )

    return application
