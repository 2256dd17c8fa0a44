"""
FastAPI application factory.

Creates and configures the FastAPI application instance with the GraphQL
endpoint mounted at /graphql.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import Settings, get_settings
from shared.database import close_mongo_client, ensure_indexes, get_database
from .routes import health
from .schema import SocialDeckGraphQLRouter, get_context, schema

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings: Settings = app.state.settings
    logger.info("Starting %s on %s:%s", settings.app_name, settings.host, settings.port)
    if not settings.jwt_secret:
        logger.warning("SOCIALDECK_JWT_SECRET is not set; sign-up and log-in will fail")
    await ensure_indexes(get_database())
    yield
    # Shutdown
    logger.info("Shutting down %s", settings.app_name)
    await close_mongo_client()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use instead of the environment-loaded ones

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Social posting GraphQL API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )
    app.state.settings = settings

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    graphql_router = SocialDeckGraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if settings.graphql_ide else None,
    )

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(graphql_router, prefix="/graphql", tags=["graphql"])

    return app


# Application instance for uvicorn
app = create_app()
