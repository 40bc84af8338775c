"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.config import get_settings
from shared.exceptions import (
    HomemaidyError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
)
from .dependencies import get_container
from .middleware.auth import identity_middleware
from .models.errors import ErrorResponse
from .routes import health, identity, navigation, routes

logger = logging.getLogger(__name__)

_STATUS_CODES = {
    NotFoundError: 404,
    ValidationError: 422,
    AuthenticationError: 401,
    AuthorizationError: 403,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    container = get_container()
    logger.info(
        f"Starting {settings.app_name} on {settings.host}:{settings.port} "
        f"with {len(container.route_table)} routes"
    )
    # Build eagerly so table and prefix-guard conflicts are logged at startup
    _ = container.policy
    yield
    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")


async def homemaidy_error_handler(request: Request, exc: HomemaidyError) -> JSONResponse:
    """Render module exceptions as ErrorResponse bodies."""
    status_code = next(
        (code for cls, code in _STATUS_CODES.items() if isinstance(exc, cls)),
        500,
    )
    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    body = ErrorResponse(error=exc.code, message=exc.message, details=exc.details or None)
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=headers)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Route access control and navigation audit API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )
    app.middleware("http")(identity_middleware)
    app.add_exception_handler(HomemaidyError, homemaidy_error_handler)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(identity.router, prefix="/api/identity", tags=["identity"])
    app.include_router(navigation.router, prefix="/api/navigation", tags=["navigation"])
    app.include_router(routes.router, prefix="/api/routes", tags=["routes"])

    return app


# Application instance for uvicorn
app = create_app()
