"""
UI Component Gallery Backend Main Application
Flow: main.py -> config -> middleware -> routers -> services -> database | registry
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from gallery.config.settings import get_settings
from gallery.core.database import dispose_engine, get_engine
from gallery.core.exceptions import GalleryException
from gallery.core.logging import REQUEST_ID_HEADER, get_logger
from gallery.middleware.logging import LoggingMiddleware

logger = get_logger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Application lifespan manager."""
    logger.info("Starting UI Component Gallery backend",
                version=settings.APP_VERSION,
                catalog_source=settings.CATALOG_SOURCE)

    if settings.CATALOG_SOURCE == "database":
        try:
            async with get_engine().begin() as conn:
                await conn.execute(text("SELECT 1"))
            logger.info("Database connection established")
        except Exception as e:
            logger.error("Failed to initialize application", error=str(e))
            raise

    yield

    logger.info("Shutting down UI Component Gallery backend")
    await dispose_engine()


async def gallery_exception_handler(request: Request, exc: GalleryException) -> JSONResponse:
    """Answer domain errors raised outside a route's own handling (e.g. in dependencies)."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "error_code": exc.error_code, **exc.details},
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.DEBUG else None,
        redoc_url="/api/redoc" if settings.DEBUG else None,
    )

    # Add middlewares
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )

    app.add_exception_handler(GalleryException, gallery_exception_handler)

    # Include routers
    from gallery.api import components, favorites, health, users

    app.include_router(health.router, prefix="/api/health", tags=["health"])
    app.include_router(components.router, prefix="/api/components", tags=["components"])
    app.include_router(favorites.router, prefix="/api/favorites", tags=["favorites"])
    app.include_router(users.router, prefix="/api/users", tags=["users"])

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "gallery.main:app",
        host=settings.BACKEND_HOST,
        port=settings.BACKEND_PORT,
        reload=settings.DEBUG,
        log_config=None,  # Use structlog instead
    )


if __name__ == "__main__":
    run()
