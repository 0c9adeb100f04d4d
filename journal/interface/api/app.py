"""FastAPI application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from journal.config import Settings
from journal.interface.api.errors import register_error_handlers
from journal.interface.api.routes import entries, health
from journal.util.di.container import create_container, setup_di
from journal.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    settings = Settings()

    # Instrument httpx for outbound media uploads
    instrument_httpx()

    app_instance = FastAPI(
        title="Journal API",
        description="Backend API for a personal journal: entries with optional photos and likes",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allow_origins,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    container = create_container()
    setup_di(app_instance, container)

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(entries.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
