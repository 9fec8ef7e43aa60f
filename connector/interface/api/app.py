"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from connector import __version__
from connector.config import Settings
from connector.interface.api.routes import auth, health, posts, profile, users
from connector.interface.error import register_error_handlers
from connector.util.di.container import create_container, setup_di
from connector.util.observability import instrument_fastapi, instrument_httpx


def create_app(
    settings: Settings | None = None, container: AsyncContainer | None = None
) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function. In production
    scripts/start_app.py handles this; tests pass their own container.

    Args:
        settings: Application settings (loaded from environment if omitted)
        container: DI container (production container if omitted)
    """
    settings = settings or Settings()

    instrument_httpx()

    app_instance = FastAPI(
        title="Connector API",
        description="Backend API for developer profiles, posts, likes and comments",
        version=__version__,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.api.frontend_url, "http://localhost:3000"],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=[
            "Content-Type",
            "Accept",
            "Origin",
            settings.auth.token_header,
        ],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())
    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(users.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(profile.router)
    app_instance.include_router(posts.router)

    return app_instance
