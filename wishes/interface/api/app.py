"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wishes.config import Settings
from wishes.interface.api.routes import auth, health, support, user, wishes
from wishes.interface.api.routes.health import API_VERSION
from wishes.interface.error import register_error_handlers
from wishes.util.di.container import create_container, setup_di
from wishes.util.observability import instrument_fastapi


def create_app(
    settings: Settings | None = None, container: AsyncContainer | None = None
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py does.

    Args:
        settings: Application settings (loaded from environment if omitted)
        container: DI container (production container if omitted)

    Returns:
        Configured application
    """
    settings = settings or Settings()

    app_instance = FastAPI(
        title="Wishes API",
        description="Post a wish and support the wishes of others",
        version=API_VERSION,
        debug=settings.debug,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance, settings.auth)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,  # Identity travels in cookies
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container())
    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(wishes.router)
    app_instance.include_router(support.router)
    app_instance.include_router(user.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
