"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from onboard.config import Settings
from onboard.interface.api.routes import (
    auth,
    health,
    invitations,
    onboarding,
    portal,
    staff,
)
from onboard.util.di.container import (
    container_lifespan,
    create_container,
    setup_di,
)
from onboard.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; the production container by default
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Onboard API",
        description="Invitation-based client portal and team onboarding",
        version="0.1.0",
        lifespan=container_lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(onboarding.router)
    app_instance.include_router(invitations.router)
    app_instance.include_router(staff.router)
    app_instance.include_router(portal.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
