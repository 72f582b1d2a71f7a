#!/usr/bin/env python3
"""Start the onboarding API under uvicorn, reporting startup errors to Logfire."""

import sys

import logfire
import uvicorn

from onboard.config import AuthSettings, Settings
from onboard.util.logging import setup_logging
from onboard.util.observability import configure_logfire


def check_settings(settings: Settings) -> None:
    """Refuse to serve sessions signed with the default secret outside development.

    Raises:
        RuntimeError: If the JWT secret was not overridden
    """
    if settings.environment in ("test", "development"):
        return
    if settings.auth.jwt_secret == AuthSettings().jwt_secret:
        raise RuntimeError("AUTH__JWT_SECRET must be set outside development")


def main() -> int:
    settings = Settings()

    setup_logging(settings)
    # Configure Logfire early to catch startup errors
    configure_logfire(settings)

    try:
        check_settings(settings)
        if not settings.notifications.enabled:
            logfire.warn("SMTP not configured, invitation e-mails will be skipped")

        logfire.info(
            "Starting onboarding API",
            environment=settings.environment,
            frontend_url=settings.api.frontend_url,
            invitation_validity_days=settings.invitations.validity_days,
        )

        # The app module is imported by uvicorn after Logfire is configured
        uvicorn.run(
            "onboard.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails properly
        raise


if __name__ == "__main__":
    sys.exit(main())
