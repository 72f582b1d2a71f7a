"""Observability configuration using Logfire.

Usage:
    import logfire

    # Structured logging
    logfire.info("Invitation issued", invitation_id=str(invitation.id))

    # Manual spans for critical operations
    with logfire.span("invitation_service.issue", kind=target.kind.value):
        ...

Tokens are never logged in full, only their first 8 characters.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from onboard.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Sends to the Logfire cloud when explicitly enabled or when a token is
    present (``OBSERVABILITY__LOGFIRE_TOKEN``); otherwise console only.

    Args:
        settings: Application settings
    """
    # Priority: explicit setting > token presence > default (False)
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    elif settings.observability.logfire_token:
        send_to_logfire = True
    else:
        send_to_logfire = False

    config_kwargs = {
        "service_name": "onboard-backend",
        "service_version": "1.0.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
        has_token=bool(settings.observability.logfire_token),
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Instrument FastAPI application with Logfire.

    Invitation tokens travel in URL paths, so paths are recorded with the
    token segment cut to its prefix.

    Args:
        app: FastAPI application instance
    """

    def _map_request_attributes(request, attributes):
        result = {**attributes}

        if hasattr(request, "method"):
            result["method"] = request.method

        if hasattr(request, "url"):
            result["path"] = _redact_path(request.url.path)

        if hasattr(request, "client") and request.client:
            result["client_host"] = request.client.host

        return result

    logfire.instrument_fastapi(
        app,
        capture_headers=False,  # Session cookies stay out of traces
        request_attributes_mapper=_map_request_attributes,
    )
    logfire.info("FastAPI instrumented")


def _redact_path(path: str) -> str:
    parts = path.split("/")
    if len(parts) > 2 and parts[1] in ("onboarding", "invitations"):
        parts[2] = parts[2][:8] + "..."
    return "/".join(parts)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Instrument SQLAlchemy engine with Logfire.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # Add SQL comments with span context
    )
    logfire.info("SQLAlchemy instrumented")
