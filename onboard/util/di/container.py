"""Dependency injection container."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from onboard.util.di import build_providers


def create_container() -> AsyncContainer:
    """Build the production container.

    Settings are loaded from environment variables by the config provider.
    """
    return make_async_container(*build_providers(), FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app's request handling."""
    setup_dishka(container, app)


@asynccontextmanager
async def container_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Close the app container on shutdown, disposing the database engine."""
    yield
    await app.state.dishka_container.close()
