"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from onboard.util.di import Component, build_providers, mockable_components


def build_test_container(
    unmock: set[Component] | None = None, fastapi: bool = False
) -> AsyncContainer:
    """Build test container with selective unmocking.

    Every component is served by its test double unless named in ``unmock``.
    Settings are loaded from environment variables.

    Args:
        unmock: Components to use production implementations for
        fastapi: Add the FastAPI integration provider, for app tests

    Returns:
        Configured test container

    Raises:
        ValueError: If unmock names an unknown component

    Examples:
        # Unit tests - all mocks
        container = build_test_container()

        # Integration tests - real persistence
        container = build_test_container(unmock={"persistence"})

        # Real SMTP, everything else mocked
        container = build_test_container(unmock={"notifications"})
    """
    unmock = unmock or set()
    available = mockable_components()
    unknown = unmock - available
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    providers = build_providers(mocked=available - unmock)
    if fastapi:
        providers.append(FastapiProvider())

    return make_async_container(*providers)
