"""Dependency injection module."""

from typing import AbstractSet, Type

from onboard.util.di.adapter import ProdAdapterProvider
from onboard.util.di.application import ProdApplicationProvider
from onboard.util.di.base import Component, ProviderBase
from onboard.util.di.core import ProdConfigProvider
from onboard.util.di.domain import ProdDomainProvider
from onboard.util.di.infrastructure import (
    ClockProvider,
    NotificationsProvider,
    PersistenceProvider,
    ProdClockProvider,
    ProdNotificationsProvider,
    ProdPersistenceProvider,
)

# Order matters only for readability; dishka resolves the graph itself
PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdAdapterProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Infrastructure components (mockable)
    PersistenceProvider,
    NotificationsProvider,
    ClockProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Get appropriate provider class.

    Automatically determines if provider is mockable by checking for subclasses.

    - No subclasses: Concrete provider, use directly
    - Has subclasses: Mockable component, select by __is_mock__ flag

    Args:
        base: Provider base class
        use_mock: Whether to use mock implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If requested implementation not found
    """
    subclasses = base.__subclasses__()

    if not subclasses:
        return base

    impl = next(
        (c for c in subclasses if getattr(c, "__is_mock__", False) == use_mock),
        None,
    )

    if not impl:
        kind = "mock" if use_mock else "production"
        component_name = getattr(base, "__mock_component__", base.__name__)
        raise ValueError(f"No {kind} implementation for {component_name}")

    return impl


def mockable_components() -> set[Component]:
    """Components that can be served by a test double."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ and base.__subclasses__()
    }


def build_providers(
    mocked: AbstractSet[Component] = frozenset(),
) -> list[ProviderBase]:
    """Instantiate one provider per entry of PROVIDERS.

    Args:
        mocked: Components to serve with their test doubles

    Returns:
        Provider instances, ready for ``make_async_container``

    Raises:
        ValueError: If a component is unknown or lacks the requested
            implementation
    """
    unknown = set(mocked) - mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    return [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "build_providers",
    "get_provider",
    "mockable_components",
    # Core providers
    "ProdConfigProvider",
    "ProdAdapterProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    # Infrastructure base classes
    "ClockProvider",
    "NotificationsProvider",
    "PersistenceProvider",
    # Infrastructure implementations
    "ProdClockProvider",
    "ProdNotificationsProvider",
    "ProdPersistenceProvider",
]
