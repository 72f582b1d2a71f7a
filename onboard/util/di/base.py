"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure that tests replace with in-memory doubles
Component = Literal["persistence", "notifications", "clock"]


class ProviderBase(Provider):
    """Provider with the metadata used to pick real or test implementations.

    A mockable component is declared as a bare subclass naming the component;
    its production and test implementations subclass that declaration.

    Attributes:
        __mock_component__: Component the provider serves, None for providers
            that are never swapped
        __is_mock__: True for the test double of a component
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
