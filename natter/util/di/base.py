"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that tests can swap for in-memory doubles
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Common base for natter's dishka providers.

    Attributes:
        __mock_component__: Name of the swappable component this provider
            family implements (None for providers that are never mocked)
        __is_mock__: True for the in-memory test implementation
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
