"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Swappable components: production providers subclass a component base, and
# tests register an in-memory twin flagged with __is_mock__
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for all tally providers.

    Attributes:
        __mock_component__: Component this provider implements, None for
            providers that are always used as is (config, domain)
        __is_mock__: Whether this is the test implementation of its component
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
