"""Dependency injection container."""

from dishka import AsyncContainer, Provider, make_async_container

from tally.config import Settings
from tally.util.di import PROVIDERS, get_provider
from tally.util.logging import setup_logging
from tally.util.observability import configure_logfire


def create_container(*extra_providers: Provider) -> AsyncContainer:
    """Build production container (all prod implementations).

    Settings are loaded from environment variables automatically. Logging
    and Logfire are configured from the same settings.

    Args:
        extra_providers: Host providers, e.g. one providing ``CounterTables``
            with the host's own counter tables registered. Later providers
            override earlier ones.

    Returns:
        Configured DI container with production providers
    """
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    # Get provider instances - all are instantiated without arguments
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*provider_instances, *extra_providers)
