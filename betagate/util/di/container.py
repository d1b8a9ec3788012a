"""Dependency injection container."""

from dishka import AsyncContainer, Provider, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka

from betagate.config import Settings
from betagate.util.di import PROVIDERS, get_provider


def create_container(settings: Settings, *overrides: Provider) -> AsyncContainer:
    """Build production container (all prod implementations).

    Args:
        settings: Application settings, built once at startup
        *overrides: Providers registered last, replacing defaults
            (e.g. a custom CodeGenerator or InviteNotifier)

    Returns:
        Configured DI container with production providers
    """
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(
        *provider_instances,
        FastapiProvider(),
        *overrides,
        context={Settings: settings},
    )


def setup_di(app, container: AsyncContainer) -> None:
    """Setup dependency injection for FastAPI.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
