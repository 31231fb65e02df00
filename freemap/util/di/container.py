"""Dependency injection container."""

from dishka import Container, make_container

from freemap.util.di import PROVIDERS, get_provider


def create_container() -> Container:
    """Build production container (all prod implementations).

    Settings are loaded from environment variables automatically.

    Returns:
        Configured DI container with production providers
    """
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_container(*provider_instances)
