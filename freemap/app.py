"""Application bootstrap."""

import logfire
from dishka import Container

from freemap.config import SeedSettings, Settings
from freemap.domain.service import EntityStore, VoteTracker
from freemap.persistence.seed import seed_store
from freemap.util.di.container import create_container
from freemap.util.logging import setup_logging
from freemap.util.observability import configure_logfire, instrument_httpx


def create_app() -> Container:
    """Create and start the application container.

    Configures logging and Logfire from the container's settings, seeds the
    store with demo data and restores the user's vote state once.

    Returns:
        Container with all services ready for use
    """
    container = create_container()

    settings = container.get(Settings)
    setup_logging(settings)
    configure_logfire(settings)
    instrument_httpx()

    start(container)
    return container


def start(container: Container) -> None:
    """Seed the store and load the vote state held by a container."""
    with logfire.span("app.start"):
        seed_settings = container.get(SeedSettings)
        if seed_settings.enabled:
            seed_store(container.get(EntityStore), seed_settings)

        container.get(VoteTracker).load()
