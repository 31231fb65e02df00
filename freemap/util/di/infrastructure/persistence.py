"""Persistence infrastructure providers."""

from dishka import Scope, provide

from freemap.config import StorageSettings
from freemap.domain.repository import (
    PlaceRepository,
    TopicRepository,
    VoteStateRepository,
)
from freemap.persistence.repository import (
    FileVoteStateRepository,
    InMemoryPlaceRepository,
    InMemoryTopicRepository,
)
from freemap.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider.

    Topics and places live in memory for the session; only the vote state
    is written to disk.
    """

    __is_mock__ = False

    scope = Scope.APP

    @provide
    def get_topic_repository(self) -> TopicRepository:
        """Provide Topic repository."""
        return InMemoryTopicRepository()

    @provide
    def get_place_repository(self) -> PlaceRepository:
        """Provide Place repository."""
        return InMemoryPlaceRepository()

    @provide
    def get_vote_state_repository(
        self, storage_settings: StorageSettings
    ) -> VoteStateRepository:
        """Provide file-backed vote state storage."""
        return FileVoteStateRepository(storage_settings.vote_state_dir)
