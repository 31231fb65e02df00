"""Mock persistence providers for testing."""

from dishka import Scope, provide

from freemap.domain.repository import (
    PlaceRepository,
    TopicRepository,
    VoteStateRepository,
)
from freemap.persistence.repository.inmemory import (
    InMemoryPlaceRepository,
    InMemoryTopicRepository,
    InMemoryVoteStateRepository,
)
from freemap.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories only.

    Each test builds its own container, so APP scope still isolates tests.
    """

    __is_mock__ = True

    scope = Scope.APP

    @provide
    def get_topic_repository(self) -> TopicRepository:
        """Provide in-memory Topic repository."""
        return InMemoryTopicRepository()

    @provide
    def get_place_repository(self) -> PlaceRepository:
        """Provide in-memory Place repository."""
        return InMemoryPlaceRepository()

    @provide
    def get_vote_state_repository(self) -> VoteStateRepository:
        """Provide in-memory vote state storage."""
        return InMemoryVoteStateRepository()
